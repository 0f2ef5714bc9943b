"""
Colorizers

Apply a display color to an output stream, either by writing ANSI escape
codes into it or by changing the Windows console text attributes.
"""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from synclog.console.colors import TtyColor


class Colorizer(ABC):
    """Abstract capability to switch the display color of a stream."""

    @abstractmethod
    def apply(self, stream: TextIO, color: TtyColor) -> None:
        """
        Switch the stream's display color.

        Args:
            stream: Output stream the following text is written to
            color: Color to switch to; RESET restores the default,
                   BRIGHT intensifies the next color
        """
        pass


class AnsiColorizer(Colorizer):
    """Write ANSI escape codes into the stream."""

    def apply(self, stream: TextIO, color: TtyColor) -> None:
        stream.write(color.ansi_code)

    def __repr__(self) -> str:
        """String representation."""
        return "AnsiColorizer()"


class WinConsoleColorizer(Colorizer):
    """
    Change text attributes of a legacy Windows console.

    Text already written must reach the console before the attribute
    changes, so the stream is flushed first. Only usable on Windows.
    """

    def __init__(self, winterm=None):
        """
        Initialize console colorizer.

        Args:
            winterm: colorama WinTerm instance (default: a new one bound to
                     the process console)
        """
        if winterm is None:
            from colorama.winterm import WinTerm
            winterm = WinTerm()
        self._winterm = winterm
        self._bright = False

    def apply(self, stream: TextIO, color: TtyColor) -> None:
        stream.flush()
        on_stderr = stream is sys.stderr
        if color is TtyColor.RESET:
            self._bright = False
            self._winterm.reset_all(on_stderr=on_stderr)
        elif color is TtyColor.BRIGHT:
            self._bright = True
        else:
            self._winterm.fore(color.win_color, light=self._bright, on_stderr=on_stderr)

    def __repr__(self) -> str:
        """String representation."""
        return "WinConsoleColorizer()"


def _supports_ansi(stream: TextIO) -> bool:
    """Check whether a Windows stream understands ANSI escape codes."""
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        # Not a console handle; escape codes pass through untouched
        return True
    if not stream.isatty():
        return True

    from colorama.winterm import enable_vt_processing
    return enable_vt_processing(fd)


def select_colorizer(stream: TextIO, platform: Optional[str] = None) -> Colorizer:
    """
    Pick the colorizer variant for a stream.

    The native console variant is used only on Windows consoles that cannot
    process ANSI escape codes.

    Args:
        stream: Output stream the logger writes to
        platform: Platform name (default: sys.platform)

    Returns:
        Colorizer instance
    """
    platform = platform or sys.platform
    if platform == "win32" and not _supports_ansi(stream):
        return WinConsoleColorizer()
    return AnsiColorizer()
