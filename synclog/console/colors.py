"""
Terminal colors

ANSI escape codes and their Windows console attribute equivalents
"""

from enum import Enum

from colorama.winterm import WinColor


class TtyColor(Enum):
    """Display colors understood by the colorizers."""

    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"
    RESET = "\x1b[0m"
    BRIGHT = "\x1b[1m"

    @property
    def ansi_code(self) -> str:
        """ANSI escape sequence for this color."""
        return self.value

    @property
    def win_color(self) -> int:
        """
        Windows console foreground attribute for this color.

        Raises:
            ValueError: For RESET and BRIGHT, which are not foreground colors
        """
        try:
            return _WIN_COLORS[self]
        except KeyError:
            raise ValueError(f"{self.name} has no console foreground attribute") from None


_WIN_COLORS = {
    TtyColor.RED: WinColor.RED,
    TtyColor.GREEN: WinColor.GREEN,
    TtyColor.YELLOW: WinColor.YELLOW,
    TtyColor.BLUE: WinColor.BLUE,
    TtyColor.MAGENTA: WinColor.MAGENTA,
    TtyColor.CYAN: WinColor.CYAN,
    TtyColor.WHITE: WinColor.GREY,
}
