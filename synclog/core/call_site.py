"""
Call-site resolution

Locates the source file and line of the code that invoked a log call
"""

import inspect
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass

from synclog.core.errors import CallSiteError


@dataclass(frozen=True)
class CallSite:
    """Source location of a log call."""

    file: str
    line: int
    function: str = ""


class CallSiteResolver(ABC):
    """
    Abstract base class for call-site resolvers.

    Resolvers are replaceable so tests and unusual runtimes (frozen
    executables, interpreters without frame support) can supply their own.
    """

    @abstractmethod
    def resolve(self, skip_frames: int) -> CallSite:
        """
        Resolve a caller's location.

        Args:
            skip_frames: Number of frames to skip above the frame that
                         called resolve(). 0 is resolve()'s direct caller.

        Returns:
            CallSite of the selected frame

        Raises:
            CallSiteError: If the stack is not deep enough or frames are
                           unavailable
        """
        pass


class FrameCallSiteResolver(CallSiteResolver):
    """Resolve call sites by walking interpreter stack frames."""

    def __init__(self, full_path: bool = False):
        """
        Initialize frame resolver.

        Args:
            full_path: Report the full source path instead of the base name
        """
        self.full_path = full_path

    def resolve(self, skip_frames: int) -> CallSite:
        if skip_frames < 0:
            raise CallSiteError(f"skip_frames cannot be negative: {skip_frames}")

        frame = inspect.currentframe()
        try:
            if frame is None:
                raise CallSiteError("stack frames are not available")
            frame = frame.f_back
            for _ in range(skip_frames):
                if frame is None:
                    break
                frame = frame.f_back
            if frame is None:
                raise CallSiteError(f"call stack is shallower than {skip_frames} frames")

            code = frame.f_code
            filename = code.co_filename
            if not self.full_path:
                filename = os.path.basename(filename)
            return CallSite(file=filename, line=frame.f_lineno, function=code.co_name)
        finally:
            del frame

    def __repr__(self) -> str:
        """String representation."""
        return f"FrameCallSiteResolver(full_path={self.full_path})"
