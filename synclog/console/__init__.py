"""Console module - Terminal color handling"""

from synclog.console.colors import TtyColor
from synclog.console.colorizer import (
    Colorizer,
    AnsiColorizer,
    WinConsoleColorizer,
    select_colorizer,
)

__all__ = ["TtyColor", "Colorizer", "AnsiColorizer", "WinConsoleColorizer", "select_colorizer"]
