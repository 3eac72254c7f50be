from __future__ import annotations

from .logging_config import ColoredFormatter, configure_logging
from .terminal import TermColors, colorize, supports_ansi

__all__ = [
    "ColoredFormatter",
    "configure_logging",
    "TermColors",
    "colorize",
    "supports_ansi",
]
