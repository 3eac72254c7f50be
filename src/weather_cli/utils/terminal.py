"""ANSI color support for console output."""
from __future__ import annotations
import os
import sys
from typing import Optional, TextIO


def supports_ansi(stream: Optional[TextIO] = None) -> bool:
    """Detect if the terminal supports ANSI escape codes.

    Args:
        stream: Stream the output is written to (default: sys.stdout).

    Returns:
        True if ANSI codes are supported, False otherwise.
    """
    stream = stream if stream is not None else sys.stdout
    # https://no-color.org/
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if not hasattr(stream, "isatty") or not stream.isatty():
        return False
    if sys.platform == "win32":
        return bool(
            os.environ.get("WT_SESSION")  # Windows Terminal
            or os.environ.get("ANSICON")
            or os.environ.get("ConEmuANSI") == "ON"
            or "TERM" in os.environ  # Git Bash, Cygwin
        )
    return True


class TermColors:
    """Raw ANSI color codes. Use colorize() so unsupported terminals get plain text."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[94m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'


def colorize(text: str, color: str, *, stream: Optional[TextIO] = None) -> str:
    """Wrap text in the given color code when the stream supports ANSI."""
    if not color or not supports_ansi(stream):
        return text
    return f"{color}{text}{TermColors.RESET}"


__all__ = ["TermColors", "colorize", "supports_ansi"]
