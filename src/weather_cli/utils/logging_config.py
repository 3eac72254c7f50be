"""Shared logging configuration with colored output for the weather CLI."""
from __future__ import annotations
import logging
import sys
from typing import Union

from .terminal import TermColors, supports_ansi


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colored output for different log levels."""

    LEVEL_COLORS = {
        'DEBUG': TermColors.CYAN,
        'INFO': TermColors.GREEN,
        'WARNING': TermColors.YELLOW,
        'ERROR': TermColors.RED,
        'CRITICAL': TermColors.MAGENTA,
    }

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as ``[LEVEL] module - message``.

        Args:
            record: Log record to format.

        Returns:
            Formatted string, with ANSI color codes when enabled.
        """
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if not self.use_color:
            return f"[{record.levelname}] {record.name} - {message}"
        level_color = self.LEVEL_COLORS.get(record.levelname, TermColors.RESET)
        colored_levelname = f"{level_color}{TermColors.BOLD}[{record.levelname}]{TermColors.RESET}"
        colored_module = f"{TermColors.BLUE}{record.name}{TermColors.RESET}"
        return f"{colored_levelname} {colored_module} - {message}"


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Configure logging with colored console output.

    Sets up a single stdout handler on the root logger and quiets the
    connection-pool chatter of urllib3.

    Args:
        level: Logging level as int or name (default: logging.WARNING).

    Example:
        >>> from weather_cli.utils.logging_config import configure_logging
        >>> configure_logging("INFO")
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(use_color=supports_ansi(sys.stdout)))
    root_logger.addHandler(console_handler)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


__all__ = ["ColoredFormatter", "configure_logging"]
