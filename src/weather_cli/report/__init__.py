"""Weather report conversion and presentation."""

from __future__ import annotations

from .formatter import (
    KELVIN_OFFSET,
    WeatherSummary,
    format_report,
    format_summary,
    kelvin_to_celsius,
    render,
    summarize,
)

__all__ = [
    "KELVIN_OFFSET",
    "WeatherSummary",
    "format_report",
    "format_summary",
    "kelvin_to_celsius",
    "render",
    "summarize",
]
