"""Configuration management for the weather CLI."""

from __future__ import annotations

from .settings import API_KEY_ENV_VAR, Settings, load_settings

__all__ = ["API_KEY_ENV_VAR", "Settings", "load_settings"]
