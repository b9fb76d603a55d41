"""
Configuration management module for tubelist.

Handles application settings loaded from environment variables and
the ``.env`` file.
"""

from __future__ import annotations

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
