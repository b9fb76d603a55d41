"""
Command-line interface for tubelist.
"""

from __future__ import annotations

__all__: list[str] = []
