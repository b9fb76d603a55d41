"""
Parsers turning YouTube API JSON documents into tubelist models.
"""

from __future__ import annotations

from .playlist_parser import (
    ParseRule,
    build_page_info,
    parse,
    parse_all,
    parse_playlist,
    parse_playlist_item,
)

__all__ = [
    "ParseRule",
    "build_page_info",
    "parse",
    "parse_all",
    "parse_playlist",
    "parse_playlist_item",
]
