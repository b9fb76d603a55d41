"""
Data models for tubelist.
"""

from __future__ import annotations

from .playlist import PageInfo, Playlist, PlaylistPage

__all__ = ["PageInfo", "Playlist", "PlaylistPage"]
