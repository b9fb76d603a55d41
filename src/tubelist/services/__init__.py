"""
Service layer for tubelist.
"""

from __future__ import annotations

from .http_gateway import HttpxGateway
from .playlist_client import PlaylistClient

__all__ = ["HttpxGateway", "PlaylistClient"]
