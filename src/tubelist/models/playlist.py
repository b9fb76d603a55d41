"""
Playlist models.

``Playlist`` is a flat projection of the several JSON shapes the YouTube
API returns for playlists and playlist items. Every field is optional;
which ones get populated depends on the endpoint the record came from.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

PageInfo = Dict[str, Any]
"""Response ``pageInfo`` plus ``nextPageToken`` and ``prevPageToken``."""


class Playlist(BaseModel):
    """
    A playlist, or an entry of a playlist, as returned by the API.

    Records built from ``/playlists`` and ``/search`` leave ``id``, ``kind``
    and ``resource_id`` unset. Records built from ``/playlistItems`` carry
    the item's own ``id`` and ``kind`` and the ``resource_id`` of the video
    the entry points at.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: Optional[str] = Field(default=None, description="Playlist item ID")
    kind: Optional[str] = Field(default=None, description="API resource kind")
    title: Optional[str] = Field(default=None)
    etag: Optional[str] = Field(default=None, description="Cache validation token")
    resource_id: Optional[Any] = Field(
        default=None, description="Resource the playlist item refers to"
    )
    playlist_id: Optional[str] = Field(default=None)
    channel_id: Optional[str] = Field(default=None)
    channel_title: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    published_at: Optional[str] = Field(
        default=None, description="ISO 8601 timestamp as sent by the API"
    )
    thumbnails: Dict[str, Any] = Field(default_factory=dict)

    @property
    def video_id(self) -> Optional[str]:
        """Video ID of a playlist item, if its resource is a video."""
        if isinstance(self.resource_id, dict):
            video_id = self.resource_id.get("videoId")
            return video_id if isinstance(video_id, str) else None
        return None


PlaylistPage = Tuple[List[Playlist], PageInfo]
"""One page of a list operation: the records and their page info."""
