"""
Playlist response parser.

Maps the JSON objects returned by the playlist endpoints of the YouTube
Data API onto the flat ``Playlist`` record. Two shapes are understood:

- ``ParseRule.PLAYLIST``: search results and (reshaped) playlist lookups,
  ``{"etag", "snippet", "id": {"playlistId"}}``.
- ``ParseRule.SONGS``: playlist items,
  ``{"etag", "id", "kind", "snippet": {"playlistId", "resourceId", ...}}``.

Every function here is pure. A document that does not carry the keys its
rule requires raises ``ShapeMismatchError`` with the document attached.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import ValidationError

from tubelist.exceptions import ShapeMismatchError
from tubelist.models.playlist import PageInfo, Playlist

logger = logging.getLogger(__name__)


class ParseRule(str, Enum):
    """Shapes a playlist document can be parsed as."""

    PLAYLIST = "playlist"
    SONGS = "songs"


_REQUIRED_KEYS: dict[ParseRule, frozenset[str]] = {
    ParseRule.PLAYLIST: frozenset({"etag", "id", "snippet"}),
    ParseRule.SONGS: frozenset({"etag", "id", "kind", "snippet"}),
}


def _mismatch(document: Any, rule: ParseRule, reason: str) -> ShapeMismatchError:
    return ShapeMismatchError(
        message=f"Cannot parse document as '{rule.value}': {reason}",
        payload=document,
        rule=rule.value,
    )


def _check_shape(document: Any, rule: ParseRule) -> Mapping[str, Any]:
    """Validate the required-key set of ``rule`` and return the snippet."""
    if not isinstance(document, Mapping):
        raise _mismatch(document, rule, f"expected an object, got {type(document).__name__}")

    missing = _REQUIRED_KEYS[rule] - document.keys()
    if missing:
        raise _mismatch(document, rule, f"missing keys {sorted(missing)}")

    snippet = document["snippet"]
    if not isinstance(snippet, Mapping):
        raise _mismatch(document, rule, "'snippet' is not an object")
    return snippet


def _build(document: Any, rule: ParseRule, **fields: Any) -> Playlist:
    try:
        return Playlist(**fields)
    except ValidationError as e:
        raise _mismatch(document, rule, f"{e.error_count()} invalid field(s)") from e


def _thumbnails(snippet: Mapping[str, Any]) -> dict[str, Any]:
    thumbnails = snippet.get("thumbnails")
    return dict(thumbnails) if isinstance(thumbnails, Mapping) else {}


def parse_playlist(document: Any) -> Playlist:
    """
    Parse a search result or a reshaped ``/playlists`` item.

    Parameters
    ----------
    document : Any
        JSON object with ``etag``, ``snippet`` and ``id.playlistId``.

    Returns
    -------
    Playlist
        Record with ``id``, ``kind`` and ``resource_id`` left unset.

    Raises
    ------
    ShapeMismatchError
        If the document does not have the required shape.
    """
    snippet = _check_shape(document, ParseRule.PLAYLIST)

    resource = document["id"]
    if not isinstance(resource, Mapping) or "playlistId" not in resource:
        raise _mismatch(document, ParseRule.PLAYLIST, "missing 'id.playlistId'")

    return _build(
        document,
        ParseRule.PLAYLIST,
        etag=document["etag"],
        title=snippet.get("title"),
        thumbnails=_thumbnails(snippet),
        published_at=snippet.get("publishedAt"),
        channel_title=snippet.get("channelTitle"),
        channel_id=snippet.get("channelId"),
        description=snippet.get("description"),
        playlist_id=resource["playlistId"],
    )


def parse_playlist_item(document: Any) -> Playlist:
    """
    Parse a ``/playlistItems`` entry.

    ``playlist_id`` comes from ``snippet.playlistId``; the top-level ``id``
    is the playlist item's own identifier.

    Raises
    ------
    ShapeMismatchError
        If the document does not have the required shape.
    """
    snippet = _check_shape(document, ParseRule.SONGS)

    return _build(
        document,
        ParseRule.SONGS,
        etag=document["etag"],
        kind=document["kind"],
        id=document["id"],
        channel_id=snippet.get("channelId"),
        channel_title=snippet.get("channelTitle"),
        description=snippet.get("description"),
        playlist_id=snippet.get("playlistId"),
        published_at=snippet.get("publishedAt"),
        resource_id=snippet.get("resourceId"),
        thumbnails=_thumbnails(snippet),
        title=snippet.get("title"),
    )


_PARSERS = {
    ParseRule.PLAYLIST: parse_playlist,
    ParseRule.SONGS: parse_playlist_item,
}


def parse(document: Any, rule: ParseRule) -> Playlist:
    """Parse ``document`` with the parser registered for ``rule``."""
    return _PARSERS[ParseRule(rule)](document)


def parse_all(items: Iterable[Any], rule: ParseRule) -> list[Playlist]:
    """
    Parse every item in order, stopping at the first mismatch.

    No partial list is returned: the ``ShapeMismatchError`` of the first
    bad item propagates and the records parsed so far are discarded.

    Parameters
    ----------
    items : Iterable[Any]
        The ``items`` array of a list response.
    rule : ParseRule
        Rule every item must match.

    Returns
    -------
    list[Playlist]
        Parsed records in response order.
    """
    playlists: list[Playlist] = []
    for index, item in enumerate(items):
        try:
            playlists.append(parse(item, rule))
        except ShapeMismatchError:
            logger.warning(
                "Item %d of list response does not match rule '%s'",
                index,
                ParseRule(rule).value,
            )
            raise
    return playlists


def build_page_info(response: Mapping[str, Any]) -> PageInfo:
    """
    Build the page info of a list response.

    Copies ``pageInfo`` (empty if absent) and adds ``nextPageToken`` and
    ``prevPageToken``, set to None when the response has no such token.
    """
    raw = response.get("pageInfo")
    page_info: PageInfo = dict(raw) if isinstance(raw, Mapping) else {}
    page_info["nextPageToken"] = response.get("nextPageToken")
    page_info["prevPageToken"] = response.get("prevPageToken")
    return page_info
