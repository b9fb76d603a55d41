"""
Client for the playlist endpoints of the YouTube Data API v3.

Wraps ``/playlists``, ``/search`` and ``/playlistItems``: caller options
are merged over per-operation defaults, the request is sent through an
``HttpGatewayInterface``, and the JSON response is mapped onto
``Playlist`` records.

Shape mismatches raise ``ShapeMismatchError``. List operations are
all-or-nothing: one malformed item fails the whole call. Transport
errors raised by the gateway propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from typing import Any, Optional, Protocol

from tubelist.exceptions import ShapeMismatchError
from tubelist.models.playlist import Playlist, PlaylistPage
from tubelist.parsers.playlist_parser import (
    ParseRule,
    build_page_info,
    parse_all,
    parse_playlist,
)
from tubelist.services.interfaces import HttpGatewayInterface

logger = logging.getLogger(__name__)

PLAYLISTS_PATH = "/playlists"
SEARCH_PATH = "/search"
PLAYLIST_ITEMS_PATH = "/playlistItems"

DEFAULT_PART = "snippet"
DEFAULT_MAX_RESULTS = 20

# Appended after the option merge, so callers cannot override it.
RESOURCE_TYPE = {"type": "playlist"}


class ApiConfig(Protocol):
    """Configuration the client needs: an API key and a base URL."""

    def api_key(self) -> str: ...

    def endpoint(self) -> str: ...


class PlaylistClient:
    """
    Async client for playlist lookup, search and item listing.

    Parameters
    ----------
    config : ApiConfig
        Supplies the API key and the endpoint base URL.
    gateway : HttpGatewayInterface
        Performs the HTTP requests.
    max_results : int
        Default ``maxResults`` for list operations.

    Examples
    --------
    >>> client = PlaylistClient(settings, HttpxGateway())
    >>> playlist = await client.get("PLZRRxQcaEjA5tpoxlKeVnPKIvfD1IavPq")
    >>> playlists, page_info = await client.search("the great debates")
    """

    def __init__(
        self,
        config: ApiConfig,
        gateway: HttpGatewayInterface,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> None:
        self.config = config
        self.gateway = gateway
        self.max_results = max_results

    async def get(
        self, playlist_id: str, options: Optional[Mapping[str, Any]] = None
    ) -> Playlist:
        """
        Fetch a single playlist by ID.

        Parameters
        ----------
        playlist_id : str
            YouTube playlist ID.
        options : Optional[Mapping[str, Any]]
            Extra query parameters; they override the defaults
            ``key``, ``id`` and ``part``.

        Returns
        -------
        Playlist
            The playlist, with ``playlist_id`` set to the requested ID.

        Raises
        ------
        ValueError
            If ``playlist_id`` is empty.
        ShapeMismatchError
            If the response does not contain exactly one item with a
            snippet and an etag. The raw body is attached as ``payload``.
        TransportError
            If the request itself fails.
        """
        _require_id(playlist_id, "playlist_id")
        defaults = {
            "key": self.config.api_key(),
            "id": playlist_id,
            "part": DEFAULT_PART,
        }
        response = await self._request(PLAYLISTS_PATH, defaults, options)

        items = response.get("items")
        if (
            not isinstance(items, list)
            or len(items) != 1
            or not isinstance(items[0], Mapping)
            or "snippet" not in items[0]
            or "etag" not in items[0]
        ):
            count = len(items) if isinstance(items, list) else None
            logger.warning(
                "Playlist lookup for %s did not return exactly one item (got %s)",
                playlist_id,
                count,
            )
            raise ShapeMismatchError(
                message=f"Expected exactly one playlist for '{playlist_id}'",
                payload=response,
            )

        item = items[0]
        try:
            return parse_playlist(
                {
                    "etag": item["etag"],
                    "snippet": item["snippet"],
                    "id": {"playlistId": playlist_id},
                }
            )
        except ShapeMismatchError as e:
            raise ShapeMismatchError(
                message=e.message, payload=response, rule=e.rule
            ) from e

    async def search(
        self, query: str, options: Optional[Mapping[str, Any]] = None
    ) -> PlaylistPage:
        """
        Search playlists by free text.

        Parameters
        ----------
        query : str
            Search text, sent as ``q``.
        options : Optional[Mapping[str, Any]]
            Extra query parameters such as ``maxResults`` or ``pageToken``.

        Returns
        -------
        PlaylistPage
            Playlists in response order and the page info.

        Raises
        ------
        ShapeMismatchError
            If the response or any one of its items is malformed.
        TransportError
            If the request itself fails.
        """
        defaults = {
            "key": self.config.api_key(),
            "part": DEFAULT_PART,
            "maxResults": self.max_results,
            "q": query,
        }
        response = await self._request(SEARCH_PATH, defaults, options)
        return _parse_page(response, ParseRule.PLAYLIST)

    async def get_items(
        self, playlist_id: str, options: Optional[Mapping[str, Any]] = None
    ) -> PlaylistPage:
        """
        List the entries of a playlist.

        Each entry's ``playlist_id`` comes from ``snippet.playlistId``
        and its ``id`` is the playlist item ID.

        Raises
        ------
        ValueError
            If ``playlist_id`` is empty.
        ShapeMismatchError
            If the response or any one of its items is malformed.
        TransportError
            If the request itself fails.
        """
        _require_id(playlist_id, "playlist_id")
        defaults = {
            "key": self.config.api_key(),
            "part": DEFAULT_PART,
            "maxResults": self.max_results,
            "playlistId": playlist_id,
        }
        response = await self._request(PLAYLIST_ITEMS_PATH, defaults, options)
        return _parse_page(response, ParseRule.SONGS)

    async def iter_items(
        self,
        playlist_id: str,
        options: Optional[Mapping[str, Any]] = None,
        max_pages: Optional[int] = None,
    ) -> AsyncIterator[Playlist]:
        """
        Yield every entry of a playlist, following page tokens.

        Parameters
        ----------
        playlist_id : str
            YouTube playlist ID.
        options : Optional[Mapping[str, Any]]
            Extra query parameters applied to every page. A ``pageToken``
            here sets the starting page.
        max_pages : Optional[int]
            Stop after this many pages (default: no limit).

        Iteration also stops when the API hands back a page token that
        was already requested.
        """
        page_options = dict(options or {})
        seen_tokens: set[str] = set()
        if page_options.get("pageToken"):
            seen_tokens.add(page_options["pageToken"])
        pages = 0
        while max_pages is None or pages < max_pages:
            items, page_info = await self.get_items(playlist_id, page_options)
            pages += 1
            for item in items:
                yield item

            next_token = page_info.get("nextPageToken")
            if not next_token:
                break
            if next_token in seen_tokens:
                logger.warning(
                    "Playlist %s returned already requested page token %r, stopping",
                    playlist_id,
                    next_token,
                )
                break
            seen_tokens.add(next_token)
            page_options["pageToken"] = next_token

    async def _request(
        self,
        path: str,
        defaults: Mapping[str, Any],
        options: Optional[Mapping[str, Any]],
    ) -> dict[str, Any]:
        params = {**defaults, **(options or {}), **RESOURCE_TYPE}
        logger.debug(
            "GET %s with params %s",
            path,
            sorted(name for name in params if name != "key"),
        )
        return await self.gateway.get(self.config.endpoint() + path, params)


def _require_id(value: str, name: str) -> None:
    if not value or not value.strip():
        raise ValueError(f"{name} must be a non-empty string")


def _parse_page(response: Mapping[str, Any], rule: ParseRule) -> PlaylistPage:
    items = response.get("items")
    if not isinstance(items, list):
        raise ShapeMismatchError(
            message="List response has no 'items' array",
            payload=response,
        )
    return parse_all(items, rule), build_page_info(response)
