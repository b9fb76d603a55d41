"""
httpx-backed HTTP gateway for the YouTube Data API.

Performs single GET requests and decodes JSON object bodies. Every
failure is raised as ``TransportError``; no retries are attempted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any, Optional

import httpx

from tubelist import __version__
from tubelist.exceptions import TransportError
from tubelist.services.interfaces import HttpGatewayInterface
from tubelist.services.interfaces.http_gateway_interface import QueryValue

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT_SECONDS = 30.0


def _api_error_message(response: httpx.Response) -> str:
    """Extract ``error.message`` from a YouTube API error body, if present."""
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
    return response.reason_phrase


class HttpxGateway(HttpGatewayInterface):
    """
    HTTP gateway using a shared ``httpx.AsyncClient``.

    Parameters
    ----------
    timeout : float
        Per-request timeout in seconds.
    client : httpx.AsyncClient | None
        Client to send requests with. When omitted the gateway creates
        one and closes it in ``aclose()``; a caller-supplied client is
        left open.

    Examples
    --------
    >>> async with HttpxGateway(timeout=10.0) as gateway:
    ...     body = await gateway.get(url, {"part": "snippet"})
    """

    def __init__(
        self,
        timeout: float = _DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers={"User-Agent": f"tubelist/{__version__}"},
            follow_redirects=True,
        )

    async def get(self, url: str, query: Mapping[str, QueryValue]) -> dict[str, Any]:
        """
        Issue a GET request and return the decoded JSON object.

        Raises
        ------
        TransportError
            If the request fails, the status is not 2xx, or the body is
            not a JSON object.
        """
        try:
            response = await self._client.get(
                url, params=dict(query), timeout=self.timeout
            )
        except httpx.HTTPError as e:
            logger.warning("GET %s failed: %s", url, type(e).__name__)
            raise TransportError(
                message=f"Request to {url} failed: {type(e).__name__}",
                url=url,
                original_error=e,
            ) from e

        if not response.is_success:
            message = _api_error_message(response)
            logger.warning("GET %s returned HTTP %d: %s", url, response.status_code, message)
            raise TransportError(
                message=f"HTTP {response.status_code} from {url}: {message}",
                url=url,
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                message=f"Response from {url} is not valid JSON",
                url=url,
                status_code=response.status_code,
                original_error=e,
            ) from e

        if not isinstance(body, dict):
            raise TransportError(
                message=f"Response from {url} is not a JSON object",
                url=url,
                status_code=response.status_code,
            )
        return body

    async def aclose(self) -> None:
        """Close the underlying client if this gateway created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxGateway:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()
