"""
Abstract Base Class for the HTTP gateway used by the playlist client.

The gateway is the only component that talks to the network. Swapping it
lets tests feed canned API responses to the client, and lets callers add
their own transport concerns (caching, retries, quota tracking) without
touching the response mapping.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Union

QueryValue = Union[str, int]


class HttpGatewayInterface(ABC):
    """
    Abstract interface for GET requests against the YouTube Data API.

    Examples
    --------
    >>> class CannedGateway(HttpGatewayInterface):
    ...     async def get(self, url, query):
    ...         return {"items": []}
    """

    @abstractmethod
    async def get(self, url: str, query: Mapping[str, QueryValue]) -> dict[str, Any]:
        """
        Issue a GET request and decode its JSON body.

        Parameters
        ----------
        url : str
            Absolute URL of the API resource.
        query : Mapping[str, QueryValue]
            Query string parameters. Each key appears once.

        Returns
        -------
        dict[str, Any]
            The decoded JSON object.

        Raises
        ------
        TransportError
            On network failure, a non-2xx status, or a body that is not
            a JSON object.
        """
        pass

    async def aclose(self) -> None:
        """Release any resources held by the gateway."""
        return None
