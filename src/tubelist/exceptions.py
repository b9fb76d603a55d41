"""
Custom exceptions for the tubelist package.

Two failure kinds are surfaced to callers of the playlist client:
transport failures coming from the HTTP gateway, and shape mismatches
raised when a JSON document does not have the structure a parse rule
expects.
"""

from __future__ import annotations

from typing import Any


class TubelistError(Exception):
    """Base exception for all tubelist errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize TubelistError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class TransportError(TubelistError):
    """
    Exception raised when an HTTP request to the YouTube API fails.

    Covers connection failures, timeouts, non-2xx responses and bodies
    that are not a JSON object. The playlist client never wraps this
    exception; callers receive it exactly as the gateway raised it.

    Attributes
    ----------
    message : str
        Human-readable error message.
    url : str
        The URL that was requested.
    status_code : int
        HTTP status code of the response, or 0 if no response was received.
    original_error : Exception | None
        The underlying httpx/JSON exception, if any.

    Examples
    --------
    >>> try:
    ...     await client.get("PLxyz")
    ... except TransportError as e:
    ...     print(f"HTTP {e.status_code} from {e.url}")
    """

    def __init__(
        self,
        message: str,
        url: str = "",
        status_code: int = 0,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize TransportError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        url : str, optional
            The URL that was requested (default: "").
        status_code : int, optional
            HTTP status code, 0 when no response was received (default: 0).
        original_error : Exception | None, optional
            The underlying exception (default: None).
        """
        self.url = url
        self.status_code = status_code
        self.original_error = original_error
        super().__init__(message)

    @property
    def is_client_error(self) -> bool:
        """Whether the API answered with a 4xx status."""
        return 400 <= self.status_code < 500


class ShapeMismatchError(TubelistError):
    """
    Exception raised when an API document does not match a parse rule.

    Attributes
    ----------
    message : str
        Human-readable error message.
    payload : Any
        The offending JSON value (a single item, or the whole response body).
    rule : str
        Name of the parse rule that was applied, or "response" when the
        top-level response envelope itself was malformed.
    """

    def __init__(
        self,
        message: str,
        payload: Any = None,
        rule: str = "response",
    ) -> None:
        """
        Initialize ShapeMismatchError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        payload : Any, optional
            The JSON value that failed to match (default: None).
        rule : str, optional
            Name of the parse rule that was applied (default: "response").
        """
        self.payload = payload
        self.rule = rule
        super().__init__(message)


__all__ = [
    "TubelistError",
    "TransportError",
    "ShapeMismatchError",
]
