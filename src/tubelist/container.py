"""
Dependency Injection Container for tubelist.

Builds the settings, HTTP gateway and playlist client on first access and
caches them. Each dependency can be overridden, which is how tests swap
in a canned gateway.

Usage
-----
    >>> from tubelist.container import container
    >>> client = container.playlist_client
    >>> playlist = await client.get("PLZRRxQcaEjA5tpoxlKeVnPKIvfD1IavPq")

Overriding for tests:

    >>> container.override_gateway(mock_gateway)
    >>> container.reset()  # back to lazily-built defaults
"""

from __future__ import annotations

from typing import Optional

from tubelist.config.settings import Settings, get_settings
from tubelist.services.http_gateway import HttpxGateway
from tubelist.services.interfaces import HttpGatewayInterface
from tubelist.services.playlist_client import PlaylistClient


class Container:
    """
    Dependency injection container for tubelist.

    All dependencies are singletons within one container and are created
    lazily. ``reset()`` drops them so the next access rebuilds them.
    """

    def __init__(self) -> None:
        self._settings: Optional[Settings] = None
        self._http_gateway: Optional[HttpGatewayInterface] = None
        self._playlist_client: Optional[PlaylistClient] = None
        self._gateway_overridden = False

    @property
    def settings(self) -> Settings:
        """Application settings, loaded from the environment on first use."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def http_gateway(self) -> HttpGatewayInterface:
        """HTTP gateway configured with the settings' request timeout."""
        if self._http_gateway is None:
            self._http_gateway = HttpxGateway(timeout=self.settings.request_timeout)
        return self._http_gateway

    @property
    def playlist_client(self) -> PlaylistClient:
        """Playlist client wired to the settings and the gateway."""
        if self._playlist_client is None:
            self._playlist_client = PlaylistClient(
                config=self.settings,
                gateway=self.http_gateway,
                max_results=self.settings.default_max_results,
            )
        return self._playlist_client

    def override_settings(self, settings: Settings) -> None:
        """Use ``settings`` instead of loading them from the environment."""
        self._settings = settings
        if not self._gateway_overridden:
            self._http_gateway = None
        self._playlist_client = None

    def override_gateway(self, gateway: HttpGatewayInterface) -> None:
        """Use ``gateway`` for all requests made through this container."""
        self._http_gateway = gateway
        self._gateway_overridden = True
        self._playlist_client = None

    async def aclose(self) -> None:
        """Close the gateway, if one was built, and drop it and the client."""
        if self._http_gateway is not None:
            await self._http_gateway.aclose()
        self._http_gateway = None
        self._gateway_overridden = False
        self._playlist_client = None

    def reset(self) -> None:
        """Drop all cached dependencies."""
        self._settings = None
        self._http_gateway = None
        self._gateway_overridden = False
        self._playlist_client = None


# Global container instance
container = Container()
