"""
Service interfaces (ABCs) for tubelist.

These abstract base classes define contracts for service implementations,
enabling dependency injection, testing with mocks, and swappable implementations.
"""

from .http_gateway_interface import HttpGatewayInterface

__all__ = ["HttpGatewayInterface"]
