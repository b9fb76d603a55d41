"""
tubelist - YouTube playlist API binding.

A small async client for the playlist endpoints of the YouTube Data API v3:
playlist lookup, playlist search and playlist item listing.
"""

from __future__ import annotations

__version__ = "0.3.0"
__author__ = "tubelist"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__license__"]
