"""
CLI constants for tubelist.

Exit codes follow Unix conventions. Command-specific constants stay in
their command modules.
"""

from __future__ import annotations

from typing import Final

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_SUCCESS: Final[int] = 0
"""Operation completed normally."""

EXIT_USER_ERROR: Final[int] = 1
"""
User error: invalid input, missing configuration, unknown playlist, or an
API response the client could not map.
"""

EXIT_SYSTEM_ERROR: Final[int] = 2
"""System error: network failure or a non-2xx answer from the API."""

EXIT_CANCELLED: Final[int] = 3
"""Operation cancelled by the user (Ctrl+C)."""

# =============================================================================
# Display
# =============================================================================

DESCRIPTION_PREVIEW_LENGTH: Final[int] = 60
"""Descriptions longer than this are truncated in table output."""
