"""
Standardized error message helpers for CLI commands.

Provides:
- Error display formatters with a consistent Title -> Problem -> Hint format
- Rich panel wrappers for error display
- Mapping from tubelist exceptions to error categories and exit codes
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from tubelist.cli.constants import EXIT_SYSTEM_ERROR, EXIT_USER_ERROR
from tubelist.exceptions import ShapeMismatchError, TransportError, TubelistError

# Module-level console for CLI error display
console = Console()


class ErrorCategory:
    """
    Standard error categories for CLI commands.

    - NOT_FOUND: The API returned no such playlist
    - VALIDATION: Input or configuration validation failed
    - RESPONSE: The API answered with a document of unexpected shape
    - TRANSPORT: The request could not be completed
    """

    NOT_FOUND = "Not Found"
    VALIDATION = "Validation"
    RESPONSE = "Response"
    TRANSPORT = "Transport"


def get_exit_code_for_category(category: str) -> int:
    """
    Map error category to appropriate exit code.

    Examples
    --------
    >>> get_exit_code_for_category(ErrorCategory.NOT_FOUND)
    1
    >>> get_exit_code_for_category(ErrorCategory.TRANSPORT)
    2
    """
    category_to_exit_code = {
        ErrorCategory.NOT_FOUND: EXIT_USER_ERROR,
        ErrorCategory.VALIDATION: EXIT_USER_ERROR,
        ErrorCategory.RESPONSE: EXIT_USER_ERROR,
        ErrorCategory.TRANSPORT: EXIT_SYSTEM_ERROR,
    }
    return category_to_exit_code.get(category, EXIT_USER_ERROR)


def categorize_error(error: TubelistError) -> str:
    """Pick the error category for a tubelist exception."""
    if isinstance(error, TransportError):
        if error.status_code == 404:
            return ErrorCategory.NOT_FOUND
        return ErrorCategory.TRANSPORT
    if isinstance(error, ShapeMismatchError):
        payload = error.payload
        if isinstance(payload, dict) and payload.get("items") == []:
            return ErrorCategory.NOT_FOUND
        return ErrorCategory.RESPONSE
    return ErrorCategory.VALIDATION


def format_error(
    category: str,
    message: str,
    hint: Optional[str] = None,
) -> str:
    """
    Format error message in the standard CLI format.

    Examples
    --------
    >>> format_error("Validation", "YOUTUBE_API_KEY is not set")
    'Error: Validation: YOUTUBE_API_KEY is not set'
    """
    lines = [f"Error: {category}: {message}"]
    if hint is not None:
        lines.append(f"   Hint: {hint}")
    return "\n".join(lines)


def display_error_panel(
    category: str,
    message: str,
    hint: Optional[str] = None,
    title: str = "Error",
) -> None:
    """Display formatted error in a red Rich panel."""
    formatted = format_error(category, message, hint)
    console.print(
        Panel(
            Text(formatted, style="red"),
            title=title,
            border_style="red",
        )
    )
