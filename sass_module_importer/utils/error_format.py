"""Safe error message formatting utilities.

Ensures exceptions always have useful display messages, even when their
str() representation is empty (e.g. a bare PermissionError from a stat call).
"""

from __future__ import annotations

from rich.markup import escape as _escape_markup

# Friendly messages for exception types that often carry no message
FRIENDLY_MESSAGES: dict[type, str] = {
    FileNotFoundError: "File or directory does not exist.",
    PermissionError: "Permission denied while reading from disk.",
    IsADirectoryError: "Expected a file but found a directory.",
    KeyboardInterrupt: "Operation interrupted by user.",
}


def format_error_message(e: BaseException, *, include_type: bool = True) -> str:
    """Format an exception into a useful display message.

    Args:
        e: The exception to format
        include_type: Whether to include the exception type name

    Returns:
        A non-empty, user-friendly error message

    Examples:
        >>> format_error_message(PermissionError())
        'PermissionError: Permission denied while reading from disk.'

        >>> format_error_message(ValueError("invalid input"), include_type=False)
        'invalid input'
    """
    error_str = str(e)
    error_type = type(e).__name__

    if error_str:
        if include_type and error_type not in error_str:
            return f"{error_type}: {error_str}"
        return error_str

    for exc_type, friendly_msg in FRIENDLY_MESSAGES.items():
        if isinstance(e, exc_type):
            return f"{error_type}: {friendly_msg}"

    return f"{error_type}: (no additional details)"


def format_error_chain(e: BaseException) -> list[str]:
    """Format an exception and its causes, outermost first."""
    messages = []
    current: BaseException | None = e
    while current is not None:
        messages.append(format_error_message(current))
        current = current.__cause__
    return messages


def escape_markup(value: object) -> str:
    """Escape a value for safe interpolation into Rich markup strings."""
    return _escape_markup(str(value))
