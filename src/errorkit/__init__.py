"""errorkit - structured application errors."""

from errorkit.errors import (
    AppError,
    ErrorKind,
    format_error_for_logging,
    get_user_friendly_message,
    handle_error,
    is_retryable_error,
    normalize_error,
)

__app_name__ = "errorkit"
__version__ = "0.1.0"

__all__ = [
    "AppError",
    "ErrorKind",
    "normalize_error",
    "get_user_friendly_message",
    "format_error_for_logging",
    "is_retryable_error",
    "handle_error",
]
