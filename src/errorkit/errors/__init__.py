"""Error model and classification for errorkit.

Normalizes arbitrary failures into AppError and derives user-facing
messages, retry hints and log output from their kind.
"""

from errorkit.errors.app_error import AppError, ErrorPayload
from errorkit.errors.formatting import format_error_for_display, format_error_for_logging
from errorkit.errors.handler import handle_error, log_error
from errorkit.errors.kinds import ErrorKind
from errorkit.errors.messages import get_user_friendly_message
from errorkit.errors.normalize import InputVariant, classify_input, normalize_error
from errorkit.errors.policy import RETRYABLE_KINDS, is_retryable_error
from errorkit.errors.service import ServiceErrorResult, handle_errors, handle_service_error

__all__ = [
    "AppError",
    "ErrorKind",
    "ErrorPayload",
    "InputVariant",
    "RETRYABLE_KINDS",
    "ServiceErrorResult",
    "classify_input",
    "normalize_error",
    "get_user_friendly_message",
    "format_error_for_logging",
    "format_error_for_display",
    "is_retryable_error",
    "handle_error",
    "log_error",
    "handle_service_error",
    "handle_errors",
]
