"""Normalization of arbitrary failure values into AppError.

Caught values are first tagged with an InputVariant, then each variant has
exactly one conversion rule. Exception messages are sniffed for a few
substrings since nothing richer is known about an arbitrary exception.
"""

from enum import Enum
from typing import Any

from errorkit.errors.app_error import AppError
from errorkit.errors.kinds import ErrorKind

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class InputVariant(Enum):
    """Shape of a caught failure value."""

    KNOWN_ERROR = "known_error"
    NATIVE_EXCEPTION = "native_exception"
    TEXT_VALUE = "text_value"
    OPAQUE_VALUE = "opaque_value"


def classify_input(error: Any) -> InputVariant:
    """Tag a caught value with its variant."""
    if isinstance(error, AppError):
        return InputVariant.KNOWN_ERROR
    if isinstance(error, BaseException):
        return InputVariant.NATIVE_EXCEPTION
    if isinstance(error, str):
        return InputVariant.TEXT_VALUE
    return InputVariant.OPAQUE_VALUE


def _exception_message(error: BaseException) -> str:
    try:
        return str(error)
    except Exception:
        return ""


def _from_exception(error: BaseException) -> AppError:
    message = _exception_message(error)

    # API/key wins over timeout when both appear
    if "API" in message or "key" in message:
        return AppError("API service error", ErrorKind.API_REQUEST_FAILED, 503)

    if "timeout" in message:
        return AppError("Request timeout", ErrorKind.TIMEOUT, 408)

    return AppError(
        message,
        ErrorKind.UNKNOWN,
        500,
        True,
        {"original_error_name": type(error).__name__},
    )


def normalize_error(error: Any) -> AppError:
    """Convert any caught value into an AppError.

    Args:
        error: Whatever was raised or reported - an AppError, any exception,
            a string, or an arbitrary value

    Returns:
        The same object for an AppError, otherwise a new classified AppError.
        Never raises.
    """
    variant = classify_input(error)

    if variant is InputVariant.KNOWN_ERROR:
        return error
    if variant is InputVariant.NATIVE_EXCEPTION:
        return _from_exception(error)
    if variant is InputVariant.TEXT_VALUE:
        return AppError(error, ErrorKind.UNKNOWN)

    return AppError(
        UNEXPECTED_ERROR_MESSAGE,
        ErrorKind.UNKNOWN,
        500,
        False,
        {"original_error": error},
    )
