"""Service-boundary error handling.

Turns failures raised inside a named service (an API client, the database
layer, ...) into a uniform failure result that callers can hand straight to
the UI, instead of letting the exception escape.
"""

import functools
import inspect
import logging
import socket
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

import httpx

from errorkit.errors.app_error import AppError
from errorkit.errors.kinds import ErrorKind
from errorkit.errors.messages import get_user_friendly_message
from errorkit.security.redaction import sanitize_error_message
from errorkit.ui.console import print_error

logger = logging.getLogger(__name__)

T = TypeVar("T")

NETWORK_EXCEPTIONS = (ConnectionError, socket.gaierror, httpx.ConnectError)


@dataclass(frozen=True)
class ServiceErrorResult:
    """Failure result returned from a service call."""

    message: str
    kind: ErrorKind = ErrorKind.UNKNOWN
    success: bool = False

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "message": self.message,
            "code": getattr(self.kind, "value", self.kind),
        }


def _message_of(error: Any) -> Optional[str]:
    if isinstance(error, AppError):
        return error.message
    if isinstance(error, BaseException):
        try:
            return str(error)
        except Exception:
            return None
    message = getattr(error, "message", None)
    return message if isinstance(message, str) else None


def _classify_service_error(error: Any) -> ServiceErrorResult:
    if isinstance(error, AppError):
        return ServiceErrorResult(get_user_friendly_message(error), error.kind)

    message = _message_of(error)

    if message == "Request timeout":
        return ServiceErrorResult(
            "The operation timed out. Please try again.", ErrorKind.TIMEOUT
        )

    if isinstance(error, NETWORK_EXCEPTIONS):
        return ServiceErrorResult(
            "There is a problem with the network connection.", ErrorKind.NETWORK_ERROR
        )

    if message and ("API key" in message or "api_key" in message):
        return ServiceErrorResult(
            "There is a problem with the API key configuration.", ErrorKind.API_KEY_INVALID
        )

    if message and ("database" in message or "Database" in message):
        return ServiceErrorResult(
            "An error occurred during a database operation.", ErrorKind.DB_QUERY_FAILED
        )

    return ServiceErrorResult(sanitize_error_message(message or "Unknown error occurred"))


def handle_service_error(
    service_name: str,
    error: Any,
    show_error: bool = False,
) -> ServiceErrorResult:
    """Convert an error raised inside a service into a failure result.

    Args:
        service_name: Name of the failing service, used in logs and titles
        error: Any caught value
        show_error: Whether to display the message to the user

    Returns:
        ServiceErrorResult with a user-facing message and kind
    """
    logger.error(f"{service_name} error: {_message_of(error) or type(error).__name__}")

    result = _classify_service_error(error)

    if show_error:
        print_error(result.message, title=f"{service_name} error")

    return result


def handle_errors(service_name: str, show_error: bool = False) -> Callable:
    """Decorator returning a ServiceErrorResult instead of raising.

    Args:
        service_name: Name of the wrapped service
        show_error: Whether to display errors to the user

    Returns:
        Decorated function
    """

    def decorator(func: Callable[..., T]) -> Callable[..., Any]:
        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                return handle_service_error(service_name, e, show_error=show_error)

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                return handle_service_error(service_name, e, show_error=show_error)

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
