"""Retry policy - which kinds of failure are worth attempting again."""

from errorkit.errors.app_error import AppError
from errorkit.errors.kinds import ErrorKind

RETRYABLE_KINDS = frozenset(
    {
        ErrorKind.API_TIMEOUT,
        ErrorKind.NETWORK_ERROR,
        ErrorKind.TIMEOUT,
        ErrorKind.DB_CONNECTION_FAILED,
    }
)


def is_retryable_error(error: AppError) -> bool:
    """Check if the operation that produced an error may be retried."""
    try:
        return getattr(error, "kind", None) in RETRYABLE_KINDS
    except TypeError:
        return False
