"""User-facing messages for each error kind."""

from errorkit.errors.app_error import AppError
from errorkit.errors.kinds import ErrorKind

FALLBACK_MESSAGE = "Something went wrong. Please try again."

USER_MESSAGES = {
    ErrorKind.API_KEY_INVALID: "Authentication with the AI service failed. Check your settings.",
    ErrorKind.API_TIMEOUT: "The request timed out. Please try again.",
    ErrorKind.API_RATE_LIMIT: "The API usage limit was reached. Please wait a moment.",
    ErrorKind.INVALID_INPUT: "The input is invalid. Please check it.",
    ErrorKind.INPUT_TOO_LONG: "The input is too long. Please shorten it.",
    ErrorKind.NETWORK_ERROR: "A network error occurred. Check your connection.",
    ErrorKind.DB_CONNECTION_FAILED: "Cannot connect to the database.",
}


def get_user_friendly_message(error: AppError) -> str:
    """Get the sentence to show the user for an error's kind."""
    try:
        return USER_MESSAGES.get(getattr(error, "kind", None), FALLBACK_MESSAGE)
    except TypeError:
        # Unhashable kind
        return FALLBACK_MESSAGE
