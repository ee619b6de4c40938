"""Error handling entry points for request handlers and background tasks."""

import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Optional

from errorkit.config.settings import get_settings
from errorkit.errors.app_error import AppError
from errorkit.errors.formatting import format_error_for_logging
from errorkit.errors.normalize import normalize_error

logger = logging.getLogger(__name__)


def handle_error(
    error: Any,
    context: Optional[str] = None,
    diagnostics_enabled: Optional[bool] = None,
) -> AppError:
    """Normalize a caught value and optionally log it.

    Args:
        error: Any caught value
        context: Where the error was caught, used in the log line
        diagnostics_enabled: Log the formatted error. Defaults to whether
            the configured environment is development.

    Returns:
        The normalized AppError. Never raises.
    """
    app_error = normalize_error(error)

    try:
        if diagnostics_enabled is None:
            diagnostics_enabled = get_settings().is_development
        if diagnostics_enabled:
            logger.error(
                f"Error in {context or 'unknown context'}: {format_error_for_logging(app_error)}"
            )
    except Exception:
        # Logging is best-effort; the caller always gets the error back
        pass

    return app_error


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<{type(value).__name__}>"


def log_error(error: Any, context: Optional[str] = None) -> dict:
    """Log a structured record describing any error value.

    Args:
        error: Any caught value
        context: Where the error was caught

    Returns:
        The logged record
    """
    if isinstance(error, AppError):
        message = error.message
        stack = error.trace
        code = getattr(error.kind, "value", error.kind)
        details = error.context
    else:
        message = _safe_str(error)
        stack = None
        tb = getattr(error, "__traceback__", None)
        if isinstance(error, BaseException) and tb is not None:
            stack = "".join(traceback.format_tb(tb))
        code = getattr(error, "code", "UNKNOWN")
        details = getattr(error, "details", None)

    record = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "context": context,
        "message": message,
        "stack": stack,
        "code": code,
        "details": details,
    }
    logger.error(f"Error logged: {record}")
    return record
