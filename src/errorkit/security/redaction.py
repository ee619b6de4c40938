"""Redaction of secrets and personal data from error messages and logs."""

import logging
import re

from errorkit.config.settings import get_settings

# Applied in order; later patterns see the output of earlier ones
_REDACTIONS = [
    # API keys, tokens and other long opaque strings
    (re.compile(r"[A-Za-z0-9]{20,}"), "[REDACTED]"),
    # URL query parameters
    (re.compile(r"\?[^?\s]*"), "?[PARAMS]"),
    (re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"), "[EMAIL]"),
    # User names in home directory paths
    (re.compile(r"/Users/[^/\s]+"), "/Users/[USER]"),
    (re.compile(r"/home/[^/\s]+"), "/home/[USER]"),
    (re.compile(r"C:\\Users\\[^\\\s]+"), "C:\\\\Users\\\\[USER]"),
]


def sanitize_error_message(message: str) -> str:
    """Strip credentials, query strings, e-mail addresses and user names.

    Args:
        message: Raw error text

    Returns:
        The message with sensitive fragments replaced by placeholders
    """
    sanitized = message
    for pattern, replacement in _REDACTIONS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized


class SensitiveDataFilter(logging.Filter):
    """Filter to keep sensitive data out of log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Sanitize the fully rendered message of a record."""
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Leave malformed records to the handler's own error reporting
            return True
        record.msg = sanitize_error_message(message)
        record.args = None
        return True


def setup_secure_logging() -> logging.Logger:
    """Configure the errorkit loggers to filter sensitive data.

    Logger filters do not apply to records propagated from child loggers, so
    the filter goes on every errorkit logger created so far.
    """
    errorkit_logger = logging.getLogger("errorkit")
    names = [
        name for name in logging.root.manager.loggerDict if name.startswith("errorkit.")
    ]
    for target in [errorkit_logger] + [logging.getLogger(name) for name in names]:
        if not any(isinstance(f, SensitiveDataFilter) for f in target.filters):
            target.addFilter(SensitiveDataFilter())

    errorkit_logger.setLevel(get_settings().log_level.upper())
    return errorkit_logger
