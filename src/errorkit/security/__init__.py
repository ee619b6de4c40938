"""Security utilities for errorkit - redaction of sensitive data."""

from errorkit.security.redaction import (
    SensitiveDataFilter,
    sanitize_error_message,
    setup_secure_logging,
)

__all__ = ["SensitiveDataFilter", "sanitize_error_message", "setup_secure_logging"]
