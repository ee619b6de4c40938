"""Error kinds - the closed taxonomy every failure is classified into."""

from enum import Enum


class ErrorKind(Enum):
    """Categories of failures for consistent handling."""

    # System
    UNKNOWN = "UNKNOWN_ERROR"
    INITIALIZATION_FAILED = "INITIALIZATION_FAILED"

    # API
    API_KEY_INVALID = "API_KEY_INVALID"
    API_REQUEST_FAILED = "API_REQUEST_FAILED"
    API_TIMEOUT = "API_TIMEOUT"
    API_RATE_LIMIT = "API_RATE_LIMIT"

    # Validation
    INVALID_INPUT = "INVALID_INPUT"
    INPUT_TOO_LONG = "INPUT_TOO_LONG"
    REQUIRED_FIELD_MISSING = "REQUIRED_FIELD_MISSING"

    # Database
    DB_CONNECTION_FAILED = "DB_CONNECTION_FAILED"
    DB_QUERY_FAILED = "DB_QUERY_FAILED"

    # Network
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"

    @property
    def domain(self) -> str:
        """Name of the group this kind belongs to."""
        return _DOMAINS[self]


_DOMAINS = {
    ErrorKind.UNKNOWN: "system",
    ErrorKind.INITIALIZATION_FAILED: "system",
    ErrorKind.API_KEY_INVALID: "api",
    ErrorKind.API_REQUEST_FAILED: "api",
    ErrorKind.API_TIMEOUT: "api",
    ErrorKind.API_RATE_LIMIT: "api",
    ErrorKind.INVALID_INPUT: "validation",
    ErrorKind.INPUT_TOO_LONG: "validation",
    ErrorKind.REQUIRED_FIELD_MISSING: "validation",
    ErrorKind.DB_CONNECTION_FAILED: "database",
    ErrorKind.DB_QUERY_FAILED: "database",
    ErrorKind.NETWORK_ERROR: "network",
    ErrorKind.TIMEOUT: "network",
}
