"""Tests for normalize_error.

Tests cover:
- AppError identity
- Exception message sniffing (API/key, timeout) and its precedence
- Plain exceptions, strings and opaque values
"""

import pytest

from errorkit.errors import AppError, ErrorKind, InputVariant, classify_input, normalize_error


class CustomFailure(Exception):
    """Application-specific exception used as input."""


class BrokenMessage(Exception):
    """Exception whose message cannot be rendered."""

    def __str__(self):
        raise RuntimeError("cannot render")


class TestClassifyInput:
    """Tests for input variant tagging."""

    @pytest.mark.parametrize(
        "value,variant",
        [
            (AppError("x"), InputVariant.KNOWN_ERROR),
            (ValueError("x"), InputVariant.NATIVE_EXCEPTION),
            (KeyboardInterrupt(), InputVariant.NATIVE_EXCEPTION),
            ("text", InputVariant.TEXT_VALUE),
            (42, InputVariant.OPAQUE_VALUE),
            (None, InputVariant.OPAQUE_VALUE),
            ({"message": "x"}, InputVariant.OPAQUE_VALUE),
        ],
    )
    def test_variants(self, value, variant):
        """Test each input shape gets its variant."""
        assert classify_input(value) is variant


class TestNormalizeKnownError:
    """Tests for AppError inputs."""

    def test_identity(self):
        """Test an AppError is returned unchanged."""
        error = AppError("Invalid input", ErrorKind.INVALID_INPUT, 400)
        assert normalize_error(error) is error

    def test_identity_for_opaque_origin(self):
        """Test re-normalizing a normalized value is a no-op."""
        first = normalize_error(3.14)
        assert normalize_error(first) is first


class TestNormalizeException:
    """Tests for native exception inputs."""

    @pytest.mark.parametrize(
        "message",
        [
            "API returned 500",
            "Invalid key supplied",
            "Missing api key",
            "keyring unavailable",
        ],
    )
    def test_api_or_key(self, message):
        """Test API/key messages become API request failures."""
        error = normalize_error(RuntimeError(message))
        assert error.kind == ErrorKind.API_REQUEST_FAILED
        assert error.status_code == 503
        assert error.is_operational is True
        assert error.message == "API service error"
        assert error.context is None

    @pytest.mark.parametrize("message", ["Connection timeout", "socket timeout after 30s"])
    def test_timeout(self, message):
        """Test timeout messages become timeouts."""
        error = normalize_error(Exception(message))
        assert error.kind == ErrorKind.TIMEOUT
        assert error.status_code == 408
        assert error.message == "Request timeout"

    def test_api_wins_over_timeout(self):
        """Test a message matching both rules is an API failure."""
        error = normalize_error(Exception("API timeout"))
        assert error.kind == ErrorKind.API_REQUEST_FAILED
        assert error.status_code == 503

    @pytest.mark.parametrize("message", ["Timeout reached", "api failure", "KEY missing"])
    def test_matching_is_case_sensitive(self, message):
        """Test substrings only match with exact case."""
        error = normalize_error(Exception(message))
        assert error.kind == ErrorKind.UNKNOWN
        assert error.message == message

    def test_unmatched_message(self):
        """Test other exceptions keep their message and type name."""
        error = normalize_error(OSError("disk full"))
        assert error.kind == ErrorKind.UNKNOWN
        assert error.status_code == 500
        assert error.is_operational is True
        assert error.message == "disk full"
        assert error.context == {"original_error_name": "OSError"}

    def test_custom_exception_name(self):
        """Test the context names the concrete exception class."""
        error = normalize_error(CustomFailure("quota exceeded"))
        assert error.context["original_error_name"] == "CustomFailure"

    def test_empty_message(self):
        """Test exceptions without a message."""
        error = normalize_error(ValueError())
        assert error.kind == ErrorKind.UNKNOWN
        assert error.message == ""
        assert error.context == {"original_error_name": "ValueError"}

    def test_unrenderable_message(self):
        """Test a broken __str__ does not escape."""
        error = normalize_error(BrokenMessage())
        assert error.kind == ErrorKind.UNKNOWN
        assert error.message == ""
        assert error.context == {"original_error_name": "BrokenMessage"}


class TestNormalizeText:
    """Tests for string inputs."""

    def test_plain_string(self):
        """Test a string becomes the message."""
        error = normalize_error("plain string failure")
        assert error.kind == ErrorKind.UNKNOWN
        assert error.status_code == 500
        assert error.is_operational is True
        assert error.message == "plain string failure"
        assert error.context is None

    def test_string_is_not_sniffed(self):
        """Test strings are not classified by content."""
        error = normalize_error("API timeout")
        assert error.kind == ErrorKind.UNKNOWN
        assert error.message == "API timeout"


class TestNormalizeOpaque:
    """Tests for any other value."""

    @pytest.mark.parametrize("value", [42, None, 0, [1, 2], {"code": "E1"}, object()])
    def test_opaque_values(self, value):
        """Test unknown values are retained for diagnostics."""
        error = normalize_error(value)
        assert error.kind == ErrorKind.UNKNOWN
        assert error.status_code == 500
        assert error.is_operational is False
        assert error.message == "An unexpected error occurred"
        assert error.context["original_error"] is value

    def test_number(self):
        """Test the raw number is kept."""
        error = normalize_error(42)
        assert error.context == {"original_error": 42}
