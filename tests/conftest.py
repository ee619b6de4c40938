"""Pytest configuration and fixtures for errorkit tests."""

import pytest

from errorkit.config.settings import reset_settings_cache


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings."""
    monkeypatch.delenv("ERRORKIT_ENVIRONMENT", raising=False)
    monkeypatch.delenv("ERRORKIT_LOG_LEVEL", raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def development_mode(monkeypatch):
    """Switch the configured environment to development."""
    monkeypatch.setenv("ERRORKIT_ENVIRONMENT", "development")
    reset_settings_cache()
