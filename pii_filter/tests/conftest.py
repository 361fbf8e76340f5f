"""Shared fixtures for the PII filter tests."""

import pytest

from ..config import PIIFilterConfig
from ..filter import PIIFilter


ENV_FLAGS = (
    "PII_FILTER_ENABLED",
    "PII_ANONYMIZE_EMAILS",
    "PII_ANONYMIZE_NAMES",
    "PII_ANONYMIZE_PHONE",
)


@pytest.fixture
def clean_env(monkeypatch):
    """
    Remove PII toggles from the environment.

    Each toggle is registered with monkeypatch before removal, so values a
    test loads later (e.g. from a .env file) are removed again on teardown.
    """
    for name in ENV_FLAGS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def pii_filter() -> PIIFilter:
    """Fresh filter with every category enabled, independent of the environment."""
    return PIIFilter(PIIFilterConfig())


@pytest.fixture
def disabled_filter() -> PIIFilter:
    return PIIFilter(PIIFilterConfig(enabled=False))
