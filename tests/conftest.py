"""
Pytest configuration for httperr tests.
"""

from typing import Any

import pytest

from httperr.processing import HTTPErrorConverter
from httperr.registration import DEFAULT_KINDS, ErrorKind, StatusRegistry


@pytest.fixture
def status_registry() -> StatusRegistry:
    """Fixture for a registry holding the default kinds."""
    return StatusRegistry(DEFAULT_KINDS)


@pytest.fixture
def converter(status_registry: StatusRegistry) -> HTTPErrorConverter:
    """Fixture for HTTPErrorConverter over the default kinds."""
    return HTTPErrorConverter(status_registry)


@pytest.fixture
def teapot_kind() -> ErrorKind:
    """Fixture for a custom kind that is not part of the defaults."""
    return ErrorKind("HTTP-40000", 499, "Client Closed Request")


@pytest.fixture
def sample_context() -> dict[str, Any]:
    """Fixture for structured context data."""
    return {
        "url": "https://example.com",
        "retry": 3,
        "cached": False,
        "headers": {"x-request-id": "abc-123"},
        "tags": ["edge", "eu-west"],
        "parent": None,
    }
