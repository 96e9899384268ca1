"""
Pytest configuration for user_switcher tests.

Provides string lookups for the helper and adapter tests.
"""

import pytest

from tests.shared.fixtures import RecordingStringLookup
from user_switcher.infrastructure.resources import CatalogStringLookup


@pytest.fixture
def recording_lookup() -> RecordingStringLookup:
    """Lookup that echoes qualified names and records each request."""
    return RecordingStringLookup()


@pytest.fixture
def english_lookup() -> CatalogStringLookup:
    """Lookup over the bundled English strings."""
    return CatalogStringLookup()
