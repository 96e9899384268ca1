"""Shared test fixtures."""

from tests.shared.fixtures.factories import TestUserRecordFactory
from tests.shared.fixtures.fakes import RecordingStringLookup

__all__ = [
    "RecordingStringLookup",
    "TestUserRecordFactory",
]
