"""
Test data factories for user switcher rows.

Usage:
    from tests.shared.fixtures.factories import TestUserRecordFactory

    def test_something():
        record = TestUserRecordFactory.current_guest()
"""

from dataclasses import dataclass

from user_switcher.domain.user import UserInfo, UserRecord


@dataclass(frozen=True)
class TestUserRecordFactory:
    """Factory for the kinds of rows the switcher shows."""

    __test__ = False

    ALICE_ID = 10
    ALICE_NAME = "Alice"

    GUEST_ID = 11
    GUEST_ACCOUNT_NAME = "guest-account"

    @classmethod
    def alice(cls, *, is_current: bool = False) -> UserRecord:
        """Regular account row."""
        return UserRecord(
            is_current=is_current,
            info=UserInfo(name=cls.ALICE_NAME, id=cls.ALICE_ID),
        )

    @classmethod
    def current_guest(cls) -> UserRecord:
        """Guest row while the guest session is active."""
        return UserRecord(
            is_guest=True,
            is_current=True,
            info=UserInfo(name=cls.GUEST_ACCOUNT_NAME, id=cls.GUEST_ID),
        )

    @classmethod
    def existing_guest(cls) -> UserRecord:
        """Guest row for a guest account that exists but is not active."""
        return UserRecord(
            is_guest=True,
            info=UserInfo(name=cls.GUEST_ACCOUNT_NAME, id=cls.GUEST_ID),
        )

    @classmethod
    def add_guest_action(cls) -> UserRecord:
        """Action row that creates the guest account."""
        return UserRecord(is_guest=True)

    @classmethod
    def add_user_action(cls) -> UserRecord:
        return UserRecord(is_add_user=True)

    @classmethod
    def add_supervised_user_action(cls) -> UserRecord:
        return UserRecord(is_add_supervised_user=True)
