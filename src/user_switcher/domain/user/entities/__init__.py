"""Entities for the user domain."""

from user_switcher.domain.user.entities.user_record import UserInfo, UserRecord

__all__ = [
    "UserInfo",
    "UserRecord",
]
