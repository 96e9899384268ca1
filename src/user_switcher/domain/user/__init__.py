"""User domain - rows shown in the user switcher.

This domain handles:
- UserRecord entity (guest, add-user and add-supervised-user rows)
- UserInfo for rows backed by a real account

Design notes:
- Records are owned by callers and never mutated here
- At most one of the role flags is expected to be set per record
"""

from user_switcher.domain.user.entities import UserInfo, UserRecord

__all__ = [
    "UserInfo",
    "UserRecord",
]
