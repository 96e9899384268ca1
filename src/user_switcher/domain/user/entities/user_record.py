"""User record entity.

A user record is one row of the user switcher: either a real account
(``info`` is set) or a UI action such as "add user" (``info`` is None).
Records are built by callers; this package only reads them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserInfo:
    """Account details of a concrete user row."""

    name: str
    id: int | None = None


@dataclass(frozen=True)
class UserRecord:
    """Immutable view of a row in the user switcher."""

    is_guest: bool = False
    is_current: bool = False
    is_add_user: bool = False
    is_add_supervised_user: bool = False
    info: UserInfo | None = None

    @property
    def is_action(self) -> bool:
        """True when the row is an affordance rather than an account."""
        return self.info is None

    def __repr__(self) -> str:
        return (
            f"UserRecord(is_guest={self.is_guest}, is_current={self.is_current}, "
            f"is_add_user={self.is_add_user}, "
            f"is_add_supervised_user={self.is_add_supervised_user}, "
            f"info={self.info!r})"
        )
