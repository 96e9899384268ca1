"""Helper functions for legacy user switcher UI code.

These exist so that the list controller and the newer view-models share
one mapping from user record flags to icons, labels and layout values
instead of each keeping a copy. Every function is pure apart from calls
to the injected StringLookupPort.
"""

import logging

from user_switcher.application.ports import StringLookupPort
from user_switcher.domain.resources import (
    ICON_ACCOUNT_CIRCLE,
    ICON_ADD,
    ICON_ADD_SUPERVISED_USER,
    ICON_AVATAR_USER,
    STRING_ADD_SUPERVISED_USER,
    STRING_ADD_USER,
    STRING_GUEST_EXIT_QUICK_SETTINGS,
    STRING_GUEST_NAME,
    STRING_GUEST_RESETTING,
    ResourceId,
)
from user_switcher.domain.shared.exceptions import (
    IllegalStateError,
    InvariantViolation,
)
from user_switcher.domain.user import UserRecord

logger = logging.getLogger(__name__)

# Alpha applied to a user view in the switcher when it's selectable
USER_SWITCHER_USER_VIEW_SELECTABLE_ALPHA = 1.0

# Alpha applied to a user view in the switcher when it's not selectable
USER_SWITCHER_USER_VIEW_NOT_SELECTABLE_ALPHA = 0.38


def get_max_user_switcher_item_columns(user_count: int) -> int:
    """Return the maximum number of columns for user items in the switcher."""
    if user_count < 5:
        return 4
    # Integer ceil division, exact for any int
    return -(-user_count // 2)


def get_user_switcher_action_icon_resource_id(
    is_add_user: bool,
    is_guest: bool,
    is_add_supervised_user: bool,
) -> ResourceId:
    """Return the drawable for an action row. The first set flag wins."""
    if is_add_user:
        return ICON_ADD
    if is_guest:
        return ICON_ACCOUNT_CIRCLE
    if is_add_supervised_user:
        return ICON_ADD_SUPERVISED_USER
    return ICON_AVATAR_USER


def get_user_record_name(
    lookup: StringLookupPort,
    record: UserRecord,
    is_guest_user_auto_created: bool,
    is_guest_user_resetting: bool,
) -> str:
    """Return the label shown for a user record.

    Guest rows use a localized guest label, account rows use the account
    name and action rows use the label of their action.
    """
    resource_id = get_guest_user_record_name_resource_id(record)
    if resource_id is not None:
        return lookup.get_string(resource_id)

    if record.info is not None:
        return record.info.name

    return lookup.get_string(
        get_user_switcher_action_text_resource_id(
            is_guest=record.is_guest,
            is_guest_user_auto_created=is_guest_user_auto_created,
            is_guest_user_resetting=is_guest_user_resetting,
            is_add_user=record.is_add_user,
            is_add_supervised_user=record.is_add_supervised_user,
        )
    )


def get_guest_user_record_name_resource_id(record: UserRecord) -> ResourceId | None:
    """Return the string resource for the name of the guest user.

    If the given record is not the guest user, returns None.
    """
    if record.is_guest and record.is_current:
        return STRING_GUEST_EXIT_QUICK_SETTINGS
    if record.is_guest and record.info is not None:
        return STRING_GUEST_NAME
    return None


def get_user_switcher_action_text_resource_id(
    *,
    is_guest: bool,
    is_guest_user_auto_created: bool,
    is_guest_user_resetting: bool,
    is_add_user: bool,
    is_add_supervised_user: bool,
) -> ResourceId:
    """Return the string resource labelling an action row.

    Raises
    ------
    InvariantViolation
        If none of ``is_guest``, ``is_add_user`` or
        ``is_add_supervised_user`` is set.
    """
    if not (is_guest or is_add_user or is_add_supervised_user):
        logger.error("Action text requested for a record without an action role")
        raise InvariantViolation(
            "At least one of is_guest, is_add_user or is_add_supervised_user "
            "must be set",
            details={
                "is_guest_user_auto_created": is_guest_user_auto_created,
                "is_guest_user_resetting": is_guest_user_resetting,
            },
        )

    if is_guest and is_guest_user_auto_created and is_guest_user_resetting:
        return STRING_GUEST_RESETTING
    if is_guest and is_guest_user_auto_created:
        return STRING_GUEST_NAME
    if is_guest:
        return STRING_GUEST_NAME
    if is_add_user:
        return STRING_ADD_USER
    if is_add_supervised_user:
        return STRING_ADD_SUPERVISED_USER

    logger.error("Unreachable branch in action text resolution")
    raise IllegalStateError()
