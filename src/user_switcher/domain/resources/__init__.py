"""Resource identifiers for icons and localized strings."""

from user_switcher.domain.resources.catalog import (
    ALL_ICONS,
    ALL_STRINGS,
    ICON_ACCOUNT_CIRCLE,
    ICON_ADD,
    ICON_ADD_SUPERVISED_USER,
    ICON_AVATAR_USER,
    STRING_ADD_SUPERVISED_USER,
    STRING_ADD_USER,
    STRING_GUEST_EXIT_QUICK_SETTINGS,
    STRING_GUEST_NAME,
    STRING_GUEST_RESETTING,
)
from user_switcher.domain.resources.resource_id import (
    ResourceId,
    ResourceNamespace,
    ResourceType,
)

__all__ = [
    # Value objects
    "ResourceId",
    "ResourceNamespace",
    "ResourceType",
    # Drawables
    "ALL_ICONS",
    "ICON_ACCOUNT_CIRCLE",
    "ICON_ADD",
    "ICON_ADD_SUPERVISED_USER",
    "ICON_AVATAR_USER",
    # Strings
    "ALL_STRINGS",
    "STRING_ADD_SUPERVISED_USER",
    "STRING_ADD_USER",
    "STRING_GUEST_EXIT_QUICK_SETTINGS",
    "STRING_GUEST_NAME",
    "STRING_GUEST_RESETTING",
]
