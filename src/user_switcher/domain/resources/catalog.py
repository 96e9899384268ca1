"""Drawable and string identifiers used by the user switcher."""

from user_switcher.domain.resources.resource_id import (
    ResourceId,
    ResourceNamespace,
    ResourceType,
)

_SYSTEM_UI = ResourceNamespace.SYSTEM_UI
_SETTINGS_LIB = ResourceNamespace.SETTINGS_LIB
_ANDROID = ResourceNamespace.ANDROID

# Drawables
ICON_ADD = ResourceId(_SYSTEM_UI, ResourceType.DRAWABLE, "ic_add")
ICON_ACCOUNT_CIRCLE = ResourceId(
    _SYSTEM_UI, ResourceType.DRAWABLE, "ic_account_circle"
)
ICON_ADD_SUPERVISED_USER = ResourceId(
    _SYSTEM_UI, ResourceType.DRAWABLE, "ic_add_supervised_user"
)
ICON_AVATAR_USER = ResourceId(_SYSTEM_UI, ResourceType.DRAWABLE, "ic_avatar_user")

# Strings
STRING_GUEST_EXIT_QUICK_SETTINGS = ResourceId(
    _SETTINGS_LIB, ResourceType.STRING, "guest_exit_quick_settings_button"
)
STRING_GUEST_NAME = ResourceId(_ANDROID, ResourceType.STRING, "guest_name")
STRING_GUEST_RESETTING = ResourceId(
    _SETTINGS_LIB, ResourceType.STRING, "guest_resetting"
)
STRING_ADD_USER = ResourceId(_SETTINGS_LIB, ResourceType.STRING, "user_add_user")
STRING_ADD_SUPERVISED_USER = ResourceId(
    _SYSTEM_UI, ResourceType.STRING, "add_user_supervised"
)

ALL_ICONS = (
    ICON_ADD,
    ICON_ACCOUNT_CIRCLE,
    ICON_ADD_SUPERVISED_USER,
    ICON_AVATAR_USER,
)

ALL_STRINGS = (
    STRING_GUEST_EXIT_QUICK_SETTINGS,
    STRING_GUEST_NAME,
    STRING_GUEST_RESETTING,
    STRING_ADD_USER,
    STRING_ADD_SUPERVISED_USER,
)
