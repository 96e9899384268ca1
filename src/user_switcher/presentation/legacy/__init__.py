"""Helpers shared by legacy and modern user switcher UI code."""

from user_switcher.presentation.legacy.user_ui_helper import (
    USER_SWITCHER_USER_VIEW_NOT_SELECTABLE_ALPHA,
    USER_SWITCHER_USER_VIEW_SELECTABLE_ALPHA,
    get_guest_user_record_name_resource_id,
    get_max_user_switcher_item_columns,
    get_user_record_name,
    get_user_switcher_action_icon_resource_id,
    get_user_switcher_action_text_resource_id,
)

__all__ = [
    "USER_SWITCHER_USER_VIEW_NOT_SELECTABLE_ALPHA",
    "USER_SWITCHER_USER_VIEW_SELECTABLE_ALPHA",
    "get_guest_user_record_name_resource_id",
    "get_max_user_switcher_item_columns",
    "get_user_record_name",
    "get_user_switcher_action_icon_resource_id",
    "get_user_switcher_action_text_resource_id",
]
