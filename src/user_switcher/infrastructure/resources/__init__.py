"""Resource system adapters."""

from user_switcher.infrastructure.resources.string_catalog import (
    DEFAULT_STRING_TABLE,
    CatalogStringLookup,
    StringTable,
)

__all__ = [
    "DEFAULT_STRING_TABLE",
    "CatalogStringLookup",
    "StringTable",
]
