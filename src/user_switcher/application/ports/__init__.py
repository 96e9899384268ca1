"""Ports the user switcher helpers depend on."""

from user_switcher.application.ports.string_lookup import StringLookupPort

__all__ = [
    "StringLookupPort",
]
