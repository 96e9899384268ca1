"""In-memory string catalog implementing StringLookupPort.

Stands in for the platform resource system so the helpers can be used
without a UI runtime. Tables map a locale tag to qualified resource names
and their localized text.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from user_switcher.domain.resources import (
    STRING_ADD_SUPERVISED_USER,
    STRING_ADD_USER,
    STRING_GUEST_EXIT_QUICK_SETTINGS,
    STRING_GUEST_NAME,
    STRING_GUEST_RESETTING,
    ResourceId,
)
from user_switcher.domain.shared.exceptions import (
    InvalidResourceIdError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)


class StringTable(BaseModel):
    """Localized strings keyed by locale, then by qualified resource name."""

    model_config = ConfigDict(frozen=True)

    locales: dict[str, dict[str, str]]

    @field_validator("locales")
    @classmethod
    def _validate_resource_names(
        cls, v: dict[str, dict[str, str]]
    ) -> dict[str, dict[str, str]]:
        """Ensure every key is the qualified name of a string resource."""
        for locale, entries in v.items():
            for key in entries:
                try:
                    resource_id = ResourceId.parse(key)
                except InvalidResourceIdError as e:
                    raise ValueError(f"[{locale}] {e.message}") from e
                if not resource_id.is_string:
                    msg = f"[{locale}] {key!r} is not a string resource"
                    raise ValueError(msg)
        return v

    @classmethod
    def from_json_file(cls, path: Path) -> StringTable:
        """Load a table from a JSON file shaped like ``{"locales": {...}}``."""
        return cls.model_validate_json(path.read_text(encoding="utf-8"))

    def merged_with(self, other: StringTable) -> StringTable:
        """Return a new table with ``other``'s entries layered on top."""
        merged = {locale: dict(entries) for locale, entries in self.locales.items()}
        for locale, entries in other.locales.items():
            merged.setdefault(locale, {}).update(entries)
        return StringTable(locales=merged)

    def lookup(self, locale: str, resource_id: ResourceId) -> str | None:
        return self.locales.get(locale, {}).get(resource_id.qualified_name)


DEFAULT_STRING_TABLE = StringTable(
    locales={
        "en": {
            STRING_GUEST_EXIT_QUICK_SETTINGS.qualified_name: "Exit guest",
            STRING_GUEST_NAME.qualified_name: "Guest",
            STRING_GUEST_RESETTING.qualified_name: "Resetting guest…",
            STRING_ADD_USER.qualified_name: "Add user",
            STRING_ADD_SUPERVISED_USER.qualified_name: "Add supervised user",
        },
    }
)


class CatalogStringLookup:
    """StringLookupPort backed by a StringTable.

    Falls back to ``fallback_locale`` when the requested locale has no
    entry for a resource.
    """

    def __init__(
        self,
        table: StringTable = DEFAULT_STRING_TABLE,
        locale: str = "en",
        fallback_locale: str = "en",
    ):
        self._table = table
        self._locale = locale
        self._fallback_locale = fallback_locale

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def available_locales(self) -> list[str]:
        return sorted(self._table.locales)

    def get_string(self, resource_id: ResourceId) -> str:
        details = {
            "resource_id": resource_id.qualified_name,
            "locale": self._locale,
        }
        if not resource_id.is_string:
            msg = f"Not a string resource: {resource_id}"
            raise ResourceNotFoundError(msg, details)

        text = self._table.lookup(self._locale, resource_id)
        if text is not None:
            return text

        if self._fallback_locale != self._locale:
            text = self._table.lookup(self._fallback_locale, resource_id)
            if text is not None:
                logger.debug(
                    "No %s translation for %s, using %s",
                    self._locale,
                    resource_id,
                    self._fallback_locale,
                )
                return text

        msg = f"String resource not found: {resource_id}"
        raise ResourceNotFoundError(msg, details)
