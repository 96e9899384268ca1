"""Resource identifier value object.

Identifies a drawable or string in the platform resource system. The
helpers treat identifiers as opaque tokens; resolving them is the job of
the caller or of an injected StringLookupPort.
"""

import re
from dataclasses import dataclass
from enum import Enum

from user_switcher.domain.shared.exceptions import InvalidResourceIdError

# namespace:type/name
QUALIFIED_NAME_PATTERN = re.compile(
    r"^(?P<namespace>[a-z]+):(?P<type>[a-z]+)/(?P<name>[A-Za-z0-9_.]+)$"
)


class ResourceNamespace(str, Enum):
    """Resource packages identifiers originate from."""

    SYSTEM_UI = "systemui"
    SETTINGS_LIB = "settingslib"
    ANDROID = "android"


class ResourceType(str, Enum):
    """Kinds of resources referenced by the user switcher."""

    DRAWABLE = "drawable"
    STRING = "string"


@dataclass(frozen=True)
class ResourceId:
    """Value object representing a resource identifier."""

    namespace: ResourceNamespace
    type: ResourceType
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidResourceIdError(
                f"{self.namespace.value}:{self.type.value}/",
                "name cannot be empty",
            )

    @property
    def qualified_name(self) -> str:
        """Return the ``namespace:type/name`` form."""
        return f"{self.namespace.value}:{self.type.value}/{self.name}"

    @property
    def is_string(self) -> bool:
        return self.type == ResourceType.STRING

    @classmethod
    def parse(cls, value: str) -> "ResourceId":
        """Parse a qualified name such as ``android:string/guest_name``."""
        match = QUALIFIED_NAME_PATTERN.match(value.strip())
        if match is None:
            raise InvalidResourceIdError(value, "expected 'namespace:type/name'")

        try:
            namespace = ResourceNamespace(match["namespace"])
        except ValueError:
            raise InvalidResourceIdError(
                value, f"unknown namespace {match['namespace']!r}"
            ) from None

        try:
            resource_type = ResourceType(match["type"])
        except ValueError:
            raise InvalidResourceIdError(
                value, f"unknown type {match['type']!r}"
            ) from None

        return cls(namespace=namespace, type=resource_type, name=match["name"])

    def __str__(self) -> str:
        return self.qualified_name
