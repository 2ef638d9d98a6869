"""Catalog entity domain model."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class EntityKind(str, Enum):
    """The two entity families a shortcode can reference."""

    FORM = "form"
    DYNAMIC_CONTENT = "dynamic_content"

    @property
    def cache_key(self) -> str:
        """Fixed cache key holding this kind's serialized catalog."""
        return _CACHE_KEYS[self]

    @property
    def identifier_argument(self) -> str:
        """Shortcode argument carrying the requested title or name."""
        return _IDENTIFIER_ARGUMENTS[self]


_CACHE_KEYS = {
    EntityKind.FORM: "serialized_forms",
    EntityKind.DYNAMIC_CONTENT: "serialized_dynamic_content",
}

_IDENTIFIER_ARGUMENTS = {
    EntityKind.FORM: "title",
    EntityKind.DYNAMIC_CONTENT: "name",
}


@dataclass(frozen=True)
class CatalogEntity:
    """One form or dynamic content unit as known to Pardot.

    Attributes:
        name: Display name, matched case and whitespace insensitively
        embed_code: Raw embed markup returned by the API
    """

    name: str
    embed_code: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "embedCode": self.embed_code}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CatalogEntity":
        """Build an entity from the Pardot wire shape.

        Raises:
            KeyError: If either field is missing
            TypeError: If either field is not a string
        """
        name = data["name"]
        embed_code = data["embedCode"]
        if not isinstance(name, str) or not isinstance(embed_code, str):
            raise TypeError("name and embedCode must be strings")
        return cls(name=name, embed_code=embed_code)
