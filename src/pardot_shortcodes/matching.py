"""Forgiving name matching for shortcode identifiers.

Shortcode arguments are typed by hand in CMS content, so a requested title
matches a catalog name when both agree after lower-casing and removing
all whitespace.
"""

import re
from collections.abc import Iterable

from pardot_shortcodes.entities import CatalogEntity

_WHITESPACE = re.compile(r"\s+")


def normalize(value: str) -> str:
    """Lower-case a name and strip every whitespace character.

    Example:
        ```python
        normalize(" Contact  Us\n")  # "contactus"
        ```
    """
    return _WHITESPACE.sub("", value).lower()


def matches(requested: str, candidate_name: str) -> bool:
    """Check whether a requested identifier names a catalog entry."""
    return normalize(requested) == normalize(candidate_name)


def find_embed_code(catalog: Iterable[CatalogEntity], identifier: str) -> str | None:
    """Return the embed code of the first entity matching ``identifier``.

    Duplicate names (after normalization) resolve to whichever entity the
    catalog lists first.

    Args:
        catalog: Entities in stored order
        identifier: The requested title or name

    Returns:
        The matching embed code, or None if nothing matches
    """
    wanted = normalize(identifier)
    for entity in catalog:
        if normalize(entity.name) == wanted:
            return entity.embed_code
    return None
