"""Domain entities for internal representation.

These are pure dataclasses (frozen) and enums used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .catalog_entity import CatalogEntity, EntityKind
from .resolve_result import ResolveOutcome, ResolveResult

__all__ = ["CatalogEntity", "EntityKind", "ResolveOutcome", "ResolveResult"]
