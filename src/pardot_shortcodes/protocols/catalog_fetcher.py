"""Catalog fetcher protocol.

Defines the interface for the single point of contact with the remote
marketing platform.
"""

from typing import Protocol, runtime_checkable

from pardot_shortcodes.entities import CatalogEntity, EntityKind


@runtime_checkable
class CatalogFetcher(Protocol):
    """Protocol for remote catalog sources."""

    async def fetch(self, kind: EntityKind) -> list[CatalogEntity]:
        """Fetch the complete current catalog for a kind.

        Args:
            kind: Which catalog to fetch

        Returns:
            Every entity of that kind, in the order the platform lists them

        Raises:
            RemoteUnavailableError: If the API cannot be reached or errors
            AuthenticationError: If the credentials are rejected
        """
        ...
