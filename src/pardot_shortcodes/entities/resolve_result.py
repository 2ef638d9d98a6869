"""Resolve result domain entity."""

from dataclasses import dataclass
from enum import Enum


class ResolveOutcome(str, Enum):
    """How a shortcode lookup ended; only FOUND renders any markup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    FETCH_FAILED = "fetch_failed"
    NO_IDENTIFIER = "no_identifier"


@dataclass(frozen=True)
class ResolveResult:
    """Outcome of a single shortcode resolution.

    Only ``FOUND`` carries markup. Every other outcome renders as an
    empty string once it reaches the page.

    Attributes:
        outcome: What happened during the lookup
        markup: Rewritten embed markup, empty unless found
        refreshed: Whether the catalog was fetched from Pardot during the call
    """

    outcome: ResolveOutcome
    markup: str = ""
    refreshed: bool = False

    @property
    def found(self) -> bool:
        return self.outcome is ResolveOutcome.FOUND
