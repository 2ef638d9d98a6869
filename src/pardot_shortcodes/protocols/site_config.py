"""Site configuration protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SiteConfig(Protocol):
    """Read-only view of the site-wide embed policy.

    ``Settings`` satisfies this protocol, and so does any object exposing
    the same two attributes (e.g. a CMS site-config record).
    """

    @property
    def force_https(self) -> bool:
        """Whether embed URLs must be rewritten to the secure host."""
        ...

    @property
    def secure_host(self) -> str:
        """Host that forced-HTTPS URLs are rewritten onto."""
        ...
