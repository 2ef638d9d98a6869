"""Exception hierarchy for shortcode resolution.

None of these escape ``ShortcodeResolver.resolve``; they exist so that the
layers below it can report what went wrong and the resolver can decide
how to degrade.
"""


class ShortcodeError(Exception):
    """Base class for all errors raised by this package."""


class CatalogFetchError(ShortcodeError):
    """The remote catalog could not be fetched."""


class RemoteUnavailableError(CatalogFetchError):
    """The Pardot API could not be reached or returned an error."""


class AuthenticationError(CatalogFetchError):
    """The Pardot API rejected the supplied credentials."""


class CatalogDeserializationError(ShortcodeError):
    """A cached catalog payload could not be decoded."""


class CacheStoreError(ShortcodeError):
    """The backing cache store failed to load or save a value."""
