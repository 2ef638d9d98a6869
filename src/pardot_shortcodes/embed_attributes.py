"""Rewrite Pardot embed snippets for a single shortcode use.

Each concern is a small pure function over the snippet text. ``apply``
runs them in a fixed order because later steps see the output of earlier
ones:

1. force the first URL onto the secure host (when the site asks for it)
2. height override
3. width override
4. extra CSS classes

Forms are iframes, so their overrides are HTML attributes. Dynamic
content ships as a script plus a ``<div class="pardotdc" style="...">``
placeholder, so its overrides are literal token replacements. Every step
is best-effort: a missing pattern leaves the snippet as it was.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import urlsplit

from pardot_shortcodes.entities import EntityKind

DEFAULT_SECURE_HOST = "go.pardot.com"
FORM_BASE_CLASS = "pardotform"
DYNAMIC_CONTENT_MARKER = "pardotdc"

URL_PATTERN = re.compile(r"(http|https|ftp|ftps)://[a-zA-Z0-9\-.]+\.[a-zA-Z]{2,3}(/\S*)?")
FRAME_TAG = "<iframe"


@dataclass(frozen=True)
class RewriteOptions:
    """Per-use display overrides taken from the shortcode arguments.

    Values are passed through verbatim; ``None`` means "not supplied".
    """

    height: str | None = None
    width: str | None = None
    classes: str | None = None

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, str | None]) -> "RewriteOptions":
        return cls(
            height=arguments.get("height"),
            width=arguments.get("width"),
            classes=arguments.get("classes"),
        )


def force_https_url(snippet: str, secure_host: str = DEFAULT_SECURE_HOST) -> str:
    """Point the first URL in the snippet at ``https://<secure_host>``.

    Only the path of the matched URL survives. Every literal occurrence of
    the matched text is replaced, not just the first one.
    """
    match = URL_PATTERN.search(snippet)
    if match is None:
        return snippet

    url = match.group(0)
    secure_url = f"https://{secure_host}{urlsplit(url).path}"
    return snippet.replace(url, secure_url)


def set_or_inject_attribute(snippet: str, attribute: str, value: str) -> str:
    """Set ``attribute="value"`` on a form iframe.

    An existing ``attribute="..."`` has its value replaced. Otherwise the
    attribute is injected right after the first ``<iframe`` tag name.
    """
    replacement = f'{attribute}="{value}"'
    existing = re.compile(rf'(?<![\w-]){re.escape(attribute)}="[^"]+"')
    if existing.search(snippet):
        return existing.sub(lambda _: replacement, snippet, count=1)
    return snippet.replace(FRAME_TAG, f"{FRAME_TAG} {replacement}", 1)


def replace_style_token(snippet: str, prop: str, value: str) -> str:
    """Replace the inline style token ``prop:auto`` with ``prop:value``."""
    return snippet.replace(f"{prop}:auto", f"{prop}:{value}")


def inject_form_classes(snippet: str, classes: str) -> str:
    return snippet.replace(FRAME_TAG, f'{FRAME_TAG} class="{FORM_BASE_CLASS} {classes}"', 1)


def append_marker_classes(snippet: str, classes: str) -> str:
    return snippet.replace(DYNAMIC_CONTENT_MARKER, f"{DYNAMIC_CONTENT_MARKER} {classes}")


def apply(
    snippet: str,
    options: RewriteOptions,
    kind: EntityKind,
    force_https: bool = False,
    secure_host: str = DEFAULT_SECURE_HOST,
) -> str:
    """Apply HTTPS forcing and display overrides to an embed snippet.

    Args:
        snippet: Raw embed markup from the catalog
        options: Height, width and class overrides
        kind: Entity family, selects attribute vs style-token rules
        force_https: Site-wide policy flag
        secure_host: Host used when forcing HTTPS

    Returns:
        The rewritten snippet. Unknown kinds get the snippet back untouched.
    """
    if kind not in (EntityKind.FORM, EntityKind.DYNAMIC_CONTENT):
        return snippet

    if force_https:
        snippet = force_https_url(snippet, secure_host)

    if kind == EntityKind.FORM:
        if options.height is not None:
            snippet = set_or_inject_attribute(snippet, "height", options.height)
        if options.width is not None:
            snippet = set_or_inject_attribute(snippet, "width", options.width)
        if options.classes is not None:
            snippet = inject_form_classes(snippet, options.classes)
        return snippet

    if options.height is not None:
        snippet = replace_style_token(snippet, "height", options.height)
    if options.width is not None:
        snippet = replace_style_token(snippet, "width", options.width)
    if options.classes is not None:
        snippet = append_marker_classes(snippet, options.classes)
    return snippet
