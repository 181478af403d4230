"""Text helpers for rendering wiki responses."""

from __future__ import annotations

import re
from urllib.parse import quote

_TAG_RE = re.compile(r"<[^>]+>")

# Characters left unescaped by JavaScript's encodeURIComponent, beyond
# the ones `quote` never escapes.
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode `value` for use as a single URL path segment.

    Example:
        >>> encode_uri_component("Zezima the 2nd/alt")
        'Zezima%20the%202nd%2Falt'
    """

    return quote(value, safe=_URI_COMPONENT_SAFE)


def strip_html_tags(text: str) -> str:
    return _TAG_RE.sub("", text)


def clean_snippet(snippet_html: str) -> str:
    """Strip markup from a search snippet and decode `&quot;`.

    Example:
        >>> clean_snippet('The <span class="searchmatch">dragon</span> &quot;axe&quot;')
        'The dragon "axe"'
    """

    return strip_html_tags(snippet_html).replace("&quot;", '"')


def build_page_url(title: str, page_url_prefix: str) -> str:
    """Build the canonical wiki link for a page title.

    Spaces become underscores before encoding, matching the wiki's own
    URLs.

    Example:
        >>> build_page_url("Dragon sword", "https://oldschool.runescape.wiki/w/")
        'https://oldschool.runescape.wiki/w/Dragon_sword'
    """

    return page_url_prefix + encode_uri_component(title.replace(" ", "_"))
