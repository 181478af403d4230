"""Utility functions for formatting and logging.

This package includes the text helpers used to render wiki responses
and the loguru setup used by the server entrypoint.
"""

from .log import configure_logging
from .text import build_page_url, clean_snippet, encode_uri_component, strip_html_tags

__all__ = [
    "build_page_url",
    "clean_snippet",
    "configure_logging",
    "encode_uri_component",
    "strip_html_tags",
]
