"""
Pre-extraction cleanup.

Drops markup that is never indexed: scripts/styles, page chrome (nav, footer,
breadcrumbs, menus), images, the table of contents, code listings and
admonition callouts. Running it again on an already cleaned tree is a no-op.
"""

from typing import Iterable, Optional

from bs4 import BeautifulSoup

from ..policy.model import DEFAULT_REMOVE_SELECTORS


def sanitize(soup: BeautifulSoup, selectors: Optional[Iterable[str]] = None) -> int:
    """Remove every element matching `selectors` in place; returns how many were removed."""
    removed = 0
    for sel in (DEFAULT_REMOVE_SELECTORS if selectors is None else selectors):
        for tag in soup.select(sel):
            # nested matches die with their ancestor
            if tag.decomposed:
                continue
            tag.decompose()
            removed += 1
    return removed
