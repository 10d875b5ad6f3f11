import re
from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

_WS_RE = re.compile(r"\s+")

# elements that break text; inline ones (code, em, a, ...) join their neighbours
_BLOCK_TAGS = {
    "p", "div", "br", "li", "ul", "ol", "dl", "dt", "dd",
    "table", "tr", "td", "th", "pre", "blockquote",
    "h1", "h2", "h3", "h4", "h5", "h6",
}
_SKIP_TAGS = {"script", "style", "template"}


def parse_html(html: str) -> BeautifulSoup:
    # built-in 'html.parser' keeps us free of native build deps
    return BeautifulSoup(html or "", "html.parser")


def load_document(path) -> BeautifulSoup:
    """Read a saved HTML page from disk. OSError propagates to the caller."""
    html = Path(path).read_text(encoding="utf-8", errors="replace")
    return parse_html(html)


def _collect_text(node: Tag, parts: list[str]) -> None:
    for child in node.children:
        if isinstance(child, Tag):
            if child.name in _SKIP_TAGS:
                continue
            block = child.name in _BLOCK_TAGS
            if block:
                parts.append(" ")
            _collect_text(child, parts)
            if block:
                parts.append(" ")
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            # comments, doctypes and CDATA are PreformattedString
            parts.append(str(child))


def visible_text(el: Optional[Tag]) -> str:
    """
    All text under `el` as a reader sees it: whitespace runs collapse to one
    space, block elements are separated, inline markup is not.
    """
    if el is None:
        return ""
    parts: list[str] = []
    _collect_text(el, parts)
    return _WS_RE.sub(" ", "".join(parts)).strip()


def child_elements(el: Tag) -> list[Tag]:
    return [c for c in el.children if isinstance(c, Tag)]


def page_title(soup: BeautifulSoup, default: str = "Unknown") -> str:
    title = soup.select_one("head > title")
    if title is None:
        return default
    return visible_text(title)


def content_root(soup: BeautifulSoup, root_id: str = "content") -> Optional[Tag]:
    return soup.find("div", id=root_id)
