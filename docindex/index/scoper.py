"""
Section scoping for Asciidoctor-style HTML.

Decides which section owns each block of text in a page:

    <div id="content">                      content root
      <h1 class="sect0"><a class="anchor" href="#part"></a>Part</h1>
      <div class="paragraph">...</div>      -> Part
      <div class="sect1">                   section boundary (level 1)
        <h2><a class="anchor" href="#s1"></a>1. Title</h2>
        <div class="sectionbody">           interior wrapper, not a boundary
          <div class="paragraph">...</div>  -> 1. Title

Text found before any boundary belongs to the page itself (title from
<title>, empty anchor).
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple, Optional

from bs4 import Tag

from ..log import debug
from ..parsers.html_parser import child_elements, visible_text
from ..policy.model import Scoping
from .model import SectionKey
from .section_index import SectionIndex

_HEADING_RE = re.compile(r"^h[1-6]$")


class NodeKind(Enum):
    ROOT = "root"
    SECTION = "section"
    LEAF = "leaf"
    STRUCTURAL = "structural"


class Classification(NamedTuple):
    kind: NodeKind
    level: int = 0          # nesting depth for SECTION
    leaf_class: str = ""    # matched marker for LEAF


def _classes(node: Tag) -> list[str]:
    cls = node.get("class") or []
    if isinstance(cls, str):
        cls = cls.split()
    return list(cls)


def section_level(classes: list[str], scoping: Scoping) -> Optional[int]:
    """'sect2' -> 2; None for the body wrapper, 'sect0' and anything else."""
    rx = re.compile(re.escape(scoping.section_prefix) + r"(\d+)")
    for c in classes:
        if c == scoping.section_body:
            continue
        m = rx.fullmatch(c)
        if m and int(m.group(1)) >= 1:
            return int(m.group(1))
    return None


def classify(node: Tag, root: Optional[Tag], scoping: Scoping) -> Classification:
    if node is root:
        return Classification(NodeKind.ROOT)
    classes = _classes(node)
    level = section_level(classes, scoping)
    if level is not None:
        return Classification(NodeKind.SECTION, level=level)
    for c in classes:
        if c in scoping.leaf_classes:
            return Classification(NodeKind.LEAF, leaf_class=c)
    return Classification(NodeKind.STRUCTURAL)


def heading_key(el: Optional[Tag], url: str, scoping: Scoping) -> Optional[SectionKey]:
    """SectionKey from a heading element, or None when `el` is not h1-h6."""
    if el is None or not _HEADING_RE.match(el.name or ""):
        return None
    href = ""
    anchor = el.select_one(f"a.{scoping.anchor_class}")
    if anchor is not None:
        href = anchor.get("href", "") or ""
    return SectionKey(title=visible_text(el), href=href, url=url)


def root_heading_key(root: Tag, url: str, scoping: Scoping) -> Optional[SectionKey]:
    # the top-level heading sits directly under the root, not inside a sectN wrapper;
    # only the first marked child counts
    for child in child_elements(root):
        if scoping.root_marker in _classes(child):
            return heading_key(child, url, scoping)
    return None


def scope_node(
    node: Tag,
    context: SectionKey,
    url: str,
    index: SectionIndex,
    root: Optional[Tag],
    scoping: Scoping,
) -> None:
    kind = classify(node, root, scoping)

    if kind.kind is NodeKind.ROOT:
        key = root_heading_key(node, url, scoping)
        if key is not None:
            index.get_or_create(key)
            context = key

    elif kind.kind is NodeKind.SECTION:
        children = child_elements(node)
        key = heading_key(children[0] if children else None, url, scoping)
        if key is not None:
            index.get_or_create(key)
            context = key
        else:
            debug(f"{url}: sect{kind.level} without heading, text stays in {context.title!r}")

    elif kind.kind is NodeKind.LEAF:
        index.append(context, visible_text(node))
        return

    for child in child_elements(node):
        scope_node(child, context, url, index, root, scoping)


def scope(
    content: Tag,
    url: str,
    index: SectionIndex,
    title: str = "Unknown",
    scoping: Optional[Scoping] = None,
) -> SectionKey:
    """
    Walk one document's content root into `index`.
    Returns the page-level key that catches text found before any heading.
    """
    scoping = scoping or Scoping()
    page_key = SectionKey(title=title, href="", url=url)
    index.get_or_create(page_key)
    scope_node(content, page_key, url, index, content, scoping)
    return page_key
