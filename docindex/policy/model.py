# docindex/policy/model.py
from dataclasses import dataclass, field
from typing import List

from ..config import SCAN_DIRS, EXCLUDE_DIRS


DEFAULT_REMOVE_SELECTORS = [
    "script", "style", "nav", "footer", "img",
    ".listingblock",      # code listings
    ".literalblock",      # preformatted
    ".navigation", ".nav", ".menu",
    ".image",
    "#toc",
    ".breadcrumb",
    ".admonitionblock",   # NOTE/TIP/WARNING callouts
]


@dataclass
class Cleaning:
    remove_selectors: List[str] = field(default_factory=lambda: list(DEFAULT_REMOVE_SELECTORS))


@dataclass
class Scoping:
    content_root_id: str = "content"
    root_marker: str = "sect0"          # class on the top-level heading itself
    section_prefix: str = "sect"        # sect1, sect2, ... wrap nested sections
    section_body: str = "sectionbody"   # interior wrapper, not a boundary
    leaf_classes: List[str] = field(default_factory=lambda: ["paragraph", "ulist", "olist", "tableblock"])
    anchor_class: str = "anchor"
    unknown_title: str = "Unknown"


@dataclass
class Walk:
    suffix: str = ".html"
    scan_dirs: List[str] = field(default_factory=lambda: list(SCAN_DIRS))
    exclude_dirs: List[str] = field(default_factory=lambda: list(EXCLUDE_DIRS))


@dataclass
class Policy:
    cleaning: Cleaning = field(default_factory=Cleaning)
    scoping: Scoping = field(default_factory=Scoping)
    walk: Walk = field(default_factory=Walk)
