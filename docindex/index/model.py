# docindex/index/model.py
from dataclasses import dataclass


@dataclass(frozen=True)
class SectionKey:
    """Identity of one indexed section; equal iff all three fields match."""
    title: str
    href: str   # in-page anchor such as '#_intro', '' for the page itself
    url: str    # document path relative to the corpus root


@dataclass
class IndexEntry:
    title: str
    url: str
    content: str
