# docindex/index/section_index.py
from __future__ import annotations

from typing import Dict, Iterator, List

from .model import IndexEntry, SectionKey


class SectionIndex:
    """
    SectionKey -> text blocks in the order the walk found them.

    Filled while documents are scoped, then flattened once by `entries()`.
    """

    def __init__(self) -> None:
        self._sections: Dict[SectionKey, List[str]] = {}

    def get_or_create(self, key: SectionKey) -> List[str]:
        return self._sections.setdefault(key, [])

    def append(self, key: SectionKey, text: str) -> None:
        self.get_or_create(key).append(text)

    def blocks(self, key: SectionKey) -> List[str]:
        return list(self._sections.get(key, []))

    def __contains__(self, key: object) -> bool:
        return key in self._sections

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[SectionKey]:
        return iter(self._sections)

    def entries(self) -> List[IndexEntry]:
        return [
            IndexEntry(title=key.title, url=key.url + key.href, content=" ".join(paragraphs))
            for key, paragraphs in self._sections.items()
        ]
