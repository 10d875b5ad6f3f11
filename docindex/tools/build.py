# docindex/tools/build.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from bs4 import BeautifulSoup

from ..cleaning.sanitizer import sanitize
from ..index.model import IndexEntry
from ..index.scoper import scope
from ..index.section_index import SectionIndex
from ..index.writer import write_index
from ..log import info, warn
from ..parsers.html_parser import content_root, load_document, page_title
from ..policy.model import Policy
from .walk import iter_documents, relative_url


class Indexer:
    """
    Builds one in-memory SectionIndex for a documentation tree.

    Documents are handled one at a time; nothing is written until `write()`.
    """

    def __init__(self, base_dir, policy: Optional[Policy] = None) -> None:
        self.base_dir = Path(base_dir)
        self.policy = policy or Policy()
        self.index = SectionIndex()
        self.processed = 0
        self.skipped = 0

    def process_document(self, soup: BeautifulSoup, url: str) -> bool:
        """Scope an already cleaned page into the index. False if it had no content root."""
        scoping = self.policy.scoping
        root = content_root(soup, scoping.content_root_id)
        if root is None:
            warn(f"No content div found in {url}, continue with next file")
            self.skipped += 1
            return False

        title = page_title(soup, scoping.unknown_title)
        scope(root, url, self.index, title=title, scoping=scoping)
        self.processed += 1
        return True

    def process_file(self, html_file) -> bool:
        html_file = Path(html_file)
        info(f"Processing {html_file}")
        soup = load_document(html_file)
        sanitize(soup, self.policy.cleaning.remove_selectors)
        return self.process_document(soup, relative_url(html_file, self.base_dir))

    def run(self) -> int:
        walk = self.policy.walk
        for html_file in iter_documents(self.base_dir, walk.scan_dirs, walk.exclude_dirs, walk.suffix):
            self.process_file(html_file)
        return self.processed

    def entries(self) -> List[IndexEntry]:
        return self.index.entries()

    def write(self, output_file) -> Path:
        return write_index(self.entries(), output_file)


def build_index(base_dir, output_file, policy: Optional[Policy] = None) -> Indexer:
    """Walk, scope and write in one go. OSError propagates; nothing is written on failure."""
    indexer = Indexer(base_dir, policy)
    indexer.run()
    indexer.write(output_file)
    info(f"{indexer.processed} document(s) indexed, {indexer.skipped} skipped, {len(indexer.index)} section(s)")
    return indexer
