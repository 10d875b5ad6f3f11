# docindex/tools/walk.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator


def iter_documents(
    base_dir,
    scan_dirs: Iterable[str],
    exclude_dirs: Iterable[str] = (),
    suffix: str = ".html",
) -> Iterator[Path]:
    """
    Yield every `suffix` file under base_dir/<scan_dir>, skipping any directory
    whose name is in `exclude_dirs` (at any depth). Sorted per directory.
    A missing scan dir raises FileNotFoundError.
    """
    base = Path(base_dir)
    skip = set(exclude_dirs)
    for scan in scan_dirs:
        root = base / scan
        if not root.is_dir():
            raise FileNotFoundError(f"Scan directory not found: {root}")
        if root.name in skip:
            continue
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in skip)
            for name in sorted(filenames):
                if name.endswith(suffix):
                    yield Path(dirpath) / name


def relative_url(path, base_dir) -> str:
    """Document URL: path relative to the corpus root, forward slashes."""
    return Path(path).relative_to(Path(base_dir)).as_posix()
