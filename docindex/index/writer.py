# docindex/index/writer.py
from __future__ import annotations

import json
import os
import tempfile
from dataclasses import asdict
from pathlib import Path
from typing import Iterable, List

from ..log import info
from .model import IndexEntry


def dump_entries(entries: Iterable[IndexEntry]) -> str:
    return json.dumps([asdict(e) for e in entries], ensure_ascii=False, indent=2)


def write_index(entries: Iterable[IndexEntry], output_file) -> Path:
    """
    Write the entries as one pretty-printed JSON array.

    The text goes to a temp file next to the target and is moved over it,
    so a failed write leaves any previous index untouched.
    """
    out = Path(output_file)
    payload = dump_entries(entries)
    fd, tmp = tempfile.mkstemp(prefix=f".{out.name}.", suffix=".tmp", dir=out.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(payload)
        os.chmod(tmp, 0o644)
        os.replace(tmp, out)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise
    info(f"Index written to JSON file: {out}")
    return out


def read_index(path) -> List[IndexEntry]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Index JSON must be a list of entries; got {type(data).__name__}")
    return [IndexEntry(title=d.get("title", ""), url=d.get("url", ""), content=d.get("content", "")) for d in data]
