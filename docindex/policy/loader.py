# docindex/policy/loader.py
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml

from .model import Cleaning, Policy, Scoping, Walk


def _str_list(raw, default: list[str]) -> list[str]:
    if raw is None:
        return list(default)
    if isinstance(raw, str):
        raw = raw.split(",")
    return [str(x).strip() for x in raw if x is not None and str(x).strip()]


def _coerce_policy(data: dict) -> Policy:
    base = Policy()
    c = data.get("cleaning") or {}
    s = data.get("scoping") or {}
    w = data.get("walk") or {}
    return Policy(
        cleaning=Cleaning(
            remove_selectors=_str_list(c.get("remove_selectors"), base.cleaning.remove_selectors),
        ),
        scoping=Scoping(
            content_root_id=str(s.get("content_root_id", base.scoping.content_root_id)),
            root_marker=str(s.get("root_marker", base.scoping.root_marker)),
            section_prefix=str(s.get("section_prefix", base.scoping.section_prefix)),
            section_body=str(s.get("section_body", base.scoping.section_body)),
            leaf_classes=_str_list(s.get("leaf_classes"), base.scoping.leaf_classes),
            anchor_class=str(s.get("anchor_class", base.scoping.anchor_class)),
            unknown_title=str(s.get("unknown_title", base.scoping.unknown_title)),
        ),
        walk=Walk(
            suffix=str(w.get("suffix", base.walk.suffix)),
            scan_dirs=_str_list(w.get("scan_dirs"), base.walk.scan_dirs),
            exclude_dirs=_str_list(w.get("exclude_dirs"), base.walk.exclude_dirs),
        ),
    )


def load_policy(path: Optional[Union[str, Path]] = None) -> Policy:
    """
    Load a YAML policy file. Without a path the built-in defaults are used.
    Keys left out of the file keep their defaults.
    """
    if not path:
        return Policy()
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Policy YAML must be a mapping; got {type(data).__name__}")
    return _coerce_policy(data)
