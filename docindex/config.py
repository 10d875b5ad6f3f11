from pathlib import Path
import os
from dotenv import load_dotenv

load_dotenv()


def _truthy(val: str) -> bool:
    return val.strip().lower() in ("1", "true", "yes", "on")


def split_csv(val: str) -> list[str]:
    """'a, b,,c' -> ['a', 'b', 'c']"""
    return [part.strip() for part in (val or "").split(",") if part.strip()]


BASE_DIR = Path(os.getenv("DOCINDEX_BASE_DIR", "."))
OUTPUT_FILE = Path(os.getenv("DOCINDEX_OUTPUT", "./wildfly-doc-index.json"))
SCAN_DIRS = split_csv(os.getenv("DOCINDEX_SCAN_DIRS", "38,prospero,bootablejar,galleon,galleon-plugins"))
EXCLUDE_DIRS = split_csv(os.getenv("DOCINDEX_EXCLUDE_DIRS", "downloads,feature-pack,images"))
POLICY_PATH = os.getenv("DOCINDEX_POLICY", "").strip() or None
VERBOSE = _truthy(os.getenv("DOCINDEX_VERBOSE", ""))
