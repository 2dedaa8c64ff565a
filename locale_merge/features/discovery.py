"""Find translation fragments under the source root."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..core.errors import RootNotFoundError
from ..core.logging_config import get_logger

log = get_logger(__name__)

LOCALE_DIR_NAME = "locale"


def find_locale_files(src_dir: Path) -> List[Path]:
    """Return every ``**/locale/*.json`` file under ``src_dir``, sorted by path."""
    if not src_dir.is_dir():
        raise RootNotFoundError(src_dir)

    files = sorted(
        p for p in src_dir.rglob("*.json")
        if p.is_file() and p.parent.name == LOCALE_DIR_NAME
    )
    log.debug("Discovered %d locale files under %s", len(files), src_dir)
    return files
