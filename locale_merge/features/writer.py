from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping

from ..core.errors import WriteError
from ..core.logging_config import get_logger
from ..infra.files import dump_json, write_text_atomic

log = get_logger(__name__)


@dataclass
class WriteResult:
    written: List[Path] = field(default_factory=list)
    failures: List[WriteError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def write_translations(merged: Mapping[str, Dict[str, Any]], messages_dir: Path) -> WriteResult:
    """Write ``<messages_dir>/<locale>.json`` for every locale.

    A failed locale is logged and recorded; the remaining locales are still written.
    """
    result = WriteResult()
    try:
        messages_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        log.error("Cannot create output directory %s: %s", messages_dir, e)
        for locale in merged:
            result.failures.append(WriteError(locale, messages_dir / f"{locale}.json", e))
        return result

    for locale, content in merged.items():
        path = messages_dir / f"{locale}.json"
        try:
            write_text_atomic(path, dump_json(content))
        except OSError as e:
            err = WriteError(locale, path, e)
            log.error("✗ %s", err)
            result.failures.append(err)
            continue
        log.info("✓ Generated %s.json", locale)
        result.written.append(path)

    return result
