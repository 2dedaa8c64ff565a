"""Re-run the merge whenever a locale fragment changes."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from ..core.config import Settings
from ..core.errors import LocaleMergeError
from ..core.logging_config import get_logger
from .discovery import LOCALE_DIR_NAME
from .pipeline import merge_translation_files

log = get_logger(__name__)

Snapshot = Dict[Path, Tuple[int, int]]


def take_snapshot(src_dir: Path) -> Snapshot:
    """Map every locale fragment to its (mtime_ns, size)."""
    snap: Snapshot = {}
    if not src_dir.is_dir():
        return snap
    for p in src_dir.rglob("*.json"):
        if p.parent.name != LOCALE_DIR_NAME or not p.is_file():
            continue
        try:
            st = p.stat()
        except FileNotFoundError:
            continue  # removed between listing and stat
        snap[p] = (st.st_mtime_ns, st.st_size)
    return snap


def diff_snapshots(old: Snapshot, new: Snapshot) -> list[Path]:
    changed = [p for p in new if old.get(p) != new[p]]
    changed.extend(p for p in old if p not in new)
    return sorted(changed)


class TranslationWatcher:
    """Polls the source tree and merges once changes have settled."""

    def __init__(
        self,
        settings: Settings,
        debounce: float = 0.3,
        interval: float = 0.5,
        merge: Callable[[Settings], bool] = merge_translation_files,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.settings = settings
        self.debounce = debounce
        self.interval = interval
        self._merge = merge
        self._clock = clock
        self._sleep = sleep
        self._snapshot: Snapshot = {}
        self._pending_since: Optional[float] = None
        self.merge_count = 0

    def run_merge(self) -> bool:
        try:
            return self._merge(self.settings)
        except LocaleMergeError as e:
            log.error("❌ %s", e)
            return False
        except Exception:
            log.exception("❌ Error during merge")
            return False
        finally:
            self.merge_count += 1

    def poll_once(self) -> bool:
        """Compare the tree against the last snapshot; True when something changed."""
        snap = take_snapshot(self.settings.SRC_DIR)
        changed = diff_snapshots(self._snapshot, snap)
        self._snapshot = snap
        if not changed:
            return False
        for path in changed:
            log.info("📝 Detected change: %s", path)
        self._pending_since = self._clock()
        return True

    def tick(self) -> bool:
        """Poll once and merge if the debounce window has passed. True if merged."""
        self.poll_once()
        if self._pending_since is None:
            return False
        if self._clock() - self._pending_since < self.debounce:
            return False
        self._pending_since = None
        self.run_merge()
        return True

    def run(self, max_cycles: Optional[int] = None) -> None:
        log.info("👀 Watching translation files in %s", self.settings.SRC_DIR)
        log.info("Press Ctrl+C to stop")

        self._snapshot = take_snapshot(self.settings.SRC_DIR)
        self.run_merge()

        cycles = 0
        try:
            while max_cycles is None or cycles < max_cycles:
                self._sleep(self.interval)
                self.tick()
                cycles += 1
        except KeyboardInterrupt:
            log.info("👋 Stopping translation watcher...")
