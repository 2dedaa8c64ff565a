"""Run discovery, validation, merging and writing as one pass."""

from __future__ import annotations

from typing import Sequence

from ..core.config import Settings
from ..core.errors import MergeIssue
from ..core.logging_config import get_logger
from .discovery import find_locale_files
from .merging import merge_translations
from .validation import load_translation_files
from .writer import write_translations

log = get_logger(__name__)

RULE = "━" * 50


def report_issues(title: str, issues: Sequence[MergeIssue]) -> None:
    log.error("❌ %s (%d):", title, len(issues))
    for issue in issues:
        for line in str(issue).splitlines():
            log.error("  %s", line)


def merge_translation_files(settings: Settings) -> bool:
    """Merge every fragment under ``settings.SRC_DIR`` into ``settings.MESSAGES_DIR``.

    Returns ``True`` when all locale files were written. Nothing is written when
    validation or merging reports an issue. Raises ``RootNotFoundError`` when the
    source directory is missing.
    """
    locales = settings.SUPPORTED_LOCALES
    log.info("🌐 Merging translation files...")
    log.info(RULE)

    paths = find_locale_files(settings.SRC_DIR)
    validation = load_translation_files(paths, settings.SRC_DIR, locales)
    if not validation.ok:
        report_issues("Validation errors found", validation.issues)
        return False

    if validation.fragments:
        log.info("📄 Found %d translation files", len(validation.fragments))
    else:
        log.warning("⚠️  No translation files found, writing empty locale files.")

    merge = merge_translations(validation.fragments, locales)
    if not merge.ok:
        report_issues("Merge errors found", merge.issues)
        return False

    log.info("📝 Writing merged translations to %s", settings.MESSAGES_DIR)
    written = write_translations(merge.as_dicts(), settings.MESSAGES_DIR)
    if not written.ok:
        log.error(
            "❌ %d of %d locale files could not be written",
            len(written.failures), len(locales),
        )
        return False

    log.info("✅ Translation merge completed successfully!")
    log.info(RULE)
    return True
