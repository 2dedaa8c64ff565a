from __future__ import annotations

from .discovery import find_locale_files
from .merging import merge_translations
from .namespace import derive_namespace
from .pipeline import merge_translation_files
from .validation import load_translation_files
from .watch import TranslationWatcher
from .writer import write_translations

__all__ = [
    "TranslationWatcher",
    "derive_namespace",
    "find_locale_files",
    "load_translation_files",
    "merge_translation_files",
    "merge_translations",
    "write_translations",
]
