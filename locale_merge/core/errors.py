"""Issue records and exceptions raised by the merge pipeline.

Issues are collected per run and never raised; exceptions are reserved for
conditions where continuing makes no sense (missing source root) or for a
single failed write that the caller records and moves past.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class IssueType(str, Enum):
    INVALID_LOCALE = "invalid_locale"
    INVALID_JSON = "invalid_json"
    EMPTY_NAMESPACE = "empty_namespace"
    MISSING_LOCALE = "missing_locale"
    KEY_CONFLICT = "key_conflict"
    NAMESPACE_COLLISION = "namespace_collision"


@dataclass(frozen=True)
class MergeIssue:
    type: IssueType
    message: str
    file: Optional[Path] = None
    locale: Optional[str] = None

    def __str__(self) -> str:
        return self.message


class LocaleMergeError(Exception):
    """Base class for fatal merge tool errors."""


class RootNotFoundError(LocaleMergeError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Source directory not found: {path}")
        self.path = path


class WriteError(LocaleMergeError):
    def __init__(self, locale: str, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to write {locale} translations to {path}: {cause}")
        self.locale = locale
        self.path = path
        self.cause = cause
