"""Parse fragments and check locale coverage per component."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from ..core.errors import IssueType, MergeIssue
from ..core.logging_config import get_logger
from ..core.models import TranslationFragment
from ..infra.files import read_json
from .namespace import component_dir, derive_namespace, locale_code

log = get_logger(__name__)


@dataclass
class ValidationResult:
    fragments: List[TranslationFragment] = field(default_factory=list)
    issues: List[MergeIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


def _display(path: Path, base: Path) -> str:
    try:
        return str(path.relative_to(base))
    except ValueError:
        return str(path)


def load_translation_files(
    paths: Iterable[Path],
    src_dir: Path,
    locales: Sequence[str],
) -> ValidationResult:
    """Parse every fragment, collecting issues instead of stopping at the first one."""
    result = ValidationResult()
    supported = set(locales)
    # component dir -> locale -> file
    groups: Dict[Path, Dict[str, Path]] = {}

    for path in paths:
        locale = locale_code(path)
        if locale not in supported:
            result.issues.append(MergeIssue(
                IssueType.INVALID_LOCALE,
                f"Invalid locale filename: {path}",
                file=path,
            ))
            continue

        try:
            content = read_json(path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            result.issues.append(MergeIssue(
                IssueType.INVALID_JSON,
                f"Invalid JSON in {path}: {e}",
                file=path,
                locale=locale,
            ))
            continue

        if not isinstance(content, dict):
            result.issues.append(MergeIssue(
                IssueType.INVALID_JSON,
                f"Invalid JSON in {path}: top-level value must be an object, "
                f"got {type(content).__name__}",
                file=path,
                locale=locale,
            ))
            continue

        namespace = derive_namespace(path, src_dir)
        if not namespace:
            result.issues.append(MergeIssue(
                IssueType.EMPTY_NAMESPACE,
                f"Namespace must be non-empty: {path} sits directly in the source "
                f"root's locale directory",
                file=path,
                locale=locale,
            ))
            continue

        groups.setdefault(component_dir(path), {})[locale] = path
        result.fragments.append(TranslationFragment(
            path=path,
            locale=locale,
            namespace=namespace,
            content=content,
        ))

    for comp_dir in sorted(groups):
        present = groups[comp_dir]
        missing = [loc for loc in locales if loc not in present]
        if missing:
            result.issues.append(MergeIssue(
                IssueType.MISSING_LOCALE,
                f"Component at {_display(comp_dir, src_dir)} is missing locales: "
                f"{', '.join(missing)}",
                file=comp_dir,
            ))

    log.debug(
        "Validated %d fragments (%d issues)", len(result.fragments), len(result.issues)
    )
    return result
