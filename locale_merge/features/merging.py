"""Insert validated fragments into one namespace tree per locale.

Each tree is made of ``Branch`` nodes (namespace segments) and ``Leaf`` nodes
(a fragment's content). A fragment may only land on an empty slot: landing on a
``Leaf`` is a key conflict, and passing through a ``Leaf`` or landing on a
``Branch`` is a namespace collision. Both cases are checked, so the outcome for
any set of fragments does not depend on the order they are visited in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from ..core.errors import IssueType, MergeIssue
from ..core.logging_config import get_logger
from ..core.models import Branch, Leaf, MergedLocaleTree, TranslationFragment, first_leaf_source

log = get_logger(__name__)


@dataclass
class MergeResult:
    merged: Dict[str, MergedLocaleTree] = field(default_factory=dict)
    issues: List[MergeIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def as_dicts(self) -> Dict[str, dict]:
        return {locale: tree.to_dict() for locale, tree in self.merged.items()}


def insert_fragment(tree: MergedLocaleTree, fragment: TranslationFragment) -> MergeIssue | None:
    """Place ``fragment`` in ``tree``; return the issue if it cannot be placed."""
    segments = fragment.segments
    current = tree.root

    for depth, key in enumerate(segments[:-1], start=1):
        node = current.children.get(key)
        if node is None:
            node = current.children[key] = Branch()
        elif isinstance(node, Leaf):
            prefix = ".".join(segments[:depth])
            return MergeIssue(
                IssueType.NAMESPACE_COLLISION,
                f'Cannot create namespace "{fragment.namespace}" - key "{prefix}" already '
                f'exists as a value in locale "{tree.locale}":\n'
                f"  - {node.source}\n"
                f"  - {fragment.path}",
                file=fragment.path,
                locale=tree.locale,
            )
        current = node

    last = segments[-1]
    existing = current.children.get(last)
    if existing is None:
        current.children[last] = Leaf(content=fragment.content, source=fragment.path)
        return None

    if isinstance(existing, Leaf):
        return MergeIssue(
            IssueType.KEY_CONFLICT,
            f'Key conflict for namespace "{fragment.namespace}" in locale "{tree.locale}":\n'
            f"  - {existing.source}\n"
            f"  - {fragment.path}",
            file=fragment.path,
            locale=tree.locale,
        )

    return MergeIssue(
        IssueType.NAMESPACE_COLLISION,
        f'Cannot create namespace "{fragment.namespace}" - key already holds nested '
        f'namespaces in locale "{tree.locale}":\n'
        f"  - {first_leaf_source(existing)}\n"
        f"  - {fragment.path}",
        file=fragment.path,
        locale=tree.locale,
    )


def merge_translations(
    fragments: Iterable[TranslationFragment],
    locales: Sequence[str],
) -> MergeResult:
    """Merge fragments into one tree per locale; every locale gets a tree."""
    result = MergeResult(merged={locale: MergedLocaleTree(locale) for locale in locales})

    for fragment in sorted(fragments, key=lambda f: (f.locale, str(f.path))):
        tree = result.merged.get(fragment.locale)
        if tree is None:
            # validation only lets supported locales through
            raise ValueError(f"Unsupported locale {fragment.locale!r} for {fragment.path}")
        issue = insert_fragment(tree, fragment)
        if issue is not None:
            result.issues.append(issue)

    log.debug("Merged %d locale trees (%d issues)", len(result.merged), len(result.issues))
    return result
