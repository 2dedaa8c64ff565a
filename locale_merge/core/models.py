from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union


@dataclass(frozen=True)
class TranslationFragment:
    """One ``locale/<code>.json`` file for one component."""

    path: Path
    locale: str
    namespace: str
    content: Dict[str, Any]

    @property
    def segments(self) -> list[str]:
        return self.namespace.split(".")


@dataclass
class Leaf:
    content: Dict[str, Any]
    source: Path


@dataclass
class Branch:
    children: Dict[str, "Node"] = field(default_factory=dict)


Node = Union[Leaf, Branch]


@dataclass
class MergedLocaleTree:
    locale: str
    root: Branch = field(default_factory=Branch)

    def to_dict(self) -> Dict[str, Any]:
        return _render(self.root)


def _render(node: Node) -> Any:
    if isinstance(node, Leaf):
        return node.content
    return {key: _render(child) for key, child in node.children.items()}


def first_leaf_source(node: Node) -> Path:
    """Return the file behind the first leaf found under ``node``."""
    while isinstance(node, Branch):
        # a Branch is only created on the way to a Leaf, so it is never empty
        node = next(iter(node.children.values()))
    return node.source
