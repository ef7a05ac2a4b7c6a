from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Tuple


class NodeKind(str, Enum):
    HEADING = "heading"
    SYNTHETIC_ROOT = "synthetic_root"


@dataclass(slots=True)
class HeadingNode:
    """A markdown heading and the headings nested under it."""

    depth: int
    name: str
    raw_line: str = ""
    kind: NodeKind = NodeKind.HEADING
    children: List["HeadingNode"] = field(default_factory=list)

    @classmethod
    def synthetic_root(cls) -> "HeadingNode":
        """Container used when a document has no top-level '#' heading."""

        return cls(depth=0, name="", kind=NodeKind.SYNTHETIC_ROOT)

    @property
    def is_synthetic(self) -> bool:
        return self.kind is NodeKind.SYNTHETIC_ROOT

    @property
    def title(self) -> str:
        return self.name.strip()

    def add_child(self, child: "HeadingNode") -> None:
        """Attach a child heading, keeping depths strictly increasing downward."""

        if child.depth <= self.depth:
            raise ValueError(
                f"child depth {child.depth} must be greater than parent depth {self.depth}"
            )
        self.children.append(child)

    def walk(self, level: int = 0) -> Iterator[Tuple["HeadingNode", int]]:
        """Yield (node, level) pairs in document order, this node first."""

        stack: List[Tuple[HeadingNode, int]] = [(self, level)]
        while stack:
            node, node_level = stack.pop()
            yield node, node_level
            # reversed so the first child is popped first
            for child in reversed(node.children):
                stack.append((child, node_level + 1))


@dataclass(slots=True)
class HeadingTree:
    """The outline of one document, rooted at a real or synthetic heading."""

    root: HeadingNode

    @property
    def has_synthetic_root(self) -> bool:
        return self.root.is_synthetic

    def walk(self) -> Iterator[Tuple[HeadingNode, int]]:
        """Yield real headings with their nesting level, skipping a synthetic root."""

        for node, level in self.root.walk():
            if node.is_synthetic:
                continue
            yield node, level

    def headings(self) -> List[HeadingNode]:
        return [node for node, _ in self.walk()]

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())


__all__ = ["HeadingNode", "HeadingTree", "NodeKind"]
