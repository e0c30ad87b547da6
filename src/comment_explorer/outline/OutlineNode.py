"""OutlineNode - One entry in a comment outline.

This module provides the outline data structures:
- OutlineNode: labeled node with a source line, identity key and children
- KEY_JOINER / LEAF_LINE_TAG: how path keys are assembled
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

# Joins path segments inside node keys ("Group :: Sub")
KEY_JOINER = " :: "

# Leaf keys end with this tag plus the line index
LEAF_LINE_TAG = "line number "


@dataclass
class OutlineNode:
    """A node in the comment outline.

    Attributes:
        label: Display text (last path segment, or whole payload if flat).
        line: Zero-based line index the annotation was found on.
        key: Unique identity. Flat nodes use the label, containers the
            accumulated path, leaves the path plus a line-number suffix.
        children: Child nodes in first-seen order.
    """

    label: str
    line: int
    key: str
    children: list[OutlineNode] = field(default_factory=list)

    def iter_children(self) -> Iterator[OutlineNode]:
        """Iterate over child nodes."""
        yield from self.children

    def child_count(self) -> int:
        """Return number of children."""
        return len(self.children)

    def has_child_key(self, key: str) -> bool:
        """Check if a child with ``key`` is already attached."""
        return any(child.key == key for child in self.children)

    def add_child(self, child: OutlineNode) -> bool:
        """Append ``child`` unless a child with the same key exists.

        Returns:
            True if the child was appended.
        """
        if self.has_child_key(child.key):
            return False
        self.children.append(child)
        return True

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self.children

    def walk(self) -> Iterator[OutlineNode]:
        """Iterate over this node and its descendants, parent first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def __str__(self) -> str:
        return f"{self.label} (line {self.line})"


def leaf_key(parent_key: str, label: str, line: int) -> str:
    """Build the key of a leaf under ``parent_key``."""
    return f"{parent_key}{KEY_JOINER}{label}{KEY_JOINER}{LEAF_LINE_TAG}{line}"


def container_key(parent_key: str, label: str) -> str:
    """Build the key of an intermediate container under ``parent_key``."""
    return f"{parent_key}{KEY_JOINER}{label}"
