"""Forest Builder - Assembles annotation payloads into an outline forest.

Payloads without a separator become flat top-level nodes. Payloads with a
separator (``Group :: Sub :: leaf``) are split into segments: every segment
but the last is a container shared by all annotations with the same path
prefix, and the last segment is a leaf unique to its line.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from comment_explorer.outline.OutlineNode import OutlineNode, container_key, leaf_key

logger = logging.getLogger(__name__)


class ForestBuilder:
    """Builds the outline forest from ``(raw_label, line_index)`` pairs.

    Each call to :meth:`build` starts from an empty forest, so the same
    builder may be reused across refreshes.

    Args:
        separator: Token splitting a payload into path segments.
    """

    def __init__(self, separator: str = "::") -> None:
        self.separator = separator
        self._roots: list[OutlineNode] = []
        # Container key -> node; only consulted while building
        self._containers: dict[str, OutlineNode] = {}

    def reset(self) -> None:
        """Discard the forest under construction."""
        self._roots = []
        self._containers = {}

    def build(self, pairs: Iterable[tuple[str, int]]) -> list[OutlineNode]:
        """Build a fresh forest from an ordered pair stream.

        Args:
            pairs: ``(raw_label, line_index)`` in ascending line order.

        Returns:
            The top-level nodes in first-seen order.
        """
        self.reset()
        count = 0
        for raw_label, line in pairs:
            self.add(raw_label, line)
            count += 1
        logger.debug(
            "Built forest: %d annotations, %d roots, %d containers",
            count,
            len(self._roots),
            len(self._containers),
        )
        return self._roots

    def add(self, raw_label: str, line: int) -> None:
        """Add one annotation to the forest under construction."""
        if self.separator in raw_label:
            segments = [segment.strip() for segment in raw_label.split(self.separator)]
            self.add_path(segments, line)
        else:
            self._roots.append(OutlineNode(label=raw_label, line=line, key=raw_label))

    def add_path(self, segments: list[str], line: int) -> None:
        """Add a path annotation given its trimmed segments.

        The first segment names a top-level container. A single segment only
        ensures that container exists.
        """
        top = segments[0]
        if top not in self._containers:
            node = OutlineNode(label=top, line=line, key=top)
            self._roots.append(node)
            self._containers[top] = node

        parent = top
        last = len(segments) - 1
        for position in range(1, len(segments)):
            label = segments[position]

            if position == last:
                leaf = OutlineNode(label=label, line=line, key=leaf_key(parent, label, line))
                self._containers[parent].children.append(leaf)
                break

            key = container_key(parent, label)
            node = self._containers.get(key)
            if node is None:
                node = OutlineNode(label=label, line=line, key=key)
                self._containers[key] = node
            self._containers[parent].add_child(node)
            parent = key

    @property
    def roots(self) -> list[OutlineNode]:
        """Top-level nodes of the most recent build."""
        return self._roots

    def find_container(self, key: str) -> OutlineNode | None:
        """Look up a container of the most recent build by its path key."""
        return self._containers.get(key)


def build_forest(pairs: Iterable[tuple[str, int]], separator: str = "::") -> list[OutlineNode]:
    """Build a forest in one call (convenience wrapper)."""
    return ForestBuilder(separator).build(pairs)
