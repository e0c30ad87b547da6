"""Outline Serialization - Export an outline forest to various formats.

This module provides functions to serialize OutlineNode forests to
JSON-compatible dicts, indented text, and markdown. Line numbers are
zero-based in the dict form and one-based in the human-readable forms.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from comment_explorer.outline.OutlineNode import OutlineNode


def serialize_node(node: OutlineNode) -> dict[str, Any]:
    """Serialize a node and its subtree to a JSON-compatible dict."""
    return {
        "label": node.label,
        "line": node.line,
        "key": node.key,
        "children": [serialize_node(child) for child in node.children],
    }


def serialize_forest(roots: Sequence[OutlineNode]) -> dict[str, Any]:
    """Serialize a whole forest.

    Returns:
        Dict with ``roots`` (nested node dicts) and ``node_count``.
    """
    return {
        "roots": [serialize_node(root) for root in roots],
        "node_count": sum(1 for root in roots for _ in root.walk()),
    }


def to_json(roots: Sequence[OutlineNode], indent: int | None = 2) -> str:
    return json.dumps(serialize_forest(roots), indent=indent)


def _iter_depth(roots: Sequence[OutlineNode], depth: int = 0):
    for node in roots:
        yield depth, node
        yield from _iter_depth(node.children, depth + 1)


def render_text(roots: Sequence[OutlineNode]) -> str:
    """Render the forest as an indented tree, two spaces per level."""
    lines = [
        f"{'  ' * depth}{node.label} (line {node.line + 1})"
        for depth, node in _iter_depth(roots)
    ]
    return "\n".join(lines)


def render_markdown(roots: Sequence[OutlineNode]) -> str:
    """Render the forest as a nested markdown bullet list."""
    lines = [
        f"{'  ' * depth}- {node.label} (L{node.line + 1})"
        for depth, node in _iter_depth(roots)
    ]
    return "\n".join(lines)
