"""Outline module - Comment annotation scanning and forest building.

Exports:
- OutlineNode: One outline entry
- AnnotationConfig: Settings shaping the annotation pattern
- LineScanner: Finds annotation comments in a document
- ForestBuilder: Assembles annotations into a forest
- OutlineProvider: Owns and refreshes the outline of one document
- TextDocument / TextLine: Line sources for the scanner
"""

from comment_explorer.outline.builder import ForestBuilder, build_forest
from comment_explorer.outline.document import TextDocument, TextLine
from comment_explorer.outline.OutlineNode import OutlineNode
from comment_explorer.outline.provider import (
    JUMP_TO_LINE_COMMAND,
    CollapsibleState,
    Command,
    EventEmitter,
    Navigator,
    OutlineProvider,
    TreeItem,
    activate,
)
from comment_explorer.outline.scanner import (
    AnnotationConfig,
    LineScanner,
    TextSource,
    build_annotation_pattern,
)

__all__ = [
    "OutlineNode",
    "AnnotationConfig",
    "LineScanner",
    "TextSource",
    "build_annotation_pattern",
    "ForestBuilder",
    "build_forest",
    "TextDocument",
    "TextLine",
    "OutlineProvider",
    "EventEmitter",
    "Navigator",
    "TreeItem",
    "Command",
    "CollapsibleState",
    "JUMP_TO_LINE_COMMAND",
    "activate",
]
