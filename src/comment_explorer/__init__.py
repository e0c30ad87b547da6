"""
comment-explorer - Outline view built from comment annotations

Marks like ``// #-- Group :: step`` in any C-style source file are
collected into a navigable tree: groups merge by path, steps keep their
line so a host editor can jump straight to them.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("comment-explorer")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from comment_explorer.outline import (
    AnnotationConfig,
    ForestBuilder,
    LineScanner,
    OutlineNode,
    OutlineProvider,
    TextDocument,
)

__all__ = [
    "__version__",
    "AnnotationConfig",
    "ForestBuilder",
    "LineScanner",
    "OutlineNode",
    "OutlineProvider",
    "TextDocument",
]
