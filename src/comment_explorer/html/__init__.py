"""HTML rendering of comment outlines (requires the ``html`` extra)."""

from comment_explorer.html.generator import OutlineHTMLGenerator

__all__ = ["OutlineHTMLGenerator"]
