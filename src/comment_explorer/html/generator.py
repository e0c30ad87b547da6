"""HTML Generator for comment outlines.

Renders an outline forest as a standalone HTML page with collapsible
groups. Uses Jinja2 templates shipped with the package.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from comment_explorer import __version__
from comment_explorer.outline.serialize import serialize_forest

if TYPE_CHECKING:
    from comment_explorer.outline.OutlineNode import OutlineNode


class OutlineHTMLGenerator:
    """Generates an HTML outline page.

    Args:
        roots: Top-level outline nodes.
        title: Page heading, usually the document path.
        version: Version string for display (defaults to the package version).
    """

    def __init__(
        self,
        roots: Sequence[OutlineNode],
        title: str = "Comment outline",
        version: str | None = None,
    ) -> None:
        self.roots = list(roots)
        self.title = title
        self.version = version if version is not None else __version__

    def generate(self) -> str:
        """Generate the complete HTML page.

        Raises:
            ImportError: If Jinja2 is not installed.
        """
        try:
            from jinja2 import Environment, PackageLoader, select_autoescape

            env = Environment(
                loader=PackageLoader("comment_explorer.html", "templates"),
                autoescape=select_autoescape(["html", "xml", "j2"]),
            )
            template = env.get_template("outline.html.j2")
        except ImportError:
            raise ImportError(
                "OutlineHTMLGenerator requires the html extra. "
                "Install with: pip install comment-explorer[html]"
            )

        data = serialize_forest(self.roots)
        return template.render(
            title=self.title,
            version=self.version,
            roots=data["roots"],
            node_count=data["node_count"],
        )
