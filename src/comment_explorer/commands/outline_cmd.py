"""
comment_explorer.commands.outline_cmd - Print the comment outline of a file.

- `comment-explorer outline FILE`                  # Indented tree
- `comment-explorer outline FILE --format json`    # Nested JSON
- `comment-explorer outline FILE --format html -o outline.html`
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from comment_explorer.config import get_config
from comment_explorer.outline import AnnotationConfig, OutlineProvider, TextDocument
from comment_explorer.outline.serialize import render_markdown, render_text, to_json

FORMATS = ["text", "json", "markdown", "html"]


def run(args: argparse.Namespace) -> int:
    """Run the outline command."""
    path: Path = args.path
    if not path.is_file():
        print(f"Error: File not found: {path}", file=sys.stderr)
        return 1

    config = get_config(getattr(args, "config", None), start=path.parent)
    annotation_config = AnnotationConfig.from_dict(config.get("annotations", {}))
    output_format = getattr(args, "format", None) or config.get("output", {}).get("format", "text")
    if output_format not in FORMATS:
        print(f"Error: Unknown format '{output_format}'", file=sys.stderr)
        return 1

    document = TextDocument.from_path(path, encoding=getattr(args, "encoding", "utf-8"))
    provider = OutlineProvider(document, config=annotation_config)
    roots = provider.get_roots()

    if output_format == "json":
        content = to_json(roots)
    elif output_format == "markdown":
        content = render_markdown(roots)
    elif output_format == "html":
        from comment_explorer.html import OutlineHTMLGenerator

        content = OutlineHTMLGenerator(roots, title=str(path)).generate()
    else:
        content = render_text(roots)

    output: Path | None = getattr(args, "output", None)
    if output:
        output.write_text(content + "\n", encoding="utf-8")
        if not getattr(args, "quiet", False):
            print(f"Wrote {output}")
    elif content:
        print(content)
    elif not getattr(args, "quiet", False):
        print("No annotations found.", file=sys.stderr)

    return 0
