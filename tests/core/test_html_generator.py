"""Tests for OutlineHTMLGenerator."""

import pytest

pytest.importorskip("jinja2")

from comment_explorer.html import OutlineHTMLGenerator  # noqa: E402
from comment_explorer.outline import build_forest  # noqa: E402


class TestOutlineHTMLGenerator:
    def test_renders_labels_and_lines(self):
        roots = build_forest([("setup", 0), ("Net :: open", 3)])

        html = OutlineHTMLGenerator(roots, title="main.c", version="1.2.3").generate()

        assert "<title>main.c</title>" in html
        assert "setup" in html
        assert "Net" in html
        assert 'data-line="3"' in html
        assert "line 4" in html
        assert "3 entries" in html
        assert "comment-explorer 1.2.3" in html

    def test_labels_are_escaped(self):
        roots = build_forest([("<b>bold</b>", 0)])

        html = OutlineHTMLGenerator(roots).generate()

        assert "<b>bold</b>" not in html
        assert "&lt;b&gt;bold&lt;/b&gt;" in html

    def test_empty_forest(self):
        html = OutlineHTMLGenerator([]).generate()
        assert "No annotations found." in html
