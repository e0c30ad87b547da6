"""Shared pytest fixtures for comment-explorer tests."""

import pytest


def document_with(annotations, line_count=None, filler="int x = 0;"):
    """Create a TextDocument with annotation texts at given line indexes.

    Args:
        annotations: Mapping of zero-based line index to line text.
        line_count: Total lines (default: one past the last annotation).
        filler: Text used for every other line.
    """
    from comment_explorer.outline import TextDocument

    if line_count is None:
        line_count = max(annotations, default=-1) + 1
    lines = [annotations.get(i, filler) for i in range(line_count)]
    return TextDocument(lines)


class RecordingNavigator:
    """Navigator that records reveal() calls."""

    def __init__(self):
        self.calls = []

    def reveal(self, line, column=0):
        self.calls.append((line, column))


@pytest.fixture
def make_document():
    """Factory fixture wrapping document_with()."""
    return document_with


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def scanner():
    from comment_explorer.outline import LineScanner

    return LineScanner()


@pytest.fixture
def builder():
    """Fresh ForestBuilder instance."""
    from comment_explorer.outline import ForestBuilder

    return ForestBuilder()


@pytest.fixture
def sample_source(tmp_path):
    """A small C file with flat, grouped and nested annotations."""
    path = tmp_path / "main.c"
    path.write_text(
        "#include <stdio.h>\n"
        "// #-- Includes done\n"
        "\n"
        "// #-- Net :: open socket\n"
        "int open_socket(void);\n"
        "/* #-- Net :: TLS :: handshake */\n"
        "int handshake(void);\n"
        "// #-- Net :: close socket\n",
        encoding="utf-8",
    )
    return path
