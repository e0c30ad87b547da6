"""Text documents satisfying the scanner's line-source contract."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

# Only these terminators end a line; form feeds and Unicode separators do not
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split ``text`` at ``\\n``, ``\\r\\n`` and ``\\r``.

    A trailing terminator adds no empty line.
    """
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


@dataclass(frozen=True)
class TextLine:
    """One line of a document, without its line terminator."""

    text: str


class TextDocument:
    """In-memory line buffer, optionally backed by a file.

    Args:
        lines: Line texts without terminators.
        path: File the lines were read from, if any.
    """

    def __init__(self, lines: list[str], path: Path | None = None, encoding: str = "utf-8") -> None:
        self._lines = list(lines)
        self.path = path
        self.encoding = encoding

    @classmethod
    def from_text(cls, text: str) -> TextDocument:
        """Create a document from a string. A trailing newline adds no line."""
        return cls(split_lines(text))

    @classmethod
    def from_path(cls, path: Path, encoding: str = "utf-8") -> TextDocument:
        """Read a document from disk.

        Raises:
            OSError: If the file cannot be read.
        """
        path = Path(path)
        return cls(split_lines(path.read_text(encoding=encoding)), path=path, encoding=encoding)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> TextLine:
        return TextLine(self._lines[index])

    def set_text(self, text: str) -> None:
        """Replace the whole buffer, as an editor would before saving."""
        self._lines = split_lines(text)

    def reload(self) -> None:
        """Re-read a file-backed document from disk."""
        if self.path is None:
            raise ValueError("Document has no backing file")
        self._lines = split_lines(self.path.read_text(encoding=self.encoding))

    def __repr__(self) -> str:
        return f"TextDocument(path={self.path!r}, lines={len(self._lines)})"
