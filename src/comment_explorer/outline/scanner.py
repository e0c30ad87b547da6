"""LineScanner - Finds annotation comments in a document.

An annotation is a single-line comment whose text starts with a marker
token, e.g.::

    // #-- Setup
    /* #-- Networking :: sockets */

The scanner yields ``(raw_label, line_index)`` pairs in document order and
silently skips every other line.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class TextLineLike(Protocol):
    """Anything exposing the text of one line."""

    @property
    def text(self) -> str: ...


@runtime_checkable
class TextSource(Protocol):
    """Line-indexed text buffer read by the scanner."""

    @property
    def line_count(self) -> int: ...

    def line_at(self, index: int) -> TextLineLike: ...


@dataclass
class AnnotationConfig:
    """Settings that shape the annotation pattern.

    Attributes:
        comment_styles: Comment openers accepted before the marker.
        marker: Token that flags a comment as an annotation.
        separator: Token splitting a payload into path segments.
        block_close: Optional block-comment closer stripped from the end.
    """

    comment_styles: list[str] = field(default_factory=lambda: ["//", "/*"])
    marker: str = "#--"
    separator: str = "::"
    block_close: str = "*/"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnnotationConfig:
        """Create an AnnotationConfig from the ``[annotations]`` table.

        A single string for ``comment_styles`` is taken as one opener.
        """
        defaults = cls()
        styles = data.get("comment_styles", defaults.comment_styles)
        if isinstance(styles, str):
            styles = [styles]
        elif isinstance(styles, (list, tuple)):
            styles = list(styles)
        return cls(
            comment_styles=styles,
            marker=data.get("marker", defaults.marker),
            separator=data.get("separator", defaults.separator),
            block_close=data.get("block_close", defaults.block_close),
        )

    def validate(self) -> None:
        """Raise ValueError for settings that cannot form a pattern."""
        if not isinstance(self.comment_styles, list) or not all(
            isinstance(style, str) for style in self.comment_styles
        ):
            raise ValueError("annotations.comment_styles must be a list of strings")
        if not self.comment_styles or not all(self.comment_styles):
            raise ValueError("annotations.comment_styles must list non-empty comment openers")
        if not self.marker:
            raise ValueError("annotations.marker must not be empty")
        if not self.separator:
            raise ValueError("annotations.separator must not be empty")


def build_annotation_pattern(config: AnnotationConfig | None = None) -> re.Pattern[str]:
    """Compile the annotation regex.

    With the default settings this is::

        ^\\s*(//|/\\*)\\s*#--\\s*(.+?)\\s*(\\*/)?\\s*$

    Group 2 holds the trimmed payload.

    Raises:
        ValueError: If the config is unusable.
    """
    config = config or AnnotationConfig()
    config.validate()

    openers = "|".join(re.escape(style) for style in config.comment_styles)
    closer = f"({re.escape(config.block_close)})?" if config.block_close else "()?"
    return re.compile(rf"^\s*({openers})\s*{re.escape(config.marker)}\s*(.+?)\s*{closer}\s*$")


class LineScanner:
    """Extracts annotation payloads from a text source.

    Args:
        config: Annotation settings. Defaults to ``//`` and ``/*`` comments
            with the ``#--`` marker.
    """

    def __init__(self, config: AnnotationConfig | None = None) -> None:
        self.config = config or AnnotationConfig()
        self.pattern = build_annotation_pattern(self.config)

    def match_line(self, text: str) -> str | None:
        """Return the payload of an annotation line, or None."""
        match = self.pattern.match(text)
        if match is None:
            return None
        return match.group(2)

    def scan(self, source: TextSource) -> Iterator[tuple[str, int]]:
        """Yield ``(raw_label, line_index)`` for every annotation in ``source``.

        Lines are visited from 0 to ``source.line_count - 1``.
        """
        found = 0
        for index in range(source.line_count):
            label = self.match_line(source.line_at(index).text)
            if label is not None:
                found += 1
                yield label, index
        logger.debug("Scanned %d lines, %d annotations", source.line_count, found)

    def scan_lines(self, lines: Iterable[str]) -> Iterator[tuple[str, int]]:
        """Like :meth:`scan`, for a plain sequence of line strings."""
        for index, text in enumerate(lines):
            label = self.match_line(text)
            if label is not None:
                yield label, index
