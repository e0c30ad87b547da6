"""OutlineProvider - Owns the outline of one document.

The provider is the seam between the scan-and-build core and a host
application:

- the host's tree widget reads ``get_roots()`` / ``get_children()`` /
  ``get_tree_item()`` and listens on ``on_forest_changed``;
- the host's save hook calls ``on_document_saved()``;
- activating a tree item runs the ``jumpToLine`` command, which the host
  routes to ``jump_to_line()``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from comment_explorer.outline.builder import ForestBuilder
from comment_explorer.outline.OutlineNode import OutlineNode
from comment_explorer.outline.scanner import AnnotationConfig, LineScanner, TextSource

logger = logging.getLogger(__name__)

JUMP_TO_LINE_COMMAND = "comment-explorer.jumpToLine"


class CollapsibleState(Enum):
    """How a tree widget should present a node."""

    NONE = "none"
    COLLAPSED = "collapsed"


@dataclass
class Command:
    """A host command bound to a tree item."""

    command: str
    title: str = ""
    arguments: list[Any] = field(default_factory=list)


@dataclass
class TreeItem:
    """Presentation of one node for a tree widget."""

    label: str
    collapsible_state: CollapsibleState
    command: Command | None = None


@runtime_checkable
class Navigator(Protocol):
    """Moves the editor caret. Implemented by the host."""

    def reveal(self, line: int, column: int = 0) -> None:
        """Place the caret at (line, column) and scroll it into view."""
        ...


class EventEmitter:
    """Minimal payload-less event with subscribe/fire."""

    def __init__(self) -> None:
        self._listeners: list[Callable[[], None]] = []

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Register ``listener``; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def fire(self) -> None:
        for listener in list(self._listeners):
            listener()

    def listener_count(self) -> int:
        return len(self._listeners)


class OutlineProvider:
    """Maintains the comment outline of a single document.

    The forest is built on construction and rebuilt from scratch by every
    :meth:`refresh`. Readers only ever see a completed forest.

    Args:
        document: Line source to scan.
        config: Annotation settings (``[annotations]`` config table).
        navigator: Host caret mover used by :meth:`jump_to_line`.
    """

    def __init__(
        self,
        document: TextSource,
        config: AnnotationConfig | None = None,
        navigator: Navigator | None = None,
    ) -> None:
        self.document = document
        self.config = config or AnnotationConfig()
        self.navigator = navigator
        self.on_forest_changed = EventEmitter()

        self._scanner = LineScanner(self.config)
        self._builder = ForestBuilder(self.config.separator)
        self._roots: list[OutlineNode] = []
        self._parse()

    def _parse(self) -> None:
        roots = self._builder.build(self._scanner.scan(self.document))
        # Swap only once the new forest is complete
        self._roots = roots

    def refresh(self) -> None:
        """Rebuild the forest and notify listeners once."""
        self._parse()
        logger.debug("Outline refreshed: %d roots", len(self._roots))
        self.on_forest_changed.fire()

    def on_document_saved(self, document: TextSource) -> bool:
        """Save hook. Refreshes only for this provider's own document.

        Returns:
            True if a refresh happened.
        """
        if document is not self.document:
            return False
        self.refresh()
        return True

    def get_roots(self) -> list[OutlineNode]:
        return list(self._roots)

    def get_children(self, node: OutlineNode | None = None) -> list[OutlineNode]:
        """Children of ``node``, or the top-level nodes when ``node`` is None."""
        if node is None:
            return self.get_roots()
        return list(node.children)

    def get_tree_item(self, node: OutlineNode) -> TreeItem:
        state = CollapsibleState.NONE if node.is_leaf else CollapsibleState.COLLAPSED
        return TreeItem(
            label=node.label,
            collapsible_state=state,
            command=Command(command=JUMP_TO_LINE_COMMAND, arguments=[node.line]),
        )

    def jump_to_line(self, line: int) -> None:
        """Run the jump-to-line command: caret to column 0 of ``line``."""
        if self.navigator is None:
            logger.debug("No navigator attached, ignoring jump to line %d", line)
            return
        self.navigator.reveal(line, 0)

    def execute(self, command: Command) -> None:
        """Dispatch a tree item's command."""
        if command.command == JUMP_TO_LINE_COMMAND:
            self.jump_to_line(*command.arguments)
        else:
            logger.warning("Unknown command: %s", command.command)


def activate(
    document: TextSource | None,
    config: AnnotationConfig | None = None,
    navigator: Navigator | None = None,
) -> OutlineProvider | None:
    """Create a provider for the active document, or None if there is none."""
    if document is None:
        logger.debug("No active document, outline not created")
        return None
    return OutlineProvider(document, config=config, navigator=navigator)
