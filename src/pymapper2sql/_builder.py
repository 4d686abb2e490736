"""Assembles node trees from mapper markup."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from xml.etree.ElementTree import ParseError, XMLParser

from pymapper2sql._constants import DEFAULT_PREPARED_MARKER
from pymapper2sql._errors import ERR_MSG_MALFORMED_MARKUP, MarkupError
from pymapper2sql._text import parse_text
from pymapper2sql._utils import trim_space
from pymapper2sql.nodes import LeafNode, Node, new_node

logger = logging.getLogger(__name__)


class MapperTreeBuilder:
    """XMLParser target that builds a node tree from parser events.

    Character data is buffered until the next start or end event, then
    split into text and placeholder leaves of the enclosing element.
    """

    def __init__(self, *, prepared_marker: str = DEFAULT_PREPARED_MARKER) -> None:
        self._prepared_marker = prepared_marker
        self._stack: list[Node] = []
        self._data: list[str] = []
        self._root: Node | None = None

    def start(self, tag: str, attrs: Mapping[str, str]) -> None:
        self._flush()
        node = new_node(tag, attrs)
        if self._stack:
            self._parent_for(f"<{tag}>").add_child(node)
        elif self._root is None:
            self._root = node
        self._stack.append(node)

    def data(self, data: str) -> None:
        self._data.append(data)

    def end(self, tag: str) -> None:
        self._flush()
        self._stack.pop()

    def close(self) -> Node:
        if self._root is None:
            raise MarkupError(ERR_MSG_MALFORMED_MARKUP, "markup contains no statement element")
        logger.debug("assembled mapper tree %r", self._root)
        return self._root

    def _flush(self) -> None:
        if not self._data:
            return
        text = "".join(self._data)
        self._data.clear()
        if not self._stack:
            return
        if isinstance(self._stack[-1], LeafNode) and not trim_space(text):
            return
        parent = self._parent_for("text")
        for leaf in parse_text(text, prepared_marker=self._prepared_marker):
            parent.add_child(leaf)

    def _parent_for(self, what: str) -> Node:
        parent = self._stack[-1]
        if isinstance(parent, LeafNode):
            raise MarkupError(
                ERR_MSG_MALFORMED_MARKUP,
                f"{type(parent).__name__} cannot contain {what}",
            )
        return parent


def parse_statement(
    markup: str, *, prepared_marker: str = DEFAULT_PREPARED_MARKER
) -> Node:
    """Build the node tree of a single mapper statement element.

    Args:
        markup: XML of one element, e.g. ``<select id="q">...</select>``.
        prepared_marker: Text that #{...} placeholders restore to.

    Returns:
        The root node of the assembled tree.

    Raises:
        MarkupError: If the markup is not well-formed, or a <bind> holds
            anything but whitespace.
        UnsupportedDirectiveError: If an element has no node type.
    """
    parser = XMLParser(target=MapperTreeBuilder(prepared_marker=prepared_marker))
    try:
        parser.feed(markup)
        return parser.close()
    except ParseError as e:
        raise MarkupError(
            ERR_MSG_MALFORMED_MARKUP,
            f"cannot parse mapper markup: {e}",
            wrapped=e,
        ) from e
