"""Splits mapper element text into literal and placeholder nodes."""

from __future__ import annotations

from lark import Lark, Token
from lark.visitors import Transformer

from pymapper2sql._constants import DEFAULT_PREPARED_MARKER
from pymapper2sql.nodes._base import Node
from pymapper2sql.nodes.text import PlaceholderKind, PlaceholderNode, TextNode

# An unterminated #{ or ${ belongs to TEXT, so every input lexes.
_GRAMMAR = r"""
start: (placeholder | text)*

placeholder: PLACEHOLDER
text: TEXT

PLACEHOLDER: /[#$]\{[^}]*\}/
TEXT: /(?:[^#$]|[#$](?!\{)|[#$]\{[^}]*\Z)+/
"""

_parser = Lark(_GRAMMAR, parser="lalr")


class _SegmentBuilder(Transformer):
    def __init__(self, prepared_marker: str) -> None:
        super().__init__()
        self._prepared_marker = prepared_marker

    def start(self, children: list[Node]) -> list[Node]:
        return list(children)

    def text(self, children: list[Token]) -> TextNode:
        return TextNode(str(children[0]))

    def placeholder(self, children: list[Token]) -> PlaceholderNode:
        raw = str(children[0])
        return PlaceholderNode(
            raw[2:-1],
            kind=PlaceholderKind(raw[0]),
            prepared_marker=self._prepared_marker,
        )


def parse_text(text: str, *, prepared_marker: str = DEFAULT_PREPARED_MARKER) -> list[Node]:
    """Split raw element text into TextNode and PlaceholderNode leaves.

    Args:
        text: Character data of a mapper element.
        prepared_marker: Text that #{...} placeholders restore to.

    Returns:
        Leaf nodes in source order. Empty text yields an empty list.
    """
    if not text:
        return []
    tree = _parser.parse(text)
    return _SegmentBuilder(prepared_marker).transform(tree)
