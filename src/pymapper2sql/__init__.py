"""pymapper2sql - Restore SQL text from MyBatis-style mapper templates."""

from __future__ import annotations

__version__ = "0.1.0"

from io import StringIO

from pymapper2sql._builder import MapperTreeBuilder, parse_statement
from pymapper2sql._errors import (
    MarkupError,
    RestoreError,
    SinkWriteError,
    UnsupportedDirectiveError,
)
from pymapper2sql._text import parse_text
from pymapper2sql._utils import trim_space
from pymapper2sql.nodes import (
    BindNode,
    ChooseNode,
    ForeachNode,
    IfNode,
    Node,
    OtherwiseNode,
    PlaceholderKind,
    PlaceholderNode,
    SetNode,
    StatementNode,
    TextNode,
    TrimNode,
    WhenNode,
    WhereNode,
    new_node,
)

__all__ = [
    "restore_sql",
    "parse_statement",
    "parse_text",
    "new_node",
    "MapperTreeBuilder",
    "RestoreError",
    "SinkWriteError",
    "UnsupportedDirectiveError",
    "MarkupError",
    "Node",
    "IfNode",
    "ChooseNode",
    "WhenNode",
    "OtherwiseNode",
    "TrimNode",
    "WhereNode",
    "SetNode",
    "StatementNode",
    "ForeachNode",
    "BindNode",
    "TextNode",
    "PlaceholderKind",
    "PlaceholderNode",
]


def restore_sql(node: Node) -> str:
    """Restore a node tree to a single SQL string.

    Every directive branch is included; test expressions are ignored.

    Args:
        node: Root of the tree, usually from parse_statement.

    Returns:
        The restored SQL with surrounding whitespace removed.
    """
    w = StringIO()
    node.restore(w)
    return trim_space(w.getvalue())
