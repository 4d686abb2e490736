"""Node types for mapper statement trees."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from pymapper2sql._constants import (
    STATEMENT_TAGS,
    TAG_BIND,
    TAG_CHOOSE,
    TAG_FOREACH,
    TAG_IF,
    TAG_OTHERWISE,
    TAG_SET,
    TAG_TRIM,
    TAG_WHEN,
    TAG_WHERE,
)
from pymapper2sql._errors import ERR_MSG_UNSUPPORTED_DIRECTIVE, UnsupportedDirectiveError
from pymapper2sql.nodes._base import ContainerNode, LeafNode, Node
from pymapper2sql.nodes.directive import ChooseNode, IfNode, OtherwiseNode, WhenNode
from pymapper2sql.nodes.statement import BindNode, ForeachNode, StatementNode
from pymapper2sql.nodes.text import PlaceholderKind, PlaceholderNode, TextNode
from pymapper2sql.nodes.trim import SetNode, TrimNode, WhereNode

__all__ = [
    "Node",
    "ContainerNode",
    "LeafNode",
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
    "new_node",
]

Attributes = Mapping[str, str]

_REGISTRY: dict[str, Callable[[Attributes], Node]] = {
    TAG_IF: lambda a: IfNode(a.get("test", "")),
    TAG_CHOOSE: lambda a: ChooseNode(),
    TAG_WHEN: lambda a: WhenNode(a.get("test", "")),
    TAG_OTHERWISE: lambda a: OtherwiseNode(),
    TAG_TRIM: lambda a: TrimNode(
        prefix=a.get("prefix", ""),
        suffix=a.get("suffix", ""),
        prefix_overrides=a.get("prefixOverrides", ""),
        suffix_overrides=a.get("suffixOverrides", ""),
    ),
    TAG_WHERE: lambda a: WhereNode(),
    TAG_SET: lambda a: SetNode(),
    TAG_FOREACH: lambda a: ForeachNode(
        collection=a.get("collection", ""),
        item=a.get("item", ""),
        index=a.get("index", ""),
        open=a.get("open", ""),
        close=a.get("close", ""),
        separator=a.get("separator", ""),
    ),
    TAG_BIND: lambda a: BindNode(a.get("name", ""), a.get("value", "")),
}


def new_node(tag: str, attrs: Attributes | None = None) -> Node:
    """Create the node for a mapper tag.

    Args:
        tag: Element name, e.g. "if", "where" or "select".
        attrs: Element attributes. Absent attributes default to "".

    Returns:
        A fresh node with no children.

    Raises:
        UnsupportedDirectiveError: If the tag has no node type.
    """
    attrs = attrs or {}
    if tag in STATEMENT_TAGS:
        return StatementNode(tag, attrs.get("id", ""))
    factory = _REGISTRY.get(tag)
    if factory is None:
        raise UnsupportedDirectiveError(
            ERR_MSG_UNSUPPORTED_DIRECTIVE,
            f"unsupported mapper tag: {tag!r}. "
            f"Available: {', '.join(sorted(_REGISTRY.keys() | STATEMENT_TAGS))}",
        )
    return factory(attrs)
