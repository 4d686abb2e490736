"""Leaf nodes holding literal SQL text and parameter placeholders."""

from __future__ import annotations

import enum

from pymapper2sql._constants import DEFAULT_PREPARED_MARKER
from pymapper2sql._utils import Sink, write
from pymapper2sql.nodes._base import LeafNode


class TextNode(LeafNode):
    """Literal SQL text, restored verbatim."""

    def __init__(self, text: str) -> None:
        self.text = text

    def restore(self, w: Sink) -> None:
        if self.text:
            write(w, self.text)

    def __repr__(self) -> str:
        return f"TextNode({self.text!r})"


class PlaceholderKind(enum.StrEnum):
    PREPARED = "#"
    RAW = "$"


class PlaceholderNode(LeafNode):
    """A ``#{...}`` or ``${...}`` parameter reference.

    Prepared placeholders restore to a bind marker. Raw placeholders are
    substituted textually by the templating engine, usually with an
    identifier, so they restore to the referenced property name.
    """

    def __init__(
        self,
        expression: str,
        kind: PlaceholderKind = PlaceholderKind.PREPARED,
        prepared_marker: str = DEFAULT_PREPARED_MARKER,
    ) -> None:
        self.expression = expression
        self.kind = kind
        self.prepared_marker = prepared_marker

    @property
    def property_name(self) -> str:
        """The referenced property, without jdbcType and similar options."""
        return self.expression.split(",", 1)[0].strip()

    def restore(self, w: Sink) -> None:
        if self.kind is PlaceholderKind.PREPARED:
            write(w, self.prepared_marker)
        else:
            write(w, self.property_name)

    def __repr__(self) -> str:
        return f"PlaceholderNode({self.kind.value}{{{self.expression}}})"
