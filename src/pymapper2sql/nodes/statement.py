"""Statement roots and structural elements: <select> et al., <foreach>, <bind>."""

from __future__ import annotations

from pymapper2sql._utils import Sink, write
from pymapper2sql.nodes._base import ContainerNode, LeafNode, write_leading_space


class StatementNode(ContainerNode):
    """Root of a ``<select>``, ``<insert>``, ``<update>``, ``<delete>`` or ``<sql>``."""

    def __init__(self, kind: str, statement_id: str = "") -> None:
        super().__init__()
        self.kind = kind
        self.id = statement_id

    def restore(self, w: Sink) -> None:
        self.restore_children(w)

    def __repr__(self) -> str:
        return f"StatementNode(kind={self.kind!r}, id={self.id!r}, children={len(self.children)})"


class ForeachNode(ContainerNode):
    """``<foreach>``, restored as a single iteration.

    The separator is kept for reference but never written, since exactly
    one iteration of the body is emitted.
    """

    def __init__(
        self,
        collection: str = "",
        item: str = "",
        index: str = "",
        open: str = "",
        close: str = "",
        separator: str = "",
    ) -> None:
        super().__init__()
        self.collection = collection
        self.item = item
        self.index = index
        self.open = open
        self.close = close
        self.separator = separator

    def restore(self, w: Sink) -> None:
        if not self.children:
            return
        write_leading_space(w)
        if self.open:
            write(w, self.open)
        self.restore_children(w)
        if self.close:
            write(w, self.close)


class BindNode(LeafNode):
    """``<bind name value>``: declares a variable, contributes no SQL."""

    def __init__(self, name: str = "", value: str = "") -> None:
        self.name = name
        self.value = value

    def restore(self, w: Sink) -> None:
        return None

    def __repr__(self) -> str:
        return f"BindNode(name={self.name!r})"
