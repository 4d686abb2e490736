"""Abstract base classes for mapper SQL nodes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pymapper2sql._utils import Sink, write


class Node(ABC):
    """A node of a mapper statement tree.

    Every node restores its literal SQL contribution, including all of its
    descendants, into a text sink. Conditions are never evaluated.
    """

    @abstractmethod
    def restore(self, w: Sink) -> None:
        """Write this node's SQL text to w.

        w is a text sink such as io.StringIO; binary streams like
        io.BytesIO are not supported.

        Raises:
            SinkWriteError: If the sink rejects a write.
        """

    @abstractmethod
    def add_child(self, child: Node) -> None: ...


class ContainerNode(Node):
    """A node that owns an ordered list of children.

    Subclasses restore their children with ``restore_children``; no child
    type checking is performed.
    """

    def __init__(self) -> None:
        self.children: list[Node] = []

    def add_child(self, child: Node) -> None:
        self.children.append(child)

    def restore_children(self, w: Sink) -> None:
        for child in self.children:
            child.restore(w)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(children={len(self.children)})"


class LeafNode(Node):
    """A node that cannot own children."""

    def add_child(self, child: Node) -> None:
        raise TypeError(f"{type(self).__name__} cannot have children")


def write_leading_space(w: Sink, count: int = 1) -> None:
    write(w, " " * count)
