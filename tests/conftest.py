"""Shared test fixtures."""

from io import StringIO

import pytest

from pymapper2sql.nodes import Node, TextNode


class FailingSink:
    """Sink that accepts ``fail_after`` writes, then raises OSError."""

    def __init__(self, fail_after: int = 0) -> None:
        self.fail_after = fail_after
        self.written: list[str] = []
        self.error = OSError("no space left on device")

    def write(self, s: str) -> int:
        if len(self.written) >= self.fail_after:
            raise self.error
        self.written.append(s)
        return len(s)


@pytest.fixture
def render():
    """Restore a node into a fresh StringIO and return the raw text."""

    def _render(node: Node) -> str:
        w = StringIO()
        node.restore(w)
        return w.getvalue()

    return _render


@pytest.fixture
def squash():
    """Collapse whitespace runs to single spaces."""

    def _squash(sql: str) -> str:
        return " ".join(sql.split())

    return _squash


@pytest.fixture
def failing_sink():
    return FailingSink


def with_children(node: Node, *children: Node | str) -> Node:
    for child in children:
        node.add_child(TextNode(child) if isinstance(child, str) else child)
    return node


@pytest.fixture
def build():
    """Attach children to a node; plain strings become TextNode leaves."""
    return with_children
