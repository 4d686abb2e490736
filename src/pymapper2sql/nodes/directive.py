"""Control-flow directives: <if>, <choose>, <when> and <otherwise>.

The test expressions are kept on the nodes but never evaluated; every
branch is restored, so the output is the union of all expansions.
"""

from __future__ import annotations

from pymapper2sql._utils import Sink
from pymapper2sql.nodes._base import ContainerNode, write_leading_space


class _PassThroughNode(ContainerNode):
    """Renders its children after a separating space."""

    leading_spaces = 1

    def restore(self, w: Sink) -> None:
        if not self.children:
            return
        write_leading_space(w, self.leading_spaces)
        self.restore_children(w)


class IfNode(_PassThroughNode):
    """``<if test="...">``."""

    def __init__(self, test: str = "") -> None:
        super().__init__()
        self.test = test

    def __repr__(self) -> str:
        return f"IfNode(test={self.test!r}, children={len(self.children)})"


class ChooseNode(_PassThroughNode):
    """``<choose>``. No branch is selected; every case is restored."""


class WhenNode(_PassThroughNode):
    """``<when test="...">``.

    Writes two leading spaces instead of one, matching the legacy renderer.
    """

    leading_spaces = 2

    def __init__(self, test: str = "") -> None:
        super().__init__()
        self.test = test

    def __repr__(self) -> str:
        return f"WhenNode(test={self.test!r}, children={len(self.children)})"


class OtherwiseNode(_PassThroughNode):
    """``<otherwise>``."""
