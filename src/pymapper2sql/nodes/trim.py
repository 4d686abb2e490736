"""Clause trimming: <trim>, <where> and <set>."""

from __future__ import annotations

import logging
from io import StringIO

from pymapper2sql._constants import SET_CLAUSE, WHERE_CLAUSE
from pymapper2sql._utils import (
    Sink,
    split_overrides,
    strip_first_prefix,
    strip_first_suffix,
    trim_space,
    write,
)
from pymapper2sql.nodes._base import ContainerNode

logger = logging.getLogger(__name__)


class TrimNode(ContainerNode):
    """``<trim prefix suffix prefixOverrides suffixOverrides>``.

    Children are restored into a local buffer first, since the strip
    decisions need the fully assembled text. The trimmed content is then
    wrapped with the prefix and suffix. Empty content restores to nothing,
    prefix and suffix included.
    """

    def __init__(
        self,
        prefix: str = "",
        suffix: str = "",
        prefix_overrides: str = "",
        suffix_overrides: str = "",
    ) -> None:
        super().__init__()
        self.prefix = prefix
        self.suffix = suffix
        self.prefix_overrides_parts = split_overrides(prefix_overrides)
        self.suffix_overrides_parts = split_overrides(suffix_overrides)

    def restore(self, w: Sink) -> None:
        buf = StringIO()
        self.restore_children(buf)

        content = trim_space(buf.getvalue())
        if not content:
            return

        stripped = strip_first_prefix(content, self.prefix_overrides_parts)
        stripped = strip_first_suffix(stripped, self.suffix_overrides_parts)
        if stripped != content:
            logger.debug(
                "%s stripped %d characters of overrides",
                type(self).__name__,
                len(content) - len(stripped),
            )

        if self.prefix:
            write(w, " ")
            write(w, self.prefix)
        if stripped:
            write(w, " ")
            write(w, stripped)
        if self.suffix:
            write(w, " ")
            write(w, self.suffix)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(prefix={self.prefix!r}, suffix={self.suffix!r}, "
            f"children={len(self.children)})"
        )


class WhereNode(TrimNode):
    """``<where>``: a trim that drops a leading AND/OR and adds WHERE."""

    def __init__(self) -> None:
        super().__init__(*WHERE_CLAUSE)


class SetNode(TrimNode):
    """``<set>``: a trim that drops a trailing comma and adds SET."""

    def __init__(self) -> None:
        super().__init__(*SET_CLAUSE)
