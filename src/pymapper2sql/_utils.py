"""Sink writing, whitespace trimming and strip-token helpers."""

from __future__ import annotations

from typing import Protocol

from pymapper2sql._constants import OVERRIDES_SEPARATOR, WHITESPACE
from pymapper2sql._errors import ERR_MSG_SINK_WRITE_FAILED, SinkWriteError


class Sink(Protocol):
    """Anything restoration can write text to, e.g. io.StringIO."""

    def write(self, s: str, /) -> object: ...


def write(w: Sink, text: str) -> None:
    """Write text to the sink, converting sink failures to SinkWriteError."""
    try:
        w.write(text)
    except (OSError, ValueError) as e:
        raise SinkWriteError(
            ERR_MSG_SINK_WRITE_FAILED,
            f"sink {type(w).__name__} rejected write of {len(text)} characters: {e}",
            wrapped=e,
        ) from e


def split_overrides(overrides: str) -> list[str]:
    """Split a prefixOverrides/suffixOverrides value into strip tokens.

    An empty value yields a single empty token, which matches everything
    and strips nothing.
    """
    return overrides.split(OVERRIDES_SEPARATOR)


def trim_space(text: str) -> str:
    """Strip leading and trailing ASCII whitespace."""
    return text.strip(WHITESPACE)


def strip_first_prefix(text: str, tokens: list[str]) -> str:
    """Remove the first token in order that prefixes text."""
    for token in tokens:
        if text.startswith(token):
            return text[len(token):]
    return text


def strip_first_suffix(text: str, tokens: list[str]) -> str:
    """Remove the first token in order that suffixes text."""
    for token in tokens:
        if text.endswith(token):
            return text[: len(text) - len(token)]
    return text
