"""Label block reader: ``{name="value", ...}``."""

from __future__ import annotations

from ..models import LabelList
from .base import ParseResult, read_tag, skip_space
from .primitives import read_quoted_string, read_variable_name


def _read_separator(text: str, sep: str) -> str | None:
    """Consume ``sep`` surrounded by optional spaces; return the rest."""
    out = read_tag(skip_space(text), sep)
    if out is None:
        return None
    return skip_space(out[0])


def read_label_pair(text: str) -> ParseResult[tuple[str, str]] | None:
    """Read a single ``name = "value"`` pair."""
    text, name = read_variable_name(text)
    rest = _read_separator(text, "=")
    if rest is None:
        return None
    out = read_quoted_string(rest)
    if out is None:
        return None
    rest, value = out
    return rest, (name, value)


def read_label(text: str) -> ParseResult[LabelList] | None:
    """Read an optional label block.

    No ``{`` at the current position yields an empty LabelList and leaves
    the input untouched. A block that is opened but malformed (including a
    trailing comma before ``}``) fails. Repeated names keep the last value.
    """
    opened = read_tag(skip_space(text), "{")
    if opened is None:
        return text, LabelList()

    rest = opened[0]
    labels: dict[str, str] = {}

    pair = read_label_pair(rest)
    if pair is not None:
        rest, (name, value) = pair
        labels[name] = value
        while True:
            after_comma = _read_separator(rest, ",")
            if after_comma is None:
                break
            pair = read_label_pair(after_comma)
            if pair is None:
                # Leave the comma unconsumed so the closing brace check fails.
                break
            rest, (name, value) = pair
            labels[name] = value

    closed = read_tag(skip_space(rest), "}")
    if closed is None:
        return None
    return closed[0], LabelList(labels)
