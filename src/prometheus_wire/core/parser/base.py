"""Shared conventions for the grammar rules.

Every rule takes the remaining input and returns ``(rest, value)`` on success
or ``None`` when the input does not match. Rules are pure functions: they
never raise and never keep state between calls.
"""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")

ParseResult = tuple[str, T]

SPACE_CHARS = " \t"


def skip_space(text: str) -> str:
    """Drop leading spaces and tabs (horizontal whitespace only)."""
    return text.lstrip(SPACE_CHARS)


def read_tag(text: str, tag: str) -> ParseResult[str] | None:
    """Consume a literal tag at the start of the input."""
    if text.startswith(tag):
        return text[len(tag) :], tag
    return None
