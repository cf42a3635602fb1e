"""Tokenizer primitives: metric/label names and quoted label values."""

from __future__ import annotations

import unicodedata

from .base import ParseResult, skip_space

QUOTE = '"'
BACKSLASH = "\\"
ESCAPABLE = frozenset('"\\\'n')

# Spacing and non-spacing combining marks (e.g. Devanagari vowel signs) are
# alphabetic in the Unicode sense but fail str.isalnum().
_MARK_CATEGORIES = frozenset({"Mn", "Mc"})


def is_metric_char(ch: str) -> bool:
    """Return True for characters allowed in metric and label names."""
    # https://prometheus.io/docs/concepts/data_model/#metric-names-and-labels
    return ch.isalnum() or ch in "_:." or unicodedata.category(ch) in _MARK_CATEGORIES


def read_variable_name(text: str) -> ParseResult[str]:
    """Read a metric or label name after optional spaces.

    Always succeeds; the name is empty when no name character follows.
    """
    text = skip_space(text)
    end = 0
    while end < len(text) and is_metric_char(text[end]):
        end += 1
    return text[end:], text[:end]


def read_quoted_string(text: str) -> ParseResult[str] | None:
    """Read a double-quoted label value.

    Inside the quotes a backslash may only precede one of ``"``, ``\\``,
    ``'`` or ``n``. Only ``\\\\`` is reduced to a single backslash; the other
    escapes are kept as written (``\\n`` stays two characters).
    """
    if not text.startswith(QUOTE):
        return None

    pos = 1
    while pos < len(text):
        ch = text[pos]
        if ch == QUOTE:
            body = text[1:pos]
            return text[pos + 1 :], body.replace(BACKSLASH * 2, BACKSLASH)
        if ch == BACKSLASH:
            if pos + 1 >= len(text) or text[pos + 1] not in ESCAPABLE:
                return None
            pos += 2
            continue
        pos += 1

    # Ran out of input before the closing quote.
    return None
