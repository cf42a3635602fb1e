"""Sample value and timestamp readers."""

from __future__ import annotations

import math
import re

from .base import ParseResult, read_tag, skip_space

# Sign, digits with optional fraction (or a bare fraction), then an optional
# exponent. An exponent marker without digits makes the literal malformed.
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_DANGLING_EXP_RE = re.compile(r"[eE][+-]?(?![0-9])")

# Case-insensitive, unsigned. "Infinity" reads as "inf" and leaves "inity".
_FLOAT_WORDS: tuple[tuple[str, float], ...] = (
    ("nan", math.nan),
    ("inf", math.inf),
)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def read_double(text: str) -> ParseResult[float] | None:
    """Read a floating point literal at the start of the input (no leading spaces)."""
    m = _FLOAT_RE.match(text)
    if m is not None:
        literal = m.group(0)
        rest = text[m.end() :]
        if "e" not in literal.lower() and _DANGLING_EXP_RE.match(rest):
            return None
        return rest, float(literal)

    lowered = text[:3].lower()
    for word, value in _FLOAT_WORDS:
        if lowered.startswith(word):
            return text[len(word) :], value
    return None


def parse_number(raw: str) -> float | None:
    """Parse a whole string as a number, accepting ``+Inf``/``-Inf``."""
    out = read_value(raw)
    if out is None or out[0].strip(" \t"):
        return None
    return out[1]


def read_value(text: str) -> ParseResult[float] | None:
    """Read a sample value: ``+Inf``, ``-Inf`` or a float literal."""
    text = skip_space(text)
    for tag, value in (("+Inf", math.inf), ("-Inf", -math.inf)):
        out = read_tag(text, tag)
        if out is not None:
            return out[0], value
    return read_double(text)


def _truncate_to_int64(value: float) -> int:
    """Truncate toward zero, saturating at the signed 64-bit range (NaN -> 0)."""
    if math.isnan(value):
        return 0
    if value >= INT64_MAX:
        return INT64_MAX
    if value <= INT64_MIN:
        return INT64_MIN
    return int(value)


def read_timestamp(text: str) -> ParseResult[int | None]:
    """Read an optional millisecond timestamp.

    Fractional values are truncated toward zero. When no number follows, the
    result is None and the input (including any spaces) is left as is.
    """
    out = read_double(skip_space(text))
    if out is None:
        return text, None
    rest, value = out
    return rest, _truncate_to_int64(value)
