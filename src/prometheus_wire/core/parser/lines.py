"""Sample and comment line composers, plus the public entry points."""

from __future__ import annotations

from ..models import Comment, CommentType, SampleData
from .base import ParseResult, read_tag, skip_space
from .labels import read_label
from .numbers import read_timestamp, read_value
from .primitives import is_metric_char, read_variable_name

COMMENT_MARKER = "#"


def _read_comment_type(text: str) -> ParseResult[CommentType] | None:
    for kind in CommentType:
        out = read_tag(text, kind.value)
        if out is None:
            continue
        rest = out[0]
        # "# HELPER x" is an unknown keyword, not HELP followed by a name.
        if rest and is_metric_char(rest[0]):
            return None
        return rest, kind
    return None


def _read_to_line_end(text: str) -> ParseResult[str]:
    for pos, ch in enumerate(text):
        if ch in "\r\n":
            return text[pos:], text[:pos]
    return "", text


def read_sample_line(text: str) -> ParseResult[SampleData] | None:
    """Read ``name{labels} value [timestamp]``.

    Anything left after the timestamp is returned as the remainder; it is
    not an error at this level.
    """
    rest, name = read_variable_name(text)

    labels_out = read_label(rest)
    if labels_out is None:
        return None
    rest, labels = labels_out

    value_out = read_value(rest)
    if value_out is None:
        return None
    rest, value = value_out

    rest, timestamp = read_timestamp(rest)
    return rest, SampleData(name=name, labels=labels, value=value, timestamp=timestamp)


def read_comment_line(text: str) -> ParseResult[Comment] | None:
    """Read ``# HELP|TYPE <name> <text>``."""
    marked = read_tag(text, COMMENT_MARKER)
    if marked is None:
        return None

    kind_out = _read_comment_type(skip_space(marked[0]))
    if kind_out is None:
        return None
    rest, kind = kind_out

    rest, name = read_variable_name(rest)
    rest, desc = _read_to_line_end(skip_space(rest))
    return rest, Comment(name=name, kind=kind, text=desc)


def try_read_sample(line: str) -> SampleData | None:
    """Parse a line as a sample; return None when it does not match.

    >>> sample = try_read_sample('http_requests_total{method="post",code="200"} 1.5e3 1395066363000')
    >>> sample.name, sample.value, sample.timestamp
    ('http_requests_total', 1500.0, 1395066363000)
    >>> sample.labels.get_number("code")
    200.0
    >>> try_read_sample("# test") is None
    True
    """
    out = read_sample_line(line)
    if out is None:
        return None
    return out[1]


def try_read_comment(line: str) -> Comment | None:
    """Parse a line as a HELP/TYPE comment; return None when it does not match.

    >>> try_read_comment("# HELP test1 this is a test")
    Comment(name='test1', kind=<CommentType.HELP: 'HELP'>, text='this is a test')
    >>> try_read_comment("metric 12345") is None
    True
    """
    out = read_comment_line(line)
    if out is None:
        return None
    return out[1]
