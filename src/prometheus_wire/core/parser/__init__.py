"""Line grammar for the Prometheus text exposition format.

Contains the grammar rules (names, quoted values, label blocks, values,
timestamps), the sample/comment line composers and per-line routing.
"""

from __future__ import annotations

from .labels import read_label
from .lines import read_comment_line, read_sample_line, try_read_comment, try_read_sample
from .numbers import read_timestamp, read_value
from .primitives import read_quoted_string, read_variable_name
from .routing import (
    CommentLineParser,
    ExpositionLineParser,
    LineKind,
    LineParser,
    ParsedLine,
    SampleLineParser,
)

__all__ = [
    "CommentLineParser",
    "ExpositionLineParser",
    "LineKind",
    "LineParser",
    "ParsedLine",
    "SampleLineParser",
    "read_comment_line",
    "read_label",
    "read_quoted_string",
    "read_sample_line",
    "read_timestamp",
    "read_value",
    "read_variable_name",
    "try_read_comment",
    "try_read_sample",
]
