"""Decode single lines of the Prometheus text exposition format."""

from __future__ import annotations

from .core.models import Comment, CommentType, LabelList, SampleData
from .core.parser import try_read_comment, try_read_sample

__all__ = [
    "Comment",
    "CommentType",
    "LabelList",
    "SampleData",
    "try_read_comment",
    "try_read_sample",
]
