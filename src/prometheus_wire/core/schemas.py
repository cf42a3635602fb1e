"""JSON-facing models for parsed lines.

Used by the MCP tools and the CLI ``--json`` output. Non-finite values are
rendered with the exposition spelling (``+Inf``, ``-Inf``, ``NaN``) because
JSON has no literal for them.
"""

from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, Field

from .models import Comment, SampleData
from .parser.routing import ParsedLine


def format_value(value: float) -> float | str:
    """Return a JSON-safe sample value."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return value


class SampleModel(BaseModel):
    name: str = Field(description="Metric name (may be empty).")
    labels: dict[str, str] = Field(default_factory=dict, description="Label name -> value.")
    value: float | str = Field(description="Sample value; '+Inf', '-Inf' or 'NaN' when not finite.")
    timestamp: int | None = Field(default=None, description="Milliseconds since epoch, if present.")

    @classmethod
    def from_sample(cls, sample: SampleData) -> SampleModel:
        return cls(
            name=sample.name,
            labels=dict(sample.labels),
            value=format_value(sample.value),
            timestamp=sample.timestamp,
        )


class CommentModel(BaseModel):
    name: str = Field(description="Metric name the comment describes (may be empty).")
    kind: Literal["HELP", "TYPE"]
    text: str = Field(description="Remainder of the line after the name.")

    @classmethod
    def from_comment(cls, comment: Comment) -> CommentModel:
        return cls(name=comment.name, kind=comment.kind.value, text=comment.text)


class ParsedLineModel(BaseModel):
    line_no: int
    kind: Literal["sample", "comment", "blank", "unparsed"]
    sample: SampleModel | None = None
    comment: CommentModel | None = None
    raw: str | None = None

    @classmethod
    def from_parsed(cls, parsed: ParsedLine, *, include_raw: bool = True) -> ParsedLineModel:
        return cls(
            line_no=parsed.line_no,
            kind=parsed.kind.value,
            sample=SampleModel.from_sample(parsed.sample) if parsed.sample is not None else None,
            comment=(
                CommentModel.from_comment(parsed.comment) if parsed.comment is not None else None
            ),
            raw=parsed.raw if include_raw else None,
        )


class ExpositionResponse(BaseModel):
    count: int = Field(ge=0, description="Number of lines returned.")
    summary: dict[str, int] = Field(default_factory=dict, description="Line counts per kind.")
    truncated: bool = Field(default=False, description="True when the limit cut the result.")
    lines: list[ParsedLineModel] = Field(default_factory=list)

