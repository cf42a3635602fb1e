"""Per-line routing between the sample and comment readers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Protocol

from ..models import Comment, SampleData
from .lines import COMMENT_MARKER, try_read_comment, try_read_sample


class LineKind(str, Enum):
    """Classification of a single exposition line."""

    SAMPLE = "sample"
    COMMENT = "comment"
    BLANK = "blank"
    UNPARSED = "unparsed"


@dataclass(frozen=True, slots=True)
class ParsedLine:
    """Outcome of routing one line through the readers."""

    line_no: int
    kind: LineKind
    sample: SampleData | None = None
    comment: Comment | None = None
    raw: str | None = None  # original line, dropped when callers opt out

    @property
    def name(self) -> str | None:
        """Metric name of the sample or comment, if any."""
        if self.sample is not None:
            return self.sample.name
        if self.comment is not None:
            return self.comment.name
        return None


class LineParser(Protocol):
    """Parser interface: return ParsedLine if line matches, else None."""

    def parse(self, line_no: int, line: str) -> ParsedLine | None:
        """Parse one exposition line."""
        ...


@dataclass(frozen=True, slots=True)
class SampleLineParser:
    """Parse sample lines only."""

    def parse(self, line_no: int, line: str) -> ParsedLine | None:
        sample = try_read_sample(line)
        if sample is None:
            return None
        return ParsedLine(line_no=line_no, kind=LineKind.SAMPLE, sample=sample, raw=line)


@dataclass(frozen=True, slots=True)
class CommentLineParser:
    """Parse `# HELP` / `# TYPE` lines only."""

    def parse(self, line_no: int, line: str) -> ParsedLine | None:
        comment = try_read_comment(line)
        if comment is None:
            return None
        return ParsedLine(line_no=line_no, kind=LineKind.COMMENT, comment=comment, raw=line)


@dataclass(frozen=True, slots=True)
class ExpositionLineParser:
    """Route a line by its first character and always classify it.

    Blank lines are BLANK; lines starting with ``#`` go to the comment reader
    and everything else to the sample reader. A line neither reader accepts
    is UNPARSED. Lines are handled independently of each other.
    """

    comments: LineParser = CommentLineParser()
    samples: LineParser = SampleLineParser()

    def parse(self, line_no: int, line: str) -> ParsedLine:
        stripped = line.strip()
        if not stripped:
            return ParsedLine(line_no=line_no, kind=LineKind.BLANK, raw=line)

        reader = self.comments if stripped.startswith(COMMENT_MARKER) else self.samples
        out = reader.parse(line_no, line.lstrip(" \t"))
        if out is None:
            return ParsedLine(line_no=line_no, kind=LineKind.UNPARSED, raw=line)
        if out.raw != line:
            out = replace(out, raw=line)
        return out
