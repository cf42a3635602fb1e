"""Core data models for exposition line parsing."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum


class CommentType(str, Enum):
    """Metadata comment keywords recognized in the exposition format."""

    HELP = "HELP"
    TYPE = "TYPE"


class LabelList(Mapping[str, str]):
    """Immutable label name -> label value mapping attached to a sample."""

    __slots__ = ("_labels",)

    def __init__(self, labels: Mapping[str, str] | None = None) -> None:
        self._labels: dict[str, str] = dict(labels) if labels else {}

    @classmethod
    def from_map(cls, labels: Mapping[str, str]) -> LabelList:
        return cls(labels)

    def __getitem__(self, name: str) -> str:
        return self._labels[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __hash__(self) -> int:
        return hash(frozenset(self._labels.items()))

    def __repr__(self) -> str:
        return f"LabelList({self._labels!r})"

    def get_string(self, name: str) -> str | None:
        """Return the raw label value, or None when the label is missing."""
        return self._labels.get(name)

    def get_number(self, name: str) -> float | None:
        """Return the label value parsed as a float, or None if missing or not numeric."""
        raw = self._labels.get(name)
        if raw is None:
            return None
        # Deferred: the parser package imports this module.
        from .parser.numbers import parse_number

        return parse_number(raw)


@dataclass(frozen=True, slots=True)
class SampleData:
    """One metric observation parsed from a sample line."""

    name: str
    labels: LabelList
    value: float
    timestamp: int | None = None  # milliseconds; None when the line carries no timestamp


@dataclass(frozen=True, slots=True)
class Comment:
    """A `# HELP` or `# TYPE` metadata line."""

    name: str
    kind: CommentType
    text: str
