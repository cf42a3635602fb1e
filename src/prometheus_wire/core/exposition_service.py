"""Exposition file reading and per-line routing.

This module reads an exposition file line by line and hands every line to a
LineParser. Lines are never joined and samples are never grouped into
families; each yielded ParsedLine depends only on its own line.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from contextlib import asynccontextmanager
from dataclasses import replace
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from .parser import ExpositionLineParser, LineKind, LineParser, ParsedLine

LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def _open_text(path: Path, *, encoding: str, decode_errors: str):
    """Open an exposition file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=encoding, errors=decode_errors)
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, encoding=encoding, errors=decode_errors) as f:
            yield f


def default_parser() -> LineParser:
    """Default router: comments to the comment reader, the rest to the sample reader."""
    return ExpositionLineParser()


def parse_kinds(kinds: Iterable[LineKind | str] | None) -> set[LineKind] | None:
    """Normalize user-supplied kind names into LineKind values."""
    if kinds is None:
        return None
    out: set[LineKind] = set()
    for k in kinds:
        if isinstance(k, LineKind):
            out.add(k)
            continue
        name = k.strip().lower()
        if not name:
            continue
        try:
            out.add(LineKind(name))
        except ValueError as e:
            valid = ", ".join(kind.value for kind in LineKind)
            raise ValueError(f"Unknown line kind '{k}'. Valid values: {valid}.") from e
    return out


def _route_line(
    parser: LineParser,
    line_no: int,
    line: str,
    *,
    allowed: set[LineKind] | None,
    metric: str | None,
    contains: str | None,
    include_raw: bool,
    skip_blank: bool,
) -> ParsedLine | None:
    """Parse one line and apply the filters; None when the line is filtered out."""
    line = line.rstrip("\r\n")
    if contains is not None and contains not in line:
        return None

    parsed = parser.parse(line_no, line)
    if parsed is None:
        parsed = ParsedLine(line_no=line_no, kind=LineKind.UNPARSED, raw=line)
    if parsed.kind is LineKind.UNPARSED:
        LOGGER.debug("Line %d did not match the exposition grammar", line_no)

    if skip_blank and parsed.kind is LineKind.BLANK:
        return None
    if allowed is not None and parsed.kind not in allowed:
        return None
    if metric is not None and parsed.name != metric:
        return None
    if not include_raw:
        parsed = replace(parsed, raw=None)
    return parsed


def iter_text_lines(
    lines: Iterable[str],
    *,
    parser: LineParser | None = None,
    kinds: Iterable[LineKind | str] | None = None,
    metric: str | None = None,
    contains: str | None = None,
    include_raw: bool = True,
    skip_blank: bool = True,
) -> Iterator[ParsedLine]:
    """Route already-decoded lines (e.g. stdin) with the same filters as iter_lines."""
    parser = parser or default_parser()
    allowed = parse_kinds(kinds)
    if allowed is not None and not allowed:
        return

    for line_no, line in enumerate(lines, start=1):
        parsed = _route_line(
            parser,
            line_no,
            line,
            allowed=allowed,
            metric=metric,
            contains=contains,
            include_raw=include_raw,
            skip_blank=skip_blank,
        )
        if parsed is not None:
            yield parsed


async def iter_lines(
    path: str | Path,
    *,
    parser: LineParser | None = None,
    kinds: Iterable[LineKind | str] | None = None,
    metric: str | None = None,
    contains: str | None = None,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
    include_raw: bool = True,
    skip_blank: bool = True,
) -> AsyncIterator[ParsedLine]:
    """Yield routed lines of an exposition file after filtering."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Exposition file not found: {path}")

    parser = parser or default_parser()
    allowed = parse_kinds(kinds)
    if allowed is not None and not allowed:
        return

    async with _open_text(path, encoding=encoding, decode_errors=decode_errors) as f:
        async for line_no, line in _enumerate_async(f, start=1):
            parsed = _route_line(
                parser,
                line_no,
                line,
                allowed=allowed,
                metric=metric,
                contains=contains,
                include_raw=include_raw,
                skip_blank=skip_blank,
            )
            if parsed is not None:
                yield parsed


async def get_lines(
    path: str | Path,
    **iter_kwargs,
) -> list[ParsedLine]:
    """Collect iter_lines into a list."""
    return [line async for line in iter_lines(path, **iter_kwargs)]


def summarize(lines: Iterable[ParsedLine]) -> dict[str, int]:
    """Count lines per kind; every kind is present, possibly with 0."""
    counts = {kind.value: 0 for kind in LineKind}
    for line in lines:
        counts[line.kind.value] += 1
    return counts


async def _enumerate_async(iterable, start: int = 0):
    """Async enumerate helper for async iterators."""
    index = start
    async for item in iterable:
        yield index, item
        index += 1
