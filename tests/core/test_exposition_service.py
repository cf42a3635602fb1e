from __future__ import annotations

import logging
from pathlib import Path

import pytest

from prometheus_wire.core.exposition_service import (
    get_lines,
    iter_lines,
    iter_text_lines,
    parse_kinds,
    summarize,
)
from prometheus_wire.core.parser import LineKind, SampleLineParser


@pytest.mark.asyncio
async def test_iter_lines_routes_every_line(tmp_path: Path, write_exposition) -> None:
    path = tmp_path / "metrics.prom"
    write_exposition(path)

    lines = [p async for p in iter_lines(path)]

    assert [p.line_no for p in lines] == [1, 2, 3, 4, 6, 7, 8, 9, 10]
    assert [p.kind for p in lines] == [
        LineKind.COMMENT,
        LineKind.COMMENT,
        LineKind.SAMPLE,
        LineKind.SAMPLE,
        LineKind.UNPARSED,
        LineKind.SAMPLE,
        LineKind.SAMPLE,
        LineKind.SAMPLE,
        LineKind.UNPARSED,
    ]
    assert lines[3].sample is not None
    assert lines[3].sample.value == 3.0
    assert lines[3].sample.labels.get_string("code") == "400"


@pytest.mark.asyncio
async def test_iter_lines_reads_gzip(tmp_path: Path, write_exposition) -> None:
    path = tmp_path / "metrics.prom.gz"
    write_exposition(path)

    lines = await get_lines(path, kinds=["sample"])

    assert len(lines) == 5
    assert lines[-1].sample is not None
    assert lines[-1].sample.timestamp == -3982045


@pytest.mark.asyncio
async def test_iter_lines_filters(tmp_path: Path, write_exposition) -> None:
    path = tmp_path / "metrics.prom"
    write_exposition(path)

    by_metric = await get_lines(path, metric="http_requests_total")
    assert [p.kind for p in by_metric] == [
        LineKind.COMMENT,
        LineKind.COMMENT,
        LineKind.SAMPLE,
        LineKind.SAMPLE,
    ]

    by_substring = await get_lines(path, contains='code="400"', include_raw=False)
    assert len(by_substring) == 1
    assert by_substring[0].line_no == 4
    assert by_substring[0].raw is None

    with_blank = await get_lines(path, kinds=[LineKind.BLANK], skip_blank=False)
    assert [p.line_no for p in with_blank] == [5]


@pytest.mark.asyncio
async def test_iter_lines_custom_parser(tmp_path: Path, write_exposition) -> None:
    path = tmp_path / "metrics.prom"
    write_exposition(path)

    lines = await get_lines(path, parser=SampleLineParser(), kinds=["unparsed"])

    # Without comment routing every comment line is unparsed.
    assert [p.line_no for p in lines] == [1, 2, 5, 6, 10]


@pytest.mark.asyncio
async def test_iter_lines_logs_unparsed(tmp_path: Path, write_exposition, caplog) -> None:
    path = tmp_path / "metrics.prom"
    write_exposition(path)

    with caplog.at_level(logging.DEBUG, logger="prometheus_wire.core.exposition_service"):
        await get_lines(path)

    assert "Line 10 did not match" in caplog.text


@pytest.mark.asyncio
async def test_iter_lines_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        _ = [p async for p in iter_lines(tmp_path / "missing.prom")]


@pytest.mark.asyncio
async def test_iter_lines_unknown_kind_raises(tmp_path: Path, write_exposition) -> None:
    path = tmp_path / "metrics.prom"
    write_exposition(path)

    with pytest.raises(ValueError):
        await get_lines(path, kinds=["histogram"])


def test_iter_text_lines_and_summarize(exposition_lines) -> None:
    lines = list(iter_text_lines(line + "\n" for line in exposition_lines))

    assert summarize(lines) == {"sample": 5, "comment": 2, "blank": 0, "unparsed": 2}
    assert lines[0].raw == exposition_lines[0]


def test_parse_kinds() -> None:
    assert parse_kinds(None) is None
    assert parse_kinds([" Sample ", "", LineKind.COMMENT]) == {LineKind.SAMPLE, LineKind.COMMENT}
    with pytest.raises(ValueError):
        parse_kinds(["nope"])
