"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Any

from prometheus_wire.core.exposition_service import iter_lines, parse_kinds
from prometheus_wire.core.parser import ExpositionLineParser, LineKind, ParsedLine
from prometheus_wire.core.schemas import ExpositionResponse, ParsedLineModel

DEFAULT_LIMIT = 500
DEFAULT_HARD_LIMIT = 5000
MAX_LINES_ENV = "PROMETHEUS_WIRE_MAX_LINES"


def _resolve_hard_limit() -> int:
    """Return the configured cap on returned lines."""
    env = os.getenv(MAX_LINES_ENV)
    if not env:
        return DEFAULT_HARD_LIMIT
    try:
        value = int(env)
    except ValueError as exc:
        raise ValueError(f"{MAX_LINES_ENV} must be an integer") from exc
    if value < 1:
        raise ValueError(f"{MAX_LINES_ENV} must be >= 1")
    return value


def parse_line_impl(line: str, *, line_no: int = 1) -> dict[str, Any]:
    """Implementation for the `parse_line` MCP tool."""
    parsed = ExpositionLineParser().parse(line_no, line)
    return ParsedLineModel.from_parsed(parsed).model_dump()


async def parse_exposition_impl(
    *,
    path: str,
    kinds: Sequence[str] | None = None,
    metric: str | None = None,
    contains: str | None = None,
    limit: int | None = None,
    include_raw: bool = False,
) -> dict[str, Any]:
    """Implementation for the `parse_exposition` MCP tool.

    Notes
    -----
    - kinds defaults to samples and comments; blank lines are never returned.
    - limit is capped by PROMETHEUS_WIRE_MAX_LINES (default 5000).
    - summary counts every line that passed the filters, including the ones
      cut by the limit.
    """
    hard_limit = _resolve_hard_limit()
    if limit is None:
        limit = DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    if limit > hard_limit:
        limit = hard_limit

    # Validate eagerly so a bad kind fails before the file is opened.
    kinds_eff = parse_kinds(kinds or ["sample", "comment"])

    counts = {kind.value: 0 for kind in LineKind}
    kept: list[ParsedLine] = []
    truncated = False
    async for parsed in iter_lines(
        path,
        kinds=kinds_eff,
        metric=metric,
        contains=contains,
        include_raw=include_raw,
    ):
        counts[parsed.kind.value] += 1
        if len(kept) < limit:
            kept.append(parsed)
        else:
            truncated = True

    response = ExpositionResponse(
        count=len(kept),
        summary=counts,
        truncated=truncated,
        lines=[ParsedLineModel.from_parsed(p, include_raw=include_raw) for p in kept],
    )
    return response.model_dump()
