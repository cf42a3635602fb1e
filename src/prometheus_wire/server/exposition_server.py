"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: parse a single line, parse an exposition file line by line
- Resources: help, an example exposition, response schema, file contents
- Prompts: reusable conversation templates that clients can invoke

Run locally (stdio):
    python -m prometheus_wire.server.exposition_server
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from prometheus_wire.prompts.registry import register_prompts
from prometheus_wire.resources.registry import register_resources
from prometheus_wire.tools.parse import parse_exposition_impl, parse_line_impl

LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "PROMETHEUS_WIRE_LOG_LEVEL"


def _configure_logging() -> None:
    """Configure logging on stderr; stdout is reserved for the stdio transport."""
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("prometheus-wire", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
def parse_line(line: str) -> dict[str, Any]:
    """Parse one exposition line.

    Lines starting with '#' are read as HELP/TYPE comments, all others as
    samples. Returns {"line_no", "kind", "sample", "comment", "raw"} where
    kind is one of sample, comment, blank, unparsed.
    """
    return parse_line_impl(line)


@mcp.tool()
async def parse_exposition(
    path: str,
    kinds: Sequence[str] | None = None,
    metric: str | None = None,
    contains: str | None = None,
    limit: int | None = None,
    include_raw: bool = False,
) -> dict[str, Any]:
    """Parse every line of a local exposition file (plain text or .gz).

    Parameters
    ----------
    path:
        Path to a local file in the text exposition format.
    kinds:
        Line kinds to return: sample, comment, unparsed. Default: sample, comment.
    metric:
        Only lines whose metric name equals this value.
    contains:
        Substring filter applied to the raw line.
    limit:
        Maximum number of lines returned (hard-capped in the implementation).
    include_raw:
        Whether to include the original line in each result.

    Returns
    -------
    dict:
        {"count": int, "summary": dict, "truncated": bool, "lines": list[dict]}
    """
    return await parse_exposition_impl(
        path=path,
        kinds=kinds,
        metric=metric,
        contains=contains,
        limit=limit,
        include_raw=include_raw,
    )


def main() -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
