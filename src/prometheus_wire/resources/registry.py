"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

import asyncio
import gzip
import os
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from prometheus_wire.core.schemas import ExpositionResponse, ParsedLineModel

ALLOWED_FILE_SUFFIXES = {".prom", ".txt", ".metrics"}
BASE_DIR_ENV = "PROMETHEUS_WIRE_BASE_DIR"
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "replace"

EXAMPLE_EXPOSITION = (
    "# HELP http_requests_total The total number of HTTP requests.\n"
    "# TYPE http_requests_total counter\n"
    'http_requests_total{method="post",code="200"} 1027 1395066363000\n'
    'http_requests_total{method="post",code="400"}    3 1395066363000\n'
    "\n"
    "# A normal comment is not HELP or TYPE.\n"
    'msdos_file_access_time_seconds{path="C:\\\\DIR\\\\FILE.TXT",error="Cannot find file:\\n\\"FILE.TXT\\""} 1.458255915e9\n'
    "\n"
    "# Minimalistic line:\n"
    "metric_without_timestamp_and_labels 12.47\n"
    'something_weird{problem="division by zero"} +Inf -3982045\n'
)


def _base_dir() -> Path:
    """Return the resolved base directory for file resources."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def _safe_resolve(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = _base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def _allowed_suffix(path: Path) -> str:
    """Return the effective suffix for allowlist checks (``.gz`` is looked through)."""
    suffix = path.suffix.lower()
    if suffix == ".gz":
        suffix = path.with_suffix("").suffix.lower()
    return suffix


def _resolve_resource_path(path: str) -> Path:
    """Resolve and validate a resource file path."""
    resolved = _safe_resolve(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"File not found: {resolved}")
    if _allowed_suffix(resolved) not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")
    return resolved


def _open_text(path: Path) -> str:
    if path.suffix.lower() == ".gz":
        with gzip.open(path, mode="rt", encoding=TEXT_ENCODING, errors=TEXT_ERRORS) as f:
            return f.read()
    return path.read_text(encoding=TEXT_ENCODING, errors=TEXT_ERRORS)


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://prometheus-wire/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        return (
            "Resources:\n"
            "- app://prometheus-wire/help\n"
            "- app://prometheus-wire/examples/exposition\n"
            "- app://prometheus-wire/schemas/parsed-line\n"
            "- app://prometheus-wire/schemas/exposition-response\n"
            f"- file://{{path}} (restricted to {BASE_DIR_ENV}; allowed: {allowed}, .gz)\n"
            f"\nBase directory: {_base_dir()}\n"
        )

    @mcp.resource("app://prometheus-wire/examples/exposition")
    def example_exposition() -> str:
        """Return a small exposition document for demos and tests."""
        return EXAMPLE_EXPOSITION

    @mcp.resource("app://prometheus-wire/schemas/parsed-line")
    def parsed_line_schema() -> dict[str, Any]:
        """Return the JSON schema of a single parsed line."""
        return ParsedLineModel.model_json_schema()

    @mcp.resource("app://prometheus-wire/schemas/exposition-response")
    def exposition_response_schema() -> dict[str, Any]:
        """Return the JSON schema of the parse_exposition response."""
        return ExpositionResponse.model_json_schema()

    @mcp.resource("file://{path}")
    async def read_file(path: str) -> str:
        """Read an exposition file from within PROMETHEUS_WIRE_BASE_DIR."""
        p = _resolve_resource_path(path)
        return await asyncio.to_thread(_open_text, p)
