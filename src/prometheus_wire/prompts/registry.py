"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def summarize_resource(uri: str) -> list[dict[str, Any]]:
        """Build a prompt that summarizes a resource URI."""
        return [
            {
                "role": "system",
                "content": (
                    "You are a precise assistant. Summarize the provided resource clearly and "
                    "concisely. Extract key points and anything that looks malformed."
                ),
            },
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": "Summarize this resource:"},
                    {"type": "resource", "uri": uri},
                ],
            },
        ]

    @mcp.prompt()
    def explain_metrics(path: str, metric: str | None = None) -> list[dict[str, Any]]:
        """Build a prompt that explains the metrics exposed in a file."""
        call_lines = [f"- path: {path}", '- kinds: ["sample", "comment"]']
        if metric is not None:
            call_lines.append(f"- metric: {metric}")
        call_lines.append("- include_raw: true")
        call_block = "\n".join(call_lines)
        return [
            {
                "role": "system",
                "content": (
                    "You are an observability assistant familiar with the Prometheus text "
                    "exposition format. Base every statement on parsed lines; do not invent "
                    "metrics, labels or values."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Explain the metrics in this file using parse_exposition. Follow this workflow:\n"
                    "- Call parse_exposition first with the parameters below.\n"
                    "- Use HELP comments for descriptions and TYPE comments for the metric type; "
                    "say 'undocumented' when a metric has neither.\n"
                    "- Values '+Inf', '-Inf' and 'NaN' are real sample values, not errors.\n"
                    "- If the summary reports unparsed lines, call parse_exposition again with "
                    'kinds ["unparsed"] and list them.\n\n'
                    "Call parse_exposition with:\n"
                    f"{call_block}\n\n"
                    "Return this structure:\n"
                    "1) Metrics (name, type, one-line description, label names)\n"
                    "2) Notable values (2-5 quoted lines with line_no)\n"
                    "3) Parsing problems (or 'none')\n"
                ),
            },
        ]
