from __future__ import annotations

import gzip
from collections.abc import Callable
from pathlib import Path

import pytest

EXPOSITION_LINES = [
    "# HELP http_requests_total The total number of HTTP requests.",
    "# TYPE http_requests_total counter",
    'http_requests_total{method="post",code="200"} 1027 1395066363000',
    'http_requests_total{method="post",code="400"}    3 1395066363000',
    "",
    "# A normal comment.",
    'msdos_file_access_time_seconds{path="C:\\\\DIR\\\\FILE.TXT",error="Cannot find file:\\n\\"FILE.TXT\\""} 1.458255915e9',
    "metric_without_timestamp_and_labels 12.47",
    'something_weird{problem="division by zero"} +Inf -3982045',
    'broken{a="1",} 5',
]


@pytest.fixture
def exposition_lines() -> list[str]:
    return list(EXPOSITION_LINES)


@pytest.fixture
def write_exposition() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        text = "\n".join(EXPOSITION_LINES) + "\n"
        if path.suffix == ".gz":
            with gzip.open(path, mode="wt", encoding="utf-8") as f:
                f.write(text)
        else:
            path.write_text(text, encoding="utf-8")

    return _write
