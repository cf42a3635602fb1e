from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Iterable
from pathlib import Path

from prometheus_wire.core.exposition_service import get_lines, iter_text_lines, parse_kinds, summarize
from prometheus_wire.core.parser import LineKind, ParsedLine
from prometheus_wire.core.schemas import ParsedLineModel, format_value


def _parse_kinds_arg(s: str) -> list[LineKind]:
    try:
        kinds = parse_kinds(s.split(","))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    if not kinds:
        raise argparse.ArgumentTypeError("At least one kind must be provided")
    return sorted(kinds, key=lambda k: k.value)


def _format_labels(labels: dict[str, str]) -> str:
    if not labels:
        return ""
    inner = ",".join(f'{k}="{v}"' for k, v in labels.items())
    return "{" + inner + "}"


def _format_line(p: ParsedLine) -> str:
    if p.sample is not None:
        s = p.sample
        out = f"{p.line_no} SAMPLE {s.name}{_format_labels(dict(s.labels))} {format_value(s.value)}"
        if s.timestamp is not None:
            out += f" @{s.timestamp}"
        return out
    if p.comment is not None:
        c = p.comment
        return f"{p.line_no} {c.kind.value} {c.name} {c.text}".rstrip()
    return f"{p.line_no} {p.kind.value.upper()} {p.raw or ''}".rstrip()


def _read_stdin(args: argparse.Namespace) -> list[ParsedLine]:
    return list(
        iter_text_lines(
            sys.stdin,
            kinds=args.kinds,
            metric=args.metric,
            contains=args.contains,
            skip_blank=not args.keep_blank,
        )
    )


def _read_file(path: Path, args: argparse.Namespace) -> list[ParsedLine]:
    return asyncio.run(
        get_lines(
            path,
            kinds=args.kinds,
            metric=args.metric,
            contains=args.contains,
            encoding=args.encoding,
            skip_blank=not args.keep_blank,
        )
    )


def _print_lines(lines: Iterable[ParsedLine], *, as_json: bool) -> None:
    for p in lines:
        if as_json:
            print(json.dumps(ParsedLineModel.from_parsed(p).model_dump()))
        else:
            print(_format_line(p))


def main() -> None:
    p = argparse.ArgumentParser(description="Parse Prometheus text exposition lines.")
    p.add_argument("path", help="Exposition file (plain or .gz), or '-' for stdin")
    p.add_argument(
        "--kind",
        dest="kinds",
        type=_parse_kinds_arg,
        default=None,
        help="Comma-separated kinds to print (sample,comment,blank,unparsed). Default: all",
    )
    p.add_argument("--metric", default=None, help="Only lines for this exact metric name")
    p.add_argument("--contains", default=None, help="Substring filter on the raw line")
    p.add_argument("--encoding", default="utf-8")
    p.add_argument("--keep-blank", action="store_true", help="Report blank lines too")
    p.add_argument("--json", dest="as_json", action="store_true", help="One JSON object per line")
    p.add_argument("--summary", action="store_true", help="Print counts per kind at the end")

    args = p.parse_args()

    try:
        if args.path == "-":
            lines = _read_stdin(args)
        else:
            lines = _read_file(Path(args.path), args)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except (ValueError, LookupError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    _print_lines(lines, as_json=args.as_json)

    if args.summary:
        counts = summarize(lines)
        print("\n" + " ".join(f"{kind}={n}" for kind, n in counts.items()))


if __name__ == "__main__":
    main()
