"""CLI entry point: python -m callfmt render|bench ..."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional

import yaml

from callfmt.errors import CompileError, MissingValue
from callfmt.registry import FormatterRegistry
from callfmt.syntax import DEFAULT_SYNTAX, load_syntax
from callfmt.template_engine import compile_template

logger = logging.getLogger(__name__)


def _field_getter(key: str):
    def _get(record: dict[str, Any]) -> Optional[str]:
        value = record.get(key)
        if value is None:
            return None
        return value if isinstance(value, str) else json.dumps(value)

    return _get


def load_records(path: str) -> list[dict[str, Any]]:
    """Read one JSON object per non-blank line."""
    records = []
    with open(path) as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            record = json.loads(line)
            if not isinstance(record, dict):
                raise ValueError(
                    f"{path}:{lineno}: expected a JSON object, got {type(record).__name__}"
                )
            records.append(record)
    return records


def build_record_registry(records: list[dict[str, Any]]) -> FormatterRegistry[dict[str, Any]]:
    """One placeholder per top-level key seen in any record."""
    keys: dict[str, None] = {}
    for record in records:
        keys.update(dict.fromkeys(record))
    return FormatterRegistry.build_from((key, _field_getter(key)) for key in keys)


def cmd_render(args: argparse.Namespace) -> None:
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
    from rich.text import Text

    try:
        syntax = load_syntax(args.syntax) if args.syntax else DEFAULT_SYNTAX
        records = load_records(args.records)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    registry = build_record_registry(records)
    try:
        compiled = compile_template(args.template, registry, syntax)
    except CompileError as exc:
        print(f"Error: invalid template: {exc}", file=sys.stderr)
        sys.exit(1)

    table = Table(show_header=True, header_style="bold", expand=True)
    table.add_column("Record", justify="right")
    table.add_column("Output")

    failed = 0
    for index, record in enumerate(records, start=1):
        try:
            output = compiled.render(record)
        except MissingValue as exc:
            failed += 1
            logger.debug("Record %d skipped: %s", index, exc)
            table.add_row(str(index), f"[bold red]skipped: {escape(str(exc))}[/bold red]")
            continue
        table.add_row(str(index), Text(output))

    console = Console()
    console.print(table)
    console.print(f"\n{len(records) - failed} rendered, {failed} skipped")
    if failed:
        sys.exit(1)


def cmd_bench(args: argparse.Namespace) -> None:
    from callfmt.benchmark import print_summary, run_benchmark

    results = []
    for count in args.placeholders:
        try:
            results.append(run_benchmark(placeholders=count, iterations=args.iterations))
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)
    print_summary(results, output=args.output)


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="callfmt",
        description="Compile-once, render-many placeholder templates",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # -- render --
    p_render = subparsers.add_parser("render", help="Render a template against JSON-lines records")
    p_render.add_argument("--template", required=True, help="Template string (e.g. '{artist} - {title}')")
    p_render.add_argument("--records", required=True,
                          help="Path to a file with one JSON object per line")
    p_render.add_argument("--syntax", default=None,
                          help="Path to YAML file with open_marker/close_marker")
    p_render.set_defaults(func=cmd_render)

    # -- bench --
    p_bench = subparsers.add_parser("bench", help="Measure compile and render time")
    p_bench.add_argument("--placeholders", type=int, nargs="+", default=[1000],
                         help="Placeholder counts to benchmark (default: 1000)")
    p_bench.add_argument("--iterations", type=int, default=20)
    p_bench.add_argument("--output", default="table", choices=["table", "json", "csv"])
    p_bench.set_defaults(func=cmd_bench)

    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    args.func(args)


if __name__ == "__main__":
    main()
