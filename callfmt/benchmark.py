"""Compile and render throughput benchmark."""

from __future__ import annotations

import csv
import json
import logging
import statistics
import sys
import time
from dataclasses import asdict, dataclass

from callfmt.registry import FormatterRegistry
from callfmt.template_engine import compile_template

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Timings for one benchmark configuration, in seconds."""

    placeholders: int
    iterations: int
    pieces: int
    compile_mean_s: float
    compile_min_s: float
    compile_median_s: float
    render_mean_s: float
    render_min_s: float
    render_median_s: float
    output_ok: bool


def _underscore(data: str) -> str:
    return f"_{data}_"


def build_workload(placeholders: int) -> tuple[FormatterRegistry[str], str]:
    """Return a registry of numbered placeholders and a template using each once."""
    if placeholders < 1:
        raise ValueError(f"placeholders must be >= 1, got {placeholders}")
    registry: FormatterRegistry[str] = FormatterRegistry.build_from(
        (str(i), _underscore) for i in range(1, placeholders + 1)
    )
    template = "".join(f"{{{i}}}" for i in range(1, placeholders + 1))
    return registry, template


def _timed(fn, *args) -> tuple[float, object]:
    start = time.perf_counter()
    value = fn(*args)
    return time.perf_counter() - start, value


def run_benchmark(
    placeholders: int = 1000,
    iterations: int = 20,
    context: str = "data",
) -> BenchmarkResult:
    """Time compile_template and render over ``iterations`` runs each."""
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")
    registry, template = build_workload(placeholders)
    expected = _underscore(context) * placeholders

    compile_times = []
    compiled = None
    for _ in range(iterations):
        elapsed, compiled = _timed(compile_template, template, registry)
        compile_times.append(elapsed)

    render_times = []
    output_ok = True
    for _ in range(iterations):
        elapsed, output = _timed(compiled.render, context)
        render_times.append(elapsed)
        output_ok = output_ok and output == expected

    if not output_ok:
        logger.warning("Rendered output did not match the expected string")

    return BenchmarkResult(
        placeholders=placeholders,
        iterations=iterations,
        pieces=len(compiled),
        compile_mean_s=statistics.mean(compile_times),
        compile_min_s=min(compile_times),
        compile_median_s=statistics.median(compile_times),
        render_mean_s=statistics.mean(render_times),
        render_min_s=min(render_times),
        render_median_s=statistics.median(render_times),
        output_ok=output_ok,
    )


def _fmt_ms(seconds: float) -> str:
    return f"{seconds * 1000:.3f}ms"


def print_summary(results: list[BenchmarkResult], output: str = "table") -> None:
    """Print results in the requested format."""
    if not results:
        print("No results to display.")
        return
    if output == "json":
        print(json.dumps([asdict(r) for r in results], indent=2))
    elif output == "csv":
        _print_csv(results)
    else:
        _print_table(results)


def _print_table(results: list[BenchmarkResult]) -> None:
    from rich.console import Console
    from rich.table import Table

    table = Table(title="Template Benchmark Results")
    table.add_column("Placeholders", justify="right")
    table.add_column("Pieces", justify="right")
    table.add_column("Iterations", justify="right")
    table.add_column("Compile (mean)")
    table.add_column("Compile (min)")
    table.add_column("Render (mean)")
    table.add_column("Render (min)")
    table.add_column("Output")

    for r in results:
        table.add_row(
            str(r.placeholders),
            str(r.pieces),
            str(r.iterations),
            _fmt_ms(r.compile_mean_s),
            _fmt_ms(r.compile_min_s),
            _fmt_ms(r.render_mean_s),
            _fmt_ms(r.render_min_s),
            "[green]ok[/green]" if r.output_ok else "[red]mismatch[/red]",
        )
    Console().print(table)


def _print_csv(results: list[BenchmarkResult]) -> None:
    fieldnames = list(asdict(results[0]).keys())
    writer = csv.DictWriter(sys.stdout, fieldnames=fieldnames)
    writer.writeheader()
    for r in results:
        writer.writerow(asdict(r))
