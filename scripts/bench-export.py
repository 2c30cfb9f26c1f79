#!/usr/bin/env python3
"""Benchmark symbol filtering and icon set export.

Measures compute_sections() over the bundled catalogs for a handful of
filters, then times a full export of each built-in icon set with one
and several workers. Prints a markdown report.

Usage:
    python3 scripts/bench-export.py [RUNS]
    # Default: 20 runs
"""

import math
import sys
import tempfile
import time

from symbolic.export.icon import Icon
from symbolic.export.models import ICON_SETS
from symbolic.export.pipeline import IconExportPipeline
from symbolic.search.catalog import default_catalogs
from symbolic.search.pipeline import compute_sections

RUNS = int(sys.argv[1]) if len(sys.argv) > 1 else 20
FILTERS = ["", "h", "home", "arrow", "zzz"]
WORKERS = [1, 4]


def stats(values):
    """Compute min, max, avg, median, p95, stddev from a list of floats."""
    s = sorted(values)
    n = len(s)
    avg = sum(s) / n
    variance = sum((x - avg) ** 2 for x in s) / n
    return {
        "min": s[0],
        "max": s[-1],
        "avg": avg,
        "median": s[n // 2] if n % 2 else (s[n // 2 - 1] + s[n // 2]) / 2,
        "p95": s[min(n - 1, int(n * 0.95))],
        "stddev": math.sqrt(variance),
    }


def timed(fn, runs):
    """Run fn repeatedly, return timings in milliseconds."""
    times = []
    for _ in range(runs):
        t0 = time.perf_counter()
        fn()
        times.append((time.perf_counter() - t0) * 1000)
    return times


def bench_search(runs):
    catalogs = default_catalogs()
    print("## Symbol filtering")
    print()
    print("| Filter | Sections | Median (ms) | p95 (ms) |")
    print("|--------|----------|-------------|----------|")
    for text in FILTERS:
        sections = compute_sections(catalogs, text)
        s = stats(timed(lambda: compute_sections(catalogs, text), runs))
        print(f"| `{text or '(empty)'}` | {len(sections)} | {s['median']:.3f} | {s['p95']:.3f} |")
    print()


def bench_export(runs):
    icon = Icon(name="Bench", glyph="")
    print("## Icon set export")
    print()
    print("| Icon set | Workers | Median (ms) | Max (ms) |")
    print("|----------|---------|-------------|----------|")
    with tempfile.TemporaryDirectory() as directory:
        for icon_set in ICON_SETS:
            for workers in WORKERS:
                pipeline = IconExportPipeline(max_workers=workers, directory=directory)
                s = stats(timed(lambda: pipeline.export(icon, icon_set), max(1, runs // 4)))
                print(f"| {icon_set.name} | {workers} | {s['median']:.1f} | {s['max']:.1f} |")
    print()


if __name__ == "__main__":
    print(f"# Symbolic benchmark ({RUNS} runs)")
    print()
    bench_search(RUNS)
    bench_export(RUNS)
