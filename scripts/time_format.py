#!/usr/bin/env python3
"""Quick perf benchmark for formatting and migration scanning."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from supersql.format import format_document
from supersql.migrate import scan_migrations


def _collect_query_files(root: Path, pattern: str) -> list[Path]:
    return [path for path in sorted(root.rglob(pattern)) if path.is_file()]


def _run_once(
    sources: list[str],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_bytes = 0
    total_findings = 0
    iterator = tqdm(sources, desc=label, unit="file") if show_progress else sources
    for text in iterator:
        total_bytes += len(format_document(text).encode("utf-8"))
        total_findings += len(scan_migrations(text))
    duration = time.perf_counter() - start
    return duration, total_bytes, total_findings


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark SuperSQL formatting and migration scanning")
    parser.add_argument("root", type=Path, help="Directory searched recursively for query files")
    parser.add_argument("--glob", default="*.spq", help="File pattern (default: *.spq)")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument("--profile-top", type=int, default=30, help="Number of cProfile rows to print")
    parser.add_argument("--profile-sort", type=str, default="tottime", help="cProfile sort key")
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")
    files = _collect_query_files(root, args.glob)
    if not files:
        raise SystemExit(f"No {args.glob} files found under {root}")
    sources = [path.read_text(encoding="utf-8") for path in files]
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(sources, label=f"warmup {warmup_idx + 1}", show_progress=show_progress)
        timings: list[float] = []
        formatted_bytes = 0
        findings = 0
        for run_idx in range(max(args.runs, 1)):
            duration, formatted_bytes, findings = _run_once(
                sources,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, formatted_bytes, findings

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, formatted_bytes, findings = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        pstats.Stats(profiler, stream=stream).sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, formatted_bytes, findings = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {root} ({len(files)} files)")
    print(f"Formatted bytes: {formatted_bytes}")
    print(f"Migration findings: {findings}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {len(files) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
