#!/usr/bin/env python3
"""Quick perf benchmark for COSY parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from cosypy.parser import parse_result


def _collect_files(root: Path) -> list[Path]:
    return sorted(path for path in root.rglob("*.cosy") if path.is_file())


def _run_once(
    files: list[Path],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_errors = 0
    iterator = tqdm(files, desc=label, unit="file") if show_progress else files
    for path in iterator:
        parsed = parse_result(path.read_text(encoding="utf-8"), source=str(path))
        total_errors += len(parsed.diagnostics)
    duration = time.perf_counter() - start
    return duration, len(files), total_errors


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark COSY parsing throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for .cosy files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument("--profile", action="store_true", help="Run cProfile and print top hotspots")
    parser.add_argument("--profile-top", type=int, default=30, help="Number of cProfile rows to print")
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_files(root)
    if not files:
        raise SystemExit(f"No .cosy files found under {root}")

    show_progress = not args.no_progress
    warmups = max(args.warmups, 0)
    runs = max(args.runs, 1)

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(warmups):
            _run_once(files, label=f"warmup {warmup_idx + 1}/{warmups}", show_progress=show_progress)

        timings: list[float] = []
        files_count = 0
        errors_count = 0
        for run_idx in range(runs):
            duration, files_count, errors_count = _run_once(
                files,
                label=f"run {run_idx + 1}/{runs}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, files_count, errors_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, files_count, errors_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        pstats.Stats(profiler, stream=stream).sort_stats("tottime").print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, files_count, errors_count = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {root}")
    print(f"Files: {files_count}")
    print(f"Files with errors: {errors_count}")
    print(f"Runs: {len(timings)} (warmups={warmups})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {files_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
