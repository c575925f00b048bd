#!/usr/bin/env python3
"""Time scan+parse over every *.lox file under a directory.

    python scripts/time_parse.py examples/ --runs 3
    python scripts/time_parse.py examples/ --profile
"""

from __future__ import annotations

import argparse
import cProfile
from pathlib import Path
import pstats
import time

from tqdm import tqdm

from loxpy.parser import parse


def _parse_all(sources: list[str], label: str) -> tuple[float, int]:
    start = time.perf_counter()
    tokens = 0
    for text in tqdm(sources, desc=label, unit="file", leave=False):
        tokens += len(parse(text).tokens)
    return time.perf_counter() - start, tokens


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark Lox scan+parse throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for *.lox files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs (default: 5)")
    parser.add_argument("--profile", action="store_true", help="Print the top cProfile entries")
    args = parser.parse_args()

    # sources are read once so the timings cover scanning and parsing only
    sources = [path.read_text(encoding="utf-8") for path in sorted(args.root.rglob("*.lox"))]
    if not sources:
        raise SystemExit(f"No .lox files found under {args.root}")

    profiler = cProfile.Profile() if args.profile else None
    if profiler is not None:
        profiler.enable()
    results = [_parse_all(sources, f"run {i + 1}/{args.runs}") for i in range(max(args.runs, 1))]
    if profiler is not None:
        profiler.disable()
        pstats.Stats(profiler).sort_stats("tottime").print_stats(20)

    timings = [duration for duration, _ in results]
    tokens = results[0][1]
    best = min(timings)
    print(f"Files: {len(sources)}  Tokens: {tokens}")
    print(f"Best: {best:.4f}s  Worst: {max(timings):.4f}s  Tokens/s (best): {tokens / best:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
