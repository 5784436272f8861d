#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
import statistics
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "python"))

from chainproxy import link  # noqa: E402


class _Point:
    def __init__(self) -> None:
        self.x = 0
        self.y = 0

    def set_x(self, value: int) -> None:
        self.x = value

    def set_y(self, value: int) -> None:
        self.y = value

    def total(self) -> int:
        return self.x + self.y


def _percentile(sorted_values: list[float], percentile: float) -> float:
    if not sorted_values:
        raise ValueError("no values to summarize")
    if percentile <= 0.0:
        return sorted_values[0]
    if percentile >= 1.0:
        return sorted_values[-1]
    index = (len(sorted_values) - 1) * percentile
    low = int(math.floor(index))
    high = int(math.ceil(index))
    if low == high:
        return sorted_values[low]
    weight = index - low
    return sorted_values[low] + (sorted_values[high] - sorted_values[low]) * weight


def _direct(point: _Point) -> int:
    point.set_x(1)
    point.set_y(2)
    return point.total()


def _chained(point: _Point) -> int:
    return link(point).set_x(1).set_y(2).total()


_SCENARIOS = {
    "direct": _direct,
    "chained": _chained,
}


def _run_once(func, calls: int) -> float:
    point = _Point()
    start = time.perf_counter()
    for _ in range(calls):
        func(point)
    end = time.perf_counter()
    return (end - start) * 1_000_000.0 / calls


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Benchmark chained calls through a proxy against direct calls.",
    )
    parser.add_argument("--iterations", type=int, default=30)
    parser.add_argument("--warmup", type=int, default=5)
    parser.add_argument(
        "--calls",
        type=int,
        default=10_000,
        help="Chain expressions evaluated per sample.",
    )
    parser.add_argument(
        "scenario",
        nargs="*",
        help=f"Scenarios to run ({', '.join(_SCENARIOS)}); default: all.",
    )
    args = parser.parse_args(argv)

    if args.iterations <= 0:
        parser.error("--iterations must be positive")
    if args.warmup < 0:
        parser.error("--warmup cannot be negative")
    if args.calls <= 0:
        parser.error("--calls must be positive")

    names = args.scenario or list(_SCENARIOS)
    unknown = [name for name in names if name not in _SCENARIOS]
    if unknown:
        parser.error(f"unknown scenario: {unknown[0]}")
    for name in names:
        func = _SCENARIOS[name]
        for _ in range(args.warmup):
            _run_once(func, args.calls)

        samples: list[float] = []
        for _ in range(args.iterations):
            samples.append(_run_once(func, args.calls))

        samples.sort()
        print(f"scenario: {name}")
        print(f"warmup: {args.warmup} iterations: {args.iterations} calls: {args.calls}")
        print(f"mean: {statistics.fmean(samples):.3f} us")
        print(f"median: {statistics.median(samples):.3f} us")
        print(f"p95: {_percentile(samples, 0.95):.3f} us")
        print(f"stdev: {statistics.pstdev(samples):.3f} us")
        print(f"min: {samples[0]:.3f} us")
        print(f"max: {samples[-1]:.3f} us")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
