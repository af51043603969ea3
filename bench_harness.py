#!/usr/bin/env python3
"""
Time-boxed benchmark sampling.

A workload is called repeatedly for up to `total_seconds`. The run is cut
into sampling windows (1 s by default); each window that measured a
non-zero duration contributes one throughput sample. The report carries
min/avg/max over the samples plus the overall throughput of the whole run.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

SAMPLE_WINDOW_SECONDS = 1.0


@dataclass(frozen=True)
class HarnessStats:
    """Raw outcome of one run_benchmark call."""

    iterations: int
    minimum: float
    average: float
    maximum: float
    overall: float
    elapsed: float
    samples: Tuple[float, ...]


@dataclass(frozen=True)
class BenchmarkResult:
    """Throughput figures of one workload plus its metadata lines."""

    name: str
    unit: str
    iterations: int
    average: float
    minimum: float
    maximum: float
    overall: float
    details: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def from_stats(
        cls,
        name: str,
        unit: str,
        stats: HarnessStats,
        details: Sequence[Tuple[str, object]] = (),
    ) -> "BenchmarkResult":
        return cls(
            name=name,
            unit=unit,
            iterations=stats.iterations,
            average=stats.average,
            minimum=stats.minimum,
            maximum=stats.maximum,
            overall=stats.overall,
            details=tuple((label, str(value)) for label, value in details),
        )

    def report(self) -> str:
        lines = [
            f"Iterations: {self.iterations}",
            f"{self.unit} avg: {self.average:.2f}",
            f"{self.unit} min: {self.minimum:.2f}",
            f"{self.unit} max: {self.maximum:.2f}",
            f"{self.unit} overall: {self.overall:.2f}",
        ]
        lines.extend(f"{label}: {value}" for label, value in self.details)
        return "\n".join(lines)


def stats(samples: Sequence[float]) -> Tuple[float, float, float]:
    """(min, avg, max) of the samples; all zero when there are none."""
    if not samples:
        return 0.0, 0.0, 0.0
    return min(samples), sum(samples) / len(samples), max(samples)


def run_benchmark(
    workload: Callable[[], object],
    total_seconds: float,
    sample_window_seconds: float = SAMPLE_WINDOW_SECONDS,
    work_per_unit: float = 1.0,
    unit_scale: float = 1.0,
    clock: Callable[[], float] = time.perf_counter,
) -> HarnessStats:
    """
    Run `workload` repeatedly for up to `total_seconds` and sample throughput.

    Both deadlines (window and total) are checked before every call, so a
    window closes early once the total budget is spent. A unit of work is
    never interrupted.

    Args:
        workload: Zero-argument callable performing one unit of work.
        total_seconds: Time budget of the whole run; 0 runs nothing.
        sample_window_seconds: Length of one sampling window.
        work_per_unit: Work done by one call (e.g. FLOPs); 1 counts calls.
        unit_scale: Multiplier applied to every throughput (1e-9 for "giga").
        clock: Monotonic clock in seconds.

    Returns:
        HarnessStats with per-window min/avg/max and overall throughput.
    """
    if total_seconds < 0:
        raise ValueError(f"total_seconds must be non-negative, got {total_seconds}")
    if sample_window_seconds <= 0:
        raise ValueError(
            f"sample_window_seconds must be positive, got {sample_window_seconds}"
        )

    samples: List[float] = []
    iterations = 0
    start = clock()

    while clock() - start < total_seconds:
        window_start = clock()
        window_iterations = 0
        while True:
            now = clock()
            if now - window_start >= sample_window_seconds or now - start >= total_seconds:
                break
            workload()
            window_iterations += 1
            iterations += 1

        window_elapsed = clock() - window_start
        # A window the clock could not resolve yields no sample
        if window_elapsed > 0.0:
            samples.append(window_iterations * work_per_unit / window_elapsed * unit_scale)

    elapsed = clock() - start
    overall = iterations * work_per_unit / elapsed * unit_scale if elapsed > 0.0 else 0.0
    minimum, average, maximum = stats(samples)

    return HarnessStats(
        iterations=iterations,
        minimum=minimum,
        average=average,
        maximum=maximum,
        overall=overall,
        elapsed=elapsed,
        samples=tuple(samples),
    )
