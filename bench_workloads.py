#!/usr/bin/env python3
"""
CPU micro-benchmarks run under bench_harness.run_benchmark.

- matmul : dense n×n double-precision multiply, reported in GFLOP/s
- bigint : ~4096-digit multiply-accumulate, reported in multiplies/sec
- sieve  : prime count below 2,000,000, reported in sieves/sec
"""

from __future__ import annotations

import time
from typing import Callable, List, Tuple, Type, Union

from bench_harness import SAMPLE_WINDOW_SECONDS, BenchmarkResult, run_benchmark
from prime_sieve import count_primes_below
from scaled_int import ScaledInt, get_backend, to_decimal

MATMUL_SIZE = 128
BIGINT_DIGITS = 4096
BIGINT_BACKEND = "gmpy2"
SIEVE_LIMIT = 2_000_000

Clock = Callable[[], float]


# =========================
# Matrix multiply
# =========================


def make_matrices(n: int) -> Tuple[List[float], List[float], List[float]]:
    """Row-major A (1.001), B (0.999) and zeroed C, each n*n."""
    return [1.001] * (n * n), [0.999] * (n * n), [0.0] * (n * n)


def matmul_step(a: List[float], b: List[float], c: List[float], n: int) -> None:
    """
    One unit of the matmul workload: C += A·B in ikj order.

    Afterwards a[0] is fed back from c[0] so every pass depends on the
    previous one.
    """
    for i in range(n):
        row = i * n
        for k in range(n):
            aik = a[row + k]
            col = k * n
            for j in range(n):
                c[row + j] += aik * b[col + j]
    a[0] = c[0] / 3.14159


def run_matmul(
    seconds: float,
    size: int = MATMUL_SIZE,
    sample_window: float = SAMPLE_WINDOW_SECONDS,
    clock: Clock = time.perf_counter,
) -> BenchmarkResult:
    a, b, c = make_matrices(size)
    stats = run_benchmark(
        lambda: matmul_step(a, b, c, size),
        seconds,
        sample_window,
        work_per_unit=2.0 * float(size) ** 3,
        unit_scale=1.0e-9,
        clock=clock,
    )
    return BenchmarkResult.from_stats(
        "matmul", "GFLOP/s", stats, [("Size", f"{size}x{size}")]
    )


def bench_matmul(seconds: float) -> str:
    return run_matmul(seconds).report()


# =========================
# Big-integer multiply
# =========================


def make_bigint_operands(
    digits: int = BIGINT_DIGITS, backend: Union[str, Type] = BIGINT_BACKEND
) -> Tuple[ScaledInt, ScaledInt]:
    """Operands 1777...7 and 1333...3, each with `digits` + 1 decimal digits."""
    int_type = get_backend(backend)
    a = int_type(1)
    b = int_type(1)
    for _ in range(digits):
        a = a * 10 + 7
        b = b * 10 + 3
    return a, b


class _MultiplyAccumulate:
    """acc = a·b + acc, one multiply per call."""

    def __init__(self, a: ScaledInt, b: ScaledInt) -> None:
        self.a = a
        self.b = b
        self.acc = type(a)(1)

    def __call__(self) -> None:
        self.acc = self.a * self.b + self.acc


def run_bigint(
    seconds: float,
    digits: int = BIGINT_DIGITS,
    backend: Union[str, Type] = BIGINT_BACKEND,
    sample_window: float = SAMPLE_WINDOW_SECONDS,
    clock: Clock = time.perf_counter,
) -> BenchmarkResult:
    a, b = make_bigint_operands(digits, backend)
    step = _MultiplyAccumulate(a, b)
    stats = run_benchmark(step, seconds, sample_window, clock=clock)
    return BenchmarkResult.from_stats(
        "bigint", "Multiplies/sec", stats, [("Digits", len(to_decimal(step.acc)))]
    )


def bench_bigint(seconds: float) -> str:
    return run_bigint(seconds).report()


# =========================
# Prime sieve
# =========================


def run_sieve(
    seconds: float,
    limit: int = SIEVE_LIMIT,
    sample_window: float = SAMPLE_WINDOW_SECONDS,
    clock: Clock = time.perf_counter,
) -> BenchmarkResult:
    last_count = 0

    def step() -> None:
        nonlocal last_count
        last_count = count_primes_below(limit)

    stats = run_benchmark(step, seconds, sample_window, clock=clock)
    return BenchmarkResult.from_stats(
        "sieve", "Sieves/sec", stats, [("Limit", limit), ("Primes", last_count)]
    )


def bench_sieve(seconds: float) -> str:
    return run_sieve(seconds).report()


BENCHMARKS = {
    "bench-matmul": bench_matmul,
    "bench-bigint": bench_bigint,
    "bench-sieve": bench_sieve,
}
