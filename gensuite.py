#!/usr/bin/env python3
"""
gensuite: π digits, prime lists and CPU micro-benchmarks from the command line.

Usage:
  gensuite pi [digits] [--backend int|gmpy2] [--time]
  gensuite primes [count] [--group N] [--time]
  gensuite bench-matmul [seconds]
  gensuite bench-bigint [seconds] [--backend int|gmpy2]
  gensuite bench-sieve [seconds]
  gensuite bench [seconds]          (all three benchmarks in turn)
"""

from __future__ import annotations

import sys
import time
from typing import List, Optional

from bench_workloads import BENCHMARKS, run_bigint
from pi_machin import compute_pi
from prime_sieve import format_prime_groups, generate_primes

DEFAULT_DIGITS = 50
DEFAULT_PRIME_COUNT = 15
DEFAULT_BENCH_SECONDS = 60

COMMAND_DEFAULTS = {
    "pi": DEFAULT_DIGITS,
    "primes": DEFAULT_PRIME_COUNT,
    "bench-matmul": DEFAULT_BENCH_SECONDS,
    "bench-bigint": DEFAULT_BENCH_SECONDS,
    "bench-sieve": DEFAULT_BENCH_SECONDS,
    "bench": DEFAULT_BENCH_SECONDS,
}

USAGE = (
    "usage: gensuite [pi <digits>|primes <count>|bench-matmul <sec>|"
    "bench-bigint <sec>|bench-sieve <sec>|bench <sec>] "
    "[--backend int|gmpy2] [--group N] [--time]\n"
)

SUFFIXES = {
    "k": 1_000,
    "m": 1_000_000,
    "g": 1_000_000_000,
    "t": 1_000_000_000_000,
}


# =========================
# Argument parsing
# =========================


def parse_count_spec(spec: str) -> int:
    """
    Parse a count specification like:
      "0", "123", "1K", "10M", "2g", "1e6", "3E7"

    Suffixes (case-insensitive): K, M, G, T for 10^3, 10^6, 10^9, 10^12.
    Scientific notation: "<int>e<int>", e.g. "1e6".

    Returns: the count as a non-negative int.
    Raises ValueError on invalid input.
    """
    s = spec.strip()
    if not s:
        raise ValueError("Empty count specification")

    # 1) Scientific notation: "<int>e<int>" or "<int>E<int>"
    if "e" in s.lower():
        mantissa_str, _, exp_str = s.lower().partition("e")
        if not mantissa_str or not exp_str:
            raise ValueError(f"Invalid scientific notation: {spec!r}")
        exp = int(exp_str)
        if exp < 0:
            raise ValueError(f"Negative exponent not supported in {spec!r}")
        value = int(mantissa_str) * 10**exp
    else:
        # 2) Suffix-based notation: K, M, G, T
        multiplier = SUFFIXES.get(s[-1].lower(), 1)
        if multiplier != 1:
            s = s[:-1].strip()
            if not s:
                raise ValueError(f"Missing number before suffix in {spec!r}")
        value = int(s) * multiplier

    if value < 0:
        raise ValueError(f"Count must be non-negative: {spec!r}")
    return value


class Options:
    """Parsed command line."""

    def __init__(self) -> None:
        self.command: Optional[str] = None
        self.value: Optional[int] = None
        self.backend: Optional[str] = None
        self.group: Optional[int] = None
        self.timed = False


def parse_args(argv: List[str]) -> Options:
    """
    Read the command, its numeric argument and options from argv.

    A malformed numeric argument falls back to the command's default with a
    warning on stderr. Flags missing their value raise ValueError.
    """
    opts = Options()
    args = argv[1:]  # skip program name
    raw_value: Optional[str] = None

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--backend", "-b", "--group", "-g"):
            if i + 1 >= len(args):
                raise ValueError(f"Flag {arg!r} requires a value")
            if arg in ("--backend", "-b"):
                opts.backend = args[i + 1]
            else:
                opts.group = parse_count_spec(args[i + 1])
            i += 2
        elif arg in ("--time", "-t"):
            opts.timed = True
            i += 1
        elif opts.command is None:
            opts.command = arg
            i += 1
        elif raw_value is None:
            raw_value = arg
            i += 1
        else:
            # Ignore extra arguments
            i += 1

    if opts.command in COMMAND_DEFAULTS:
        default = COMMAND_DEFAULTS[opts.command]
        opts.value = default
        if raw_value is not None:
            try:
                opts.value = parse_count_spec(raw_value)
            except ValueError as e:
                sys.stderr.write(f"Warning: {e}; using default {default}\n")
    return opts


# =========================
# Commands
# =========================


def run_command(opts: Options) -> str:
    """Execute a parsed command and return the text to print."""
    if opts.command == "pi":
        return compute_pi(opts.value, opts.backend or "int")
    if opts.command == "primes":
        primes = generate_primes(opts.value)
        if opts.group:
            return format_prime_groups(primes, opts.group)
        return ", ".join(str(p) for p in primes)
    if opts.command == "bench-bigint" and opts.backend:
        return run_bigint(opts.value, backend=opts.backend).report()
    if opts.command in BENCHMARKS:
        return BENCHMARKS[opts.command](opts.value)
    if opts.command == "bench":
        reports = []
        for name, bench in BENCHMARKS.items():
            reports.append(f"{name.replace('bench-', '').upper()}\n{bench(opts.value)}")
        return "\n\n".join(reports)
    raise ValueError(f"Unknown command: {opts.command!r}")


def main(argv: List[str]) -> int:
    try:
        opts = parse_args(argv)
    except ValueError as e:
        sys.stderr.write(f"Error: {e}\n")
        sys.stderr.write(USAGE)
        return 2

    if opts.command not in COMMAND_DEFAULTS:
        sys.stderr.write(USAGE)
        return 2

    start = time.perf_counter()
    try:
        output = run_command(opts)
    except ValueError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1
    elapsed = time.perf_counter() - start

    print(output)
    if opts.timed:
        sys.stderr.write(f"Time: {elapsed:.4f} s\n")
    return 0


def cli() -> int:
    return main(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
