#!/usr/bin/env python3
"""
Prime generation with the Sieve of Eratosthenes.

- generate_primes(count)      -> the first `count` primes, ascending
- count_primes_below(limit)   -> how many primes are <= limit
- format_prime_groups(...)    -> primes laid out in fixed-width rows
"""

from __future__ import annotations

import math
from itertools import compress, islice
from typing import List, Sequence

# Smallest sieve ever allocated; holds the first five primes
MIN_SIEVE_BOUND = 15


def prime_upper_bound(count: int) -> int:
    """
    Upper bound for the `count`-th prime, used to size the sieve.

    For count >= 6, p_n < n * (ln n + ln ln n) (Rosser's theorem), so the
    sieve never comes up short. Smaller counts use a fixed bound of 15.
    """
    if count < 6:
        return MIN_SIEVE_BOUND
    n = float(count)
    estimate = math.ceil(n * (math.log(n) + math.log(math.log(n))))
    return max(estimate, MIN_SIEVE_BOUND)


def _sieve(limit: int) -> bytearray:
    """Flags for 0..limit: 1 where the index is prime, 0 elsewhere."""
    flags = bytearray([1]) * (limit + 1)
    flags[0] = 0
    if limit >= 1:
        flags[1] = 0
    for i in range(2, math.isqrt(limit) + 1):
        if flags[i]:
            # Mark i*i, i*i + i, ... as composite
            flags[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return flags


def generate_primes(count: int) -> List[int]:
    """Return the first `count` primes in ascending order."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count == 0:
        return []

    limit = prime_upper_bound(count)
    flags = _sieve(limit)
    return list(islice(compress(range(limit + 1), flags), count))


def count_primes_below(limit: int) -> int:
    """Number of primes p with p <= limit."""
    if limit < 2:
        return 0
    return _sieve(limit).count(1)


def format_prime_groups(primes: Sequence[int], increment: int) -> str:
    """
    Lay primes out in rows of `increment`, comma-separated within a row.

    >>> print(format_prime_groups([2, 3, 5, 7, 11], 2))
    2, 3
    5, 7
    11
    """
    if increment <= 0:
        raise ValueError(f"increment must be positive, got {increment}")
    rows = []
    for i in range(0, len(primes), increment):
        rows.append(", ".join(str(p) for p in primes[i : i + increment]))
    return "\n".join(rows)
