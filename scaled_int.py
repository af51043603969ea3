#!/usr/bin/env python3
"""
Scaled big-integer arithmetic used by the π engine and the bigint benchmark.

A scaled integer is an arbitrary-precision integer standing for a real value
multiplied by a fixed power of ten. Any integer type with exact +, -, * and
truncating // works; two backends are provided:

- "int"   : Python's built-in int (no external libraries).
- "gmpy2" : gmpy2.mpz (GMP under the hood), much faster for large operands.
"""

from __future__ import annotations

import sys
from typing import Dict, Protocol, Type, Union

import gmpy2
from gmpy2 import mpz

# Allow large int-to-string conversions (Python 3.11+ safety limit)
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)


class ScaledInt(Protocol):
    """Operations the π series and the bigint workload rely on."""

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def __floordiv__(self, other): ...

    def __lt__(self, other) -> bool: ...

    def bit_length(self) -> int: ...


BACKENDS: Dict[str, Type] = {
    "int": int,
    "gmpy2": mpz,
}

DEFAULT_BACKEND = "int"


def get_backend(name: Union[str, Type]) -> Type:
    """
    Resolve a backend name ("int" or "gmpy2") to its integer type.

    Integer types already present in BACKENDS are passed through unchanged.
    Raises ValueError for anything else.
    """
    if isinstance(name, type):
        if name in BACKENDS.values():
            return name
        raise ValueError(f"Unsupported integer type: {name!r}")
    try:
        return BACKENDS[name]
    except KeyError:
        valid = ", ".join(sorted(BACKENDS))
        raise ValueError(f"Unknown backend {name!r} (expected one of: {valid})") from None


def pow10(n: int, backend: Union[str, Type] = DEFAULT_BACKEND) -> ScaledInt:
    """Build 10**n by repeated multiplication, in the given backend."""
    if n < 0:
        raise ValueError(f"Exponent must be non-negative, got {n}")
    value = get_backend(backend)(1)
    for _ in range(n):
        value *= 10
    return value


def to_decimal(value: ScaledInt) -> str:
    """Decimal string of a scaled integer of either backend."""
    if isinstance(value, int):
        return str(value)
    # avoids Python int->str limits
    return gmpy2.digits(value, 10)
