#!/usr/bin/env python3
"""
π to an arbitrary number of digits using Machin's formula.

- π = 16·arctan(1/5) − 4·arctan(1/239)
- Each arctangent is a Taylor series evaluated in scaled integers
  (value × 10^(digits + GUARD_DIGITS)), no floats and no decimal module.
- The result is correctly rounded, not floor-truncated.
"""

from __future__ import annotations

from typing import Optional, Type, Union

from scaled_int import DEFAULT_BACKEND, ScaledInt, get_backend, pow10, to_decimal

# Extra digits carried through the series to absorb truncation error
GUARD_DIGITS = 5


# =========================
# Arctangent series
# =========================


def arctan_inv(x: int, scale: ScaledInt, max_terms: Optional[int] = None) -> ScaledInt:
    """
    Compute scale * arctan(1/x) as a scaled integer.

    Uses the alternating series:
      arctan(1/x) = sum_{k>=0} (-1)^k / ((2k + 1) * x^(2k + 1))

    The running term x^-(2k+1) is divided by x² at every step and the series
    stops the first time a term truncates to zero at the working precision.

    Args:
        x: Integer argument, at least 2.
        scale: Power-of-ten scale factor (int or gmpy2.mpz).
        max_terms: Iteration cap. Defaults to scale.bit_length() + 1, which
            is enough for any x >= 2 since each step divides the term by 4.

    Raises:
        ValueError: If x < 2.
        ArithmeticError: If the series has not converged after max_terms.
    """
    if x < 2:
        raise ValueError(f"arctan_inv needs x >= 2, got {x}")
    if max_terms is None:
        max_terms = scale.bit_length() + 1

    x2 = x * x
    term = scale // x
    total = term
    sign = -1

    for k in range(1, max_terms + 1):
        term = term // x2
        add = term // (2 * k + 1)
        if add == 0:
            return total
        if sign < 0:
            total -= add
        else:
            total += add
        sign = -sign

    raise ArithmeticError(
        f"arctan(1/{x}) series did not converge within {max_terms} terms"
    )


# =========================
# Main computation
# =========================


def compute_pi(digits: int, backend: Union[str, Type] = DEFAULT_BACKEND) -> str:
    """
    Compute π to `digits` decimal places as a string "3.<digits>".

    The last digit is rounded half-up from the guard digits, so
    compute_pi(10) == "3.1415926536". compute_pi(0) == "3.".
    """
    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")

    int_type = get_backend(backend)
    scale = pow10(digits + GUARD_DIGITS, int_type)

    atan5 = arctan_inv(5, scale)
    atan239 = arctan_inv(239, scale)
    pi_scaled = atan5 * 16 - atan239 * 4

    # Half a unit in the last kept digit, then drop the guard digits
    rounding = pow10(GUARD_DIGITS - 1, int_type) * 5
    pi_rounded = (pi_scaled + rounding) // pow10(GUARD_DIGITS, int_type)

    # Ensure at least digits + 1 characters ("3" + digits decimals)
    s = to_decimal(pi_rounded).rjust(digits + 1, "0")
    int_part = s[0]
    frac_part = s[1:]
    return f"{int_part}.{frac_part}"
