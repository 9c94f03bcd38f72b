"""Precision-driven use of convergents.

For consecutive convergents of x,

    |x - h_k/k_k| < 1 / (k_k · k_{k+1})

so the first k with k_k · k_{k+1} >= 10^D gives |x - h_k/k_k| < 10^-D.
All selection is exact; floats only appear in float_errors().
"""

from itertools import islice
from typing import List

import numpy as np

from arithmetic import Q, decimal_digits, digit_count
from continued_fraction import ContinuedFraction, Convergent
from sqrt_expansion import check_radicand

GUARD_DIGITS = 10
MAX_CONVERGENTS = 100_000


def convergent_for_precision(cf: ContinuedFraction, digits: int, max_convergents: int = MAX_CONVERGENTS) -> Convergent:
    """
    First convergent within 10^-digits of the value of cf.
    A finite fraction whose stream runs out first returns its last (exact) convergent.

    Raises:
        ValueError: If digits < 0
        RuntimeError: If the bound is not met within max_convergents
    """
    if digits < 0:
        raise ValueError(f"digits must be >= 0, got {digits}")
    if max_convergents < 1:
        raise ValueError(f"max_convergents must be >= 1, got {max_convergents}")
    limit = 10 ** digits
    gen = cf.convergents()
    prev = next(gen)
    for c in islice(gen, max_convergents - 1):
        if prev.denominator * c.denominator >= limit:
            return prev
        prev = c
    if cf.is_finite and gen.index == cf.term_count():
        return prev
    raise RuntimeError(f"Precision 10^-{digits} not reached within {max_convergents} convergents of {cf}")


def _digits_to_int(digits: List[int]) -> int:
    n = 0
    for d in digits:
        n = n * 10 + d
    return n


def sqrt_decimal_digits(n: int, count: int) -> List[int]:
    """
    First `count` digits of sqrt(n): the integer part, then the fraction, truncated.
    e.g. sqrt_decimal_digits(2, 6) == [1, 4, 1, 4, 2, 1]
    """
    check_radicand(n)
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    cf = ContinuedFraction.from_sqrt(n)
    if cf.is_finite:
        return decimal_digits(Q(cf.head), count)

    frac_digits = max(0, count - digit_count(cf.head))
    guard = GUARD_DIGITS
    while True:
        c = convergent_for_precision(cf, frac_digits + guard)
        digits = decimal_digits(c.as_q(), count)
        # exact check: N = floor(sqrt(n) · 10^frac_digits) iff N^2 <= n·10^(2·frac_digits) < (N+1)^2
        N = _digits_to_int(digits)
        scaled = n * 10 ** (2 * frac_digits)
        if count <= digit_count(cf.head) or N * N <= scaled < (N + 1) * (N + 1):
            return digits
        guard *= 2


def sqrt_digit_sum(n: int, count: int) -> int:
    return sum(sqrt_decimal_digits(n, count))


def numerator_heavy_count(cf: ContinuedFraction, count: int) -> int:
    """How many convergents with index 1..count have more numerator digits than denominator digits."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    heavy = 0
    for c in islice(cf.convergents(), 1, count + 1):
        if digit_count(c.numerator) > digit_count(c.denominator):
            heavy += 1
    return heavy


def float_errors(cf: ContinuedFraction, count: int, target: float) -> np.ndarray:
    """
    |float(h_i/k_i) - target| for the first `count` convergents, as float64.
    Errors bottom out at float64 resolution; use convergent_for_precision for exact bounds.
    """
    errs = [abs(float(c) - target) for c in islice(cf.convergents(), count)]
    return np.array(errs, dtype=np.float64)
