from __future__ import annotations
from fractions import Fraction
from math import isqrt
from typing import List

Q = Fraction  # rational type alias

DIGIT_BASE = 10

def isqrt_floor(n: int) -> int:
    """Exact floor(sqrt(n)); never goes through a float."""
    if n < 0:
        raise ValueError(f"isqrt_floor: negative input {n}")
    return isqrt(n)

def is_perfect_square(n: int) -> bool:
    if n < 0:
        return False
    r = isqrt(n)
    return r * r == n

def digits_of(n: int) -> List[int]:
    """Decimal digits of |n|, most significant first."""
    return [int(c) for c in str(abs(n))]

def digit_sum(n: int) -> int:
    return sum(digits_of(n))

def digit_count(n: int) -> int:
    return len(str(abs(n)))

def decimal_digits(q: Q, count: int) -> List[int]:
    """
    First `count` decimal digits of a non-negative rational, by exact long division.
    - The integer part contributes all of its digits first.
    - Fractional digits follow, truncated (never rounded).
    - Terminating expansions are padded with zeros.
    e.g. decimal_digits(Q(41, 29), 5) == [1, 4, 1, 3, 7]
    """
    if q < 0:
        raise ValueError(f"decimal_digits requires q >= 0. got q = {q}")
    if count < 0:
        raise ValueError(f"decimal_digits requires count >= 0. got count = {count}")
    n = q.numerator
    d = q.denominator

    int_part = n // d
    rem = n % d
    digits = digits_of(int_part)[:count]

    # Long division for the fractional part
    while len(digits) < count:
        rem *= DIGIT_BASE
        digits.append(rem // d)
        rem = rem % d
    return digits
