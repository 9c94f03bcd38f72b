"""Continued-fraction expansion of square roots of integers.

For a radicand n that is not a perfect square, sqrt(n) has a purely periodic
expansion after its integer part:

    sqrt(n) = [a_0; a_1, a_2, ..., a_p, a_1, a_2, ..., a_p, ...]

with a_0 = floor(sqrt(n)) and a_p = 2·a_0. The terms come from the integer
recurrence over the state (m, d, a):

    m_{i+1} = d_i · a_i - m_i
    d_{i+1} = (n - m_{i+1}^2) / d_i        (always exact)
    a_{i+1} = floor((a_0 + m_{i+1}) / d_{i+1})

starting from m_0 = 0, d_0 = 1. The first a_{i+1} equal to 2·a_0 closes one
full period.
"""

import numbers
from dataclasses import dataclass
from typing import Optional, Tuple

from arithmetic import isqrt_floor

MIN_RADICAND = 2


class InvalidRadicand(ValueError):
    pass


class NoPeriodicPart(ValueError):
    pass


@dataclass(frozen=True)
class SqrtExpansion:
    radicand: int
    head: int                            # a_0 = floor(sqrt(n))
    period: Optional[Tuple[int, ...]]    # (a_1, ..., a_p), None for perfect squares

    @property
    def is_perfect_square(self) -> bool:
        return self.period is None

    @property
    def period_length(self) -> int:
        return 0 if self.period is None else len(self.period)


def check_radicand(n: int) -> None:
    # bool is an int subclass but never a meaningful radicand; numpy integers are Integral
    if not isinstance(n, numbers.Integral) or isinstance(n, bool):
        raise InvalidRadicand(f"Radicand must be an integer, got {type(n).__name__}: {n!r}")
    if n < MIN_RADICAND:
        raise InvalidRadicand(f"Radicand must be >= {MIN_RADICAND}, got {n}")


def expand_sqrt(n: int) -> SqrtExpansion:
    """Expand sqrt(n) into its head term and one full period.

    Args:
        n: Radicand, an integer >= 2

    Returns:
        SqrtExpansion whose period ends with the closing term 2·a_0, or whose
        period is None when n is a perfect square (the expansion is then just [a_0])

    Raises:
        InvalidRadicand: If n is not an integer >= 2
    """
    check_radicand(n)
    n = int(n)    # fixed-width numpy integers would overflow in m*m
    a0 = isqrt_floor(n)
    if a0 * a0 == n:
        return SqrtExpansion(radicand=n, head=a0, period=None)

    period = []
    m, d, a = 0, 1, a0
    while True:
        m = d * a - m
        d = (n - m * m) // d
        a = (a0 + m) // d
        period.append(a)
        if a == 2 * a0:
            break
    return SqrtExpansion(radicand=n, head=a0, period=tuple(period))


def period_of(n: int) -> Tuple[int, ...]:
    """The repeating terms of sqrt(n); raises NoPeriodicPart for perfect squares."""
    expansion = expand_sqrt(n)
    if expansion.period is None:
        raise NoPeriodicPart(f"{n} is a perfect square ({expansion.head}^2); sqrt({n}) has no periodic part")
    return expansion.period
