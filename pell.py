from dataclasses import dataclass
from typing import Optional

from arithmetic import digit_count, is_perfect_square
from continued_fraction import ContinuedFraction
from sqrt_expansion import NoPeriodicPart, check_radicand, expand_sqrt

@dataclass(frozen=True)
class PellSolution:
    d: int
    x: int
    y: int
    index: int    # convergent index of sqrt(d) at which x/y was found

def is_pell_solution(x: int, y: int, d: int) -> bool:
    return x * x - d * y * y == 1

def solve_pell(d: int, max_convergents: Optional[int] = None, verbose: bool = False) -> Optional[PellSolution]:
    """
    Minimal positive solution of x^2 - d·y^2 = 1.

    The fundamental solution is a convergent of sqrt(d) (index p-1 or 2p-1 for
    period length p), so convergents are pulled in order until one satisfies
    the equation. With max_convergents=None the search covers two full periods,
    which always contains the solution. Returns None if an explicit
    max_convergents is too small.

    Raises:
        InvalidRadicand: If d < 2
        NoPeriodicPart: If d is a perfect square (only the trivial solution exists)
        ValueError: If max_convergents < 1
    """
    check_radicand(d)
    d = int(d)
    if max_convergents is not None and max_convergents < 1:
        raise ValueError(f"max_convergents must be >= 1, got {max_convergents}")
    if is_perfect_square(d):
        raise NoPeriodicPart(f"Pell equation x^2 - {d}y^2 = 1 has no non-trivial solution: {d} is a perfect square")
    expansion = expand_sqrt(d)
    if max_convergents is None:
        max_convergents = 2 * expansion.period_length
    cf = ContinuedFraction(head=expansion.head, periodic_tail=expansion.period)

    gen = cf.convergents()
    for _ in range(max_convergents):
        c = gen.next_convergent()
        if is_pell_solution(c.numerator, c.denominator, d):
            if verbose:
                print(f"[pell] d={d}: x={c.numerator}, y={c.denominator} at convergent {c.index}")
            return PellSolution(d=d, x=c.numerator, y=c.denominator, index=c.index)
    if verbose:
        print(f"[pell] d={d}: no solution within {max_convergents} convergents")
    return None

def largest_minimal_solution(limit: int, max_convergents: Optional[int] = None, verbose: bool = False) -> PellSolution:
    """
    Among non-square 2 <= d <= limit, the d whose minimal solution has the largest x.
    max_convergents is passed to solve_pell; an explicit cap that misses a
    solution raises RuntimeError.
    """
    check_radicand(limit)    # limit >= 2, so d = 2 always contributes
    best: Optional[PellSolution] = None
    for d in range(2, int(limit) + 1):
        if is_perfect_square(d):
            continue
        sol = solve_pell(d, max_convergents)
        if sol is None:
            raise RuntimeError(f"No Pell solution for d={d} within {max_convergents} convergents")
        if best is None or sol.x > best.x:
            best = sol
            if verbose:
                print(f"[pell] new largest minimal x at d={d} ({digit_count(sol.x)} digits)")
    return best
