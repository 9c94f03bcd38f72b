import numpy as np
import pytest

from pell import PellSolution, is_pell_solution, largest_minimal_solution, solve_pell
from sqrt_expansion import InvalidRadicand, NoPeriodicPart, expand_sqrt


@pytest.mark.parametrize("d, x, y", [
    (2, 3, 2),
    (3, 2, 1),
    (5, 9, 4),
    (6, 5, 2),
    (7, 8, 3),
    (13, 649, 180),
    (61, 1766319049, 226153980),
])
def test_minimal_solutions(d, x, y):
    sol = solve_pell(d)
    assert (sol.x, sol.y) == (x, y)
    assert is_pell_solution(sol.x, sol.y, d)


def test_solution_index_is_a_convergent_index():
    assert solve_pell(2) == PellSolution(d=2, x=3, y=2, index=1)
    # period of sqrt(13) has odd length 5, so the solution sits at index 2*5 - 1
    assert solve_pell(13).index == 9


def test_cap_hit_returns_none():
    assert solve_pell(13, max_convergents=9) is None
    assert solve_pell(13, max_convergents=10) is not None


def test_bad_arguments():
    with pytest.raises(NoPeriodicPart):
        solve_pell(9)
    with pytest.raises(InvalidRadicand):
        solve_pell(1)
    with pytest.raises(ValueError):
        solve_pell(2, max_convergents=0)


def test_verbose_prints_progress(capsys):
    solve_pell(7, verbose=True)
    assert "[pell] d=7: x=8, y=3" in capsys.readouterr().out


def test_largest_minimal_solution_small():
    assert largest_minimal_solution(7).d == 5


def test_largest_minimal_solution_up_to_1000():
    best = largest_minimal_solution(1000)
    assert best.d == 661
    assert is_pell_solution(best.x, best.y, best.d)


def test_default_cap_covers_two_periods_of_a_long_odd_period():
    d = 20000161
    p = expand_sqrt(d).period_length
    assert p == 8163
    sol = solve_pell(d)
    assert sol is not None
    assert sol.index == 2 * p - 1
    assert is_pell_solution(sol.x, sol.y, d)


def test_largest_minimal_solution_passes_cap_through():
    with pytest.raises(RuntimeError):
        largest_minimal_solution(13, max_convergents=3)
    assert largest_minimal_solution(13, max_convergents=10).d == 13


def test_numpy_integer_d():
    assert solve_pell(np.int64(61)).x == 1766319049
