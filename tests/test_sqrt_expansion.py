import numpy as np
import pytest

from sqrt_expansion import InvalidRadicand, NoPeriodicPart, SqrtExpansion, expand_sqrt, period_of


@pytest.mark.parametrize("n, head, period", [
    (2, 1, (2,)),
    (3, 1, (1, 2)),
    (5, 2, (4,)),
    (7, 2, (1, 1, 1, 4)),
    (13, 3, (1, 1, 1, 1, 6)),
    (19, 4, (2, 1, 3, 1, 2, 8)),
    (23, 4, (1, 3, 1, 8)),
])
def test_known_expansions(n, head, period):
    e = expand_sqrt(n)
    assert e == SqrtExpansion(radicand=n, head=head, period=period)
    assert e.period_length == len(period)
    assert not e.is_perfect_square


@pytest.mark.parametrize("n", [4, 9, 16, 100, 10**6])
def test_perfect_square_has_no_period(n):
    e = expand_sqrt(n)
    assert e.is_perfect_square
    assert e.period is None
    assert e.period_length == 0
    assert e.head * e.head == n


def test_period_of_perfect_square_raises():
    with pytest.raises(NoPeriodicPart):
        period_of(16)
    assert period_of(23) == (1, 3, 1, 8)


@pytest.mark.parametrize("n", [1, 0, -7])
def test_small_radicand_rejected(n):
    with pytest.raises(InvalidRadicand):
        expand_sqrt(n)


@pytest.mark.parametrize("n", [2.0, "5", True, None])
def test_non_integer_radicand_rejected(n):
    with pytest.raises(InvalidRadicand):
        expand_sqrt(n)


def test_period_structure():
    for n in range(2, 2001):
        e = expand_sqrt(n)
        if e.is_perfect_square:
            continue
        body = e.period[:-1]
        assert e.period[-1] == 2 * e.head
        assert all(1 <= a < 2 * e.head for a in body)
        assert body == body[::-1]


def test_large_radicand():
    n = 10**30 + 1
    e = expand_sqrt(n)
    assert e.head == 10**15
    assert e.period == (2 * 10**15,)


def test_numpy_integer_radicand():
    e = expand_sqrt(np.int64(3037000499))
    assert type(e.radicand) is int
    assert e == expand_sqrt(3037000499)
    assert expand_sqrt(np.int32(23)).period == (1, 3, 1, 8)
