"""Simple continued fractions and their convergents.

A continued fraction [a_0; a_1, a_2, ...] is stored as a head a_0, a finite
tuple of further terms, and an optional tail that repeats forever after them.
Convergents h_i / k_i come from the recurrence

    h_i = a_i · h_{i-1} + h_{i-2}        h_{-2} = 0, h_{-1} = 1
    k_i = a_i · k_{i-1} + k_{i-2}        k_{-2} = 1, k_{-1} = 0

and satisfy gcd(h_i, k_i) = 1, so they are never reduced explicitly.
Numerators and denominators are Python ints (unbounded).
"""

from __future__ import annotations
import numbers
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from arithmetic import Q
from sqrt_expansion import expand_sqrt


class ExhaustedSequence(LookupError):
    pass


@dataclass(frozen=True)
class Convergent:
    index: int          # position k of the last term used
    numerator: int      # h_k
    denominator: int    # k_k

    def as_q(self) -> Q:
        return Q(self.numerator, self.denominator)

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


def _check_term(x, what: str) -> None:
    if not isinstance(x, numbers.Integral) or isinstance(x, bool):
        raise ValueError(f"{what} must be an integer, got {type(x).__name__}: {x!r}")


def _check_positive_terms(terms: Sequence[int], what: str) -> None:
    for i, a in enumerate(terms):
        _check_term(a, f"{what}[{i}]")
        if a < 1:
            raise ValueError(f"{what}[{i}] = {a}; terms after the head must be >= 1")


@dataclass(frozen=True)
class ContinuedFraction:
    head: int
    terms: Tuple[int, ...] = ()
    periodic_tail: Optional[Tuple[int, ...]] = None

    def __post_init__(self):
        _check_term(self.head, "head")
        terms = tuple(self.terms)
        _check_positive_terms(terms, "terms")
        # plain ints in tuples: the value stays immutable and h/k never use fixed-width arithmetic
        object.__setattr__(self, "head", int(self.head))
        object.__setattr__(self, "terms", tuple(int(a) for a in terms))
        if self.periodic_tail is not None:
            tail = tuple(self.periodic_tail)
            _check_positive_terms(tail, "periodic_tail")
            object.__setattr__(self, "periodic_tail", tuple(int(a) for a in tail))
            if not self.periodic_tail:
                raise ValueError("periodic_tail must be non-empty when present (use None for a finite fraction)")

    @classmethod
    def from_terms(cls, terms: Iterable[int], periodic_tail: Optional[Iterable[int]] = None) -> ContinuedFraction:
        """[a_0; a_1, ..., a_n] followed, if given, by periodic_tail repeated forever."""
        terms = tuple(terms)
        if not terms:
            raise ValueError("from_terms needs at least the head term a_0")
        tail = None if periodic_tail is None else tuple(periodic_tail)
        return cls(head=terms[0], terms=terms[1:], periodic_tail=tail)

    @classmethod
    def from_sqrt(cls, n: int) -> ContinuedFraction:
        """
        Continued fraction of sqrt(n). A perfect square gives the one-term
        finite fraction [sqrt(n)] whose periodic() is None.
        """
        expansion = expand_sqrt(n)
        return cls(head=expansion.head, periodic_tail=expansion.period)

    def periodic(self) -> Optional[Tuple[int, ...]]:
        return self.periodic_tail

    def non_periodic(self) -> Tuple[int, ...]:
        return (self.head,) + self.terms

    @property
    def is_finite(self) -> bool:
        return self.periodic_tail is None

    def term_count(self) -> Optional[int]:
        """Number of terms of a finite fraction, None for an infinite one."""
        return 1 + len(self.terms) if self.is_finite else None

    def term(self, i: int) -> int:
        """a_i of the effective term stream; the tail is indexed modulo its length."""
        if i < 0:
            raise IndexError(f"term index must be >= 0, got {i}")
        if i == 0:
            return self.head
        if i <= len(self.terms):
            return self.terms[i - 1]
        if self.periodic_tail is None:
            raise IndexError(f"term index {i} out of range for a finite fraction of {1 + len(self.terms)} terms")
        return self.periodic_tail[(i - 1 - len(self.terms)) % len(self.periodic_tail)]

    def iter_terms(self) -> Iterator[int]:
        yield self.head
        yield from self.terms
        if self.periodic_tail is not None:
            while True:
                yield from self.periodic_tail

    def convergents(self) -> ConvergentGenerator:
        """A fresh generator; generators built from one value share no state."""
        return ConvergentGenerator(self)

    def convergent(self, n: int) -> Convergent:
        if n < 0:
            raise IndexError(f"convergent index must be >= 0, got {n}")
        gen = self.convergents()
        c = gen.next_convergent()
        while c.index < n:
            c = gen.next_convergent()
        return c

    def value(self) -> Q:
        """Exact value of a finite continued fraction."""
        if not self.is_finite:
            raise ValueError("value() is only defined for finite continued fractions; use convergents()")
        return self.convergent(len(self.terms)).as_q()

    def __str__(self) -> str:
        s = f"[{self.head}"
        if self.terms:
            s += "; " + ", ".join(str(a) for a in self.terms)
        if self.periodic_tail is not None:
            s += ("; " if not self.terms else ", ") + "(" + ", ".join(str(a) for a in self.periodic_tail) + ")"
        return s + "]"


class ConvergentGenerator:
    """
    Pull-based generator of convergents. Holds only the last two numerators,
    the last two denominators and a cursor into the term stream; once past the
    finite prefix the cursor indexes the tail modulo its length.
    Not restartable: build a new one from the ContinuedFraction instead.
    """

    def __init__(self, cf: ContinuedFraction):
        self._prefix = cf.non_periodic()
        self._tail = cf.periodic_tail
        self._cursor = 0
        self._h_prev, self._h = 0, 1    # h_{i-2}, h_{i-1}
        self._k_prev, self._k = 1, 0    # k_{i-2}, k_{i-1}

    @property
    def index(self) -> int:
        """Index of the convergent the next call will produce."""
        return self._cursor

    def _next_term(self) -> int:
        i = self._cursor
        if i < len(self._prefix):
            return self._prefix[i]
        if self._tail is None:
            raise ExhaustedSequence(f"finite continued fraction has only {len(self._prefix)} convergents")
        return self._tail[(i - len(self._prefix)) % len(self._tail)]

    def next_convergent(self) -> Convergent:
        a = self._next_term()
        h = a * self._h + self._h_prev
        k = a * self._k + self._k_prev
        self._h_prev, self._h = self._h, h
        self._k_prev, self._k = self._k, k
        c = Convergent(index=self._cursor, numerator=h, denominator=k)
        self._cursor += 1
        return c

    def __iter__(self) -> ConvergentGenerator:
        return self

    def __next__(self) -> Convergent:
        try:
            return self.next_convergent()
        except ExhaustedSequence:
            raise StopIteration from None


def e_terms(count: int) -> Tuple[int, ...]:
    """First `count` terms of e = [2; 1, 2, 1, 1, 4, 1, 1, 6, ...]."""
    if count < 1:
        raise ValueError(f"e_terms needs count >= 1, got {count}")
    rest = [2 * (i // 3 + 1) if i % 3 == 1 else 1 for i in range(count - 1)]
    return (2, *rest)


def e_continued_fraction(count: int) -> ContinuedFraction:
    return ContinuedFraction.from_terms(e_terms(count))
