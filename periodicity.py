import numpy as np
from dataclasses import dataclass
from typing import Optional

from sqrt_expansion import MIN_RADICAND, InvalidRadicand, expand_sqrt

@dataclass(frozen=True)
class PeriodSurvey:
    """Period lengths of sqrt(n) over a radicand range [start, stop]."""
    start: int
    stop: int
    lengths: np.ndarray      # lengths[i] is the period of sqrt(start + i), 0 for perfect squares
    odd_count: int           # non-squares with an odd period
    square_count: int        # perfect squares in the range
    longest_radicand: Optional[int]    # first radicand attaining the longest period, None if all are squares
    longest_period: int                # 0 if all are squares

def period_lengths(stop: int, start: int = MIN_RADICAND) -> np.ndarray:
    if start < MIN_RADICAND:
        raise InvalidRadicand(f"Survey start must be >= {MIN_RADICAND}, got {start}")
    if stop < start:
        raise ValueError(f"Survey range is empty: stop={stop} < start={start}")
    lengths = np.zeros(stop - start + 1, dtype=np.int64)
    for i, n in enumerate(range(start, stop + 1)):
        lengths[i] = expand_sqrt(n).period_length
    return lengths

def survey_periods(stop: int, start: int = MIN_RADICAND, verbose: bool = False) -> PeriodSurvey:
    if verbose:
        print(f"[periods] expanding sqrt(n) for n in [{start}, {stop}]...")
    lengths = period_lengths(stop, start)
    squares = lengths == 0
    odd = (lengths % 2 == 1)
    i_max = int(np.argmax(lengths))
    has_period = bool(lengths[i_max] > 0)
    survey = PeriodSurvey(
        start=start,
        stop=stop,
        lengths=lengths,
        odd_count=int(np.count_nonzero(odd)),
        square_count=int(np.count_nonzero(squares)),
        longest_radicand=start + i_max if has_period else None,
        longest_period=int(lengths[i_max]),
    )
    if verbose:
        print(f"[periods] {survey.odd_count} odd periods, {survey.square_count} perfect squares, "
              f"longest period {survey.longest_period} at n={survey.longest_radicand}")
    return survey

def count_odd_periods(stop: int, start: int = MIN_RADICAND) -> int:
    return survey_periods(stop, start).odd_count
