import numpy as np
import pytest

from periodicity import count_odd_periods, period_lengths, survey_periods
from sqrt_expansion import InvalidRadicand


def test_period_lengths_small_range():
    lengths = period_lengths(13)
    assert lengths.dtype == np.int64
    np.testing.assert_array_equal(lengths, [1, 2, 0, 1, 2, 4, 2, 0, 1, 2, 2, 5])


def test_count_odd_periods_small():
    assert count_odd_periods(13) == 4


def test_survey_to_10000():
    survey = survey_periods(10000)
    assert survey.odd_count == 1322
    assert survey.square_count == 99
    assert len(survey.lengths) == 9999
    # every non-square has a non-empty period
    assert np.count_nonzero(survey.lengths) == 9999 - 99
    assert survey.longest_period == survey.lengths.max()
    assert survey.lengths[survey.longest_radicand - 2] == survey.longest_period


def test_survey_offset_range():
    survey = survey_periods(23, start=19)
    np.testing.assert_array_equal(survey.lengths, [6, 2, 6, 6, 4])
    assert survey.longest_radicand == 19
    assert survey.odd_count == 0


def test_bad_ranges():
    with pytest.raises(InvalidRadicand):
        period_lengths(10, start=1)
    with pytest.raises(ValueError):
        period_lengths(5, start=10)


def test_verbose(capsys):
    survey_periods(13, verbose=True)
    out = capsys.readouterr().out
    assert "[periods] 4 odd periods" in out


def test_survey_of_only_perfect_squares():
    survey = survey_periods(4, start=4)
    assert survey.square_count == 1
    assert survey.longest_radicand is None
    assert survey.longest_period == 0
    assert survey.odd_count == 0
