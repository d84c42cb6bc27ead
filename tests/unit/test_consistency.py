"""Unit tests for consistency scoring"""

import math

import pytest
from campus_analytics.domain.consistency import get_consistency_score


@pytest.mark.parametrize("series", [[], None, [5], [0, 0, 0]])
def test_consistency_neutral_cases(series):
    """Test short and all-zero series score 100"""
    assert get_consistency_score(series) == 100


@pytest.mark.parametrize("value", [0.5, 10, 47.25])
def test_constant_series_is_perfectly_consistent(value):
    assert get_consistency_score([value] * 4) == 100


def test_consistency_uses_population_variance():
    """Test cv = std/mean with variance over n"""
    # mean 15, std 5, cv 1/3
    assert get_consistency_score([10, 20]) == 66.7


def test_consistency_floors_at_zero():
    # mean 5, std 5, cv 1
    assert get_consistency_score([0, 10]) == 0.0
    assert get_consistency_score([0, 0, 30]) == 0.0


def test_consistency_coerces_bad_values():
    """Test non-numeric values count as 0"""
    assert get_consistency_score(["abc", None, 10, 10]) == 0.0


def test_consistency_huge_values_stay_finite():
    assert math.isfinite(get_consistency_score([1e308, 1e308]))


def test_consistency_is_idempotent():
    series = [12.5, 30, "abc", 18]

    assert get_consistency_score(series) == get_consistency_score(series)
