"""Tests for AnalyzeTrendsUseCase."""

import math

import pytest
from src.domain.entities.trend_analysis import TrendDirection
from src.domain.use_cases.analyze_trends import AnalyzeTrendsUseCase


def _records(make_record, productions, start=2018):
    return [make_record(production=p, year=start + i) for i, p in enumerate(productions)]


def test_stable_series(make_record):
    """Test volatility includes the leading 0% change."""
    use_case = AnalyzeTrendsUseCase()

    result = use_case.execute(_records(make_record, [100, 110, 99]))

    assert result.volatility_percent == pytest.approx(math.sqrt(200 / 3))
    assert result.direction == TrendDirection.FALLING
    assert not result.is_cyclic


def test_cyclic_series(make_record):
    """Test an alternating series is flagged as cyclic."""
    use_case = AnalyzeTrendsUseCase()

    result = use_case.execute(_records(make_record, [100, 150, 100, 150]))

    expected = math.sqrt((0 + 50**2 + (100 / 3) ** 2 + 50**2) / 4)
    assert result.volatility_percent == pytest.approx(expected)
    assert result.direction == TrendDirection.RISING
    assert result.is_cyclic


def test_unordered_records_are_sorted(make_record):
    """Test records are analyzed in year order."""
    use_case = AnalyzeTrendsUseCase()
    records = list(reversed(_records(make_record, [100, 110, 99])))
    assert use_case.execute(records).direction == TrendDirection.FALLING


def test_flat_last_change_is_falling(make_record):
    """Test a zero last change is reported as falling."""
    use_case = AnalyzeTrendsUseCase()
    result = use_case.execute(_records(make_record, [100, 120, 120]))
    assert result.direction == TrendDirection.FALLING


def test_zero_previous_production(make_record):
    """Test a zero base contributes a 0% change."""
    changes = AnalyzeTrendsUseCase.percent_changes([0, 50, 100])
    assert list(changes) == [0, 0, 100]


def test_single_and_empty(make_record):
    """Test degenerate histories."""
    use_case = AnalyzeTrendsUseCase()

    single = use_case.execute(_records(make_record, [100]))
    assert single.volatility_percent == 0
    assert single.direction == TrendDirection.FALLING

    empty = use_case.execute([])
    assert empty.volatility_percent == 0
    assert not empty.is_cyclic
