"""Tests for SummarizeDatasetUseCase."""

import pytest
from src.domain.use_cases.summarize_dataset import SummarizeDatasetUseCase


def _dataset(make_record):
    return [
        make_record(production=100, year=2025, region_code="MG", area=10, productivity=1000),
        make_record(production=300, year=2026, region_code="MG", area=20, productivity=2000),
        make_record(production=200, year=2026, region_code="ES", area=5, productivity=3000),
    ]


def test_summary_of_everything(make_record):
    """Test totals without filters."""
    use_case = SummarizeDatasetUseCase()

    summary = use_case.execute(_dataset(make_record))

    assert summary.record_count == 3
    assert summary.total_production == 600
    assert summary.avg_productivity == pytest.approx(2000)
    assert summary.total_area == 35
    assert list(summary.production_by_region.items()) == [("MG", 400), ("ES", 200)]


def test_summary_filters(make_record):
    """Test year and region filters."""
    use_case = SummarizeDatasetUseCase()

    summary = use_case.execute(_dataset(make_record), years=[2026], region_codes=["es"])

    assert summary.record_count == 1
    assert summary.total_production == 200
    assert summary.production_by_region == {"ES": 200}


def test_summary_without_matches(make_record):
    """Test an empty selection."""
    use_case = SummarizeDatasetUseCase()
    summary = use_case.execute(_dataset(make_record), years=[1999])
    assert summary.record_count == 0
    assert summary.production_by_region == {}
    assert use_case.execute([]).record_count == 0
