"""Tests for domain entities."""

import pytest
from dataclasses import FrozenInstanceError
from src.domain.entities.crop_record import CropRecord, calculate_productivity
from src.domain.entities.prediction_result import PredictionResult
from src.domain.entities.region_group import REGION_LOOKUP, RegionGroup, resolve_region_group
from src.domain.entities.trend_analysis import TrendAnalysis, TrendDirection
from src.domain.entities.validation_report import ValidationReport


def test_resolve_region_group():
    """Test state to region lookup."""
    assert resolve_region_group("MG") == RegionGroup.SOUTHEAST
    assert resolve_region_group("ro") == RegionGroup.NORTH
    assert resolve_region_group("BA") == RegionGroup.NORTHEAST
    assert resolve_region_group("GO") == RegionGroup.MIDWEST
    assert resolve_region_group("PR") == RegionGroup.SOUTH


def test_unmapped_region_falls_back_to_southeast():
    """Test unknown codes resolve to SOUTHEAST."""
    assert resolve_region_group("XYZ") == RegionGroup.SOUTHEAST
    assert resolve_region_group("") == RegionGroup.SOUTHEAST


def test_region_lookup_is_immutable():
    """Test the lookup table cannot be mutated at runtime."""
    with pytest.raises(TypeError):
        REGION_LOOKUP["XX"] = RegionGroup.NORTH
    assert len(REGION_LOOKUP) == 27


def test_region_group_portuguese_label():
    """Test RegionGroup labels."""
    assert RegionGroup.MIDWEST.value == "MIDWEST"
    assert RegionGroup.MIDWEST.to_portuguese() == "Centro-Oeste"


def test_calculate_productivity():
    """Test bag to kg/ha conversion."""
    assert calculate_productivity(34100, 1100) == pytest.approx(1860.0)
    assert calculate_productivity(500, 0) == 0


def test_crop_record_derives_missing_fields():
    """Test productivity and region are derived when absent."""
    record = CropRecord(
        id="ba-2026",
        year=2026,
        region_code="BA",
        crop_type="Café Arábica",
        production=4250,
        area=175,
    )
    assert record.productivity == pytest.approx(4250 * 60 / 175)
    assert record.region_group == RegionGroup.NORTHEAST
    assert str(record) == "BA_2026_Café Arábica"


def test_crop_record_keeps_reported_values():
    """Test reported productivity and region are not overridden."""
    record = CropRecord(
        id="es-2026",
        year=2026,
        region_code="ES",
        crop_type="Café Conillon",
        production=16100,
        area=296,
        productivity=3260,
        region_group="SOUTHEAST",
    )
    assert record.productivity == 3260
    assert record.region_group is RegionGroup.SOUTHEAST
    with pytest.raises(FrozenInstanceError):
        record.production = 0


def test_crop_record_create():
    """Test the ingestion factory."""
    record = CropRecord.create(" mg ", 2026, "Café Arábica", 34100, 1100)
    assert record.id == "mg-2026"
    assert record.region_code == "MG"
    assert record.productivity == pytest.approx(1860.0)
    data = record.to_dict()
    assert data["region_group"] == "SOUTHEAST"
    assert isinstance(data["captured_at"], str)


def test_prediction_result_notes_are_append_only():
    """Test with_notes extends the notes of a copy."""
    result = PredictionResult(2027, 10.0, 9.0, 11.0, 5.0, 0.8, ("a",))
    updated = result.with_notes("b", "c", predicted_value=12.0)
    assert updated.derivation_notes == ("a", "b", "c")
    assert updated.predicted_value == 12.0
    assert result.derivation_notes == ("a",)
    assert updated.to_dict()["derivation_notes"] == ["a", "b", "c"]


def test_trend_analysis_to_dict():
    """Test TrendAnalysis serialization."""
    analysis = TrendAnalysis(12.5, TrendDirection.RISING, False)
    assert analysis.to_dict() == {
        "volatility_percent": 12.5,
        "direction": "rising",
        "is_cyclic": False,
    }


def test_validation_report():
    """Test ValidationReport validity flag."""
    assert ValidationReport().is_valid
    assert not ValidationReport(errors=["bad"]).is_valid
