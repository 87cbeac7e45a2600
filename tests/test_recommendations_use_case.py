"""Tests for the recommendation use cases."""

from src.domain.use_cases.generate_recommendations import (
    CLIMATE_RISK_MONITORING,
    DRIP_IRRIGATION,
    INSUFFICIENT_DATA,
    IRRIGATION_AND_RENEWAL,
    MAINTAIN_PROTOCOLS,
    NUTRIENT_MANAGEMENT,
    SPECIALTY_CERTIFICATION,
    RecordRecommendationUseCase,
    RegionalRecommendationUseCase,
    latest_record_for_region,
)


def test_regional_without_record():
    """Test missing data yields a single advisory."""
    use_case = RegionalRecommendationUseCase()
    assert use_case.execute(None) == [INSUFFICIENT_DATA]


def test_regional_rules_fire_in_order(make_record):
    """Test every regional rule and the trailing nitrogen estimate."""
    use_case = RegionalRecommendationUseCase()
    record = make_record(
        production=300, region_code="RO", area=100, productivity=3100, crop_type="Café Robusta"
    )

    result = use_case.execute(record)

    assert len(result) == 4
    assert result[0].startswith("[ALERT] Low production density in RO.")
    assert result[1] == DRIP_IRRIGATION
    assert result[2] == SPECIALTY_CERTIFICATION
    assert result[3] == (
        "Nutrient replenishment estimate: 372.00 kg of N/ha to sustain current output."
    )


def test_regional_only_nitrogen(make_record):
    """Test a dense, average southeastern record only gets the nitrogen estimate."""
    use_case = RegionalRecommendationUseCase()
    record = make_record(production=34100, region_code="MG", area=1100, productivity=1860)

    result = use_case.execute(record)
    assert result == [
        "Nutrient replenishment estimate: 223.20 kg of N/ha to sustain current output."
    ]


def test_regional_zero_area_counts_as_low_density(make_record):
    """Test zero area does not raise."""
    use_case = RegionalRecommendationUseCase()
    record = make_record(production=10, region_code="SP", area=0)

    result = use_case.execute(record)
    assert result[0].startswith("[ALERT]")
    assert result[-1].startswith("Nutrient replenishment estimate: 0.00")


def test_latest_record_for_region(make_record):
    """Test the most recent record of a region is picked."""
    records = [
        make_record(production=1, year=2024, region_code="MG", record_id="mg-2024"),
        make_record(production=2, year=2026, region_code="MG", record_id="mg-2026-a"),
        make_record(production=3, year=2026, region_code="MG", record_id="mg-2026-b"),
        make_record(production=4, year=2027, region_code="ES", record_id="es-2027"),
    ]
    assert latest_record_for_region(records, "mg").id == "mg-2026-a"
    assert latest_record_for_region(records, "BA") is None


def test_record_rules(make_record):
    """Test all record-level rules firing together."""
    use_case = RecordRecommendationUseCase()
    record = make_record(
        production=10000, region_code="MG", area=600, productivity=1200, crop_type="Café Arábica"
    )

    assert use_case.execute(record) == [
        IRRIGATION_AND_RENEWAL,
        NUTRIENT_MANAGEMENT,
        CLIMATE_RISK_MONITORING,
    ]


def test_record_nutrient_rule_only(make_record):
    """Test a large, mid-productivity southern record."""
    use_case = RecordRecommendationUseCase()
    record = make_record(
        production=10000, region_code="PR", area=600, productivity=2000, crop_type="Café Arábica"
    )
    assert use_case.execute(record) == [NUTRIENT_MANAGEMENT]


def test_record_default(make_record):
    """Test the default message when no rule fires."""
    use_case = RecordRecommendationUseCase()
    record = make_record(
        production=500, region_code="GO", area=100, productivity=2600, crop_type="Café Robusta"
    )
    assert use_case.execute(record) == [MAINTAIN_PROTOCOLS]
