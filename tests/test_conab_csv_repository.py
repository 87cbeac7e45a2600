"""Tests for ConabCsvRepository."""

import pytest
from config.settings import CROP_DATA_FILE
from src.domain.entities.region_group import RegionGroup
from src.infrastructure.repositories.conab_csv_repository import ConabCsvRepository

RAW_EXPORT = (
    "state,year,production,area,cropType\n"
    "MG,2026,34100,1100,Café Arábica\n"
    "ES,2026,16100,296,Café Conillon\n"
    "xyz,2025,10,0,Café Robusta\n"
)


def test_missing_file(tmp_path):
    """Test a missing data file is reported."""
    with pytest.raises(FileNotFoundError):
        ConabCsvRepository(str(tmp_path / "missing.csv"))


def test_parse_raw_export(tmp_path):
    """Test the raw CONAB export is normalized into records."""
    data_file = tmp_path / "conab.csv"
    data_file.write_text(RAW_EXPORT, encoding="utf-8")

    records = ConabCsvRepository(str(data_file)).get_records()

    assert len(records) == 3
    mg, es, unknown = records
    assert mg.id == "conab-MG-2026-0"
    assert mg.productivity == pytest.approx(1860.0)
    assert mg.region_group == RegionGroup.SOUTHEAST
    assert es.crop_type == "Café Conillon"
    assert unknown.region_code == "XYZ"
    assert unknown.region_group == RegionGroup.SOUTHEAST
    assert unknown.productivity == 0


def test_missing_columns(tmp_path):
    """Test files without the required columns are rejected."""
    data_file = tmp_path / "broken.csv"
    data_file.write_text("state,year\nMG,2026\n", encoding="utf-8")

    with pytest.raises(ValueError):
        ConabCsvRepository(str(data_file)).get_records()


def test_filters(tmp_path):
    """Test region, year and crop filters."""
    data_file = tmp_path / "conab.csv"
    data_file.write_text(RAW_EXPORT, encoding="utf-8")
    repo = ConabCsvRepository(str(data_file))

    assert [r.region_code for r in repo.get_records(region_code="es")] == ["ES"]
    assert [r.region_code for r in repo.get_records(year=2025)] == ["XYZ"]
    assert [r.region_code for r in repo.get_records(crop_type="café arábica")] == ["MG"]


def test_save_and_reload(tmp_path):
    """Test saved records keep their reported values."""
    source = tmp_path / "conab.csv"
    source.write_text(RAW_EXPORT, encoding="utf-8")
    records = ConabCsvRepository(str(source)).get_records()

    target = tmp_path / "export.csv"
    target.touch()
    repo = ConabCsvRepository(str(target))
    repo.save_records(records)
    reloaded = repo.get_records()

    assert [r.id for r in reloaded] == [r.id for r in records]
    assert [r.productivity for r in reloaded] == pytest.approx([r.productivity for r in records])
    assert reloaded[0].captured_at == records[0].captured_at


def test_bundled_dataset():
    """Test the bundled CONAB coffee series."""
    records = ConabCsvRepository(str(CROP_DATA_FILE)).get_records()

    assert len(records) == 37
    assert {r.year for r in records} == set(range(2018, 2027))
    assert len([r for r in records if r.region_code == "MG"]) == 9
