"""Shared fixtures."""

import pytest
from config.settings import CROP_DATA_FILE, ANALYTICS_SETTINGS
from src.application.services.crop_analytics_service import CropAnalyticsService
from src.domain.entities.crop_record import CropRecord
from src.infrastructure.repositories.conab_csv_repository import ConabCsvRepository


@pytest.fixture
def make_record():
    """Factory for records with sensible defaults."""

    def _make(
        production,
        year=2020,
        region_code="MG",
        crop_type="Café Conillon",
        area=100.0,
        productivity=None,
        record_id=None,
    ):
        return CropRecord(
            id=record_id or f"{region_code.lower()}-{year}-{production}",
            year=year,
            region_code=region_code,
            crop_type=crop_type,
            production=production,
            area=area,
            productivity=productivity,
        )

    return _make


@pytest.fixture
def service():
    """Service over the bundled CONAB coffee dataset."""
    return CropAnalyticsService(
        repository=ConabCsvRepository(str(CROP_DATA_FILE)),
        analytics_settings=ANALYTICS_SETTINGS,
    )
