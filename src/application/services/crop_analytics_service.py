"""Main service orchestrating the crop analytics workflow."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ...domain.entities.crop_record import CropRecord
from ...domain.entities.dataset_summary import DatasetSummary
from ...domain.entities.prediction_result import PredictionResult
from ...domain.entities.regional_efficiency_entry import RegionalEfficiencyEntry
from ...domain.entities.trend_analysis import TrendAnalysis
from ...domain.entities.validation_report import ValidationReport
from ...domain.repositories.crop_record_repository import CropRecordRepository

# Use cases
from ...domain.use_cases.project_trend import ProjectTrendUseCase
from ...domain.use_cases.adjust_for_biennial_cycle import AdjustForBiennialCycleUseCase
from ...domain.use_cases.detect_anomalies import DetectAnomaliesUseCase
from ...domain.use_cases.compute_efficiency_matrix import ComputeEfficiencyMatrixUseCase
from ...domain.use_cases.generate_recommendations import (
    RecordRecommendationUseCase,
    RegionalRecommendationUseCase,
    latest_record_for_region,
)
from ...domain.use_cases.analyze_trends import AnalyzeTrendsUseCase
from ...domain.use_cases.validate_records import ValidateRecordsUseCase
from ...domain.use_cases.summarize_dataset import SummarizeDatasetUseCase

logger = logging.getLogger(__name__)


class CropAnalyticsService:
    """Runs the analytics over the records supplied by a repository."""

    def __init__(
        self,
        repository: CropRecordRepository,
        analytics_settings: Dict[str, Any],
        biennial_settings: Optional[Dict[str, Any]] = None,
        anomaly_settings: Optional[Dict[str, Any]] = None,
        trend_settings: Optional[Dict[str, Any]] = None,
        recommendation_settings: Optional[Dict[str, Any]] = None,
        validation_settings: Optional[Dict[str, Any]] = None,
    ):
        self.repository = repository
        self.reference_year = analytics_settings["reference_year"]
        self.default_horizon = analytics_settings.get("default_horizon", 3)

        biennial_settings = dict(biennial_settings or {})
        recommendation_settings = dict(recommendation_settings or {})
        crop_markers = biennial_settings.get("crop_markers", ("arabica", "arábica"))

        self.projector = ProjectTrendUseCase(
            band_width=analytics_settings.get("band_width", 0.08),
            base_confidence=analytics_settings.get("base_confidence", 0.85),
            confidence_decay=analytics_settings.get("confidence_decay", 0.05),
        )
        self.biennial_uc = AdjustForBiennialCycleUseCase(
            projector=self.projector, **biennial_settings
        )
        self.anomaly_uc = DetectAnomaliesUseCase(**(anomaly_settings or {}))
        self.efficiency_uc = ComputeEfficiencyMatrixUseCase(anomaly_detector=self.anomaly_uc)
        self.trends_uc = AnalyzeTrendsUseCase(**(trend_settings or {}))
        self.regional_recommendation_uc = RegionalRecommendationUseCase(
            **{
                key: recommendation_settings[key]
                for key in (
                    "min_bags_per_hectare",
                    "irrigation_region_groups",
                    "high_productivity",
                    "nitrogen_per_kg",
                )
                if key in recommendation_settings
            }
        )
        self.record_recommendation_uc = RecordRecommendationUseCase(
            crop_markers=crop_markers,
            **{
                key: recommendation_settings[key]
                for key in ("low_productivity", "large_area", "medium_productivity")
                if key in recommendation_settings
            },
        )
        self.validate_uc = ValidateRecordsUseCase(**(validation_settings or {}))
        self.summary_uc = SummarizeDatasetUseCase()

    def records(self, region_code: Optional[str] = None) -> List[CropRecord]:
        records = self.repository.get_records(region_code=region_code)
        logger.debug(f"Fetched {len(records)} records (region={region_code})")
        return records

    def project_region(
        self, region_code: str, horizon: Optional[int] = None
    ) -> List[PredictionResult]:
        """Biennial-adjusted production projection for a state."""
        return self.biennial_uc.execute(
            self.records(region_code),
            horizon if horizon is not None else self.default_horizon,
        )

    def efficiency_matrix(
        self, reference_year: Optional[int] = None
    ) -> List[RegionalEfficiencyEntry]:
        return self.efficiency_uc.execute(self.records(), reference_year or self.reference_year)

    def region_anomalies(self, region_code: str) -> List[CropRecord]:
        return self.anomaly_uc.execute(self.records(region_code))

    def region_trends(self, region_code: str) -> TrendAnalysis:
        return self.trends_uc.execute(self.records(region_code))

    def region_recommendations(self, region_code: str) -> List[str]:
        latest = latest_record_for_region(self.records(region_code), region_code)
        return self.regional_recommendation_uc.execute(latest)

    def record_recommendations(self, record_id: str) -> List[str]:
        """Recommendations for one record; unknown ids raise KeyError."""
        for record in self.records():
            if record.id == record_id:
                return self.record_recommendation_uc.execute(record)
        raise KeyError(f"Unknown record id: {record_id}")

    def validate(self) -> ValidationReport:
        return self.validate_uc.execute(self.records())

    def summary(
        self,
        years: Optional[Iterable[int]] = None,
        region_codes: Optional[Iterable[str]] = None,
    ) -> DatasetSummary:
        return self.summary_uc.execute(self.records(), years=years, region_codes=region_codes)
