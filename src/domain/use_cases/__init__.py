"""Use cases - core business operations."""

from .project_trend import ProjectTrendUseCase
from .adjust_for_biennial_cycle import AdjustForBiennialCycleUseCase
from .detect_anomalies import DetectAnomaliesUseCase
from .compute_efficiency_matrix import ComputeEfficiencyMatrixUseCase
from .generate_recommendations import (
    RecordRecommendationUseCase,
    RegionalRecommendationUseCase,
    latest_record_for_region,
)
from .analyze_trends import AnalyzeTrendsUseCase
from .validate_records import ValidateRecordsUseCase
from .summarize_dataset import SummarizeDatasetUseCase

__all__ = [
    "ProjectTrendUseCase",
    "AdjustForBiennialCycleUseCase",
    "DetectAnomaliesUseCase",
    "ComputeEfficiencyMatrixUseCase",
    "RegionalRecommendationUseCase",
    "RecordRecommendationUseCase",
    "latest_record_for_region",
    "AnalyzeTrendsUseCase",
    "ValidateRecordsUseCase",
    "SummarizeDatasetUseCase",
]
