"""Domain entities."""

from .region_group import RegionGroup, REGION_LOOKUP, resolve_region_group
from .crop_record import CropRecord, calculate_productivity
from .prediction_result import PredictionResult
from .regional_efficiency_entry import RegionalEfficiencyEntry
from .trend_analysis import TrendAnalysis, TrendDirection
from .validation_report import ValidationReport
from .dataset_summary import DatasetSummary

__all__ = [
    "RegionGroup",
    "REGION_LOOKUP",
    "resolve_region_group",
    "CropRecord",
    "calculate_productivity",
    "PredictionResult",
    "RegionalEfficiencyEntry",
    "TrendAnalysis",
    "TrendDirection",
    "ValidationReport",
    "DatasetSummary",
]
