"""Use cases for rule-based agronomic recommendations."""

import logging
from typing import List, Optional, Sequence, Tuple

from ..entities.crop_record import CropRecord
from ..entities.region_group import RegionGroup

logger = logging.getLogger(__name__)

INSUFFICIENT_DATA = "Insufficient data for regional analysis."
LOW_DENSITY_ALERT = (
    "[ALERT] Low production density in {region}. "
    "Denser planting and genetic renewal are recommended."
)
DRIP_IRRIGATION = "Invest in drip irrigation systems to mitigate severe water stress."
SPECIALTY_CERTIFICATION = (
    "High performance detected. Focus on specialty coffee certifications "
    "and traceability to add value."
)
NITROGEN_REPLENISHMENT = (
    "Nutrient replenishment estimate: {nitrogen} kg of N/ha to sustain current output."
)

IRRIGATION_AND_RENEWAL = (
    "Adopt irrigation systems and renew the coffee stand to raise baseline productivity."
)
NUTRIENT_MANAGEMENT = "Intensify nutrient management on large areas to dilute fixed costs."
CLIMATE_RISK_MONITORING = (
    "Closely monitor climate variables to mitigate frost and prolonged drought risk."
)
MAINTAIN_PROTOCOLS = "Maintain current protocols and invest in sustainability certifications."


def latest_record_for_region(
    records: Sequence[CropRecord], region_code: str
) -> Optional[CropRecord]:
    """Most recent record of a region; the first one wins when years tie."""
    code = region_code.strip().upper()
    latest = None
    for record in records:
        if record.region_code.upper() == code and (latest is None or record.year > latest.year):
            latest = record
    return latest


class RegionalRecommendationUseCase:
    """Guidance for a region based on its latest record."""

    def __init__(
        self,
        min_bags_per_hectare: float = 20.0,
        irrigation_region_groups: Tuple[str, ...] = ("NORTH", "NORTHEAST"),
        high_productivity: float = 3000.0,
        nitrogen_per_kg: float = 0.12,
    ):
        self.min_bags_per_hectare = min_bags_per_hectare
        self.irrigation_region_groups = {RegionGroup(g) for g in irrigation_region_groups}
        self.high_productivity = high_productivity
        self.nitrogen_per_kg = nitrogen_per_kg

    def execute(self, latest_record: Optional[CropRecord]) -> List[str]:
        """
        Execute the rule set.

        Args:
            latest_record: The region's most recent record, if any

        Returns:
            Recommendations in rule order; the nitrogen estimate is always last
        """
        if latest_record is None:
            return [INSUFFICIENT_DATA]

        record = latest_record
        recommendations = []

        # Zero area counts as zero density
        density = record.production / record.area if record.area else 0.0
        if density < self.min_bags_per_hectare:
            recommendations.append(LOW_DENSITY_ALERT.format(region=record.region_code))

        if record.region_group in self.irrigation_region_groups:
            recommendations.append(DRIP_IRRIGATION)

        if record.productivity > self.high_productivity:
            recommendations.append(SPECIALTY_CERTIFICATION)

        nitrogen = record.productivity * self.nitrogen_per_kg
        recommendations.append(NITROGEN_REPLENISHMENT.format(nitrogen=f"{nitrogen:.2f}"))

        logger.debug(f"{len(recommendations)} recommendations for {record}")
        return recommendations


class RecordRecommendationUseCase:
    """Generic guidance for a single record."""

    def __init__(
        self,
        low_productivity: float = 1500.0,
        large_area: float = 500.0,
        medium_productivity: float = 2500.0,
        crop_markers: Tuple[str, ...] = ("arabica", "arábica"),
    ):
        self.low_productivity = low_productivity
        self.large_area = large_area
        self.medium_productivity = medium_productivity
        self.crop_markers = crop_markers

    def execute(self, record: CropRecord) -> List[str]:
        recommendations = []

        if record.productivity < self.low_productivity:
            recommendations.append(IRRIGATION_AND_RENEWAL)

        if record.area > self.large_area and record.productivity < self.medium_productivity:
            recommendations.append(NUTRIENT_MANAGEMENT)

        crop = record.crop_type.lower()
        if record.region_group == RegionGroup.SOUTHEAST and any(
            marker in crop for marker in self.crop_markers
        ):
            recommendations.append(CLIMATE_RISK_MONITORING)

        if not recommendations:
            recommendations.append(MAINTAIN_PROTOCOLS)

        return recommendations
