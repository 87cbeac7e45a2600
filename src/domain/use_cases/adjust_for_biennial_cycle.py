"""Use case for projecting production with a biennial bearing correction."""

import logging
from typing import List, Optional, Sequence, Tuple

from ..entities.crop_record import CropRecord
from ..entities.prediction_result import PredictionResult
from .project_trend import ProjectTrendUseCase

logger = logging.getLogger(__name__)


class AdjustForBiennialCycleUseCase:
    """
    Calendar-aware projection of a region's production.

    Arabica coffee alternates high and low crops, so projections for even
    target years are scaled up and odd years scaled down. Bounds keep the
    unadjusted trend band unless ``rescale_bounds`` is enabled.
    """

    def __init__(
        self,
        projector: Optional[ProjectTrendUseCase] = None,
        high_year_factor: float = 1.15,
        low_year_factor: float = 0.85,
        crop_markers: Tuple[str, ...] = ("arabica", "arábica"),
        rescale_bounds: bool = False,
    ):
        """
        Initialize use case.

        Args:
            projector: Trend projector used for the raw projection
            high_year_factor: Multiplier applied to even target years
            low_year_factor: Multiplier applied to odd target years
            crop_markers: Lower-case substrings identifying biennial crops
            rescale_bounds: Whether bounds are scaled along with the value
        """
        self.projector = projector or ProjectTrendUseCase()
        self.high_year_factor = high_year_factor
        self.low_year_factor = low_year_factor
        self.crop_markers = crop_markers
        self.rescale_bounds = rescale_bounds

    def is_biennial(self, crop_type: str) -> bool:
        name = crop_type.lower()
        return any(marker in name for marker in self.crop_markers)

    def factor_for(self, target_year: int, biennial: bool) -> float:
        if not biennial:
            return 1.0
        return self.high_year_factor if target_year % 2 == 0 else self.low_year_factor

    def execute(self, records: Sequence[CropRecord], horizon: int = 3) -> List[PredictionResult]:
        """
        Execute the adjusted projection.

        Args:
            records: Records of a single region and crop
            horizon: Number of future years to project

        Returns:
            List of PredictionResult keyed by calendar target year
        """
        ordered = sorted(records, key=lambda r: r.year)
        if not ordered:
            logger.warning("No records to project")
            return []

        last_year = ordered[-1].year
        biennial = self.is_biennial(ordered[0].crop_type)
        logger.info(
            f"Projecting {ordered[0].region_code} {ordered[0].crop_type} "
            f"from {len(ordered)} records (biennial={biennial})"
        )

        raw = self.projector.execute([r.production for r in ordered], horizon)

        result = []
        for step, prediction in enumerate(raw, start=1):
            target_year = last_year + step
            factor = self.factor_for(target_year, biennial)
            crop_label = "high" if target_year % 2 == 0 else "low"
            changes = {
                "target_year": target_year,
                "predicted_value": prediction.predicted_value * factor,
            }
            if self.rescale_bounds:
                changes["lower_bound"] = prediction.lower_bound * factor
                changes["upper_bound"] = prediction.upper_bound * factor
            result.append(
                prediction.with_notes(
                    f"B_f = {factor:.2f} ({crop_label}-crop year adjustment)",
                    "Ŷ_adj = Ŷ * B_f",
                    **changes,
                )
            )
        return result
