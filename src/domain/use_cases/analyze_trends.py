"""Use case for summarizing the volatility of a production series."""

import logging
from typing import Sequence

import numpy as np

from ..entities.crop_record import CropRecord
from ..entities.trend_analysis import TrendAnalysis, TrendDirection

logger = logging.getLogger(__name__)


class AnalyzeTrendsUseCase:
    """Year-over-year volatility, latest direction and cyclic flag."""

    def __init__(self, cyclic_volatility_threshold: float = 15.0):
        """
        Initialize use case.

        Args:
            cyclic_volatility_threshold: Volatility (%) above which a series is cyclic
        """
        self.cyclic_volatility_threshold = cyclic_volatility_threshold

    @staticmethod
    def percent_changes(productions: Sequence[float]) -> np.ndarray:
        """Year-over-year changes in percent; the first position counts as 0%."""
        changes = np.zeros(len(productions))
        for i in range(1, len(productions)):
            previous = productions[i - 1]
            if previous != 0:
                changes[i] = (productions[i] - previous) / previous * 100
        return changes

    def execute(self, records: Sequence[CropRecord]) -> TrendAnalysis:
        """
        Execute the analysis.

        Args:
            records: Records of a single region

        Returns:
            TrendAnalysis of the production series ordered by year
        """
        ordered = sorted(records, key=lambda r: r.year)
        if not ordered:
            logger.warning("No records for trend analysis")
            return TrendAnalysis(0.0, TrendDirection.FALLING, False)

        changes = self.percent_changes([r.production for r in ordered])
        volatility = float(np.sqrt(np.mean(changes**2)))
        direction = TrendDirection.RISING if changes[-1] > 0 else TrendDirection.FALLING

        return TrendAnalysis(
            volatility_percent=volatility,
            direction=direction,
            is_cyclic=volatility > self.cyclic_volatility_threshold,
        )
