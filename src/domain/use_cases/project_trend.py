"""Use case for projecting a production series with a linear trend."""

import logging
from typing import List, Sequence

import numpy as np
from sklearn.metrics import r2_score

from ..entities.prediction_result import PredictionResult

logger = logging.getLogger(__name__)


class ProjectTrendUseCase:
    """Least-squares trend projection over the positions of an ordered series."""

    def __init__(
        self,
        band_width: float = 0.08,
        base_confidence: float = 0.85,
        confidence_decay: float = 0.05,
    ):
        """
        Initialize use case.

        Args:
            band_width: Relative half-width of the projection band
            base_confidence: Confidence before any decay is applied
            confidence_decay: Confidence lost per forecast step
        """
        self.band_width = band_width
        self.base_confidence = base_confidence
        self.confidence_decay = confidence_decay

    @staticmethod
    def fit(values: Sequence[float]):
        """
        Fit value = slope * index + intercept in closed form.

        Positions are zero-based, so gaps between years count as a single step.
        A constant series fits exactly with a zero slope.

        Returns:
            Tuple of (slope, intercept)
        """
        y = np.asarray(values, dtype=float)
        if np.ptp(y) == 0:
            return 0.0, float(y[0])

        x = np.arange(len(y), dtype=float)
        x_mean = x.mean()
        y_mean = y.mean()

        slope = ((x - x_mean) * (y - y_mean)).sum() / ((x - x_mean) ** 2).sum()
        intercept = y_mean - slope * x_mean
        return float(slope), float(intercept)

    @staticmethod
    def r_squared(values: Sequence[float], slope: float, intercept: float) -> float:
        """Coefficient of determination of the fit; 1.0 for a constant series."""
        y = np.asarray(values, dtype=float)
        if np.ptp(y) == 0:
            return 1.0
        return float(r2_score(y, slope * np.arange(len(y), dtype=float) + intercept))

    def execute(self, values: Sequence[float], horizon: int = 1) -> List[PredictionResult]:
        """
        Execute the projection.

        Args:
            values: Series ordered by its natural field (year ascending)
            horizon: Number of future steps to project

        Returns:
            One PredictionResult per step, target_year holding the step number.
            Empty when fewer than two points are available.
        """
        if horizon < 1:
            raise ValueError(f"horizon must be a positive integer, got {horizon}")

        n = len(values)
        if n < 2:
            logger.warning(f"Insufficient data for trend projection ({n} points), skipping")
            return []

        slope, intercept = self.fit(values)
        r_squared = self.r_squared(values, slope, intercept)
        notes = (
            f"ŷ = {intercept:.4f} + {slope:.4f}x",
            f"R² = {r_squared:.4f}",
        )

        last_value = values[-1]
        result = []
        for step in range(1, horizon + 1):
            fitted = slope * (n + step - 1) + intercept
            # Growth is measured against the clamped value
            predicted = max(0.0, fitted)
            growth_rate = (predicted - last_value) / last_value * 100 if last_value != 0 else 0.0
            result.append(
                PredictionResult(
                    target_year=step,
                    predicted_value=predicted,
                    # Band follows the unclamped fit; only the lower edge is floored
                    lower_bound=max(0.0, fitted * (1 - self.band_width)),
                    upper_bound=fitted * (1 + self.band_width),
                    growth_rate_percent=growth_rate,
                    confidence_score=self.base_confidence - step * self.confidence_decay,
                    derivation_notes=notes,
                )
            )

        logger.info(
            f"Projected {horizon} steps from {n} points (slope={slope:.4f}, R²={r_squared:.4f})"
        )
        return result
