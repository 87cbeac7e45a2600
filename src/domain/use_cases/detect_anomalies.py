"""Use case for flagging outlier harvests with Tukey fences."""

import logging
from typing import List, Sequence, Tuple

import numpy as np

from ..entities.crop_record import CropRecord

logger = logging.getLogger(__name__)


class DetectAnomaliesUseCase:
    """Flag records whose production falls outside the interquartile fences."""

    def __init__(self, min_records: int = 4, iqr_multiplier: float = 1.5):
        """
        Initialize use case.

        Args:
            min_records: Minimum history size for the quartiles to be used
            iqr_multiplier: Fence distance from the quartiles, in IQRs
        """
        self.min_records = min_records
        self.iqr_multiplier = iqr_multiplier

    def fences(self, values: Sequence[float]) -> Tuple[float, float]:
        """
        Compute the lower and upper fences.

        Quartiles are taken by nearest rank at floor(0.25 * n) and
        floor(0.75 * n) of the sorted values, without interpolation.
        """
        ordered = np.sort(np.asarray(values, dtype=float))
        n = len(ordered)
        q1 = ordered[int(np.floor(n * 0.25))]
        q3 = ordered[int(np.floor(n * 0.75))]
        iqr = q3 - q1
        return float(q1 - self.iqr_multiplier * iqr), float(q3 + self.iqr_multiplier * iqr)

    def execute(self, records: Sequence[CropRecord]) -> List[CropRecord]:
        """
        Execute anomaly detection.

        Args:
            records: Historical records of a single region

        Returns:
            The anomalous records, in input order
        """
        if len(records) < self.min_records:
            logger.debug(f"Only {len(records)} records, skipping anomaly detection")
            return []

        lower, upper = self.fences([r.production for r in records])
        anomalies = [r for r in records if r.production < lower or r.production > upper]

        if anomalies:
            logger.info(
                f"Detected {len(anomalies)} anomalies in {len(records)} records "
                f"(fences=[{lower:.2f}, {upper:.2f}])"
            )
        return anomalies
