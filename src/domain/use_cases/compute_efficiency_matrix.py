"""Use case for ranking regions by productivity against the national average."""

import logging
from typing import List, Optional, Sequence

import pandas as pd

from ..entities.crop_record import CropRecord
from ..entities.regional_efficiency_entry import RegionalEfficiencyEntry
from .detect_anomalies import DetectAnomaliesUseCase

logger = logging.getLogger(__name__)


class ComputeEfficiencyMatrixUseCase:
    """Cross-sectional efficiency ranking for a reference year."""

    def __init__(self, anomaly_detector: Optional[DetectAnomaliesUseCase] = None):
        """
        Initialize use case.

        Args:
            anomaly_detector: Detector run over each region's full history
        """
        self.anomaly_detector = anomaly_detector or DetectAnomaliesUseCase()

    def execute(
        self, records: Sequence[CropRecord], reference_year: int
    ) -> List[RegionalEfficiencyEntry]:
        """
        Execute the efficiency ranking.

        Args:
            records: Full historical dataset
            reference_year: Year whose records are ranked

        Returns:
            Entries sorted by descending efficiency index, ranked from 1
        """
        logger.info(f"Computing efficiency matrix for {reference_year} over {len(records)} records")

        df = pd.DataFrame(
            {
                "region_code": [r.region_code for r in records],
                "year": [r.year for r in records],
                "productivity": [r.productivity for r in records],
                "record": list(records),
            }
        )
        current = df[df["year"] == reference_year] if not df.empty else df
        if current.empty:
            logger.warning(f"No records for reference year {reference_year}")
            return []

        national_average = current["productivity"].mean()
        if national_average == 0:
            logger.warning(f"National average productivity is zero for {reference_year}")

        # Anomalies come from each region's whole history, not the reference year
        histories = {
            code: group["record"].tolist() for code, group in df.groupby("region_code", sort=False)
        }
        ranked_codes = set(current["region_code"])
        anomaly_counts = {
            code: len(self.anomaly_detector.execute(history))
            for code, history in histories.items()
            if code in ranked_codes
        }

        entries = []
        for record in current["record"]:
            efficiency = record.productivity / national_average if national_average else 0.0
            entries.append(
                RegionalEfficiencyEntry(
                    region_code=record.region_code,
                    region_group=record.region_group,
                    avg_productivity=record.productivity,
                    total_production=record.production,
                    efficiency_index=float(efficiency),
                    anomaly_count=anomaly_counts[record.region_code],
                )
            )

        # sorted() is stable, so ties keep their input order
        entries = sorted(entries, key=lambda e: e.efficiency_index, reverse=True)
        for position, entry in enumerate(entries):
            entry.rank = position + 1

        logger.info(
            f"Ranked {len(entries)} entries (national average={national_average:.2f} kg/ha)"
        )
        return entries
