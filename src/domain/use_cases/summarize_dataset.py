"""Use case for headline indicators over the dataset."""

import logging
from typing import Iterable, Optional, Sequence

import pandas as pd

from ..entities.crop_record import CropRecord
from ..entities.dataset_summary import DatasetSummary

logger = logging.getLogger(__name__)


class SummarizeDatasetUseCase:
    """Totals and averages for a year/region selection."""

    def execute(
        self,
        records: Sequence[CropRecord],
        years: Optional[Iterable[int]] = None,
        region_codes: Optional[Iterable[str]] = None,
    ) -> DatasetSummary:
        """
        Execute the summary.

        Args:
            records: Full dataset
            years: Years to keep (all when empty)
            region_codes: Regions to keep (all when empty)

        Returns:
            DatasetSummary of the selection
        """
        df = pd.DataFrame(
            [
                {
                    "region_code": r.region_code.upper(),
                    "year": r.year,
                    "production": r.production,
                    "productivity": r.productivity,
                    "area": r.area,
                }
                for r in records
            ],
            columns=["region_code", "year", "production", "productivity", "area"],
        )

        years = list(years or [])
        region_codes = [code.upper() for code in region_codes or []]
        if years:
            df = df[df["year"].isin(years)]
        if region_codes:
            df = df[df["region_code"].isin(region_codes)]

        if df.empty:
            logger.warning("No records match the summary filters")
            return DatasetSummary(0, 0.0, 0.0, 0.0, {})

        by_region = (
            df.groupby("region_code", sort=False)["production"].sum().sort_values(ascending=False)
        )
        return DatasetSummary(
            record_count=len(df),
            total_production=float(df["production"].sum()),
            avg_productivity=float(df["productivity"].mean()),
            total_area=float(df["area"].sum()),
            production_by_region={code: float(total) for code, total in by_region.items()},
        )
