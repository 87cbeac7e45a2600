"""Use case for checking ingested records for impossible values."""

import logging
from typing import Sequence

from ..entities.crop_record import CropRecord
from ..entities.validation_report import ValidationReport

logger = logging.getLogger(__name__)


class ValidateRecordsUseCase:
    """Integrity check run before records are handed to the analytics."""

    def __init__(
        self,
        min_year: int = 1990,
        max_year: int = 2026,
        max_productivity: float = 10000.0,
    ):
        self.min_year = min_year
        self.max_year = max_year
        self.max_productivity = max_productivity

    def execute(self, records: Sequence[CropRecord]) -> ValidationReport:
        """
        Execute the integrity check.

        Args:
            records: Parsed records

        Returns:
            ValidationReport with one message per violation
        """
        report = ValidationReport()
        for idx, record in enumerate(records):
            where = f"{record.region_code} ({record.year})"
            if record.production < 0:
                report.errors.append(f"[Row {idx}] Negative production in {where}.")
            if record.area < 0:
                report.errors.append(f"[Row {idx}] Negative planted area in {where}.")
            if record.year > self.max_year or record.year < self.min_year:
                report.errors.append(f"[Row {idx}] Year outside operating range: {record.year}.")
            if record.productivity > self.max_productivity:
                report.errors.append(
                    f"[Row {idx}] Anomalous productivity (>{self.max_productivity:.0f} kg/ha) "
                    f"in {record.region_code}. Check units."
                )

        if report.is_valid:
            logger.info(f"Validated {len(records)} records")
        else:
            logger.warning(f"Validation found {len(report.errors)} problems in {len(records)} records")
        return report
