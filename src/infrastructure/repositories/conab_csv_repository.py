"""CONAB (Companhia Nacional de Abastecimento) crop record repository implementation."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import pandas as pd

from ...domain.entities.crop_record import CropRecord
from ...domain.repositories.crop_record_repository import CropRecordRepository

logger = logging.getLogger(__name__)

RECORD_COLUMNS = [
    "id",
    "year",
    "region_code",
    "region_group",
    "crop_type",
    "production",
    "productivity",
    "area",
    "captured_at",
]

# Column names of the raw CONAB historical series export
RAW_EXPORT_COLUMNS = {
    "state": "region_code",
    "cropType": "crop_type",
}


class ConabCsvRepository(CropRecordRepository):
    """Repository for crop records stored as CSV or Excel files."""

    def __init__(self, data_file: str):
        """
        Initialize repository.

        Args:
            data_file: Path to CSV/XLSX file with crop records
        """
        self.data_file = Path(data_file)
        if not self.data_file.exists():
            raise FileNotFoundError(f"Crop data file not found: {data_file}")

    def _read_frame(self) -> pd.DataFrame:
        try:
            if self.data_file.suffix == ".xlsx":
                return pd.read_excel(self.data_file, engine="openpyxl")
            return pd.read_csv(self.data_file)
        except Exception as e:
            logger.error(f"Error reading crop data file: {e}")
            raise

    @staticmethod
    def parse_frame(df: pd.DataFrame) -> List[CropRecord]:
        """
        Convert a frame into records.

        Raw exports carry only state, year, production, area and crop; ids,
        productivity and region groups are derived for them.
        """
        df = df.rename(columns=RAW_EXPORT_COLUMNS)
        missing = {"region_code", "year", "production", "area", "crop_type"} - set(df.columns)
        if missing:
            raise ValueError(f"Crop data is missing columns: {sorted(missing)}")

        now = datetime.now(timezone.utc)
        result = []
        for index, row in df.reset_index(drop=True).iterrows():
            code = str(row["region_code"]).strip().upper()
            year = int(row["year"])
            record_id = row.get("id")
            productivity = row.get("productivity")
            region_group = row.get("region_group")
            captured_at = row.get("captured_at")
            record = CropRecord(
                id=str(record_id) if pd.notna(record_id) else f"conab-{code}-{year}-{index}",
                year=year,
                region_code=code,
                crop_type=str(row["crop_type"]).strip(),
                production=float(row["production"]),
                area=float(row["area"]),
                productivity=float(productivity) if pd.notna(productivity) else None,
                region_group=region_group if pd.notna(region_group) else None,
                captured_at=(
                    pd.Timestamp(captured_at).to_pydatetime() if pd.notna(captured_at) else now
                ),
            )
            result.append(record)
        return result

    def get_records(
        self,
        region_code: Optional[str] = None,
        year: Optional[int] = None,
        crop_type: Optional[str] = None,
    ) -> List[CropRecord]:
        """Retrieve crop records from the data file."""
        logger.info(f"Loading crop records from {self.data_file}")

        records = self.parse_frame(self._read_frame())

        # Apply filters
        if region_code:
            records = [r for r in records if r.region_code == region_code.strip().upper()]
        if year:
            records = [r for r in records if r.year == year]
        if crop_type:
            records = [r for r in records if r.crop_type.lower() == crop_type.lower()]

        logger.info(f"Loaded {len(records)} crop records")
        return records

    def save_records(self, records: List[CropRecord]) -> None:
        """Save crop records to the data file."""
        logger.info(f"Saving {len(records)} crop records to {self.data_file}")

        df = pd.DataFrame([r.to_dict() for r in records], columns=RECORD_COLUMNS)
        if self.data_file.suffix == ".xlsx":
            df.to_excel(self.data_file, index=False, engine="openpyxl")
        else:
            df.to_csv(self.data_file, index=False)

        logger.info("Crop records saved successfully")
