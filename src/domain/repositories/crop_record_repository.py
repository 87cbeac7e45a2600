"""Crop record repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from ..entities.crop_record import CropRecord


class CropRecordRepository(ABC):
    """Abstract repository for crop record access."""

    @abstractmethod
    def get_records(
        self,
        region_code: Optional[str] = None,
        year: Optional[int] = None,
        crop_type: Optional[str] = None,
    ) -> List[CropRecord]:
        """
        Retrieve crop records.

        Args:
            region_code: Filter by state code (optional)
            year: Filter by year (optional)
            crop_type: Filter by crop name (optional)

        Returns:
            List of CropRecord entities
        """
        pass

    @abstractmethod
    def save_records(self, records: List[CropRecord]) -> None:
        """
        Save crop records.

        Args:
            records: List of CropRecord entities to save
        """
        pass
