"""Repository interfaces."""

from .crop_record_repository import CropRecordRepository

__all__ = [
    "CropRecordRepository",
]
