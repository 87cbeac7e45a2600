"""Concrete repository implementations."""

from .conab_csv_repository import ConabCsvRepository

__all__ = [
    "ConabCsvRepository",
]
