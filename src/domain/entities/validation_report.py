"""Validation report entity."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ValidationReport:
    """Outcome of an integrity check over ingested records."""

    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {"is_valid": self.is_valid, "errors": list(self.errors)}
