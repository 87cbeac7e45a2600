"""Prediction result entity."""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class PredictionResult:
    """Projection for one future period."""

    target_year: int
    predicted_value: float
    lower_bound: float
    upper_bound: float
    growth_rate_percent: float
    confidence_score: float  # 0-1, decays with the forecast horizon
    derivation_notes: Tuple[str, ...] = ()

    def with_notes(self, *notes: str, **changes: Any) -> "PredictionResult":
        """Return a copy with notes appended after the existing ones."""
        return replace(self, derivation_notes=self.derivation_notes + tuple(notes), **changes)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["derivation_notes"] = list(self.derivation_notes)
        return data
