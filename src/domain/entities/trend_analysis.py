"""Trend analysis entities."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class TrendDirection(str, Enum):
    """Direction of the most recent year-over-year change."""

    RISING = "rising"
    FALLING = "falling"


@dataclass(frozen=True)
class TrendAnalysis:
    """Volatility summary of a production series."""

    volatility_percent: float
    direction: TrendDirection
    is_cyclic: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "volatility_percent": self.volatility_percent,
            "direction": self.direction.value,
            "is_cyclic": self.is_cyclic,
        }
