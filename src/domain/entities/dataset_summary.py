"""Dataset summary entity."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict


@dataclass
class DatasetSummary:
    """Headline indicators over a filtered set of records."""

    record_count: int
    total_production: float  # thousand bags
    avg_productivity: float  # kg/hectare, unweighted mean
    total_area: float  # thousand hectares
    production_by_region: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
