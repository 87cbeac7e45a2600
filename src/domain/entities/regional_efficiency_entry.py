"""Regional efficiency entry entity."""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from .region_group import RegionGroup


@dataclass
class RegionalEfficiencyEntry:
    """Productivity of one state relative to the national average."""

    region_code: str
    region_group: RegionGroup
    avg_productivity: float  # kg/hectare
    total_production: float  # thousand bags
    efficiency_index: float  # 1.0 == national average
    rank: int = 0
    anomaly_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["region_group"] = self.region_group.value
        return data
