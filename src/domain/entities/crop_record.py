"""Crop record entity."""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .region_group import RegionGroup, resolve_region_group

KG_PER_BAG = 60


def calculate_productivity(production: float, area: float) -> float:
    """Convert thousand bags over thousand hectares into kg per hectare."""
    if area == 0:
        return 0.0
    return (production * KG_PER_BAG) / area


@dataclass(frozen=True)
class CropRecord:
    """Represents one crop observation for a state in a given year."""

    id: str
    year: int
    region_code: str  # State abbreviation, e.g. 'MG'
    crop_type: str  # e.g. 'Café Arábica'
    production: float  # in thousand 60 kg bags
    area: float  # in thousand hectares
    productivity: Optional[float] = None  # in kg/hectare
    region_group: Optional[RegionGroup] = None
    captured_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if self.productivity is None:
            object.__setattr__(
                self, "productivity", calculate_productivity(self.production, self.area)
            )
        if self.region_group is None:
            object.__setattr__(self, "region_group", resolve_region_group(self.region_code))
        elif not isinstance(self.region_group, RegionGroup):
            object.__setattr__(self, "region_group", RegionGroup(self.region_group))

    @classmethod
    def create(
        cls,
        region_code: str,
        year: int,
        crop_type: str,
        production: float,
        area: float,
        record_id: Optional[str] = None,
    ) -> "CropRecord":
        """Build a record from raw CONAB figures, deriving productivity and region."""
        code = region_code.strip().upper()
        return cls(
            id=record_id or f"{code.lower()}-{year}",
            year=year,
            region_code=code,
            crop_type=crop_type,
            production=production,
            area=area,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for tabular export."""
        data = asdict(self)
        data["region_group"] = self.region_group.value
        data["captured_at"] = self.captured_at.isoformat()
        return data

    def __str__(self) -> str:
        return f"{self.region_code}_{self.year}_{self.crop_type}"
