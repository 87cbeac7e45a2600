"""Region group enumeration and state lookup."""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)


class RegionGroup(str, Enum):
    """Brazilian macro-regions used to group state-level records."""

    NORTH = "NORTH"
    NORTHEAST = "NORTHEAST"
    MIDWEST = "MIDWEST"
    SOUTHEAST = "SOUTHEAST"
    SOUTH = "SOUTH"

    def to_portuguese(self) -> str:
        """Convert to the label used in CONAB reports."""
        mapping = {
            RegionGroup.NORTH: "Norte",
            RegionGroup.NORTHEAST: "Nordeste",
            RegionGroup.MIDWEST: "Centro-Oeste",
            RegionGroup.SOUTHEAST: "Sudeste",
            RegionGroup.SOUTH: "Sul",
        }
        return mapping[self]


DEFAULT_REGION_GROUP = RegionGroup.SOUTHEAST

REGION_LOOKUP: Mapping[str, RegionGroup] = MappingProxyType(
    {
        **{code: RegionGroup.NORTH for code in ("AC", "AM", "AP", "PA", "RO", "RR", "TO")},
        **{
            code: RegionGroup.NORTHEAST
            for code in ("AL", "BA", "CE", "MA", "PB", "PE", "PI", "RN", "SE")
        },
        **{code: RegionGroup.MIDWEST for code in ("DF", "GO", "MT", "MS")},
        **{code: RegionGroup.SOUTHEAST for code in ("ES", "MG", "RJ", "SP")},
        **{code: RegionGroup.SOUTH for code in ("PR", "RS", "SC")},
    }
)


def resolve_region_group(region_code: str) -> RegionGroup:
    """
    Resolve the region group of a state code.

    Unmapped codes fall back to SOUTHEAST.

    Args:
        region_code: State abbreviation (case-insensitive)

    Returns:
        RegionGroup for the code
    """
    group = REGION_LOOKUP.get((region_code or "").strip().upper())
    if group is None:
        logger.debug(f"Unmapped region code {region_code!r}, using {DEFAULT_REGION_GROUP.value}")
        return DEFAULT_REGION_GROUP
    return group
