"""Building block component (foundations, walls, floors...)."""

from dataclasses import dataclass
from offline_raiding.types import BuildingID


@dataclass(frozen=True)
class BuildingBlock:
    """Structural piece linked to a building."""

    building_id: BuildingID
