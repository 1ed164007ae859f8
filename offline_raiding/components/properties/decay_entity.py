"""Decay entity component (doors, boxes and other deployables)."""

from dataclasses import dataclass
from offline_raiding.types import BuildingID


@dataclass(frozen=True)
class DecayEntity:
    """Deployable attached to a building and decaying with it."""

    building_id: BuildingID
