"""Building component.

A building is the connected structure formed by building blocks sharing a
``building_id``. Privileges are kept in placement order; the first one is the
primary cupboard but systems treat them uniformly.
"""

from dataclasses import dataclass
from pyrsistent import PSet, PVector, pvector
from offline_raiding.components.properties.building_privilege import (
    BuildingPrivilege,
)
from offline_raiding.types import BuildingID, EntityID


@dataclass(frozen=True)
class Building:
    """Blocks and privileges of one building.

    Attributes:
        building_id: Id shared by every block of the building.
        block_ids: Entity ids of the building blocks forming the structure.
        privileges: Ordered building privileges protecting the structure.
    """

    building_id: BuildingID
    block_ids: PSet[EntityID]
    privileges: PVector[BuildingPrivilege] = pvector()

    def has_building_privileges(self) -> bool:
        return len(self.privileges) > 0
