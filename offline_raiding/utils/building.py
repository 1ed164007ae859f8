"""Building resolution helpers."""

from typing import List, Optional

from offline_raiding.components import (
    Building,
    BuildingBlock,
    DecayEntity,
    Structure,
)
from offline_raiding.state import World
from offline_raiding.types import BuildingID, EntityID, PlayerID


def building_id_for(structure: Optional[Structure]) -> Optional[BuildingID]:
    """Building id carried by a structure variant, ``None`` for anything else."""
    match structure:
        case BuildingBlock(building_id=building_id):
            return building_id
        case DecayEntity(building_id=building_id):
            return building_id
        case _:
            return None


def try_get_building_for_entity(
    world: World,
    entity_id: EntityID,
    minimum_building_blocks: int,
    must_have_building_privilege: bool = True,
) -> Optional[Building]:
    """Return the building ``entity_id`` belongs to if it meets the requirements.

    Args:
        world (World): Current snapshot.
        entity_id (EntityID): Damaged or inspected entity.
        minimum_building_blocks (int): Smallest acceptable block count.
        must_have_building_privilege (bool): Reject buildings without any
            privilege (unclaimed structures).

    Returns:
        Building | None: The building, or ``None`` when the entity is not part
        of a building or the building does not qualify.
    """
    building_id = building_id_for(world.structure.get(entity_id))
    if building_id is None:
        return None

    building = world.building.get(building_id)
    if building is None:
        return None
    if len(building.block_ids) < minimum_building_blocks:
        return None
    if must_have_building_privilege and not building.has_building_privileges():
        return None
    return building


def authorized_player_ids(building: Building) -> List[PlayerID]:
    """Flatten the authorization lists of every privilege (duplicates kept)."""
    return [
        player_id
        for privilege in building.privileges
        for player_id in privilege.authorized_players
    ]
