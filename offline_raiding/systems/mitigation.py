"""Offline damage mitigation system.

Explosive damage dealt by a player to a claimed building is scaled down when
nobody who could defend the building is online. The system is a pure function
of ``(World, DamageEvent, Configuration)``: it returns the event to apply and,
when damage was reduced, the notification owed to the attacker.

Eligibility filters run in a fixed order and short-circuit:

1. explosive damage on a resolved entity,
2. a player initiated it,
3. the attacker lacks the bypass permission,
4. the entity has a known owner,
5. the owner is neither the attacker nor the attacker's teammate,
6. the entity belongs to a building with at least one block and a privilege.

Any failed filter returns the original event untouched.
"""

from dataclasses import replace
from typing import Optional, Tuple

from loguru import logger

from offline_raiding.components import Building
from offline_raiding.config import Configuration
from offline_raiding.events import DamageEvent, Notification
from offline_raiding.lang import Lang
from offline_raiding.permissions import IGNORE, has_permission
from offline_raiding.state import World
from offline_raiding.types import DamageType, PlayerID
from offline_raiding.utils.building import (
    authorized_player_ids,
    try_get_building_for_entity,
)
from offline_raiding.utils.damage import has_damage_type, scale_all
from offline_raiding.utils.player import are_teammates, find_by_id, get_team, is_offline

MINIMUM_BUILDING_BLOCKS = 1


def is_explosive(event: DamageEvent) -> bool:
    return has_damage_type(event.damage_types, DamageType.EXPLOSION)


def find_eligible_building(
    world: World, event: DamageEvent, attacker_id: PlayerID
) -> Optional[Tuple[PlayerID, Building]]:
    """Resolve the owner and building of the damaged entity if mitigation may apply.

    Returns:
        tuple[PlayerID, Building] | None: Owner id and building, or ``None``
        when the attacker bypasses mitigation, owns or shares a team with the
        owner, or the entity is not part of a claimed building.
    """
    if event.entity_id is None:
        return None

    if has_permission(world, attacker_id, IGNORE):
        logger.debug("Attacker {} bypasses offline mitigation", attacker_id)
        return None

    owner = world.owner.get(event.entity_id)
    if owner is None or find_by_id(world, owner.player_id) is None:
        return None
    owner_id = owner.player_id

    if owner_id == attacker_id:
        return None

    if are_teammates(world, owner_id, attacker_id):
        return None

    building = try_get_building_for_entity(
        world,
        event.entity_id,
        minimum_building_blocks=MINIMUM_BUILDING_BLOCKS,
        must_have_building_privilege=True,
    )
    if building is None:
        return None

    return owner_id, building


def all_authorized_offline(world: World, building: Building, owner_id: PlayerID) -> bool:
    """True if no authorized player, nor any teammate of one, is online.

    A teammate equal to the building owner also counts as a defender, even
    when offline. An empty authorization list is vacuously offline.
    """
    authed_players = authorized_player_ids(building)
    if not authed_players:
        logger.warning(
            "Building {} has no authorized players; treating owners as offline",
            building.building_id,
        )

    for player_id in authed_players:
        if not is_offline(world, player_id):
            return False

        team = get_team(world, player_id)
        if team is None:
            continue
        for member_id in team.members:
            if member_id == owner_id or not is_offline(world, member_id):
                return False

    return True


def reduction_factor(config: Configuration) -> float:
    """Multiplier applied to damage, ``1 - percentage / 100``."""
    return max(0.0, 1 - config.reduction)


def mitigation_system(
    world: World, event: DamageEvent, config: Configuration
) -> Tuple[DamageEvent, Optional[Notification]]:
    """Scale explosive raid damage when every defender of the building is offline.

    Args:
        world (World): Snapshot of the host registries.
        event (DamageEvent): Incoming damage.
        config (Configuration): Loaded plugin configuration.

    Returns:
        tuple[DamageEvent, Notification | None]: The event to apply (the same
        object when nothing changed) and the attacker notification, if any.
    """
    unchanged = event, None

    if event.entity_id is None or not is_explosive(event):
        return unchanged

    attacker_id = event.initiator
    if attacker_id is None:
        return unchanged

    eligible = find_eligible_building(world, event, attacker_id)
    if eligible is None:
        return unchanged
    owner_id, building = eligible

    if not all_authorized_offline(world, building, owner_id):
        return unchanged

    negative = [damage_type for damage_type, amount in event.damage_types.items() if amount < 0]
    if negative:
        logger.debug("Clamping negative {} damage to zero on entity {}", negative, event.entity_id)

    percentage = config.damage_reduction_percentage
    mitigated = replace(
        event, damage_types=scale_all(event.damage_types, reduction_factor(config))
    )
    logger.info(
        "Reduced damage by {}% for attacker {} on entity {} (owner {} offline)",
        percentage,
        attacker_id,
        event.entity_id,
        owner_id,
    )
    return mitigated, Notification(
        player_id=attacker_id, key=Lang.DAMAGE_REDUCED, args=(percentage,)
    )
