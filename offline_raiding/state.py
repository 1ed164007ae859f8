"""Immutable snapshot of the host registries.

The plugin never owns game state. Each damage event is evaluated against a
frozen :class:`World` that the host builds from its own registries (players,
teams, buildings, entity ownership, permissions) and keeps valid for the
duration of a single hook call.

Design notes:

* Stores are **persistent maps** (``pyrsistent.PMap``) keyed by id. Absence
  of a key means the host does not know the record; e.g. a player missing from
  ``player`` is treated as offline.
* ``structure`` links an entity to the building it belongs to through the
  :data:`offline_raiding.components.Structure` variant.
* Permission grants live on the snapshot too, so the policy stays a pure
  function of ``(World, DamageEvent, Configuration)``.
"""

from dataclasses import dataclass
from pyrsistent import PMap, PSet, pmap, pset

from offline_raiding.components import (
    Building,
    Owner,
    Player,
    Structure,
    Team,
)
from offline_raiding.types import BuildingID, EntityID, PlayerID, TeamID


@dataclass(frozen=True)
class World:
    """Immutable view over the host's world state.

    Attributes:
        player (PMap[PlayerID, Player]): Known players and their connection state.
        team (PMap[TeamID, Team]): Teams and their members.
        building (PMap[BuildingID, Building]): Buildings by id.
        owner (PMap[EntityID, Owner]): Ownership of placed entities.
        structure (PMap[EntityID, Structure]): Entity to building links.
        permission (PMap[PlayerID, PSet[str]]): Permissions granted per player.
        registered_permissions (PSet[str]): Capabilities known to the registry.
    """

    player: PMap[PlayerID, Player] = pmap()
    team: PMap[TeamID, Team] = pmap()
    building: PMap[BuildingID, Building] = pmap()
    owner: PMap[EntityID, Owner] = pmap()
    structure: PMap[EntityID, Structure] = pmap()
    permission: PMap[PlayerID, PSet[str]] = pmap()
    registered_permissions: PSet[str] = pset()
