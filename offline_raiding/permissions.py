"""Permission capabilities and registry helpers.

The host keeps a registry of known capabilities plus the grants per player;
both are carried on the :class:`~offline_raiding.state.World` snapshot. All
helpers are pure and return a new ``World`` when they change it.
"""

from dataclasses import replace
from typing import Tuple
from pyrsistent import pset

from offline_raiding.state import World
from offline_raiding.types import PlayerID

IGNORE = "offlineraidingweakened.ignore"

PERMISSIONS: Tuple[str, ...] = (IGNORE,)


def register_permissions(world: World) -> World:
    """Register every plugin capability (idempotent)."""
    return replace(
        world, registered_permissions=world.registered_permissions.update(PERMISSIONS)
    )


def has_permission(world: World, player_id: PlayerID, permission_name: str) -> bool:
    """Return True if ``player_id`` was granted a registered ``permission_name``."""
    if permission_name not in world.registered_permissions:
        return False
    return permission_name in world.permission.get(player_id, pset())


def grant_permission(world: World, player_id: PlayerID, permission_name: str) -> World:
    if permission_name not in world.registered_permissions:
        raise ValueError(f"Permission {permission_name!r} is not registered")
    granted = world.permission.get(player_id, pset()).add(permission_name)
    return replace(world, permission=world.permission.set(player_id, granted))


def revoke_permission(world: World, player_id: PlayerID, permission_name: str) -> World:
    granted = world.permission.get(player_id, pset()).discard(permission_name)
    return replace(world, permission=world.permission.set(player_id, granted))
