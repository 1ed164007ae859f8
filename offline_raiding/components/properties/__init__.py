"""Property component aggregates.

This module re-exports the host records the plugin reads: connection state
(:class:`Player`), relationships (:class:`Team`), ownership (:class:`Owner`)
and building structure (:class:`Building`, :class:`BuildingPrivilege`, plus
the :data:`Structure` variant linking an entity to its building).

All properties are immutable dataclasses; the plugin never writes them. The
host produces a new :class:`offline_raiding.state.World` snapshot when its
registries change.
"""

from typing import Union

from .building import Building
from .building_block import BuildingBlock
from .building_privilege import BuildingPrivilege
from .decay_entity import DecayEntity
from .owner import Owner
from .player import Player
from .team import Team

Structure = Union[BuildingBlock, DecayEntity]

__all__ = [
    "Building",
    "BuildingBlock",
    "BuildingPrivilege",
    "DecayEntity",
    "Owner",
    "Player",
    "Structure",
    "Team",
]
