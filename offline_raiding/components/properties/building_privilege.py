"""Building privilege component (tool cupboard authorization list)."""

from dataclasses import dataclass
from pyrsistent import PSet
from offline_raiding.types import PlayerID


@dataclass(frozen=True)
class BuildingPrivilege:
    """Players authorized to build on and modify a building.

    Attributes:
        authorized_players: Persistent set of authorized player ids. May be
            empty when every player was deauthorized.
    """

    authorized_players: PSet[PlayerID]
