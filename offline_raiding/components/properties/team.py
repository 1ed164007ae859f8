"""Team component (host relationship registry)."""

from dataclasses import dataclass
from pyrsistent import PSet
from offline_raiding.types import PlayerID


@dataclass(frozen=True)
class Team:
    """Members of a single team.

    Attributes:
        members: Persistent set of member player ids. A player belongs to at
            most one team.
    """

    members: PSet[PlayerID]
