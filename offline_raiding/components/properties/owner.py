"""Owner component (entity placed by a player)."""

from dataclasses import dataclass
from offline_raiding.types import PlayerID


@dataclass(frozen=True)
class Owner:
    """Player who placed the entity."""

    player_id: PlayerID
