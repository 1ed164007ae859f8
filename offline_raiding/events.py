"""Event payloads crossing the host boundary.

:class:`DamageEvent` is what the host hands to the plugin for every combat
interaction; the hook answers with a (possibly scaled) replacement event.
:class:`Notification` describes a message for a player before it is rendered
in that player's language.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
from pyrsistent import PMap, pmap

from offline_raiding.lang import Lang
from offline_raiding.types import DamageType, EntityID, PlayerID


@dataclass(frozen=True)
class DamageEvent:
    """Damage about to be applied to an entity.

    Attributes:
        entity_id: Damaged entity, ``None`` when the host could not resolve it.
        damage_types: Amount of damage per type. Amounts are never negative.
        initiator: Player who caused the damage, ``None`` for environmental or
            NPC sources.
    """

    entity_id: Optional[EntityID]
    damage_types: PMap[DamageType, float] = pmap()
    initiator: Optional[PlayerID] = None


@dataclass(frozen=True)
class Notification:
    """Localized message addressed to a single player."""

    player_id: PlayerID
    key: Lang
    args: Tuple[object, ...] = ()
