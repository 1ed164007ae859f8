"""Common type aliases and enumerations.

``NotifyFn`` is the extension point through which the host delivers chat
messages to a player; the plugin never talks to a connection directly.
"""

from enum import StrEnum, auto
from typing import Callable

PlayerID = int
EntityID = int
BuildingID = int
TeamID = int

NotifyFn = Callable[[PlayerID, str], None]


class DamageType(StrEnum):
    """Damage categories carried by a :class:`~offline_raiding.events.DamageEvent`."""

    GENERIC = auto()
    BULLET = auto()
    SLASH = auto()
    BLUNT = auto()
    STAB = auto()
    HEAT = auto()
    EXPLOSION = auto()
    DECAY = auto()
