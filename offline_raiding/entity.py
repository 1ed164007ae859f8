"""ID generation for host records.

The host owns players, entities and buildings; this module only provides
deterministic, process-local monotonic counters so worlds can be authored in
tests and tooling without colliding ids.

Examples
--------
>>> from offline_raiding.entity import new_entity_id, new_player_ids
>>> eid = new_entity_id()
>>> owner_id, raider_id = new_player_ids(2)

IDs are *not* recycled.
"""

from itertools import count
from typing import Iterator, List

from offline_raiding.types import BuildingID, EntityID, PlayerID


def id_generator(start: int = 0) -> Iterator[int]:
    """Yield an infinite sequence of monotonically increasing ids."""
    return count(start)


# Player ids use the 64-bit platform account range.
_player_id_gen = id_generator(76561198000000000)
_entity_id_gen = id_generator(1)
_building_id_gen = id_generator(1)


def new_player_id() -> PlayerID:
    """Return a newly allocated unique player ID."""
    return next(_player_id_gen)


def new_player_ids(n: int) -> List[PlayerID]:
    """Return ``n`` fresh player IDs as a list."""
    return [new_player_id() for _ in range(n)]


def new_entity_id() -> EntityID:
    """Return a newly allocated unique entity ID."""
    return next(_entity_id_gen)


def new_entity_ids(n: int) -> List[EntityID]:
    return [new_entity_id() for _ in range(n)]


def new_building_id() -> BuildingID:
    return next(_building_id_gen)
