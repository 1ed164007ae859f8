"""Player, connection and team queries.

All functions are pure and operate on the immutable
:class:`offline_raiding.state.World` snapshot. Nothing is cached between
calls; every lookup reads the snapshot it is given.
"""

from typing import Optional

from offline_raiding.components import Building, Player, Team
from offline_raiding.state import World
from offline_raiding.types import PlayerID


def find_by_id(world: World, player_id: PlayerID) -> Optional[Player]:
    return world.player.get(player_id)


def is_offline(world: World, player_id: PlayerID) -> bool:
    """Unknown players and players without a live session are offline."""
    player = find_by_id(world, player_id)
    return player is None or not player.connected


def get_team(world: World, player_id: PlayerID) -> Optional[Team]:
    """Return the team ``player_id`` belongs to, if any."""
    return next((team for team in world.team.values() if player_id in team.members), None)


def are_teammates(
    world: World, first_player_id: PlayerID, second_player_id: PlayerID
) -> bool:
    """True if ``second_player_id`` is a member of ``first_player_id``'s team."""
    team = get_team(world, first_player_id)
    return team is not None and second_player_id in team.members


def authed_in_building(building: Building, player_id: PlayerID) -> bool:
    """True if any privilege of ``building`` lists ``player_id``."""
    return any(
        player_id in privilege.authorized_players for privilege in building.privileges
    )
