"""offline_raiding.components
=============================

Aggregate import surface for the host record dataclasses read by the plugin.

The symbols re-exported here are curated so downstream code can import
components from a single place, e.g.::

    from offline_raiding.components import Building, Owner, Player

All component classes are simple frozen ``@dataclass`` value objects; they
carry no behavior beyond small derived predicates.
"""

from .properties import Building
from .properties import BuildingBlock
from .properties import BuildingPrivilege
from .properties import DecayEntity
from .properties import Owner
from .properties import Player
from .properties import Structure
from .properties import Team

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
