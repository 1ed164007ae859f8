from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """Connection record of a known player.

    Attributes:
        name:
            Display name, used only for diagnostics.
        connected:
            True while the player has a live session on the server.
        language:
            Preferred message language; unknown languages fall back to ``en``.
    """

    name: str
    connected: bool = False
    language: str = "en"
