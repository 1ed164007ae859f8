"""Plugin entry point and host hooks.

:class:`OfflineRaidingWeakened` is constructed explicitly by the host (no
process-wide singleton) and holds everything that stays fixed while the
plugin is loaded: the frozen configuration, the message catalog and the chat
notifier. Hooks receive the current :class:`~offline_raiding.state.World`
snapshot and return values instead of mutating host objects.

Lifecycle::

    plugin = OfflineRaidingWeakened.load(config_path, notify=server.send_reply)
    world = plugin.init(world)
    ...
    event = plugin.on_entity_take_damage(world, event)
"""

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from offline_raiding.config import PLUGIN_VERSION, Configuration, load_config
from offline_raiding.events import DamageEvent, Notification
from offline_raiding.lang import DEFAULT_LANGUAGE, MessageCatalog, default_catalog
from offline_raiding.permissions import register_permissions
from offline_raiding.state import World
from offline_raiding.systems.mitigation import mitigation_system
from offline_raiding.types import NotifyFn
from offline_raiding.utils.player import find_by_id

TITLE = "Offline Raiding Weakened"
AUTHOR = "VisEntities"
VERSION = PLUGIN_VERSION
DESCRIPTION = "Lowers the damage inflicted on buildings when owners are offline."


@dataclass(frozen=True)
class OfflineRaidingWeakened:
    """Loaded plugin instance.

    Attributes:
        config (Configuration): Immutable configuration read at load time.
        notify (NotifyFn): Host callable delivering a chat line to a player.
        messages (MessageCatalog): Localized templates, English by default.
    """

    config: Configuration
    notify: NotifyFn
    messages: MessageCatalog = field(default_factory=default_catalog)

    @classmethod
    def load(cls, config_path: Path, notify: NotifyFn) -> "OfflineRaidingWeakened":
        """Read (and migrate) the configuration and build the plugin.

        Raises:
            ConfigurationError: If the configuration document is malformed.
        """
        config = load_config(config_path, VERSION)
        logger.info(
            "{} v{} loaded with {}% damage reduction",
            TITLE,
            VERSION,
            config.damage_reduction_percentage,
        )
        return cls(config=config, notify=notify)

    def init(self, world: World) -> World:
        """Register the plugin permissions with the host registry."""
        return register_permissions(world)

    def on_entity_take_damage(self, world: World, event: DamageEvent) -> DamageEvent:
        """Hook called by the host before damage is applied to an entity.

        Returns:
            DamageEvent: The event the host should apply; scaled when the
            building's defenders are all offline, otherwise ``event`` itself.
        """
        event, notification = mitigation_system(world, event, self.config)
        if notification is not None:
            self.send_message(world, notification)
        return event

    def send_message(self, world: World, notification: Notification) -> None:
        player = find_by_id(world, notification.player_id)
        language = player.language if player is not None else DEFAULT_LANGUAGE
        message = self.messages.render(notification.key, language, *notification.args)
        self.notify(notification.player_id, message)
