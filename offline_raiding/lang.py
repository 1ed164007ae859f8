"""Localization keys and message catalog.

Messages are registered per language as plain ``str.format`` templates with
positional placeholders (``{0}``). Lookups fall back to English, and then to
the key itself, so a missing translation never breaks delivery.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Mapping
from pyrsistent import PMap, pmap

DEFAULT_LANGUAGE = "en"


class Lang(StrEnum):
    """Message keys understood by the plugin."""

    DAMAGE_REDUCED = "DamageReduced"


DEFAULT_MESSAGES: Mapping[str, str] = {
    Lang.DAMAGE_REDUCED: "Your damage has been reduced by {0}% because the base owners are offline.",
}


@dataclass(frozen=True)
class MessageCatalog:
    """Message templates keyed by language, then by message key."""

    messages: PMap[str, PMap[str, str]] = pmap()

    def register_messages(
        self, messages: Mapping[str, str], language: str = DEFAULT_LANGUAGE
    ) -> "MessageCatalog":
        """Return a new catalog with ``messages`` merged into ``language``."""
        current = self.messages.get(language, pmap())
        merged = current.update({str(key): value for key, value in messages.items()})
        return MessageCatalog(messages=self.messages.set(language, merged))

    def get_message(self, key: str, language: str = DEFAULT_LANGUAGE) -> str:
        """Template for ``key`` in ``language`` (English, then the key, as fallback)."""
        for lang in (language, DEFAULT_LANGUAGE):
            template = self.messages.get(lang, pmap()).get(str(key))
            if template is not None:
                return template
        return str(key)

    def render(self, key: str, language: str = DEFAULT_LANGUAGE, *args: object) -> str:
        message = self.get_message(key, language)
        if args:
            message = message.format(*args)
        return message


def default_catalog() -> MessageCatalog:
    return MessageCatalog().register_messages(DEFAULT_MESSAGES, DEFAULT_LANGUAGE)
