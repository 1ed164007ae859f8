"""Plugin configuration document.

The configuration is a small JSON document persisted next to the server's
other plugin configs::

    {
      "Version": "1.0.1",
      "Damage Reduction Percentage": 50
    }

It is read once when the plugin loads. Documents written by an older plugin
version are migrated (reset to defaults across breaking versions) and the
version tag is restamped; the result is always written back so new keys show
up for server owners. After loading, the :class:`Configuration` is frozen.
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger
from packaging.version import InvalidVersion, Version
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

PLUGIN_VERSION = "1.0.1"
DEFAULT_DAMAGE_REDUCTION_PERCENTAGE = 50

# Documents older than this are discarded in favor of the defaults.
RESET_BEFORE_VERSION = "1.0.0"


class ConfigurationError(ValueError):
    """Raised when the configuration document cannot be read or validated."""


class Configuration(BaseModel):
    """Validated plugin configuration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str = Field(default="0.0.0", alias="Version")
    damage_reduction_percentage: int = Field(
        default=DEFAULT_DAMAGE_REDUCTION_PERCENTAGE,
        alias="Damage Reduction Percentage",
        strict=True,
    )

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: Any) -> Any:
        if value is None:
            return "0.0.0"
        return str(value)

    @field_validator("damage_reduction_percentage")
    @classmethod
    def _clamp_percentage(cls, value: int) -> int:
        clamped = min(100, max(0, value))
        if clamped != value:
            logger.warning(
                "Damage Reduction Percentage {} is outside [0, 100]; using {}",
                value,
                clamped,
            )
        return clamped

    @property
    def reduction(self) -> float:
        """Percentage as a fraction in ``[0, 1]``."""
        return self.damage_reduction_percentage / 100


def default_config(version: str = PLUGIN_VERSION) -> Configuration:
    return Configuration(
        version=version,
        damage_reduction_percentage=DEFAULT_DAMAGE_REDUCTION_PERCENTAGE,
    )


def parse_version(version: str) -> Version:
    """PEP 440 version; unparsable tags sort before every release."""
    try:
        return Version(version)
    except InvalidVersion:
        return Version("0")


def is_older(version: str, other: str) -> bool:
    return parse_version(version) < parse_version(other)


def update_config(config: Configuration, version: str = PLUGIN_VERSION) -> Configuration:
    """Migrate a configuration written by an older plugin version."""
    logger.warning("Config changes detected! Updating...")
    previous_version = config.version

    if is_older(previous_version, RESET_BEFORE_VERSION):
        config = default_config(version)

    logger.warning(
        "Config update complete! Updated from version {} to {}",
        previous_version,
        version,
    )
    return config.model_copy(update={"version": version})


def read_config(path: Path) -> Configuration:
    """Read and validate the document at ``path`` without migrating it."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Configuration file {path} is not valid JSON") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

    try:
        return Configuration.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Configuration file {path} is invalid: {exc}") from exc


def save_config(config: Configuration, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    document = config.model_dump(by_alias=True)
    path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")


def load_config(path: Path, version: str = PLUGIN_VERSION) -> Configuration:
    """Load, migrate and re-save the configuration at ``path``.

    A missing file yields the defaults. The loaded document is written back in
    every case.

    Raises:
        ConfigurationError: If the document is malformed.
    """
    if not path.exists():
        logger.info("Creating a new configuration file at {}", path)
        config = default_config(version)
    else:
        config = read_config(path)
        if is_older(config.version, version):
            config = update_config(config, version)

    save_config(config, path)
    return config
