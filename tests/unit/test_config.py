import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from offline_raiding.config import (
    DEFAULT_DAMAGE_REDUCTION_PERCENTAGE,
    PLUGIN_VERSION,
    Configuration,
    ConfigurationError,
    default_config,
    is_older,
    load_config,
    read_config,
    save_config,
    update_config,
)


def write_document(path: Path, document: object) -> None:
    path.write_text(json.dumps(document), encoding="utf-8")


def test_default_config() -> None:
    config = default_config()
    assert config.version == PLUGIN_VERSION
    assert config.damage_reduction_percentage == DEFAULT_DAMAGE_REDUCTION_PERCENTAGE == 50
    assert config.reduction == pytest.approx(0.5)


def test_missing_file_writes_defaults(tmp_path: Path) -> None:
    path = tmp_path / "OfflineRaidingWeakened.json"

    config = load_config(path)

    assert config == default_config()
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "Version": PLUGIN_VERSION,
        "Damage Reduction Percentage": 50,
    }


def test_save_then_read_keeps_percentage(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    config = Configuration(version=PLUGIN_VERSION, damage_reduction_percentage=35)

    save_config(config, path)

    assert read_config(path).damage_reduction_percentage == 35
    assert load_config(path) == config


def test_current_version_is_kept(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    write_document(path, {"Version": PLUGIN_VERSION, "Damage Reduction Percentage": 80})

    assert load_config(path).damage_reduction_percentage == 80


def test_version_before_1_0_0_resets_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    write_document(path, {"Version": "0.9.5", "Damage Reduction Percentage": 80})

    config = load_config(path)

    assert config.version == PLUGIN_VERSION
    assert config.damage_reduction_percentage == 50
    assert json.loads(path.read_text(encoding="utf-8"))["Version"] == PLUGIN_VERSION


def test_version_after_1_0_0_keeps_values(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    write_document(path, {"Version": "1.0.0", "Damage Reduction Percentage": 80})

    config = load_config(path)

    assert config.version == PLUGIN_VERSION
    assert config.damage_reduction_percentage == 80


def test_missing_version_counts_as_oldest(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    write_document(path, {"Damage Reduction Percentage": 80})

    config = load_config(path)

    assert config.version == PLUGIN_VERSION
    assert config.damage_reduction_percentage == 50


def test_update_config_stamps_version() -> None:
    old = Configuration(version="1.0.0", damage_reduction_percentage=20)
    updated = update_config(old, "2.0.0")
    assert updated.version == "2.0.0"
    assert updated.damage_reduction_percentage == 20


@pytest.mark.parametrize("stored, expected", [(150, 100), (-20, 0), (100, 100), (0, 0)])
def test_percentage_is_clamped(stored: int, expected: int) -> None:
    config = Configuration.model_validate(
        {"Version": PLUGIN_VERSION, "Damage Reduction Percentage": stored}
    )
    assert config.damage_reduction_percentage == expected


def test_configuration_is_frozen() -> None:
    config = default_config()
    with pytest.raises(ValidationError):
        config.damage_reduction_percentage = 10  # type: ignore[misc]


def test_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_non_object_document_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    write_document(path, [1, 2, 3])

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_non_integer_percentage_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    write_document(path, {"Version": PLUGIN_VERSION, "Damage Reduction Percentage": "lots"})

    with pytest.raises(ConfigurationError):
        load_config(path)


@pytest.mark.parametrize("stored", [True, False, "50", 50.0])
def test_non_integer_json_values_raise(tmp_path: Path, stored: object) -> None:
    path = tmp_path / "config.json"
    write_document(path, {"Version": PLUGIN_VERSION, "Damage Reduction Percentage": stored})

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_is_older() -> None:
    assert is_older("0.9.9", "1.0.0")
    assert is_older("1.0.0", "1.0.1")
    assert is_older("1.0.9", "1.0.10")
    assert not is_older("1.0.1", "1.0.1")
    assert is_older("garbage", "0.0.1")
