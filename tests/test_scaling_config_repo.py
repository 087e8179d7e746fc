import json
import logging
from pathlib import Path

import pytest

from outdoor_scaling.data.errors import DataLoadError, DataValidationError
from outdoor_scaling.data.repositories import ScalingConfigRepository
from outdoor_scaling.domain.scaling_models import OutdoorScalingConfig, ScalingOverride


def test_full_config_loads(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "outdoor_scaling.json",
        {
            "OutdoorScaling.Enable": True,
            "OutdoorScaling.Continent.0.Health": 1.5,
            "OutdoorScaling.Continent.0.Damage": 1.25,
            "OutdoorScaling.Continent.1.Health": 1.3,
            "OutdoorScaling.Continent.1.Damage": 1.15,
            "OutdoorScaling.Continent.2.Health": 1.2,
            "OutdoorScaling.Continent.2.Damage": 1,
            "OutdoorScaling.ZoneOverrides": "12 2.0 1.5, bogus",
            "OutdoorScaling.CreatureOverrides": "448 3.0",
        },
    )
    config = ScalingConfigRepository(base_path=definitions_dir).get_config()

    assert config.enabled is True
    assert config.continent_health == (1.5, 1.3, 1.2)
    assert config.continent_damage == (1.25, 1.15, 1.0)
    assert dict(config.zone_overrides) == {12: ScalingOverride(2.0, 1.5)}
    assert dict(config.creature_overrides) == {448: ScalingOverride(3.0, 3.0)}


def test_missing_options_use_defaults(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "outdoor_scaling.json", {})
    config = ScalingConfigRepository(base_path=definitions_dir).get_config()
    assert config == OutdoorScalingConfig()


def test_bad_option_values_fall_back_with_warning(tmp_path: Path, caplog) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "outdoor_scaling.json",
        {
            "OutdoorScaling.Enable": "yes",
            "OutdoorScaling.Continent.0.Health": "1.5",
            "OutdoorScaling.Continent.1.Health": -2,
            "OutdoorScaling.Continent.2.Damage": 0,
            "OutdoorScaling.ZoneOverrides": 12,
        },
    )
    with caplog.at_level(logging.WARNING):
        config = ScalingConfigRepository(base_path=definitions_dir).get_config()

    assert config.enabled is True
    assert config.continent_health == (1.0, 1.0, 1.0)
    assert config.continent_damage == (1.0, 1.0, 1.0)
    assert dict(config.zone_overrides) == {}
    assert "OutdoorScaling.Continent.1.Health" in caplog.text
    assert "OutdoorScaling.ZoneOverrides" in caplog.text


def test_enable_accepts_integer_flag(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "outdoor_scaling.json", {"OutdoorScaling.Enable": 0})
    assert ScalingConfigRepository(base_path=definitions_dir).get_config().enabled is False


def test_unknown_option_is_reported(tmp_path: Path, caplog) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "outdoor_scaling.json", {"OutdoorScaling.Continent.3.Health": 2.0})
    with caplog.at_level(logging.WARNING):
        ScalingConfigRepository(base_path=definitions_dir).get_config()
    assert "OutdoorScaling.Continent.3.Health" in caplog.text


def test_oversized_integer_option_falls_back_with_warning(tmp_path: Path, caplog) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "outdoor_scaling.json",
        {
            "OutdoorScaling.Continent.0.Health": int("9" * 400),
            "OutdoorScaling.Continent.1.Damage": 1.5,
        },
    )
    with caplog.at_level(logging.WARNING):
        config = ScalingConfigRepository(base_path=definitions_dir).get_config()

    assert config.continent_health == (1.0, 1.0, 1.0)
    assert config.continent_damage == (1.0, 1.5, 1.0)
    assert "OutdoorScaling.Continent.0.Health" in caplog.text


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    repo = ScalingConfigRepository(base_path=_make_definitions_dir(tmp_path))
    with pytest.raises(DataLoadError):
        repo.get_config()


def test_non_object_document_is_rejected(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "outdoor_scaling.json", ["OutdoorScaling.Enable"])
    with pytest.raises(DataValidationError):
        ScalingConfigRepository(base_path=definitions_dir).get_config()


def test_reload_reads_file_again(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    config_path = definitions_dir / "outdoor_scaling.json"
    _write_json(config_path, {"OutdoorScaling.Enable": True})
    repo = ScalingConfigRepository(base_path=definitions_dir)
    first = repo.get_config()

    _write_json(config_path, {"OutdoorScaling.Enable": False})
    assert repo.get_config() is first

    repo.reload()
    assert repo.get_config().enabled is False


def test_bundled_config_loads() -> None:
    config = ScalingConfigRepository().get_config()
    assert config.enabled is True
    assert 448 in config.creature_overrides


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    return definitions_dir


def _write_json(path: Path, data: object) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
