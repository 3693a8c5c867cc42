"""Tests for configuration management."""

import json
import pytest
from pathlib import Path
from gravity_sandbox.utils.config import Settings, WorldConfig, load_config, save_config


def test_defaults():
    """Defaults match the documented constants."""
    config = WorldConfig()
    settings = Settings.defaults()

    assert settings.G == 2000.0
    assert settings.collision_enabled and settings.spawn_enabled and settings.random_velocity_enabled
    assert settings.random_velocity_strength == 3000.0
    assert config.mass_range == (1.0, 2.0)
    assert config.spawn_interval == 0.002
    assert config.max_force == 10000.0
    assert config.min_distance == 0.5
    assert config.initial_body_count == 1
    assert config.seed_spread == 150.0


@pytest.mark.parametrize("kwargs", [
    {"mass_min": 0.0},
    {"mass_min": 3.0, "mass_max": 2.0},
    {"spawn_interval": 0.0},
    {"max_force": -1.0},
    {"min_distance": 0.0},
    {"width": 0.0},
    {"initial_body_count": -1},
    {"gravity_step": 1.0},
    {"force_method": "tree"},
])
def test_invalid_values_rejected(kwargs):
    """Invalid configuration raises ValueError."""
    with pytest.raises(ValueError):
        WorldConfig(**kwargs)


def test_negative_velocity_strength_rejected():
    """Settings cannot start with a negative strength."""
    with pytest.raises(ValueError):
        Settings(random_velocity_strength=-1.0)


def test_settings_copy_is_independent():
    """copy() returns a separate object."""
    settings = Settings()
    copy = settings.copy()
    copy.G = 1.0

    assert settings.G == 2000.0


def test_from_dict_nested_settings():
    """Nested settings mappings become Settings objects."""
    config = WorldConfig.from_dict({"width": 640, "settings": {"G": 10.0, "spawn_enabled": False}})

    assert isinstance(config.settings, Settings)
    assert config.settings.G == 10.0
    assert config.settings.spawn_enabled is False


def test_from_dict_unknown_key():
    """Unknown keys are reported."""
    with pytest.raises(ValueError, match="Unknown config keys"):
        WorldConfig.from_dict({"widht": 640})


def test_save_load_json(tmp_path):
    """JSON config survives a save/load cycle."""
    config = WorldConfig(width=640.0, height=480.0, seed=5, settings=Settings(G=123.0))
    path = tmp_path / "config.json"
    save_config(config, str(path))

    assert json.loads(path.read_text())["settings"]["G"] == 123.0
    assert load_config(str(path)) == config


def test_save_load_yaml(tmp_path):
    """YAML config survives a save/load cycle."""
    config = WorldConfig(force_method="vectorized", settings=Settings(collision_enabled=False))
    path = tmp_path / "config.yaml"
    save_config(config, str(path))

    assert load_config(str(path)) == config


def test_example_config_loads():
    """The shipped example config is valid."""
    path = Path(__file__).parent.parent / "examples" / "sandbox.yaml"
    config = load_config(str(path))

    assert config.force_method == "vectorized"
    assert config.seed == 7


def test_unsupported_format(tmp_path):
    """Only JSON and YAML are supported."""
    path = tmp_path / "config.toml"
    path.write_text("width = 1")

    with pytest.raises(ValueError, match="Unsupported config format"):
        load_config(str(path))
    with pytest.raises(ValueError, match="Unsupported config format"):
        save_config(WorldConfig(), str(path))


def test_empty_yaml_gives_defaults(tmp_path):
    """An empty YAML file means all defaults."""
    path = tmp_path / "empty.yml"
    path.write_text("")

    assert load_config(str(path)) == WorldConfig()
