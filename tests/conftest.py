"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from gravity_sandbox.utils.config import Settings, WorldConfig


@pytest.fixture
def quiet_config():
    """800x600 world with no initial bodies, no spawning and bodies at rest."""
    return WorldConfig(
        width=800.0,
        height=600.0,
        initial_body_count=0,
        settings=Settings(spawn_enabled=False, random_velocity_enabled=False),
    )


@pytest.fixture
def spawning_config():
    """800x600 world that spawns bodies at rest and never merges them."""
    return WorldConfig(
        width=800.0,
        height=600.0,
        initial_body_count=0,
        seed=0,
        settings=Settings(collision_enabled=False, random_velocity_enabled=False),
    )
