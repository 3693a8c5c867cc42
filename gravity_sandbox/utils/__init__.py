"""Utility functions for reproducibility and configuration."""

from gravity_sandbox.utils.reproducibility import make_rng
from gravity_sandbox.utils.config import load_config, save_config, Settings, WorldConfig

__all__ = ["make_rng", "load_config", "save_config", "Settings", "WorldConfig"]
