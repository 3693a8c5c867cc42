"""Preset initial layouts."""

from gravity_sandbox.presets.base import Preset
from gravity_sandbox.presets.cluster import CenterCluster
from gravity_sandbox.presets.binary import BinaryPair

PRESETS = {
    'cluster': CenterCluster,
    'binary': BinaryPair,
}


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class(**kwargs)


__all__ = ["Preset", "CenterCluster", "BinaryPair", "PRESETS", "get_preset"]
