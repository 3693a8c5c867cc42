"""Configuration management."""

import json
import yaml
from typing import Any, Dict, Optional, Tuple
from pathlib import Path
from dataclasses import dataclass, asdict, field, fields, replace

DEFAULT_G = 2000.0
DEFAULT_RANDOM_VELOCITY_STRENGTH = 3000.0


@dataclass
class Settings:
    """Runtime parameters the user can change while the simulation runs."""
    G: float = DEFAULT_G
    collision_enabled: bool = True
    spawn_enabled: bool = True
    random_velocity_enabled: bool = True
    random_velocity_strength: float = DEFAULT_RANDOM_VELOCITY_STRENGTH

    def __post_init__(self):
        if self.random_velocity_strength < 0:
            raise ValueError(
                f"random_velocity_strength must be >= 0, got {self.random_velocity_strength}"
            )

    @classmethod
    def defaults(cls) -> "Settings":
        return cls()

    def copy(self) -> "Settings":
        return replace(self)


@dataclass
class WorldConfig:
    """Static simulation configuration."""
    # Viewport
    width: float = 1280.0
    height: float = 720.0

    # Seeding and spawning
    initial_body_count: int = 1
    mass_min: float = 1.0
    mass_max: float = 2.0
    spawn_interval: float = 0.002
    seed_spread: float = 150.0

    # Force law
    max_force: float = 10000.0
    min_distance: float = 0.5
    force_method: str = "pairwise"

    # Input steps
    gravity_step: float = 1.1
    velocity_strength_step: float = 10.0

    # Reproducibility
    seed: Optional[int] = None

    # Settings restored on reset
    settings: Settings = field(default_factory=Settings)

    def __post_init__(self):
        if isinstance(self.settings, dict):
            self.settings = Settings(**self.settings)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Viewport must be positive, got {self.width}x{self.height}")
        if self.mass_min <= 0:
            raise ValueError(f"mass_min must be > 0, got {self.mass_min}")
        if self.mass_min > self.mass_max:
            raise ValueError(f"mass_min ({self.mass_min}) exceeds mass_max ({self.mass_max})")
        if self.initial_body_count < 0:
            raise ValueError(f"initial_body_count must be >= 0, got {self.initial_body_count}")
        if self.spawn_interval <= 0:
            raise ValueError(f"spawn_interval must be > 0, got {self.spawn_interval}")
        if self.max_force <= 0:
            raise ValueError(f"max_force must be > 0, got {self.max_force}")
        if self.min_distance <= 0:
            raise ValueError(f"min_distance must be > 0, got {self.min_distance}")
        if self.seed_spread < 0:
            raise ValueError(f"seed_spread must be >= 0, got {self.seed_spread}")
        if self.gravity_step <= 1:
            raise ValueError(f"gravity_step must be > 1, got {self.gravity_step}")
        if self.velocity_strength_step < 0:
            raise ValueError(f"velocity_strength_step must be >= 0, got {self.velocity_strength_step}")
        if self.force_method not in ("pairwise", "vectorized"):
            raise ValueError(
                f"Unknown force method: {self.force_method}. Available: ['pairwise', 'vectorized']"
            )

    @property
    def mass_range(self) -> Tuple[float, float]:
        return self.mass_min, self.mass_max

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorldConfig":
        """Build a config from a plain mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}. Available: {sorted(known)}")
        return cls(**data)


def load_config(config_path: str) -> WorldConfig:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json, .yaml or .yml)

    Returns:
        WorldConfig object
    """
    config_path = Path(config_path)
    suffix = config_path.suffix.lower()

    with open(config_path, 'r') as f:
        if suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        elif suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json, .yaml or .yml")

    return WorldConfig.from_dict(data or {})


def save_config(config: WorldConfig, output_path: str):
    """Save configuration to file.

    Args:
        config: WorldConfig object
        output_path: Output file path (.json, .yaml or .yml)
    """
    output_path = Path(output_path)
    suffix = output_path.suffix.lower()
    data = asdict(config)

    if suffix not in ('.json', '.yaml', '.yml'):
        raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json, .yaml or .yml")

    with open(output_path, 'w') as f:
        if suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            yaml.dump(data, f, default_flow_style=False)
