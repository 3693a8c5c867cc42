"""Bodies scattered around the viewport center."""

import warnings
from typing import List, Optional, Tuple
from gravity_sandbox.physics.body import Body
from gravity_sandbox.physics.spawner import Spawner
from gravity_sandbox.presets.base import Preset
from gravity_sandbox.utils.config import Settings


class CenterCluster(Preset):
    """Random bodies in a square of +/- spread around the viewport center.
    
    This is the layout a world is reseeded with on reset.
    """
    
    def __init__(
        self,
        n_bodies: int = 1,
        seed: int = None,
        spawner: Optional[Spawner] = None,
        mass_range: Tuple[float, float] = (1.0, 2.0),
        spread: float = 150.0
    ):
        """Initialize center cluster preset.
        
        Args:
            n_bodies: Number of bodies
            seed: Random seed
            spawner: Spawner whose generator to draw from
            mass_range: (mass_min, mass_max)
            spread: Half-width of the square the bodies are placed in
        """
        super().__init__(n_bodies, seed, spawner)
        self.mass_range = mass_range
        self.spread = spread
    
    @property
    def name(self) -> str:
        return "cluster"
    
    def generate(self, width: float, height: float, settings: Settings) -> List[Body]:
        """Generate clustered bodies with velocities drawn per settings."""
        if self.n_bodies and self.spread > min(width, height) / 2:
            warnings.warn(
                f"spread={self.spread} exceeds half the viewport ({width}x{height}); "
                f"some bodies may start off screen and be culled on the first step.",
                UserWarning
            )
        cx = width / 2
        cy = height / 2
        bounds = (cx - self.spread, cy - self.spread, cx + self.spread, cy + self.spread)
        return [
            self.spawner.spawn(
                bounds,
                self.mass_range,
                settings.random_velocity_enabled,
                settings.random_velocity_strength,
            )
            for _ in range(self.n_bodies)
        ]
