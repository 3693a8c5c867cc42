"""Random body generation."""

import math
from typing import Optional, Tuple
import numpy as np
from gravity_sandbox.physics.body import Body


class Spawner:
    """Draws new bodies from a numpy random generator.

    The generator is the only state; every draw advances it, so two spawners
    built with the same seed produce the same sequence of bodies.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        """Initialize spawner.

        Args:
            rng: Generator to draw from (takes precedence over seed)
            seed: Seed for a fresh generator when rng is not given
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def random_velocity(self, enabled: bool, strength: float) -> Tuple[float, float]:
        """Velocity with uniform direction and speed uniform in [0, strength].

        Returns (0, 0) without consuming randomness when disabled.
        """
        if not enabled:
            return 0.0, 0.0
        angle = self.rng.uniform(0.0, 2.0 * math.pi)
        speed = self.rng.uniform(0.0, strength)
        return math.cos(angle) * speed, math.sin(angle) * speed

    def random_mass(self, mass_range: Tuple[float, float]) -> float:
        mass_min, mass_max = mass_range
        return float(self.rng.uniform(mass_min, mass_max))

    def spawn_at(
        self,
        x: float,
        y: float,
        mass_range: Tuple[float, float],
        random_velocity_enabled: bool,
        random_velocity_strength: float,
    ) -> Body:
        """Body at a fixed point with random mass and velocity."""
        mass = self.random_mass(mass_range)
        vx, vy = self.random_velocity(random_velocity_enabled, random_velocity_strength)
        return Body(x, y, mass, vx, vy)

    def spawn(
        self,
        bounds: Tuple[float, float, float, float],
        mass_range: Tuple[float, float],
        random_velocity_enabled: bool,
        random_velocity_strength: float,
    ) -> Body:
        """Body at a uniformly random point inside bounds.

        Args:
            bounds: (x_min, y_min, x_max, y_max)
            mass_range: (mass_min, mass_max), mass_min > 0
            random_velocity_enabled: Draw a random velocity if True, else rest
            random_velocity_strength: Upper bound on the random speed

        Returns:
            New body
        """
        x_min, y_min, x_max, y_max = bounds
        x = float(self.rng.uniform(x_min, x_max))
        y = float(self.rng.uniform(y_min, y_max))
        return self.spawn_at(x, y, mass_range, random_velocity_enabled, random_velocity_strength)
