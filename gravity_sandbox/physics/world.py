"""Simulation world: owns the bodies and runs one step at a time."""

import logging
import time
from typing import Callable, List, Optional, Sequence, Tuple
import numpy as np
from gravity_sandbox.physics.body import Body, BodyView
from gravity_sandbox.physics.collisions import CollisionResolver
from gravity_sandbox.physics.force_field import ForceField
from gravity_sandbox.physics.integrators.base import Integrator
from gravity_sandbox.physics.integrators.euler import SemiImplicitEulerIntegrator
from gravity_sandbox.physics.spawner import Spawner
from gravity_sandbox.presets.base import Preset
from gravity_sandbox.presets.cluster import CenterCluster
from gravity_sandbox.utils.config import Settings, WorldConfig
from gravity_sandbox.utils.reproducibility import make_rng

logger = logging.getLogger(__name__)


class SimulationWorld:
    """Main simulation controller.

    Each step runs, in order: timed spawn, force computation, semi-implicit
    Euler integration, collision merging and off-screen culling. Forces are
    computed from one consistent snapshot of positions before any body moves.

    The spawn timer is reset to zero when it fires rather than reduced by the
    interval, so at most one body spawns per step however large dt is. Large
    dt is not sub-stepped either; both are accepted approximations.
    """

    def __init__(
        self,
        config: Optional[WorldConfig] = None,
        seed: Optional[int] = None,
        integrator: Optional[Integrator] = None,
        preset: Optional[Preset] = None
    ):
        """Initialize world and seed it as reset() does.

        Args:
            config: Static configuration (defaults if None)
            seed: Random seed; overrides config.seed when given
            integrator: Integrator to use (default: semi-implicit Euler)
            preset: Layout used by reset() (default: CenterCluster from config)
        """
        self.config = config or WorldConfig()
        self.seed = seed if seed is not None else self.config.seed
        self.rng = make_rng(self.seed)

        self.spawner = Spawner(rng=self.rng)
        self.force_field = ForceField(
            method=self.config.force_method,
            max_force=self.config.max_force,
            min_distance=self.config.min_distance,
        )
        self.collision_resolver = CollisionResolver()
        self.integrator = integrator or SemiImplicitEulerIntegrator()
        self.preset = preset

        self.width = float(self.config.width)
        self.height = float(self.config.height)
        self.settings: Settings = self.config.settings.copy()
        self.bodies: List[Body] = []
        self.spawn_timer = 0.0
        self.time = 0.0
        self.step_count = 0

        # Profiling: last step timing (ms)
        self._profile = False
        self._last_forces_ms: Optional[float] = None
        self._last_collisions_ms: Optional[float] = None

        self.on_step_callback: Optional[Callable] = None

        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle

    def reset(self):
        """Reseed the bodies near the viewport center, then restore default settings.

        The new bodies are drawn with the random-velocity settings in effect
        before the reset.
        """
        preset = self.preset or CenterCluster(
            n_bodies=self.config.initial_body_count,
            spawner=self.spawner,
            mass_range=self.config.mass_range,
            spread=self.config.seed_spread,
        )
        self.bodies = list(preset.generate(self.width, self.height, self.settings))
        self.settings = self.config.settings.copy()
        self.spawn_timer = 0.0
        self.time = 0.0
        self.step_count = 0
        logger.debug("World reset with %d bodies (preset=%s)", len(self.bodies), preset.name)

    def initialize(self, bodies: Sequence[Body]):
        """Replace the body collection, keeping the current settings.

        Args:
            bodies: New bodies; the world takes ownership of them
        """
        self.bodies = list(bodies)
        self.spawn_timer = 0.0
        self.time = 0.0
        self.step_count = 0

    def set_bounds(self, width: float, height: float):
        """Change the viewport; applies from the next spawn and cull."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)
        logger.info("Viewport set to %.0fx%.0f", self.width, self.height)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return 0.0, 0.0, self.width, self.height

    # ------------------------------------------------------------------
    # Stepping

    def step(self, dt: float):
        """Advance the simulation by dt.

        Args:
            dt: Elapsed time since the previous step
        """
        settings = self.settings

        if settings.spawn_enabled:
            self.spawn_timer += dt
            if self.spawn_timer >= self.config.spawn_interval:
                self.bodies.append(self.spawner.spawn(
                    self.bounds,
                    self.config.mass_range,
                    settings.random_velocity_enabled,
                    settings.random_velocity_strength,
                ))
                self.spawn_timer = 0.0

        if self._profile:
            t0 = time.perf_counter()
        forces = self.force_field.compute_forces(self.bodies, settings.G)
        if self._profile:
            t1 = time.perf_counter()

        self.integrator.step(self.bodies, forces, dt)

        if self._profile:
            t2 = time.perf_counter()
        self.bodies = list(self.collision_resolver.resolve(self.bodies, settings.collision_enabled))
        if self._profile:
            t3 = time.perf_counter()
            self._last_forces_ms = (t1 - t0) * 1000.0
            self._last_collisions_ms = (t3 - t2) * 1000.0

        n_before_cull = len(self.bodies)
        self.bodies = [b for b in self.bodies if not b.is_off_screen(self.width, self.height)]

        merges = self.collision_resolver.last_merge_count
        culled = n_before_cull - len(self.bodies)
        if merges or culled:
            logger.debug("step %d: %d merges, %d culled", self.step_count, merges, culled)

        self.time += dt
        self.step_count += 1

        if self.on_step_callback:
            self.on_step_callback(self)

    def run(self, n_steps: int, dt: float):
        """Run n_steps steps of size dt."""
        for _ in range(n_steps):
            self.step(dt)

    def set_profiling(self, enabled: bool = True):
        """Enable or disable step timing (forces ms, collisions ms)."""
        self._profile = enabled

    def get_timing(self) -> dict:
        """Return last step timing in ms: forces_ms, collisions_ms."""
        return {
            "forces_ms": self._last_forces_ms,
            "collisions_ms": self._last_collisions_ms,
        }

    # ------------------------------------------------------------------
    # External commands

    def toggle_collisions(self) -> bool:
        self.settings.collision_enabled = not self.settings.collision_enabled
        return self.settings.collision_enabled

    def toggle_spawn(self) -> bool:
        self.settings.spawn_enabled = not self.settings.spawn_enabled
        return self.settings.spawn_enabled

    def toggle_random_velocity(self) -> bool:
        self.settings.random_velocity_enabled = not self.settings.random_velocity_enabled
        return self.settings.random_velocity_enabled

    def scale_gravity(self, up: bool = True) -> float:
        """Multiply (up) or divide G by the configured gravity step."""
        if up:
            self.settings.G *= self.config.gravity_step
        else:
            self.settings.G /= self.config.gravity_step
        return self.settings.G

    def adjust_random_velocity_strength(self, delta: float) -> float:
        """Add delta to the random velocity strength, never going below zero."""
        self.settings.random_velocity_strength = max(
            0.0, self.settings.random_velocity_strength + delta
        )
        return self.settings.random_velocity_strength

    def insert_body(self, x: float, y: float) -> Body:
        """Add a body at (x, y) with random mass and velocity per the current settings."""
        body = self.spawner.spawn_at(
            x,
            y,
            self.config.mass_range,
            self.settings.random_velocity_enabled,
            self.settings.random_velocity_strength,
        )
        self.bodies.append(body)
        return body

    # ------------------------------------------------------------------
    # Read-only access

    @property
    def n_bodies(self) -> int:
        return len(self.bodies)

    def snapshot(self) -> Tuple[BodyView, ...]:
        """Immutable view of every body for rendering."""
        return tuple(b.view() for b in self.bodies)

    def get_state(self):
        """Get current state as arrays.

        Returns:
            Tuple of (positions (n, 2), velocities (n, 2), masses (n,), radii (n,))
        """
        n = len(self.bodies)
        positions = np.empty((n, 2))
        velocities = np.empty((n, 2))
        masses = np.empty(n)
        radii = np.empty(n)
        for k, b in enumerate(self.bodies):
            positions[k] = (b.x, b.y)
            velocities[k] = (b.vx, b.vy)
            masses[k] = b.mass
            radii[k] = b.radius
        return positions, velocities, masses, radii
