"""Semi-implicit Euler integrator (first order)."""

from typing import Sequence, Tuple
from gravity_sandbox.physics.body import Body
from gravity_sandbox.physics.integrators.base import Integrator


class SemiImplicitEulerIntegrator(Integrator):
    """Kick every body, then drift every body.
    
    Velocities are updated from the forces first and positions then move with
    the new velocities. The two passes are kept separate so that no force is
    ever evaluated against a partially updated set of positions.
    """
    
    @property
    def name(self) -> str:
        return "semi_implicit_euler"
    
    @property
    def order(self) -> int:
        return 1
    
    def step(self, bodies: Sequence[Body], forces: Tuple, dt: float) -> None:
        """v += (F / m) * dt for all bodies, then r += v * dt for all bodies."""
        fx, fy = forces
        for body, body_fx, body_fy in zip(bodies, fx, fy):
            body.apply_force(float(body_fx), float(body_fy), dt)
        for body in bodies:
            body.update_position(dt)
