"""Time integrators for the body collection."""

from gravity_sandbox.physics.integrators.base import Integrator
from gravity_sandbox.physics.integrators.euler import SemiImplicitEulerIntegrator

__all__ = ["Integrator", "SemiImplicitEulerIntegrator"]
