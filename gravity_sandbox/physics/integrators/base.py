"""Abstract base class for integrators."""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple
from gravity_sandbox.physics.body import Body


class Integrator(ABC):
    """Abstract interface for advancing bodies by one step."""
    
    @abstractmethod
    def step(self, bodies: Sequence[Body], forces: Tuple, dt: float) -> None:
        """Advance bodies in place.
        
        Args:
            bodies: Bodies to advance
            forces: Tuple (fx, fy) of per-body force components, aligned with bodies
            dt: Time step
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass
    
    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
