"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List, Optional
from gravity_sandbox.physics.body import Body
from gravity_sandbox.physics.spawner import Spawner
from gravity_sandbox.utils.config import Settings


class Preset(ABC):
    """Abstract base class for initial body layouts."""
    
    def __init__(self, n_bodies: int = 1, seed: int = None, spawner: Optional[Spawner] = None):
        """Initialize preset.
        
        Args:
            n_bodies: Number of bodies to generate
            seed: Random seed for reproducibility (ignored if spawner is given)
            spawner: Spawner whose generator to draw from
        """
        self.n_bodies = n_bodies
        self.seed = seed
        self.spawner = spawner if spawner is not None else Spawner(seed=seed)
    
    @abstractmethod
    def generate(self, width: float, height: float, settings: Settings) -> List[Body]:
        """Generate initial bodies.
        
        Args:
            width: Viewport width
            height: Viewport height
            settings: Settings in effect (velocity toggles and strength)
            
        Returns:
            List of bodies
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
