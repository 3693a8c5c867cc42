"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
import numpy as np
from gravity_sandbox.physics.body import BodyView


class Renderer(ABC):
    """Abstract base class for renderers.
    
    Renderers only read body snapshots; they never touch the world.
    """
    
    @abstractmethod
    def render(self, bodies: Sequence[BodyView], overlay: Optional[str] = None):
        """Render current frame.
        
        Args:
            bodies: Snapshot of (x, y, radius, mass) per body
            overlay: Optional status text drawn on top
        """
        pass
    
    @abstractmethod
    def set_bounds(self, width: float, height: float):
        """Match the drawing area to the viewport."""
        pass
    
    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.
        
        Returns:
            Image array (H, W, 3) uint8
        """
        pass
    
    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
