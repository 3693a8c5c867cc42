"""Two bodies at rest on a horizontal line."""

from typing import List, Optional, Tuple
from gravity_sandbox.physics.body import Body
from gravity_sandbox.physics.spawner import Spawner
from gravity_sandbox.presets.base import Preset
from gravity_sandbox.utils.config import Settings


class BinaryPair(Preset):
    """A body at the viewport center and a second one `separation` to its right."""
    
    def __init__(
        self,
        seed: int = None,
        spawner: Optional[Spawner] = None,
        masses: Tuple[float, float] = (1.0, 2.0),
        separation: float = 100.0
    ):
        """Initialize binary preset; always two bodies.

        Args:
            seed: Random seed
            spawner: Unused, accepted so all presets share a constructor
            masses: (mass at center, mass to the right)
            separation: Horizontal distance between the bodies
        """
        super().__init__(2, seed, spawner)
        self.masses = masses
        self.separation = separation
    
    @property
    def name(self) -> str:
        return "binary"
    
    def generate(self, width: float, height: float, settings: Settings) -> List[Body]:
        cx = width / 2
        cy = height / 2
        return [
            Body(cx, cy, self.masses[0]),
            Body(cx + self.separation, cy, self.masses[1]),
        ]
