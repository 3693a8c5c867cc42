"""Point-mass body model."""

import math
from typing import NamedTuple

MIN_RADIUS = 5
RADIUS_EXPONENT = 0.8


def radius_for_mass(mass: float) -> int:
    """Visual radius derived from mass: max(5, floor(mass ** 0.8))."""
    return max(MIN_RADIUS, math.floor(mass ** RADIUS_EXPONENT))


class BodyView(NamedTuple):
    """Read-only snapshot of a body handed to renderers."""
    x: float
    y: float
    radius: int
    mass: float


class Body:
    """A point mass moving in the plane.
    
    The radius is not stored; it is derived from the current mass every time
    it is read, so it follows the mass through merges automatically.
    
    Mass must be strictly positive. Every producer (spawner, presets, merges)
    guarantees this, so it is not checked here.
    """
    
    __slots__ = ("x", "y", "vx", "vy", "mass")
    
    def __init__(self, x: float, y: float, mass: float, vx: float = 0.0, vy: float = 0.0):
        """Initialize body.
        
        Args:
            x: Horizontal position
            y: Vertical position (grows downwards, like screen coordinates)
            mass: Mass, > 0
            vx: Horizontal velocity
            vy: Vertical velocity
        """
        self.x = float(x)
        self.y = float(y)
        self.mass = float(mass)
        self.vx = float(vx)
        self.vy = float(vy)
    
    @property
    def radius(self) -> int:
        return radius_for_mass(self.mass)
    
    @property
    def momentum(self):
        return self.mass * self.vx, self.mass * self.vy
    
    def apply_force(self, fx: float, fy: float, dt: float):
        """Accelerate under force (fx, fy) for dt: v += (f / m) * dt."""
        self.vx += fx / self.mass * dt
        self.vy += fy / self.mass * dt
    
    def update_position(self, dt: float):
        """Drift with the current velocity: pos += v * dt."""
        self.x += self.vx * dt
        self.y += self.vy * dt
    
    def is_off_screen(self, width: float, height: float) -> bool:
        """True if the bounding circle lies entirely outside [0, width] x [0, height]."""
        r = self.radius
        return (
            self.x + r < 0
            or self.x - r > width
            or self.y + r < 0
            or self.y - r > height
        )
    
    def view(self) -> BodyView:
        return BodyView(self.x, self.y, self.radius, self.mass)
    
    def __eq__(self, other):
        if not isinstance(other, Body):
            return NotImplemented
        return (
            self.x == other.x
            and self.y == other.y
            and self.vx == other.vx
            and self.vy == other.vy
            and self.mass == other.mass
        )

    def __repr__(self) -> str:
        return (
            f"Body(x={self.x!r}, y={self.y!r}, mass={self.mass!r}, "
            f"vx={self.vx!r}, vy={self.vy!r})"
        )
