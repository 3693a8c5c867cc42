"""
Gravity Sandbox - an interactive 2D N-body gravity playground.

Features:
- Pairwise gravity with a distance floor and a force cap
- Inelastic merging of overlapping bodies
- Timed spawning of new bodies with optional random velocities
- Off-screen culling against a resizable viewport
- Interactive matplotlib window and a headless CLI
"""

__version__ = "0.1.0"

from gravity_sandbox.physics.body import Body
from gravity_sandbox.physics.world import SimulationWorld
from gravity_sandbox.utils.config import Settings, WorldConfig

__all__ = [
    "Body",
    "SimulationWorld",
    "Settings",
    "WorldConfig",
]
