"""Physics core for the gravity sandbox."""

from gravity_sandbox.physics.body import Body, BodyView
from gravity_sandbox.physics.force_field import ForceField, compute_forces
from gravity_sandbox.physics.collisions import CollisionResolver, merge_bodies
from gravity_sandbox.physics.spawner import Spawner
from gravity_sandbox.physics.world import SimulationWorld

__all__ = [
    "Body",
    "BodyView",
    "ForceField",
    "compute_forces",
    "CollisionResolver",
    "merge_bodies",
    "Spawner",
    "SimulationWorld",
]
