"""Inelastic merging of overlapping bodies."""

import math
from typing import List, Sequence
from gravity_sandbox.physics.body import Body


def merge_bodies(b1: Body, b2: Body) -> Body:
    """Combine two bodies into one.

    Mass is summed; position and velocity are mass-weighted averages, so total
    mass and momentum are conserved exactly. Kinetic energy is not.

    Args:
        b1: First body
        b2: Second body

    Returns:
        New body carrying the combined mass
    """
    mass = b1.mass + b2.mass
    return Body(
        (b1.x * b1.mass + b2.x * b2.mass) / mass,
        (b1.y * b1.mass + b2.y * b2.mass) / mass,
        mass,
        (b1.vx * b1.mass + b2.vx * b2.mass) / mass,
        (b1.vy * b1.mass + b2.vy * b2.mass) / mass,
    )


def overlapping(b1: Body, b2: Body) -> bool:
    return math.hypot(b2.x - b1.x, b2.y - b1.y) < b1.radius + b2.radius


class CollisionResolver:
    """Detects overlapping bodies and merges them pairwise.

    One pass over the bodies in order. A body merges with at most one partner
    per pass: the first not-yet-consumed body after it that overlaps. Merge
    products are not considered again until the next pass.
    """

    def __init__(self):
        self.last_merge_count = 0

    def resolve(self, bodies: Sequence[Body], collision_enabled: bool = True) -> Sequence[Body]:
        """Resolve collisions for one step.

        Args:
            bodies: Bodies in their current order
            collision_enabled: If False, the input is returned as is

        Returns:
            Surviving bodies in original relative order, followed by merge
            products in the order their merges were found
        """
        if not collision_enabled:
            self.last_merge_count = 0
            return bodies

        n = len(bodies)
        consumed = set()
        products: List[Body] = []

        for i in range(n):
            if i in consumed:
                continue
            b1 = bodies[i]
            for j in range(i + 1, n):
                if j in consumed:
                    continue
                b2 = bodies[j]
                if overlapping(b1, b2):
                    consumed.add(i)
                    consumed.add(j)
                    products.append(merge_bodies(b1, b2))
                    break

        self.last_merge_count = len(products)
        survivors = [b for idx, b in enumerate(bodies) if idx not in consumed]
        return survivors + products
