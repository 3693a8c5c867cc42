"""Pairwise gravitational forces with a distance floor and a force cap.

Each unordered pair (i, j), i < j, is evaluated once; the result is added to
body i and subtracted from body j. Pairs are visited in index order of the
body sequence so repeated runs give identical sums.
"""

import math
from typing import Literal, Sequence, Tuple
import numpy as np
from gravity_sandbox.physics.body import Body

MAX_FORCE = 10000.0
MIN_DISTANCE = 0.5

FORCE_METHODS = ("pairwise", "vectorized")


def pair_force(
    b1: Body,
    b2: Body,
    G: float,
    max_force: float = MAX_FORCE,
    min_distance: float = MIN_DISTANCE,
) -> Tuple[float, float]:
    """Force exerted on b1 by b2.

    Args:
        b1: Body receiving the force
        b2: Body exerting the force
        G: Gravitational constant
        max_force: Upper bound on the force magnitude
        min_distance: Distance floor applied before the inverse-square law

    Returns:
        (fx, fy) pointing from b1 towards b2
    """
    dx = b2.x - b1.x
    dy = b2.y - b1.y
    dist_sq = dx * dx + dy * dy
    dist = math.sqrt(dist_sq)
    if dist < min_distance:
        dist = min_distance
        dist_sq = dist * dist
    force = min(G * b1.mass * b2.mass / dist_sq, max_force)
    return force * dx / dist, force * dy / dist


class ForceField:
    """Gravity between every pair of bodies in a collection."""

    def __init__(
        self,
        method: Literal["pairwise", "vectorized"] = "pairwise",
        max_force: float = MAX_FORCE,
        min_distance: float = MIN_DISTANCE,
    ):
        """Initialize force field.

        Args:
            method: 'pairwise' (explicit i<j loop) or 'vectorized' (numpy over
                the upper-triangle pair list). Both give the same forces.
            max_force: Force cap per pair
            min_distance: Distance floor per pair
        """
        if method not in FORCE_METHODS:
            raise ValueError(f"Unknown force method: {method}. Available: {list(FORCE_METHODS)}")
        self.method = method
        self.max_force = max_force
        self.min_distance = min_distance

    def compute_forces(self, bodies: Sequence[Body], G: float) -> Tuple[np.ndarray, np.ndarray]:
        """Compute the net force on every body.

        Args:
            bodies: Bodies in their current order
            G: Gravitational constant

        Returns:
            (fx, fy) arrays of shape (n,); all zeros for fewer than two bodies
        """
        if self.method == "vectorized":
            return self._compute_vectorized(bodies, G)
        return self._compute_pairwise(bodies, G)

    def _compute_pairwise(self, bodies: Sequence[Body], G: float) -> Tuple[np.ndarray, np.ndarray]:
        n = len(bodies)
        fx = np.zeros(n)
        fy = np.zeros(n)
        for i in range(n):
            for j in range(i + 1, n):
                pfx, pfy = pair_force(bodies[i], bodies[j], G, self.max_force, self.min_distance)
                fx[i] += pfx
                fy[i] += pfy
                fx[j] -= pfx
                fy[j] -= pfy
        return fx, fy

    def _compute_vectorized(self, bodies: Sequence[Body], G: float) -> Tuple[np.ndarray, np.ndarray]:
        n = len(bodies)
        fx = np.zeros(n)
        fy = np.zeros(n)
        if n < 2:
            return fx, fy

        x = np.fromiter((b.x for b in bodies), dtype=np.float64, count=n)
        y = np.fromiter((b.y for b in bodies), dtype=np.float64, count=n)
        m = np.fromiter((b.mass for b in bodies), dtype=np.float64, count=n)

        # Row-major upper triangle: (0,1), (0,2), ..., (1,2), ... same order as the loop
        i, j = np.triu_indices(n, k=1)
        dx = x[j] - x[i]
        dy = y[j] - y[i]
        dist_sq = dx * dx + dy * dy
        dist = np.sqrt(dist_sq)
        too_close = dist < self.min_distance
        dist = np.where(too_close, self.min_distance, dist)
        dist_sq = np.where(too_close, self.min_distance ** 2, dist_sq)

        force = np.minimum(G * m[i] * m[j] / dist_sq, self.max_force)
        pfx = force * dx / dist
        pfy = force * dy / dist

        np.add.at(fx, i, pfx)
        np.add.at(fy, i, pfy)
        np.add.at(fx, j, -pfx)
        np.add.at(fy, j, -pfy)
        return fx, fy


def compute_forces(
    bodies: Sequence[Body],
    G: float,
    max_force: float = MAX_FORCE,
    min_distance: float = MIN_DISTANCE,
) -> Tuple[np.ndarray, np.ndarray]:
    """Functional shortcut for ForceField(...).compute_forces(bodies, G)."""
    return ForceField("pairwise", max_force, min_distance).compute_forces(bodies, G)
