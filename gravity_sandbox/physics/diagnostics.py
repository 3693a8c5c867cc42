"""Conserved-quantity diagnostics for a body collection."""

import numpy as np
from typing import Sequence, Tuple
from gravity_sandbox.physics.body import Body
from gravity_sandbox.physics.force_field import MIN_DISTANCE


class Diagnostics:
    """Mass, momentum and energy of a set of bodies.

    Merges conserve mass and momentum exactly; kinetic energy drops on every
    merge. The potential uses the same distance floor as the force law.
    """

    def __init__(self, G: float = 2000.0, min_distance: float = MIN_DISTANCE):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant
            min_distance: Distance floor (must match the force field)
        """
        self.G = G
        self.min_distance = min_distance

    @staticmethod
    def _arrays(bodies: Sequence[Body]):
        positions = np.array([(b.x, b.y) for b in bodies], dtype=float).reshape(-1, 2)
        velocities = np.array([(b.vx, b.vy) for b in bodies], dtype=float).reshape(-1, 2)
        masses = np.array([b.mass for b in bodies], dtype=float)
        return positions, velocities, masses

    def total_mass(self, bodies: Sequence[Body]) -> float:
        return float(sum(b.mass for b in bodies))

    def total_momentum(self, bodies: Sequence[Body]) -> np.ndarray:
        """Total linear momentum (px, py)."""
        _, velocities, masses = self._arrays(bodies)
        return np.sum(masses[:, np.newaxis] * velocities, axis=0)

    def center_of_mass(self, bodies: Sequence[Body]) -> np.ndarray:
        """Mass-weighted mean position; zeros for an empty collection."""
        positions, _, masses = self._arrays(bodies)
        total = np.sum(masses)
        if total == 0:
            return np.zeros(2)
        return np.sum(masses[:, np.newaxis] * positions, axis=0) / total

    def kinetic_energy(self, bodies: Sequence[Body]) -> float:
        _, velocities, masses = self._arrays(bodies)
        return float(0.5 * np.sum(masses * np.sum(velocities ** 2, axis=1)))

    def potential_energy(self, bodies: Sequence[Body]) -> float:
        """U = -G * sum_{i<j} m_i m_j / max(r_ij, min_distance)."""
        positions, _, masses = self._arrays(bodies)
        n = len(masses)
        if n < 2:
            return 0.0
        i, j = np.triu_indices(n, k=1)
        r = np.linalg.norm(positions[j] - positions[i], axis=1)
        r = np.maximum(r, self.min_distance)
        return float(-self.G * np.sum(masses[i] * masses[j] / r))

    def compute_energies(self, bodies: Sequence[Body]) -> Tuple[float, float, float]:
        """Return (kinetic, potential, total) energy."""
        K = self.kinetic_energy(bodies)
        U = self.potential_energy(bodies)
        return K, U, K + U
