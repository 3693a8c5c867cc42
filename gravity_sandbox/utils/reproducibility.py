"""Reproducibility utilities for deterministic simulations."""

import numpy as np
from typing import Optional


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the generator a world draws all of its randomness from.

    Args:
        seed: Optional seed; None gives a fresh OS-seeded generator

    Returns:
        NumPy Generator
    """
    return np.random.default_rng(seed)
