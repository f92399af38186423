"""Random number generator utilities."""

from typing import Optional

import numpy as np


def create_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a numpy random number generator.

    Centralizes RNG creation so every helper that draws random numbers
    accepts the same injected source, and tests can pass a seeded one.

    Args:
        seed: Optional seed for reproducible random numbers

    Returns:
        NumPy Generator instance
    """
    return np.random.default_rng(seed)


def resolve_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    """Return the given generator, or a fresh unseeded one if None."""
    return rng if rng is not None else create_rng()
