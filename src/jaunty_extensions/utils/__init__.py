"""Shared utility functions.

Kept free of imports from the rest of the package to prevent circular
imports.
"""

from .random_utils import create_rng, resolve_rng

__all__ = [
    "create_rng",
    "resolve_rng",
]
