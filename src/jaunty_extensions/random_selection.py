"""Random picks and in-place shuffles over caller-owned sequences.

Every helper takes an optional numpy Generator. Pass a seeded one (see
``create_rng``) for reproducible results; when omitted a fresh unseeded
generator is used.

Invalid arguments (non-positive lengths, out-of-range indices) are logged
as errors and answered with index 0 rather than raising.
"""

import logging
from typing import MutableSequence, Optional, Sequence, TypeVar

import numpy as np

from .utils import resolve_rng

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _swap(sequence: MutableSequence[T], i: int, j: int) -> None:
    # Indexing a multi-dimensional ndarray returns a view, so swap rows by
    # fancy indexing, which copies.
    if isinstance(sequence, np.ndarray):
        sequence[[i, j]] = sequence[[j, i]]
    else:
        sequence[i], sequence[j] = sequence[j], sequence[i]


def shuffle(sequence: MutableSequence[T], rng: Optional[np.random.Generator] = None) -> None:
    """Shuffle a sequence in place, swapping each slot with any slot.

    Each index i is swapped with an index drawn from the full range
    [0, n), not [i, n). The resulting permutations are not equally
    likely; use ``shuffle_array`` for an unbiased shuffle.

    Args:
        sequence: Sequence to shuffle
        rng: NumPy random generator (created if not provided)
    """
    rng = resolve_rng(rng)
    count = len(sequence)
    for i1 in range(count):
        i2 = int(rng.integers(0, count))
        _swap(sequence, i1, i2)


def shuffle_array(sequence: MutableSequence[T], rng: Optional[np.random.Generator] = None) -> None:
    """Shuffle a sequence in place with Fisher-Yates.

    Args:
        sequence: Sequence to shuffle
        rng: NumPy random generator (created if not provided)
    """
    rng = resolve_rng(rng)
    n = len(sequence)
    for i in range(n):
        # Pick an index at or above the current one
        r = i + int(rng.integers(0, n - i))
        _swap(sequence, i, r)


def get_random_array_index(
    array_length: int,
    exclude_index: int = -1,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """Pick a random index into an array, optionally avoiding one index.

    Args:
        array_length: Length of the array
        exclude_index: Index that must not be returned; negative disables
        rng: NumPy random generator (created if not provided)

    Returns:
        Random index in [0, array_length), or 0 if array_length is invalid
    """
    if array_length <= 0:
        logger.error("get_random_array_index array_length invalid=%d", array_length)
        return 0

    rng = resolve_rng(rng)
    if exclude_index < 0:
        return int(rng.integers(0, array_length))
    if array_length == 1:
        return 0  # nothing else to pick

    random_index = exclude_index
    while random_index == exclude_index:
        random_index = int(rng.integers(0, array_length))
    return random_index


def get_weighted_random_array_index(
    array_length: int,
    weighted_index: int,
    chance_of_getting_weighted_index: float,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """Pick weighted_index with the given chance, otherwise any index.

    The fallback pick is uniform over the whole array, so it may land on
    weighted_index too.

    Args:
        array_length: Length of the array
        weighted_index: Favored index
        chance_of_getting_weighted_index: Probability in [0, 1] of returning
            weighted_index directly
        rng: NumPy random generator (created if not provided)

    Returns:
        Chosen index, or 0 if weighted_index is out of bounds
    """
    if weighted_index >= array_length or weighted_index < 0:
        logger.error(
            "get_weighted_random_array_index weighted_index=%d out of bounds for array_length=%d",
            weighted_index,
            array_length,
        )
        return 0

    rng = resolve_rng(rng)
    if rng.random() < chance_of_getting_weighted_index:
        return weighted_index
    return get_random_array_index(array_length, rng=rng)


def get_weighted_index(weights: Sequence[float], rng: Optional[np.random.Generator] = None) -> int:
    """Pick an index with probability proportional to its weight.

    Args:
        weights: Non-negative weight per index
        rng: NumPy random generator (created if not provided)

    Returns:
        Chosen index, or 0 if no index could be chosen
    """
    rng = resolve_rng(rng)
    total_weight = sum(weights)
    x = rng.uniform(0.0, total_weight)

    cumulative_weight = 0.0
    for i, weight in enumerate(weights):
        cumulative_weight += weight
        if x <= cumulative_weight:
            return i

    logger.error("get_weighted_index invalid return value (weights=%s)", list(weights))
    return 0


def random_element(sequence: Sequence[T], rng: Optional[np.random.Generator] = None) -> T:
    """Return a uniformly chosen element.

    Raises:
        IndexError: If the sequence is empty
    """
    if len(sequence) == 0:
        raise IndexError("random_element from empty sequence")
    rng = resolve_rng(rng)
    return sequence[int(rng.integers(0, len(sequence)))]
