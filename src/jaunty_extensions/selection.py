"""Single-pass selection of the best element of a collection.

``first_by_generated_value`` returns the same element as sorting the
admissible elements by their generated value and taking the first one,
but it:

1. Never sorts, it walks the collection once.
2. Calls the value function exactly once per element.

``nearest`` builds on it to find the closest positioned object inside an
optional distance window.
"""

import math
from typing import Callable, Iterable, Optional, Protocol, Sequence, TypeVar

import numpy as np

T = TypeVar("T")
V = TypeVar("V")


class Positioned(Protocol):
    """Anything that exposes a 3D position."""

    @property
    def position(self) -> Sequence[float]:
        ...


P = TypeVar("P", bound=Positioned)


def first_by_generated_value(
    sequence: Iterable[T],
    value_of: Callable[[T], V],
    is_admissible: Optional[Callable[[V], bool]] = None,
    default: Optional[T] = None,
) -> Optional[T]:
    """Return the element with the lowest generated value.

    Negate the generated value to find the element with the highest one
    instead. Ties go to the element seen first.

    Args:
        sequence: Elements to search, any iterable
        value_of: Converts an element to the value used for ordering
        is_admissible: Optional predicate on the generated value; elements
            whose value fails it are skipped entirely
        default: Returned when no element is admissible or the input is empty

    Returns:
        The first element by generated value, or ``default``
    """
    found = False
    best_element = default
    best_value = None

    for element in sequence:
        value = value_of(element)

        if is_admissible is not None and not is_admissible(value):
            continue

        if not found or value < best_value:
            found = True
            best_element = element
            best_value = value

    return best_element


def squared_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Squared Euclidean distance between two points."""
    delta = np.subtract(a, b, dtype=float)
    return float(np.dot(delta, delta))


def nearest(
    sequence: Iterable[P],
    reference_point: Sequence[float],
    min_distance: float = 0.0,
    max_distance: float = math.inf,
    default: Optional[P] = None,
) -> Optional[P]:
    """Return the element nearest to reference_point within [min_distance, max_distance].

    Args:
        sequence: Positioned elements to search
        reference_point: Point to measure distances from
        min_distance: Minimum allowed distance (inclusive)
        max_distance: Maximum allowed distance (inclusive)
        default: Returned when no element lies in range

    Returns:
        The nearest element in range, or ``default``
    """
    is_admissible = None
    if min_distance != 0 or max_distance != math.inf:
        min_distance_sq = min_distance * min_distance
        max_distance_sq = max_distance * max_distance

        def is_admissible(distance_sq: float) -> bool:
            return min_distance_sq <= distance_sq <= max_distance_sq

    reference = np.asarray(reference_point, dtype=float)

    return first_by_generated_value(
        sequence,
        lambda element: squared_distance(element.position, reference),
        is_admissible,
        default,
    )
