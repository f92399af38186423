"""Line and segment intersection tests.

Points are accepted as any sequence of floats and returned as numpy arrays.
"""

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

PLANAR_EPSILON = 1e-4
PARALLEL_EPSILON = 1e-4


@dataclass
class Intersection:
    """Result of an intersection test."""

    found: bool
    point: np.ndarray = field(default_factory=lambda: np.zeros(2))


def _miss(dimensions: int) -> Intersection:
    return Intersection(found=False, point=np.zeros(dimensions))


def line_line_intersection(
    line_point1: Sequence[float],
    line_vec1: Sequence[float],
    line_point2: Sequence[float],
    line_vec2: Sequence[float],
    planar_epsilon: float = PLANAR_EPSILON,
    parallel_epsilon: float = PARALLEL_EPSILON,
) -> Intersection:
    """Intersect two infinite 3D lines given as point + direction.

    Two lines in 3D usually do not intersect. They only do when they are
    coplanar and not parallel.

    Args:
        line_point1: A point on the first line
        line_vec1: Direction of the first line
        line_point2: A point on the second line
        line_vec2: Direction of the second line
        planar_epsilon: Tolerance on the scalar triple product for coplanarity
        parallel_epsilon: Minimum squared length of the directions' cross
            product for the lines to count as non-parallel

    Returns:
        Intersection with the 3D point, or found=False for skew or
        parallel lines
    """
    p1 = np.asarray(line_point1, dtype=float)
    v1 = np.asarray(line_vec1, dtype=float)
    p2 = np.asarray(line_point2, dtype=float)
    v2 = np.asarray(line_vec2, dtype=float)

    v3 = p2 - p1
    cross_1_2 = np.cross(v1, v2)
    cross_3_2 = np.cross(v3, v2)

    planar_factor = float(np.dot(v3, cross_1_2))
    cross_sq = float(np.dot(cross_1_2, cross_1_2))

    # coplanar and not parallel
    if abs(planar_factor) < planar_epsilon and cross_sq > parallel_epsilon:
        s = float(np.dot(cross_3_2, cross_1_2)) / cross_sq
        return Intersection(found=True, point=p1 + v1 * s)

    return _miss(3)


def line_segments_intersection(
    p1: Sequence[float],
    p2: Sequence[float],
    p3: Sequence[float],
    p4: Sequence[float],
) -> Intersection:
    """Intersect 2D segments p1-p2 and p3-p4 by solving the parametric form.

    Args:
        p1: Start of the first segment
        p2: End of the first segment
        p3: Start of the second segment
        p4: End of the second segment

    Returns:
        Intersection with the 2D point, or found=False if the segments are
        parallel or do not touch
    """
    x1, y1 = float(p1[0]), float(p1[1])
    x2, y2 = float(p2[0]), float(p2[1])
    x3, y3 = float(p3[0]), float(p3[1])
    x4, y4 = float(p4[0]), float(p4[1])

    d = (x2 - x1) * (y4 - y3) - (y2 - y1) * (x4 - x3)
    if d == 0.0:
        return _miss(2)

    u = ((x3 - x1) * (y4 - y3) - (y3 - y1) * (x4 - x3)) / d
    v = ((x3 - x1) * (y2 - y1) - (y3 - y1) * (x2 - x1)) / d

    if u < 0.0 or u > 1.0 or v < 0.0 or v > 1.0:
        return _miss(2)

    return Intersection(found=True, point=np.array([x1 + u * (x2 - x1), y1 + u * (y2 - y1)]))


def segment_segment_intersection(
    p1: Sequence[float],
    p2: Sequence[float],
    p3: Sequence[float],
    p4: Sequence[float],
) -> Intersection:
    """Intersect 2D segments p1-p2 and p3-p4 with early bounding-box rejection.

    Cheap axis-aligned bounding box tests run first, then the sign of the
    cross-product numerators is checked against the shared denominator, so
    most misses never reach a division.

    Args:
        p1: Start of the first segment
        p2: End of the first segment
        p3: Start of the second segment
        p4: End of the second segment

    Returns:
        Intersection with the 2D point, or found=False if the segments are
        parallel or do not touch
    """
    x1, y1 = float(p1[0]), float(p1[1])
    x2, y2 = float(p2[0]), float(p2[1])
    x3, y3 = float(p3[0]), float(p3[1])
    x4, y4 = float(p4[0]), float(p4[1])

    ax = x2 - x1
    bx = x3 - x4

    # X bounding box
    if ax < 0:
        x1_lo, x1_hi = x2, x1
    else:
        x1_lo, x1_hi = x1, x2

    if bx > 0:
        if x1_hi < x4 or x3 < x1_lo:
            return _miss(2)
    elif x1_hi < x3 or x4 < x1_lo:
        return _miss(2)

    ay = y2 - y1
    by = y3 - y4

    # Y bounding box
    if ay < 0:
        y1_lo, y1_hi = y2, y1
    else:
        y1_lo, y1_hi = y1, y2

    if by > 0:
        if y1_hi < y4 or y3 < y1_lo:
            return _miss(2)
    elif y1_hi < y3 or y4 < y1_lo:
        return _miss(2)

    cx = x1 - x3
    cy = y1 - y3
    d = by * cx - bx * cy  # alpha numerator
    f = ay * bx - ax * by  # shared denominator

    # alpha
    if f > 0:
        if d < 0 or d > f:
            return _miss(2)
    elif d > 0 or d < f:
        return _miss(2)

    e = ax * cy - ay * cx  # beta numerator

    # beta
    if f > 0:
        if e < 0 or e > f:
            return _miss(2)
    elif e > 0 or e < f:
        return _miss(2)

    # parallel
    if f == 0:
        return _miss(2)

    return Intersection(found=True, point=np.array([x1 + d * ax / f, y1 + d * ay / f]))
