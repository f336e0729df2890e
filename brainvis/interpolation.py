"""Inverse-distance interpolation over nearest 2-D points."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

Point = Tuple[float, float]

_EPSILON = 0.00000000001


def _distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def find_k_nearest(points: Sequence[Point], pos: Point, k: int) -> List[int]:
    """Indices of the ``k`` points closest to ``pos``, nearest first."""
    if k > len(points):
        raise ValueError(f"cannot take {k} nearest of {len(points)} points")
    ranked = sorted(range(len(points)), key=lambda i: _distance(points[i], pos))
    return ranked[: max(k, 0)]


def weighted_average(
    values: Sequence[float], points: Sequence[Point], pos: Point, k: int
) -> float:
    """Average of the values at the ``k`` nearest points, weighted by 1/distance."""
    sum_weighted = 0.0
    sum_weight = 0.0
    for index in find_k_nearest(points, pos, k):
        weight = 1.0 / (_distance(points[index], pos) + _EPSILON)
        sum_weighted += weight * values[index]
        sum_weight += weight
    if sum_weight == 0.0:
        return math.nan
    return sum_weighted / sum_weight