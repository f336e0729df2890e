import math

import pytest

from brainvis.interpolation import find_k_nearest, weighted_average

POINTS = [(0.0, 0.0), (5.0, 5.0), (1.0, 0.5), (-3.0, 2.0), (0.2, -0.1)]


def _dist(p, q):
    return math.hypot(p[0] - q[0], p[1] - q[1])


@pytest.mark.parametrize("k", [0, 1, 3, len(POINTS)])
def test_find_k_nearest_invariants(k):
    pos = (0.3, 0.3)
    result = find_k_nearest(POINTS, pos, k)
    assert len(result) == k
    assert len(set(result)) == k
    dists = [_dist(POINTS[i], pos) for i in result]
    assert dists == sorted(dists)
    others = [i for i in range(len(POINTS)) if i not in result]
    if result:
        assert all(_dist(POINTS[i], pos) >= dists[-1] for i in others)


def test_find_k_nearest_exact_point_first():
    assert find_k_nearest(POINTS, POINTS[3], 1) == [3]


def test_find_k_nearest_too_many():
    with pytest.raises(ValueError):
        find_k_nearest(POINTS, (0.0, 0.0), len(POINTS) + 1)


def test_weighted_average_constant_values():
    values = [4.5] * len(POINTS)
    assert weighted_average(values, POINTS, (2.0, 1.0), 3) == pytest.approx(4.5)


def test_weighted_average_at_sample_point():
    values = [1.0, 2.0, 3.0, 4.0, 5.0]
    assert weighted_average(values, POINTS, POINTS[1], 3) == pytest.approx(2.0)


def test_weighted_average_within_bounds():
    values = [1.0, -2.0, 3.0, 10.0, 0.5]
    pos = (0.4, 0.1)
    k = 3
    nearest = find_k_nearest(POINTS, pos, k)
    chosen = [values[i] for i in nearest]
    result = weighted_average(values, POINTS, pos, k)
    assert min(chosen) <= result <= max(chosen)


def test_weighted_average_single_neighbour_is_its_value():
    values = [1.0, 2.0, 3.0, 4.0, 5.0]
    pos = (-2.9, 2.1)
    assert weighted_average(values, POINTS, pos, 1) == pytest.approx(values[3])


def test_weighted_average_equidistant_points_is_mean():
    points = [(0.0, 0.0), (2.0, 0.0)]
    assert weighted_average([1.0, 3.0], points, (1.0, 0.0), 2) == pytest.approx(2.0)


def test_weighted_average_leans_towards_closer_point():
    points = [(0.0, 0.0), (2.0, 0.0)]
    result = weighted_average([1.0, 3.0], points, (0.5, 0.0), 2)
    assert 1.0 < result < 2.0