import itertools
import math
import random

import pytest

from algocraft.geometry import closest_pair


def _check_result(points, result):
    distance, (i, j) = result
    assert i != j
    assert distance == pytest.approx(math.dist(points[i], points[j]))
    assert all(
        math.dist(a, b) >= distance - 1e-9
        for a, b in itertools.combinations(points, 2)
    )


def test_two_points():
    distance, pair = closest_pair([(0, 0), (3, 4)])
    assert distance == pytest.approx(5.0)
    assert set(pair) == {0, 1}


def test_duplicate_points_give_zero():
    points = [(5, 5), (1, 9), (5, 5), (-3, 2)]
    distance, pair = closest_pair(points)
    assert distance == 0.0
    assert set(pair) == {0, 2}


def test_needs_two_points():
    with pytest.raises(ValueError):
        closest_pair([(1, 1)])
    with pytest.raises(ValueError):
        closest_pair([])


def test_collinear_points():
    points = [(x * x, 0) for x in range(10)]
    distance, pair = closest_pair(points)
    _check_result(points, (distance, pair))
    assert set(pair) == {0, 1}


@pytest.mark.parametrize("seed", range(30))
def test_random_point_sets(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 80)
    points = [(rng.randint(-200, 200), rng.randint(-200, 200)) for _ in range(n)]
    _check_result(points, closest_pair(points))


def test_input_order_does_not_change_distance():
    rng = random.Random(99)
    points = [(rng.randint(0, 1000), rng.randint(0, 1000)) for _ in range(60)]
    first, _ = closest_pair(points)
    shuffled = list(points)
    rng.shuffle(shuffled)
    second, _ = closest_pair(shuffled)
    assert first == pytest.approx(second)