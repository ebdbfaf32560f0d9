import math

import numpy as np
import pytest

from gosper import Points, TurtleState, generate, path_array, points
from gosper.symbols import parse
from gosper.turtle import DIRECTIONS, displacement

S = math.sqrt(0.75)


def test_generation_zero_steps_east():
    assert list(points(generate(0))) == [(1.0, 0.0)]


def test_generation_one_path():
    expected = [
        (1.0, 0.0),
        (1.5, S),
        (0.5, S),
        (0.0, 2 * S),
        (1.0, 2 * S),
        (2.0, 2 * S),
        (2.5, S),
    ]
    np.testing.assert_allclose(np.array(list(points(generate(1)))), expected)


@pytest.mark.parametrize("n", range(5))
def test_one_point_per_segment(n):
    curve = generate(n)
    assert sum(1 for _ in curve.points()) == curve.segment_count()


def test_fresh_walk_retraces_identically():
    curve = generate(3)
    assert list(Points(curve)) == list(Points(curve))


def test_points_are_lazy():
    walk = points(generate(4))
    assert next(walk) == (1.0, 0.0)
    assert walk.state.x == 1.0


def test_walk_is_single_pass():
    walk = points(generate(1))
    list(walk)
    assert list(walk) == []


def test_turns_emit_nothing():
    assert list(points(parse("LLRRLR"))) == []


def test_turns_wrap_around():
    walk = points(parse("RA"))
    assert next(walk) == pytest.approx(DIRECTIONS[5])
    assert walk.state.heading == 5

    walk = points(parse("LLLLLLA"))
    assert next(walk) == (1.0, 0.0)
    assert walk.state.heading == 0


def test_directions_are_unit_length():
    for dx, dy in DIRECTIONS:
        assert math.hypot(dx, dy) == pytest.approx(1.0)


@pytest.mark.parametrize("heading", [-1, 6, 11])
def test_invalid_heading_fails_fast(heading):
    with pytest.raises(AssertionError):
        displacement(heading)
    with pytest.raises(AssertionError):
        TurtleState(heading=heading).forward()


def test_non_symbol_is_a_type_error():
    with pytest.raises(TypeError):
        list(points(["A"]))


@pytest.mark.parametrize("n", range(5))
def test_path_array_matches_walk(n):
    curve = generate(n)
    path = path_array(curve)
    assert path.shape == (curve.segment_count(), 2)
    np.testing.assert_allclose(path, np.array(list(points(curve))))


def test_path_array_of_turns_only_is_empty():
    assert path_array(parse("LR")).shape == (0, 2)
