import pytest

from algodrills.dragon_curve import count_squares, curve_points


def test_first_generation_points():
    assert curve_points(0, 0, 0, 1) == [(0, 0), (1, 0), (1, -1)]


@pytest.mark.parametrize("generation", range(6))
def test_point_count_doubles(generation):
    assert len(curve_points(5, 5, 2, generation)) == 2**generation + 1


@pytest.mark.parametrize("direction", range(4))
def test_each_step_is_unit_length(direction):
    points = curve_points(10, 10, direction, 4)
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        assert abs(x1 - x2) + abs(y1 - y2) == 1


def test_curve_starts_at_origin_point():
    assert curve_points(3, 7, 1, 3)[0] == (3, 7)


def test_next_generation_extends_previous():
    previous = curve_points(4, 4, 3, 3)
    following = curve_points(4, 4, 3, 4)
    assert following[: len(previous)] == previous


def test_example_square_count():
    assert count_squares([(3, 3, 0, 1), (4, 2, 1, 3), (4, 2, 2, 1)]) == 4


def test_duplicate_curves_do_not_change_count():
    curves = [(3, 3, 0, 1), (4, 2, 1, 3)]
    assert count_squares(curves + curves) == count_squares(curves)


def test_bad_direction_rejected():
    with pytest.raises(ValueError):
        curve_points(0, 0, 4, 1)


def test_negative_generation_rejected():
    with pytest.raises(ValueError):
        curve_points(0, 0, 0, -1)