import pytest

from brainvis.thresholds import (
    Thresholds,
    parse_thresholds,
    point_in_polygon,
    slider_value,
)

SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


@pytest.mark.parametrize(
    "point, expected",
    [
        ((0.5, 0.5), True),
        ((0.2, 0.9), True),
        ((1.5, 0.5), False),
        ((-0.5, 0.5), False),
        ((0.5, 2.0), False),
        ((0.5, -1.0), False),
    ],
)
def test_point_in_square(point, expected):
    assert point_in_polygon(point, SQUARE) is expected


def test_point_in_concave_polygon():
    # U shape: the notch between the arms is outside.
    shape = [(0, 0), (3, 0), (3, 3), (2, 3), (2, 1), (1, 1), (1, 3), (0, 3)]
    assert point_in_polygon((0.5, 2.0), shape) is True
    assert point_in_polygon((1.5, 2.0), shape) is False
    assert point_in_polygon((1.5, 0.5), shape) is True


def test_point_in_empty_polygon():
    assert point_in_polygon((0.0, 0.0), []) is False


def test_slider_value_clamps_to_ends():
    assert slider_value(-1.0, 0.02, 0.96, -1.0, 1.0) == -1.0
    assert slider_value(5.0, 0.02, 0.96, -1.0, 1.0) == 1.0
    assert slider_value(0.02, 0.02, 0.96, -1.0, 1.0) == pytest.approx(-1.0)
    assert slider_value(0.98, 0.02, 0.96, -1.0, 1.0) == pytest.approx(1.0)


def test_slider_value_is_monotonic():
    xs = [i / 20 for i in range(21)]
    values = [slider_value(x, 0.02, 0.96, 0.0, 0.3) for x in xs]
    assert values == sorted(values)
    assert all(0.0 <= v <= 0.3 for v in values)


def test_drag_lower_cannot_pass_upper():
    t = Thresholds(min_value=-1.0, lower=-0.5, upper=0.2, max_value=1.0)
    result = t.drag_lower(0.99)
    assert result == 0.2
    assert t.lower == t.upper


def test_drag_lower_to_left_end():
    t = Thresholds(min_value=-1.0, lower=-0.5, upper=0.2, max_value=1.0)
    assert t.drag_lower(0.0) == -1.0
    assert t.upper == 0.2


def test_drag_upper_cannot_pass_lower():
    t = Thresholds(min_value=-1.0, lower=-0.5, upper=0.2, max_value=1.0)
    assert t.drag_upper(0.0) == -0.5
    assert t.upper == t.lower


def test_drag_upper_to_right_end():
    t = Thresholds(min_value=0.0, lower=0.1, upper=0.2, max_value=2.0)
    assert t.drag_upper(1.0) == 2.0
    assert t.lower == 0.1


def test_drag_keeps_order_everywhere():
    t = Thresholds(min_value=-1.0, lower=-0.5, upper=0.5, max_value=1.0)
    for i in range(21):
        x = i / 20
        t.drag_lower(x)
        t.drag_upper(1.0 - x)
        assert t.min_value <= t.lower <= t.upper <= t.max_value


def test_invalid_range_type():
    with pytest.raises(ValueError):
        Thresholds(0.0, 0.1, 0.2, 1.0, range_type="within")


def test_parse_thresholds_valid():
    assert parse_thresholds("-1", "-0.5", "0.5", "1") == (-1.0, -0.5, 0.5, 1.0)
    assert parse_thresholds("0", "0", "0", "0") == (0.0, 0.0, 0.0, 0.0)


@pytest.mark.parametrize(
    "args, message",
    [
        (("x", "0", "0", "1"), "Thres min is invalid format"),
        (("0", "", "0", "1"), "Lower thres is invalid format"),
        (("0", "0", "abc", "1"), "Upper thres is invalid format"),
        (("0", "0", "0", "?"), "Thres max is invalid format"),
        (("0.5", "0", "0.6", "1"), "Lower thres must be equal or larger than thres min"),
        (("0", "0.7", "0.6", "1"), "Upper thres must be equal or larger than lower thres"),
        (("0", "0.1", "0.6", "0.5"), "Thres max must be equal or larger than upper thres"),
    ],
)
def test_parse_thresholds_errors(args, message):
    with pytest.raises(ValueError, match=message):
        parse_thresholds(*args)