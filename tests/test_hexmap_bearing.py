import pytest

from starfleet.hexmap import Bearing, angle_between, bearing, classify, make


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        ((39, 0), Bearing.A),
        ((40, 0), Bearing.AB),
        ((40, 1), Bearing.B),
        ((40, 2), Bearing.C),
        ((40, 3), Bearing.CD),
        ((39, 2), Bearing.D),
        ((38, 3), Bearing.DE),
        ((38, 2), Bearing.E),
        ((38, 1), Bearing.F),
        ((38, 0), Bearing.FA),
    ],
)
def test_bearing_from_hex_4002(target, expected):
    assert bearing(make(39, 1), make(*target)) is expected


def test_horizontal_bearings_are_ties():
    assert bearing(make(0, 0), make(2, 0)) is Bearing.BC
    assert bearing(make(2, 0), make(0, 0)) is Bearing.EF


def test_angle_between_vertical_is_exact():
    assert angle_between(make(39, 1), make(39, 0)) == 90.0
    assert angle_between(make(39, 0), make(39, 1)) == 270.0


def test_angle_between_rounds_to_whole_degrees():
    theta = angle_between(make(10, 10), make(15, 3))
    assert theta == int(theta)
    assert 0.0 <= theta < 360.0


def test_same_hex_bearing_is_zero_degrees():
    assert angle_between(make(5, 5), make(5, 5)) == 0.0
    assert bearing(make(5, 5), make(5, 5)) is Bearing.BC


@pytest.mark.parametrize(
    ("theta", "expected"),
    [
        (0, Bearing.BC),
        (1, Bearing.B),
        (59, Bearing.B),
        (60, Bearing.AB),
        (61, Bearing.A),
        (90, Bearing.A),
        (119, Bearing.A),
        (120, Bearing.FA),
        (150, Bearing.F),
        (180, Bearing.EF),
        (210, Bearing.E),
        (240, Bearing.DE),
        (270, Bearing.D),
        (300, Bearing.CD),
        (330, Bearing.C),
        (359, Bearing.C),
        (360, Bearing.BC),
    ],
)
def test_classify_open_sectors_and_closed_ties(theta, expected):
    assert classify(theta) is expected


def test_bearing_flips_when_reversed():
    a, b = make(12, 14), make(20, 9)
    assert bearing(a, b) is Bearing.B
    assert bearing(b, a) is Bearing.E
    assert bearing(b, a).ordinal == (bearing(a, b).ordinal + 6) % 12
