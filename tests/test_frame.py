import pytest

from hullstrength.bound import Bound
from hullstrength.curve import Curve
from hullstrength.frame import Displacement, Frame


def test_frame():
    assert Frame(Curve([(0.0, 0.0), (2.0, 2.0)])).area(1.0) == 1.0


def test_frame_clamped():
    assert Frame(Curve([(0.0, 0.0), (2.0, 2.0)])).area(5.0) == 2.0


def _two_frames():
    return [
        Frame(Curve([(0.0, 0.0), (10.0, 0.0)])),
        Frame(Curve([(0.0, 0.0), (10.0, 40.0)])),
    ]


def test_displacement_value():
    result = Displacement(_two_frames(), 20.0).value(Bound(-10.0, 0.0), 10.0)
    assert result == 100.0


def test_displacement_whole_hull():
    result = Displacement(_two_frames(), 20.0).value(Bound(-10.0, 10.0), 10.0)
    assert result == 400.0


def test_displacement_on_frames_exactly():
    frames = [Frame(Curve([(0.0, 0.0), (10.0, 10.0)])) for _ in range(3)]
    result = Displacement(frames, 20.0).value(Bound(-10.0, 0.0), 5.0)
    assert result == 50.0


def test_displacement_single_frame():
    frames = [Frame(Curve([(0.0, 0.0), (10.0, 10.0)]))]
    result = Displacement(frames, 20.0).value(Bound(-10.0, -5.0), 4.0)
    assert result == 20.0


def test_displacement_needs_frames():
    with pytest.raises(ValueError):
        Displacement([], 20.0)


def test_displacement_needs_positive_length():
    with pytest.raises(ValueError):
        Displacement(_two_frames(), 0.0)


def test_displacement_bound_outside_hull():
    with pytest.raises(ValueError):
        Displacement(_two_frames(), 20.0).value(Bound(-11.0, 0.0), 10.0)