import pytest

from hullstrength.bound import Bound
from hullstrength.curve import Curve
from hullstrength.draught import Draught
from hullstrength.frame import Displacement, Frame


class _FixedTrim:
    def __init__(self, value):
        self._value = value

    def value(self):
        return self._value


class _FixedMass:
    def __init__(self, total):
        self._total = total

    def sum(self):
        return self._total


def _draught(trim, x_f, mean=2.0, density=1.025):
    frames = [Frame(Curve([(0.0, 0.0), (10.0, 10.0)])) for _ in range(3)]
    return Draught(
        20.0,
        density,
        [Bound(-10.0, 0.0), Bound(0.0, 10.0)],
        _FixedMass(10.0),
        Curve([(0.0, x_f), (100.0, x_f)]),
        Curve([(0.0, mean), (100.0, mean)]),
        Displacement(frames, 20.0),
        _FixedTrim(trim),
    )


def test_even_keel_gives_uniform_displacement():
    result = _draught(trim=0.0, x_f=0.0, density=1.025).values()
    assert result == pytest.approx([20.0 * 1.025, 20.0 * 1.025])


def test_trim_lowers_draught_when_centre_at_midship():
    result = _draught(trim=2.0, x_f=0.0, density=1.0).values()
    assert result == pytest.approx([10.0, 10.0])


def test_trim_with_shifted_waterline_centre_varies_along_hull():
    result = _draught(trim=1.0, x_f=5.0, density=1.0).values()
    assert len(result) == 2
    assert result[0] > result[1] > 0.0


def test_one_value_per_bound():
    frames = [Frame(Curve([(0.0, 0.0), (10.0, 10.0)])) for _ in range(2)]
    bounds = [Bound(-10.0 + 5.0 * i, -5.0 + 5.0 * i) for i in range(4)]
    draught = Draught(
        20.0,
        1.0,
        bounds,
        _FixedMass(1.0),
        Curve([(0.0, 0.0), (1.0, 0.0)]),
        Curve([(0.0, 3.0), (1.0, 3.0)]),
        Displacement(frames, 20.0),
        _FixedTrim(0.0),
    )
    assert draught.values() == pytest.approx([15.0] * 4)