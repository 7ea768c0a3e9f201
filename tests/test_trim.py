import pytest

from hullstrength.moments import Position
from hullstrength.trim import Trim


class _FixedPosition:
    def __init__(self, position):
        self._position = position

    def value(self, key):
        return self._position


class _FixedValue:
    def __init__(self, value):
        self._value = value

    def value(self, key):
        return self._value


class _FixedMass:
    def __init__(self, total, shift, delta_m_h):
        self._total = total
        self._shift = shift
        self._delta_m_h = delta_m_h

    def sum(self):
        return self._total

    def shift(self):
        return self._shift

    def delta_m_h(self):
        return self._delta_m_h


def test_trim_value():
    result = Trim(
        1.025,
        118.39,
        _FixedPosition(Position(-0.194609657, 0.0, 0.735524704)),
        _FixedValue(696.702572991),
        _FixedMass(2044.10, Position(1.05, 0.0, 5.32), 0.0),
    ).value()
    target = 0.2115
    assert abs(result - target) < abs(result) * 0.00005


def test_trim_zero_when_centres_coincide():
    result = Trim(
        1.025,
        100.0,
        _FixedPosition(Position(1.5, 0.0, 2.0)),
        _FixedValue(50.0),
        _FixedMass(1000.0, Position(1.5, 0.0, 3.0), 0.0),
    ).value()
    assert result == 0.0


def test_trim_sign_follows_centre_of_mass():
    def trim_for(x):
        return Trim(
            1.0,
            100.0,
            _FixedPosition(Position(0.0, 0.0, 1.0)),
            _FixedValue(50.0),
            _FixedMass(1000.0, Position(x, 0.0, 0.0), 0.0),
        ).value()

    assert trim_for(2.0) > 0.0
    assert trim_for(-2.0) < 0.0
    assert trim_for(2.0) == pytest.approx(-trim_for(-2.0))


@pytest.mark.parametrize(
    "water_density, ship_length", [(0.0, 10.0), (-1.0, 10.0), (1.0, 0.0)]
)
def test_trim_rejects_non_positive_arguments(water_density, ship_length):
    with pytest.raises(ValueError):
        Trim(
            water_density,
            ship_length,
            _FixedPosition(Position(0.0, 0.0, 0.0)),
            _FixedValue(1.0),
            _FixedMass(1.0, Position(0.0, 0.0, 0.0), 0.0),
        )