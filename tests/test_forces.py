import pytest

from hullstrength.forces import BendingMoment, ShearForce, TotalForce


class _Fixed:
    def __init__(self, data):
        self._data = list(data)

    def values(self):
        return list(self._data)


def test_total_force():
    gravity_g = 9.81
    result = TotalForce(
        _Fixed([20.0] * 10),
        _Fixed([5.0, 25.0, 25.0, 25.0, 25.0, 25.0, 25.0, 25.0, 15.0, 5.0]),
        gravity_g,
    ).values()
    target = [
        v * gravity_g
        for v in [15.0, -5.0, -5.0, -5.0, -5.0, -5.0, -5.0, -5.0, 5.0, 15.0]
    ]
    assert result == target


def test_total_force_rejects_length_mismatch():
    force = TotalForce(_Fixed([1.0, 2.0]), _Fixed([1.0]), 9.81)
    with pytest.raises(ValueError):
        force.values()


@pytest.mark.parametrize("gravity_g", [0.0, -9.81])
def test_total_force_rejects_non_positive_gravity(gravity_g):
    with pytest.raises(ValueError):
        TotalForce(_Fixed([1.0]), _Fixed([1.0]), gravity_g)


def test_shear_force():
    result = ShearForce(
        _Fixed([15.0, -5.0, -5.0, -5.0, -5.0, -5.0, -5.0, -5.0, 5.0, 15.0])
    ).values()
    target = [0.0, 15.0, 10.0, 5.0, 0.0, -5.0, -10.0, -15.0, -20.0, -15.0, 0.0]
    assert result == target


def test_bending_moment():
    result = BendingMoment(
        _Fixed(
            [0.0, 5.0, 10.0, 15.0, 10.0, 5.0, 0.0, -5.0, -10.0, -15.0, -15.0, 0.0]
        )
    ).values()
    target = [0.0, 5.0, 20.0, 45.0, 70.0, 85.0, 90.0, 85.0, 70.0, 45.0, 15.0, 0.0]
    assert result == target


def test_chain_from_total_force_to_bending_moment():
    total = TotalForce(_Fixed([2.0, 0.0, 2.0]), _Fixed([1.0, 2.0, 1.0]), 1.0)
    shear = ShearForce(total)
    moment = BendingMoment(shear)
    assert shear.values() == [0.0, 1.0, -1.0, 0.0]
    assert moment.values() == [0.0, 1.0, 1.0, 0.0]