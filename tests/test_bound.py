import pytest

from hullstrength.bound import Bound


@pytest.mark.parametrize(
    "left, right, target",
    [
        (Bound(2.0, 4.0), Bound(0.0, 1.0), None),
        (Bound(2.0, 4.0), Bound(4.0, 5.0), None),
        (Bound(2.0, 4.0), Bound(1.0, 3.0), Bound(2.0, 3.0)),
        (Bound(2.0, 4.0), Bound(1.0, 5.0), Bound(2.0, 4.0)),
        (Bound(2.0, 4.0), Bound(3.0, 5.0), Bound(3.0, 4.0)),
        (Bound(2.0, 4.0), Bound(2.0, 3.0), Bound(2.0, 3.0)),
    ],
)
def test_intersect(left, right, target):
    assert left.intersect(right) == target


@pytest.mark.parametrize(
    "left, right, target",
    [
        (Bound(2.0, 4.0), Bound(0.0, 1.0), 0.0),
        (Bound(2.0, 4.0), Bound(4.0, 5.0), 0.0),
        (Bound(2.0, 4.0), Bound(1.0, 3.0), 0.5),
        (Bound(2.0, 4.0), Bound(1.0, 5.0), 1.0),
        (Bound(2.0, 4.0), Bound(3.0, 5.0), 0.5),
        (Bound(2.0, 4.0), Bound(2.0, 3.0), 0.5),
    ],
)
def test_part_ratio(left, right, target):
    assert left.part_ratio(right) == target


def test_center():
    assert Bound(-2.0, 4.0).center() == 1.0


def test_length():
    assert Bound(-2.0, 4.0).length() == 6.0


@pytest.mark.parametrize("start, end", [(1.0, 1.0), (3.0, 2.0)])
def test_invalid_bound_rejected(start, end):
    with pytest.raises(ValueError):
        Bound(start, end)


def test_intersect_is_symmetric():
    a = Bound(-3.0, 1.5)
    b = Bound(0.5, 7.0)
    assert a.intersect(b) == b.intersect(a)