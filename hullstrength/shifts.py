"""Positions and inertia moments that depend on a single parameter."""

from hullstrength.curve import Curve
from hullstrength.moments import InertiaMoment, Position


class PosShift:
    """Position of a point as a function of a key, one curve per axis."""

    def __init__(self, x: Curve, y: Curve, z: Curve) -> None:
        self.x = x
        self.y = y
        self.z = z

    def value(self, key: float) -> Position:
        return Position(self.x.value(key), self.y.value(key), self.z.value(key))


class InertiaShift:
    """Free surface inertia moments as a function of liquid volume."""

    def __init__(self, x: Curve, y: Curve) -> None:
        self.x = x
        self.y = y

    def value(self, key: float) -> InertiaMoment:
        """Inertia moments (x transverse, y longitudinal) at ``key``."""
        return InertiaMoment(self.x.value(key), self.y.value(key))