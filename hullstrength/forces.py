"""Resulting load, shear force and bending moment along the hull."""

from __future__ import annotations

import logging
from typing import Protocol

from hullstrength.vectors import integral_sum, mul_single, sub_vec, sum_above

_log = logging.getLogger(__name__)


class _Distribution(Protocol):
    def values(self) -> list[float]: ...


class TotalForce:
    """Resulting load on each stretch: (ship mass - displaced water) * g."""

    def __init__(
        self, mass: _Distribution, draught: _Distribution, gravity_g: float
    ) -> None:
        if not gravity_g > 0.0:
            raise ValueError(f"gravity_g {gravity_g} must be positive")
        self._mass = mass
        self._draught = draught
        self._gravity_g = gravity_g

    def values(self) -> list[float]:
        mass_values = self._mass.values()
        draught_values = self._draught.values()
        if len(mass_values) != len(draught_values):
            raise ValueError(
                f"mass has {len(mass_values)} values, "
                f"draught has {len(draught_values)}"
            )
        result = mul_single(sub_vec(mass_values, draught_values), self._gravity_g)
        _log.debug("TotalForce result:%s", result)
        return result


class ShearForce:
    """Shear force, the running sum of the resulting load from the stern."""

    def __init__(self, total_force: _Distribution) -> None:
        self._total_force = total_force

    def values(self) -> list[float]:
        result = sum_above(self._total_force.values())
        _log.debug("ShearForce result:%s", result)
        return result


class BendingMoment:
    """Bending moment, the integral sum of the shear force."""

    def __init__(self, shear_force: _Distribution) -> None:
        self._shear_force = shear_force

    def values(self) -> list[float]:
        result = integral_sum(self._shear_force.values())
        _log.debug("BendingMoment result:%s", result)
        return result