"""Trim: inclination of the hull in the longitudinal plane."""

from __future__ import annotations

import logging
from typing import Protocol

from hullstrength.moments import Position

_log = logging.getLogger(__name__)


class _PositionSource(Protocol):
    def value(self, key: float) -> Position: ...


class _ValueSource(Protocol):
    def value(self, key: float) -> float: ...


class _MassSource(Protocol):
    def sum(self) -> float: ...

    def shift(self) -> Position: ...

    def delta_m_h(self) -> float: ...


class Trim:
    """Trim of the ship, corrected for free liquid surfaces in tanks."""

    def __init__(
        self,
        water_density: float,
        ship_length: float,
        center_draught_shift: _PositionSource,
        rad_long: _ValueSource,
        mass: _MassSource,
    ) -> None:
        if not water_density > 0.0:
            raise ValueError(f"water_density {water_density} must be positive")
        if not ship_length > 0.0:
            raise ValueError(f"ship_length {ship_length} must be positive")
        self._water_density = water_density
        self._ship_length = ship_length
        self._center_draught_shift = center_draught_shift
        self._rad_long = rad_long
        self._mass = mass

    def value(self) -> float:
        """Trim used to derive the bow and stern draughts."""
        mass_sum = self._mass.sum()
        volume = mass_sum / self._water_density
        center = self._center_draught_shift.value(volume)
        rad_long = self._rad_long.value(volume)
        # applicate of the longitudinal metacentre
        z_m = center.z + rad_long
        # longitudinal metacentric height without the free surface correction
        h_0 = z_m - center.z
        h = h_0 - self._mass.delta_m_h()
        # moment to change trim by one centimetre
        trim_moment = (mass_sum * h) / (100.0 * self._ship_length)
        result = (
            mass_sum * (self._mass.shift().x - center.x) / (100.0 * trim_moment)
        )
        _log.debug(
            "Trim mass:%s volume:%s center:%s rad:%s Z_m:%s H_0:%s H:%s M:%s "
            "result:%s",
            mass_sum, volume, center, rad_long, z_m, h_0, h, trim_moment, result,
        )
        return result