"""Distribution of the displaced water mass over the hull's stretches."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

from hullstrength.bound import Bound
from hullstrength.frame import Displacement

_log = logging.getLogger(__name__)


class _ValueSource(Protocol):
    def value(self, key: float) -> float: ...


class _MassSource(Protocol):
    def sum(self) -> float: ...


class _TrimSource(Protocol):
    def value(self) -> float: ...


class Draught:
    """Mass of water displaced by each stretch of the hull."""

    def __init__(
        self,
        ship_length: float,
        water_density: float,
        bounds: Iterable[Bound],
        mass: _MassSource,
        center_waterline_shift: _ValueSource,
        mean_draught: _ValueSource,
        displacement: Displacement,
        trim: _TrimSource,
    ) -> None:
        self._ship_length = ship_length
        self._water_density = water_density
        self._bounds = list(bounds)
        self._mass = mass
        self._center_waterline_shift = center_waterline_shift
        self._mean_draught = mean_draught
        self._displacement = displacement
        self._trim = trim

    def values(self) -> list[float]:
        """Displaced water mass for each bound."""
        length = self._ship_length
        trim = self._trim.value()
        volume = self._mass.sum() / self._water_density
        x_f = self._center_waterline_shift.value(volume)
        mean = self._mean_draught.value(volume)
        bow_draught = mean - (0.5 + x_f / length) * trim
        trim_x_f_sl = x_f * trim / length
        delta_draught = (-2.0 * trim_x_f_sl) / (len(self._bounds) * length)
        result = [
            self._displacement.value(
                bound,
                bow_draught + delta_draught * (bound.center() + length / 2.0),
            )
            * self._water_density
            for bound in self._bounds
        ]
        _log.debug(
            "Draught trim:%s volume:%s x_f:%s d:%s bow_draught:%s "
            "trim_x_f_sl:%s delta_draught:%s result:%s",
            trim, volume, x_f, mean, bow_draught, trim_x_f_sl, delta_draught,
            result,
        )
        return result