"""Loads carried by the ship: solid cargo spaces and liquid tanks."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from hullstrength.bound import Bound
from hullstrength.moments import MassMoment, Position, SurfaceMoment
from hullstrength.shifts import InertiaShift, PosShift

_log = logging.getLogger(__name__)


class Load(ABC):
    """A load with a mass, part of which may fall within a given range."""

    @abstractmethod
    def center(self) -> Position:
        """Centre of mass of the load."""

    @abstractmethod
    def mass(self, bound: Bound | None = None) -> float:
        """Mass inside ``bound``, or the whole mass when ``bound`` is None."""

    def moment_mass(self) -> MassMoment:
        """Static moment of the whole mass."""
        return MassMoment.from_position(self.center(), self.mass())

    def moment_surface(self) -> SurfaceMoment:
        """Free surface moment; zero for solid loads."""
        return SurfaceMoment(0.0, 0.0)


class LoadSpace(Load):
    """Solid load spread evenly along its bound."""

    def __init__(self, mass: float, bound: Bound, center: Position) -> None:
        if not bound.start < center.x:
            raise ValueError(
                f"bound start {bound.start} must be less than center x {center.x}"
            )
        if not bound.end > center.x:
            raise ValueError(
                f"bound end {bound.end} must be greater than center x {center.x}"
            )
        self._mass = mass
        self._bound = bound
        self._center = center

    def center(self) -> Position:
        return self._center

    def mass(self, bound: Bound | None = None) -> float:
        if bound is None:
            return self._mass
        return self._bound.part_ratio(bound) * self._mass


class Tank(Load):
    """Tank of liquid, with a volume-dependent centre and free surface."""

    def __init__(
        self,
        density: float,
        volume: float,
        bound: Bound,
        center: PosShift,
        free_surf_inertia: InertiaShift,
    ) -> None:
        if not density > 0.0:
            raise ValueError(f"density {density} must be positive")
        if not volume >= 0.0:
            raise ValueError(f"volume {volume} must not be negative")
        self._density = density
        self._volume = volume
        self._bound = bound
        self._center = center
        self._free_surf_inertia = free_surf_inertia

    def center(self) -> Position:
        return self._center.value(self._volume)

    def mass(self, bound: Bound | None = None) -> float:
        ratio = 1.0 if bound is None else self._bound.part_ratio(bound)
        return self._volume * self._density * ratio

    def moment_surface(self) -> SurfaceMoment:
        result = SurfaceMoment.from_inertia(
            self._free_surf_inertia.value(self._volume), self._density
        )
        _log.debug("Tank surface moment: %s", result)
        return result