"""Total load on the hull and its distribution along the ship."""

from __future__ import annotations

from collections.abc import Iterable

from hullstrength.bound import Bound
from hullstrength.loads import Load
from hullstrength.moments import MassMoment, Position, SurfaceMoment


class Mass:
    """All loads of the ship split over the diagram's bounds."""

    def __init__(self, loads: Iterable[Load], bounds: Iterable[Bound]) -> None:
        self._loads = list(loads)
        self._bounds = list(bounds)

    def moment_mass(self) -> MassMoment:
        """Sum of the static moments of all loads."""
        return sum((load.moment_mass() for load in self._loads), MassMoment())

    def moment_surface(self) -> SurfaceMoment:
        """Sum of the free surface moments of all loads."""
        return sum(
            (load.moment_surface() for load in self._loads), SurfaceMoment()
        )

    def sum(self) -> float:
        """Total mass."""
        return sum((load.mass() for load in self._loads), 0.0)

    def values(self) -> list[float]:
        """Mass falling into each bound."""
        return [
            sum((load.mass(bound) for load in self._loads), 0.0)
            for bound in self._bounds
        ]

    def shift(self) -> Position:
        """Centre of mass of all loads."""
        return self.moment_mass().to_position(self.sum())

    def delta_m_h(self) -> float:
        """Free surface correction to the longitudinal metacentric height."""
        return self.moment_surface().y / self.sum()