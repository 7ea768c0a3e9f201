"""Positions relative to the ship's centre and the moments built on them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Point relative to the centre of the ship."""

    x: float
    y: float
    z: float

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


@dataclass(frozen=True)
class MassMoment:
    """Static moment of a mass about the ship's centre."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_position(cls, position: Position, mass: float) -> MassMoment:
        """Moment of ``mass`` placed at ``position``."""
        return cls(position.x * mass, position.y * mass, position.z * mass)

    def to_position(self, mass: float) -> Position:
        """Centre of mass for this moment and the total ``mass``."""
        return Position(self.x / mass, self.y / mass, self.z / mass)

    def __add__(self, other: MassMoment) -> MassMoment:
        if not isinstance(other, MassMoment):
            return NotImplemented
        return MassMoment(self.x + other.x, self.y + other.y, self.z + other.z)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


@dataclass(frozen=True)
class InertiaMoment:
    """Inertia moment of a free liquid surface: x transverse, y longitudinal."""

    x: float
    y: float


@dataclass(frozen=True)
class SurfaceMoment:
    """Free surface moment of a liquid."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_inertia(
        cls, inertia_moment: InertiaMoment, density: float
    ) -> SurfaceMoment:
        """Moment of a surface with the given inertia and liquid density."""
        return cls(inertia_moment.x * density, inertia_moment.y * density)

    def __add__(self, other: SurfaceMoment) -> SurfaceMoment:
        if not isinstance(other, SurfaceMoment):
            return NotImplemented
        return SurfaceMoment(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"