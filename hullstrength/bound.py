"""A range of values along one axis."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bound:
    """Half-open range from ``start`` to ``end``; ``end`` must exceed ``start``."""

    start: float
    end: float

    def __post_init__(self) -> None:
        if not self.end > self.start:
            raise ValueError(
                f"bound end {self.end} must be greater than start {self.start}"
            )

    def part_ratio(self, other: Bound) -> float:
        """Share of this range's length that lies inside ``other``."""
        common = self.intersect(other)
        if common is None:
            return 0.0
        return common.length() / self.length()

    def intersect(self, other: Bound) -> Bound | None:
        """Common part of both ranges, or None when they do not overlap."""
        if other.start >= self.end or other.end <= self.start:
            return None
        if other.start <= self.start and other.end >= self.end:
            return self
        return Bound(max(other.start, self.start), min(other.end, self.end))

    def length(self) -> float:
        return self.end - self.start

    def center(self) -> float:
        return (self.start + self.end) / 2.0