"""Table of key/value pairs with linear interpolation between them."""

from bisect import bisect_right
from collections.abc import Iterable


class Curve:
    """Piecewise linear curve built from ``(key, value)`` pairs.

    Keys are sorted on construction. Outside the key range the first or
    last value is returned.
    """

    def __init__(self, values: Iterable[tuple[float, float]]) -> None:
        points = sorted(
            ((float(k), float(v)) for k, v in values), key=lambda p: p[0]
        )
        if len(points) < 2:
            raise ValueError(
                f"a curve needs at least two points, got {points!r}"
            )
        self._keys = [k for k, _ in points]
        self._values = [v for _, v in points]

    def value(self, key: float) -> float:
        """Interpolated value at ``key``, clamped to the ends of the table."""
        keys, values = self._keys, self._values
        if key <= keys[0]:
            return values[0]
        if key >= keys[-1]:
            return values[-1]
        i = bisect_right(keys, key) - 1
        k0, k1 = keys[i], keys[i + 1]
        v0, v1 = values[i], values[i + 1]
        return v0 + (v1 - v0) * (key - k0) / (k1 - k0)

    def __repr__(self) -> str:
        return f"Curve({list(zip(self._keys, self._values))!r})"