"""Hull frames and the displacement computed from them."""

from __future__ import annotations

import math
from collections.abc import Iterable

from hullstrength.bound import Bound
from hullstrength.curve import Curve


class Frame:
    """A frame with its immersed cross-section area as a curve of draft."""

    def __init__(self, area: Curve) -> None:
        self._area = area

    def area(self, draft: float) -> float:
        """Immersed cross-section area at the given draft."""
        return self._area.value(draft)


class Displacement:
    """Volume displaced by a stretch of the hull, from interpolated frames.

    Frames are evenly spaced along the ship, the first at the stern end
    (``-ship_length / 2``) and the last at the bow end.
    """

    def __init__(self, frames: Iterable[Frame], ship_length: float) -> None:
        self._frames = list(frames)
        if not self._frames:
            raise ValueError("at least one frame is required")
        if not ship_length > 0.0:
            raise ValueError(f"ship_length {ship_length} must be positive")
        self._ship_length = ship_length
        count = len(self._frames)
        self._step = ship_length / (count - 1) if count > 1 else math.inf

    def value(self, bound: Bound, draft: float) -> float:
        """Immersed volume of ``bound`` at mean ``draft`` over it."""
        area_start = self._area(bound.start, draft)
        area_end = self._area(bound.end, draft)
        return bound.length() * (area_start + area_end) / 2.0

    def _area(self, pos_x: float, draft: float) -> float:
        half = self._ship_length / 2.0
        if pos_x < -half or pos_x > half:
            raise ValueError(
                f"position {pos_x} is outside the hull [{-half}, {half}]"
            )
        index = (pos_x + half) / self._step
        index_up = math.ceil(index)
        index_down = math.floor(index)
        if index_down < 0 or index_up >= len(self._frames):
            raise ValueError(
                f"frame index {index} is outside 0..{len(self._frames) - 1}"
            )
        if index_up == index_down:
            return self._frames[index_up].area(draft)
        coeff_up = index - index_down
        coeff_down = index_up - index
        return (
            self._frames[index_up].area(draft) * coeff_up
            + self._frames[index_down].area(draft) * coeff_down
        )