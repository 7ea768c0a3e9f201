"""Output record of the hull strength calculation."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field


def _number(value: float) -> float | None:
    value = float(value)
    return value if math.isfinite(value) else None


@dataclass
class OutData:
    """Shear force and bending moment diagrams as (x, value) pairs."""

    shear_force: list[tuple[float, float]] = field(default_factory=list)
    bending_moment: list[tuple[float, float]] = field(default_factory=list)

    def serialize(self) -> str:
        """Compact JSON text; non-finite numbers become null."""
        data = {
            "shear_force": [[_number(x), _number(v)] for x, v in self.shear_force],
            "bending_moment": [
                [_number(x), _number(v)] for x, v in self.bending_moment
            ],
        }
        return json.dumps(data, separators=(",", ":"), allow_nan=False)