"""Shear forces and bending moments of a hull in still water.

Reads a calculation request as one JSON line from standard input and
prints the shear force and bending moment diagrams as JSON.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from hullstrength.bound import Bound
from hullstrength.curve import Curve
from hullstrength.draught import Draught
from hullstrength.forces import BendingMoment, ShearForce, TotalForce
from hullstrength.frame import Displacement, Frame
from hullstrength.input_data import InputDataError, ParsedInputData
from hullstrength.loads import Tank
from hullstrength.mass import Mass
from hullstrength.output_data import OutData
from hullstrength.shifts import InertiaShift, PosShift
from hullstrength.trim import Trim

_log = logging.getLogger(__name__)

SHIP_LENGTH = 118.39
GRAVITY_G = 9.81


def read_input(stream: TextIO) -> ParsedInputData:
    """Parse the calculation request from the first line of ``stream``."""
    line = stream.readline()
    return ParsedInputData.parse(line.lower().strip())


def split_hull(ship_length: float, n_parts: int) -> list[Bound]:
    """Split the hull into ``n_parts`` equal stretches from stern to bow."""
    if n_parts <= 0:
        raise ValueError(f"n_parts {n_parts} must be positive")
    if not ship_length > 0.0:
        raise ValueError(f"ship_length {ship_length} must be positive")
    delta_x = ship_length / n_parts
    start_x = -ship_length / 2.0
    edges = [start_x + delta_x * i for i in range(n_parts)]
    # the last edge is pinned to the bow so rounding never leaves the hull
    edges.append(ship_length / 2.0)
    return [Bound(a, b) for a, b in zip(edges, edges[1:])]


def calculate(input_data: ParsedInputData) -> OutData:
    """Shear force and bending moment diagrams for the built-in hull model."""
    ship_length = SHIP_LENGTH
    water_density = input_data.water_density
    bounds = split_hull(ship_length, input_data.n_parts)

    center_waterline_shift = Curve([(0.0, 0.0), (10.0, 1.0)])
    rad_long = Curve([(0.0, 0.0), (10.0, 1.0)])
    mean_draught = Curve([(0.0, 0.0), (1000.0, 1.0), (10000.0, 10.0)])
    center_draught_shift = PosShift(
        Curve([(0.0, 2.0), (10.0, 2.0)]),
        Curve([(0.0, 0.0), (10.0, 0.0)]),
        Curve([(0.0, 0.0), (10.0, 0.0)]),
    )
    tank_center_shift = PosShift(
        Curve([(0.0, 2.0), (10.0, 2.0)]),
        Curve([(0.0, 0.0), (10.0, 0.0)]),
        Curve([(0.0, 0.0), (10.0, 0.0)]),
    )
    tank_free_surf_inertia = InertiaShift(
        Curve([(0.0, 0.0), (10.0, 1.0)]),
        Curve([(0.0, 0.0), (10.0, 1.0)]),
    )
    loads = [
        Tank(
            2.0,
            10.0,
            Bound(-5.0, 5.0),
            tank_center_shift,
            tank_free_surf_inertia,
        )
    ]
    mass = Mass(loads, bounds)
    frames = [Frame(Curve([(0.0, 0.0), (10.0, 10.0)])) for _ in range(3)]

    shear_force = ShearForce(
        TotalForce(
            mass,
            Draught(
                ship_length,
                water_density,
                bounds,
                mass,
                center_waterline_shift,
                mean_draught,
                Displacement(frames, ship_length),
                Trim(
                    water_density,
                    ship_length,
                    center_draught_shift,
                    rad_long,
                    mass,
                ),
            ),
            GRAVITY_G,
        )
    )
    bending_moment = BendingMoment(shear_force)

    edges = [bounds[0].start, *(bound.end for bound in bounds)]
    return OutData(
        shear_force=list(zip(edges, shear_force.values())),
        bending_moment=list(zip(edges, bending_moment.values())),
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hullstrength",
        description=(
            "Compute shear forces and bending moments of a hull in still "
            "water from a JSON request read on standard input."
        ),
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING)
    try:
        input_data = read_input(sys.stdin)
    except InputDataError as err:
        _log.error("Parsing arguments: %s", err)
        return 1
    try:
        result = calculate(input_data)
    except ValueError as err:
        _log.error("Calculation failed: %s", err)
        return 1
    print(result.serialize())
    return 0


if __name__ == "__main__":
    sys.exit(main())