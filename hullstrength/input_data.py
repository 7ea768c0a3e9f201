"""Input records for the hull strength calculation, parsed from JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


class InputDataError(ValueError):
    """Raised when input JSON is malformed or holds invalid values."""


def _reject_constant(name: str) -> Any:
    raise InputDataError(f"invalid number: {name}")


def _load_object(src: str) -> dict[str, Any]:
    try:
        data = json.loads(src, parse_constant=_reject_constant)
    except json.JSONDecodeError as err:
        raise InputDataError(f"invalid JSON: {err}") from err
    if not isinstance(data, dict):
        raise InputDataError("expected a JSON object")
    return data


def _field(obj: dict[str, Any], name: str) -> Any:
    try:
        return obj[name]
    except KeyError:
        raise InputDataError(f"missing field `{name}`") from None


def _float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InputDataError(f"`{name}`: expected a number, got {value!r}")
    return float(value)


def _unsigned(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InputDataError(
            f"`{name}`: expected a non-negative integer, got {value!r}"
        )
    return value


def _string(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise InputDataError(f"`{name}`: expected a string, got {value!r}")
    return value


def _array(value: Any, name: str) -> list[Any]:
    if not isinstance(value, list):
        raise InputDataError(f"`{name}`: expected an array, got {value!r}")
    return value


def _tuple(value: Any, size: int, name: str) -> tuple[float, ...]:
    items = _array(value, name)
    if len(items) != size:
        raise InputDataError(
            f"`{name}`: expected {size} numbers, got {len(items)}"
        )
    return tuple(_float(item, name) for item in items)


def _points(value: Any, size: int, name: str) -> list[tuple[float, ...]]:
    return [_tuple(item, size, name) for item in _array(value, name)]


def _invalid(unexpected: str, expected: str) -> InputDataError:
    return InputDataError(f"invalid value: {unexpected}, expected {expected}")


@dataclass
class ParsedInputData:
    """Calculation request."""

    project_name: str
    ship_name: str
    n_parts: int
    water_density: float

    @classmethod
    def parse(cls, src: str) -> ParsedInputData:
        obj = _load_object(src)
        result = cls(
            project_name=_string(_field(obj, "project_name"), "project_name"),
            ship_name=_string(_field(obj, "ship_name"), "ship_name"),
            n_parts=_unsigned(_field(obj, "n_parts"), "n_parts"),
            water_density=_float(_field(obj, "water_density"), "water_density"),
        )
        if not result.project_name:
            raise _invalid(f"string {result.project_name!r}", "project_name")
        if not result.ship_name:
            raise _invalid(f"string {result.ship_name!r}", "ship_name")
        if result.n_parts == 0:
            raise _invalid(
                f"integer {result.n_parts}", "positive number of frames"
            )
        if result.water_density <= 0.0:
            raise _invalid(
                f"floating point {result.water_density}",
                "positive value of water density",
            )
        return result


@dataclass
class ParsedShipData:
    """Hull data: length and hydrostatic curves."""

    ship_length: float
    center_waterline: list[tuple[float, float]]
    rad_long: list[tuple[float, float]]
    mean_draught: list[tuple[float, float]]
    center_shift: list[tuple[float, float, float, float]]

    @classmethod
    def parse(cls, src: str) -> ParsedShipData:
        obj = _load_object(src)
        result = cls(
            ship_length=_float(_field(obj, "ship_length"), "ship_length"),
            center_waterline=_points(
                _field(obj, "center_waterline"), 2, "center_waterline"
            ),
            rad_long=_points(_field(obj, "rad_long"), 2, "rad_long"),
            mean_draught=_points(_field(obj, "mean_draught"), 2, "mean_draught"),
            center_shift=_points(_field(obj, "center_shift"), 4, "center_shift"),
        )
        if result.ship_length <= 0.0:
            raise _invalid(
                f"floating point {result.ship_length}",
                "positive value of ship's length",
            )
        if len(result.center_waterline) <= 1:
            raise _invalid(
                f"integer {len(result.center_waterline)}",
                "number of waterline's points greater or equal to 2",
            )
        if len(result.mean_draught) <= 1:
            raise _invalid(
                f"integer {len(result.mean_draught)}",
                "number of mean_draught's points greater or equal to 2",
            )
        if len(result.center_shift) <= 1:
            raise _invalid(
                f"integer {len(result.center_shift)}",
                "number of center_shift's points greater or equal to 2",
            )
        return result


@dataclass
class FrameData:
    """A frame: its index from the stern and its immersed area curve."""

    index: int
    immersion_area: list[tuple[float, float]]

    @classmethod
    def _from_json(cls, value: Any) -> FrameData:
        if not isinstance(value, dict):
            raise InputDataError("`frames`: expected an array of objects")
        return cls(
            index=_unsigned(_field(value, "index"), "index"),
            immersion_area=_points(
                _field(value, "immersion_area"), 2, "immersion_area"
            ),
        )


@dataclass
class ParsedFramesData:
    """All frames of the hull."""

    frames: list[FrameData]

    @classmethod
    def parse(cls, src: str) -> ParsedFramesData:
        obj = _load_object(src)
        result = cls(
            frames=[
                FrameData._from_json(item)
                for item in _array(_field(obj, "frames"), "frames")
            ]
        )
        count = len(result.frames)
        if count <= 1:
            raise _invalid(
                f"integer {count}", "number of frames greater or equal to 2"
            )
        bad_index = next((f for f in result.frames if f.index > count), None)
        if bad_index is not None:
            raise _invalid(
                f"integer {bad_index.index}",
                "index of frame lower or equal frames.len()",
            )
        empty = next((f for f in result.frames if not f.immersion_area), None)
        if empty is not None:
            raise _invalid(
                f"integer {len(empty.immersion_area)}",
                "number of immersion_area's points greater to 0",
            )
        return result


@dataclass
class LoadSpaceData:
    """A solid load: mass, bounds (x1, x2, y1, y2) and centre of mass."""

    mass: float
    bound: tuple[float, float, float, float]
    center: tuple[float, float, float]

    @classmethod
    def _from_json(cls, value: Any) -> LoadSpaceData:
        if not isinstance(value, dict):
            raise InputDataError("`load_space`: expected an array of objects")
        return cls(
            mass=_float(_field(value, "mass"), "mass"),
            bound=_tuple(_field(value, "bound"), 4, "bound"),
            center=_tuple(_field(value, "center"), 3, "center"),
        )


@dataclass
class ParsedLoadsData:
    """All solid loads of the ship."""

    load_space: list[LoadSpaceData]

    @classmethod
    def parse(cls, src: str) -> ParsedLoadsData:
        obj = _load_object(src)
        result = cls(
            load_space=[
                LoadSpaceData._from_json(item)
                for item in _array(_field(obj, "load_space"), "load_space")
            ]
        )
        negative = next((s for s in result.load_space if s.mass < 0.0), None)
        if negative is not None:
            raise _invalid(
                f"floating point {negative.mass}",
                "mass of load_space greater or equal to 0",
            )
        return result


@dataclass
class TankData:
    """A tank with liquid.

    ``bound`` is (x1, x2, y1, y2), ``center`` points are (volume, x, y, z),
    ``free_surf_inertia`` points are (volume, transverse, longitudinal).
    """

    density: float
    volume: float
    bound: tuple[float, float, float, float]
    center: list[tuple[float, float, float, float]]
    free_surf_inertia: list[tuple[float, float, float]]

    @classmethod
    def _from_json(cls, value: Any) -> TankData:
        if not isinstance(value, dict):
            raise InputDataError("`tanks`: expected an array of objects")
        return cls(
            density=_float(_field(value, "density"), "density"),
            volume=_float(_field(value, "volume"), "volume"),
            bound=_tuple(_field(value, "bound"), 4, "bound"),
            center=_points(_field(value, "center"), 4, "center"),
            free_surf_inertia=_points(
                _field(value, "free_surf_inertia"), 3, "free_surf_inertia"
            ),
        )


@dataclass
class ParsedTanksData:
    """All tanks of the ship."""

    tanks: list[TankData]

    @classmethod
    def parse(cls, src: str) -> ParsedTanksData:
        obj = _load_object(src)
        result = cls(
            tanks=[
                TankData._from_json(item)
                for item in _array(_field(obj, "tanks"), "tanks")
            ]
        )
        tank = next((t for t in result.tanks if t.density <= 0.0), None)
        if tank is not None:
            raise _invalid(
                f"floating point {tank.density}",
                "density of liquid in the tank greater to 0",
            )
        tank = next((t for t in result.tanks if t.volume < 0.0), None)
        if tank is not None:
            raise _invalid(
                f"floating point {tank.volume}",
                "volume of tank greater or equal to 0",
            )
        tank = next((t for t in result.tanks if not t.center), None)
        if tank is not None:
            raise _invalid(
                f"integer {len(tank.center)}",
                "number of center's points greater to 0",
            )
        tank = next((t for t in result.tanks if not t.free_surf_inertia), None)
        if tank is not None:
            raise _invalid(
                f"integer {len(tank.free_surf_inertia)}",
                "number of free_surf_inertia's points greater to 0",
            )
        return result