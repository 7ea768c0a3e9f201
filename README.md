# hullstrength

Calculation of shear forces and bending moments acting on a ship hull in
still water, with no dependencies beyond the standard library.

The hull is split lengthwise into equal parts. For each part the package
works out the mass of the loads that lies in it and the mass of the water
it displaces. The difference, times gravity, is the resulting force on the
part. The shear force is the running sum of those forces, and the bending
moment is the integral sum of the shear force.

## How the calculation goes

1. All loads (solid cargo and tanks of liquid) are summed. The total mass
   divided by the water density gives the volumetric displacement.
2. From the hydrostatic curves the package reads, for that displacement,
   the centre of buoyancy, the longitudinal position of the centre of the
   waterline, the longitudinal metacentric radius and the mean draught.
   Values between curve points come from linear interpolation; values
   outside a curve take its first or last value.
3. The trim follows from these, corrected for the free surfaces of liquid
   in the tanks. Trim and mean draught give the draught along the hull.
4. The submerged areas of the frames give the displaced water for each
   part: the mean of the areas at its two ends times its length times the
   water density.
5. Resulting force, shear force and bending moment are computed per part.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
hullstrength
```

The command reads one line of JSON from standard input describing the
calculation request. The line is lower-cased before it is parsed, for
example:

```
{"project_name": "demo", "ship_name": "demo", "n_parts": 20, "water_density": 1.025}
```

The project and ship names must not be empty, `n_parts` must be a positive
integer and `water_density` must be greater than zero. The command prints
one line of compact JSON with two keys, `shear_force` and
`bending_moment`, each a list of `[x, value]` pairs: `x` runs over the
`n_parts + 1` edges of the parts, from the stern end at `-length / 2` to
the bow end at `length / 2`. Invalid input or a failed calculation is
logged as an error and the command exits with status 1.

### What the command does not do

From the request the command takes only `n_parts` and `water_density`.
The hull itself is a fixed model built into `hullstrength.cli.calculate`:
a length of 118.39 m, gravity 9.81 m/s², three identical frames, fixed
hydrostatic curves and a single tank as the only load. The command does
not read hull data, frames, cargo spaces or tanks from its input, even
though `hullstrength.input_data` can parse records of that kind; to
compute a real ship, assemble the classes below yourself.

## Using the library

Vector helpers in `hullstrength.vectors`:

```python
from hullstrength.vectors import sum_above, integral_sum, sub_vec

sum_above([1.0, 2.0, 3.0])          # [0.0, 1.0, 3.0, 6.0]
integral_sum([0.0, 1.0, 2.0, 3.0])  # [0.0, 1.0, 4.0, 9.0]
sub_vec([2.0, 1.0], [1.0, 2.0])     # [1.0, -1.0]
```

`shift`, `mul_single`, `div_single`, `add_vec`, `mul_vec` and `div_vec`
work the same way and return new lists; the pairwise ones raise
`ValueError` when the lengths differ.

Ranges along the hull and interpolated curves:

```python
from hullstrength.bound import Bound
from hullstrength.curve import Curve

Bound(2.0, 4.0).part_ratio(Bound(1.0, 3.0))   # 0.5
Bound(2.0, 4.0).intersect(Bound(0.0, 1.0))    # None
Bound(-2.0, 4.0).center()                     # 1.0

draught_curve = Curve([(0.0, 0.0), (2.0, 2.0)])
draught_curve.value(1.0)   # 1.0
draught_curve.value(3.0)   # 2.0, clamped to the last point
```

`hullstrength.moments` holds `Position`, `MassMoment`, `SurfaceMoment` and
`InertiaMoment`; `hullstrength.shifts` holds `PosShift` and
`InertiaShift`, which read a position or an inertia moment from curves
for a given key.

Displacement of a part of the hull from its frames:

```python
from hullstrength.bound import Bound
from hullstrength.curve import Curve
from hullstrength.frame import Displacement, Frame

frames = [
    Frame(Curve([(0.0, 0.0), (10.0, 0.0)])),
    Frame(Curve([(0.0, 0.0), (10.0, 40.0)])),
]
Displacement(frames, 20.0).value(Bound(-10.0, 0.0), 10.0)   # 100.0
```

Loads and their distribution over the parts of the hull:

```python
from hullstrength.bound import Bound
from hullstrength.loads import LoadSpace
from hullstrength.mass import Mass
from hullstrength.moments import Position

cargo = LoadSpace(20.0, Bound(-1.0, 3.0), Position(1.0, 0.0, 0.0))
cargo.mass(Bound(1.0, 3.0))   # 10.0

mass = Mass([cargo], [Bound(-1.0, 1.0), Bound(1.0, 3.0)])
mass.sum()      # 20.0
mass.values()   # [10.0, 10.0]
```

Tanks (`hullstrength.loads.Tank`) add the moment of their liquid's free
surface, which `Mass.delta_m_h` turns into a correction of the
longitudinal metacentric height. `hullstrength.trim.Trim`,
`hullstrength.draught.Draught` and the classes in `hullstrength.forces`
(`TotalForce`, `ShearForce`, `BendingMoment`) chain these pieces into the
full calculation, as `hullstrength.cli.calculate` does;
`hullstrength.cli.split_hull` divides a hull into equal `Bound`s.

## Input and output records

`hullstrength.input_data` parses JSON text into dataclasses with
`ParsedInputData.parse`, `ParsedShipData.parse`, `ParsedFramesData.parse`,
`ParsedLoadsData.parse` and `ParsedTanksData.parse`. Malformed JSON,
missing fields, wrong types and invalid values (such as an empty ship
name, a non-positive density or too few curve points) raise
`InputDataError`, a subclass of `ValueError`.

`hullstrength.output_data.OutData.serialize` writes the shear force and
bending moment diagrams as compact JSON; non-finite numbers become
`null`.

Bad values elsewhere, such as a range whose end is not after its start, a
curve with fewer than two points or a non-positive density, raise
`ValueError`.