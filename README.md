# racesim

A small racing simulation library. It models cars, tracks, driving techniques
and a ranked report of results.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
racesim
```

The command prints a greeting and asks how many numbers to read. It then reads
that many whitespace-separated integers from standard input and lists them
back, one per line. At most 100 numbers can be read. A larger count prints an
error and the command exits with status 1. If the input runs out or holds
something that is not an integer, every remaining value is read as 0.

```
printf '3\n10\n20\n30\n' | racesim
```

## Library

### Cars (`racesim.cars`)

- `Car` is the abstract base. Each car has a `name`, a `speed` that starts at
  0, and a `fuel` level. `accelerate(amount)` raises the speed and burns half
  the amount in fuel. If the speed is already above 350 when it is called, it
  raises `Overheated`, a `RuntimeError`. `consume_fuel(amount)` never takes
  fuel below zero.
- `Car.car_count()` gives the number of cars that are alive.
  `Car.total_distance()` gives the sum of every distance added through
  `add_distance(km)`, shared by all cars.
- `str(car)` gives a line such as `Car: Comet  Spped: 20 fuel: 90`.
- The concrete cars are listed below. Each `score()` works from the current
  speed and fuel.

  | Class            | Starting fuel | `score()`                  |
  |------------------|---------------|----------------------------|
  | `SUV`            | 130           | speed × 1.0 + fuel × 0.4   |
  | `SportsCar`      | 100           | speed × 1.2 + fuel × 0.3   |
  | `Enduro`         | 130           | speed × 0.9 + fuel × 0.6   |
  | `TunedSportsCar` | 100           | speed × 1.5 + fuel × 0.2   |

  A `TunedSportsCar` is created already accelerated by 10, which leaves it
  with speed 10 and fuel 95.

```python
from racesim.cars import SportsCar

car = SportsCar("Comet")
car.accelerate(20)
print(car, car.score())
```

### Tracks (`racesim.tracks`)

- `Track(surface, difficulty, nr_curves, weather)` holds those four values.
  Setting `track.weather` or `track.nr_curves` calls `track_update(track)` on
  every observer registered with `add_observer`, in the order they were added.
  `notify_observers()` does the same on demand.
- `TrackObserver` is the abstract base for observers. Subclasses implement
  `track_update(track)`.
- `OffRoadTrack(nr_curves, weather)` has surface `"OffRoadTrack"` and
  difficulty 1.5. `PavementTrack(nr_curves, weather)` has surface
  `"Pavement"` and difficulty 1.0.

### Driving techniques (`racesim.techniques`)

Each technique's `drive(car)` accelerates the car and then burns extra fuel:

| Technique            | Acceleration | Extra fuel |
|----------------------|--------------|------------|
| `Aggressive`         | 15           | 10         |
| `Economical`         | 5            | 2          |
| `Flexible`, aggressive mode | 14    | 9          |
| `Flexible`, economical mode | 6     | 3          |
| `Flexible`, balanced mode   | 10    | 5          |

A `Flexible` driver starts in `Mode.BALANCED`. `update_from_track(track)` sets
the mode from the track:

- `Mode.ECONOMICAL` if the weather is `"rainy"` or the difficulty is above 10;
- otherwise `Mode.AGGRESSIVE` if the weather is `"sunny"` or the difficulty is
  above 1.2;
- otherwise `Mode.BALANCED`.

```python
from racesim.cars import SUV
from racesim.techniques import Flexible
from racesim.tracks import OffRoadTrack

track = OffRoadTrack(5, "rainy")
driver = Flexible()
driver.update_from_track(track)   # economical mode
car = SUV("Boulder")
driver.drive(car)
```

`Flexible` is not a `TrackObserver`. To follow a track's changes, call
`update_from_track` yourself, or wrap it in an observer of your own.

### Reports (`racesim.report`)

`Report(comp)` collects items and ranks them. `comp(a, b)` returns true when
`a` ranks below `b`.

- `add(item)` adds an item.
- `top()` returns the highest-ranked item. It raises `IndexError` when the
  report is empty.
- `ordered()` returns all items from highest to lowest.
- `show_order(out)` writes the ranking as numbered lines (`1. ...`), to
  standard output by default.

```python
import sys
from racesim.cars import SUV, SportsCar
from racesim.report import Report

report = Report(lambda a, b: a.score() < b.score())
report.add(SUV("Boulder"))
report.add(SportsCar("Comet"))
report.show_order(sys.stdout)
```

### Helpers (`racesim.example`)

`do_something(x)` returns `x` as an integer and raises `TypeError` if `x` is
not integral.

## What the package does not do

The package provides the building blocks only. Nothing runs a race: no
function puts cars on a track, drives them over a number of laps, records the
distance or ranks the results. The `racesim` command does not use the cars or
tracks at all. It only reads and echoes integers.