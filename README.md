# orbitsim

A small gravitational n-body simulation. A set of bodies is placed at random
distances (100 to 150 units) around a common centre, each given a speed
between 10 and 15 perpendicular to its position, and every body pulls on
every other with Newtonian gravity (G = 50). Bodies closer than 5 units exert
no pull on each other. The system is advanced with a fixed time step of
0.0001 and shown as circles moving in a window, while the frame rate is
printed on the console.

## Installation

```
pip install .
```

The viewer uses the standard library's `tkinter`, so no further libraries are
needed. A Python build with Tk support and a display are required to open the
window; the rest of the package works without them.

## Running the viewer

```
orbitsim
```

A 1200 × 800 window opens with the bodies drawn as circles whose size grows
with their mass. A background thread computes steps and queues them (up to
100 at a time); the window moves the circles as frames arrive. Every ten
frames the frames per second and the resulting simulated time per second are
printed. Closing the window stops the simulation.

Options:

- `--count N` — number of bodies (default 20).
- `--seed S` — seed for the random starting system, to get the same one again.
- `--parallel` — compute accelerations in worker threads.
- `--run-length N` — bodies handled by each worker with `--parallel`
  (default 50).

## Using the library

The pieces can also be used on their own, without a window:

```python
import random

from orbitsim.randomize import random_bodies
from orbitsim.physics import accelerations, advance, simulate

rng = random.Random(42)
bodies = random_bodies(20, rng)

# One step by hand: updates the bodies in place and returns their positions
accs = accelerations(bodies)
positions = advance(bodies, accs)

# Or a stream of frames, each a list of (x, y) positions.
# simulate works on its own copy and never ends by itself.
for step, positions in zip(range(100), simulate(bodies, False, 50)):
    pass
```

- `orbitsim.constants` holds the simulation parameters, the `Body` dataclass
  (`mass`, `position`, `velocity`, and `copy()`) and a heavy `SUN` body.
- `orbitsim.randomize` builds random starting systems: `random_float` (a value
  on a decimal grid within bounds, raising `ValueError` if the bounds are
  reversed), `random_perpendicular_unit_vectors` and `random_bodies`. Each
  takes an optional `random.Random`. `report` prints its arguments separated
  by commas.
- `orbitsim.physics` computes the pull of one body on another
  (`acceleration`), the total on every body (`accelerations`, or
  `accelerations_parallel` working in chunks of `run_length` in a thread
  pool), moves the bodies one step (`advance`) and yields positions step
  after step (`simulate`).
- `orbitsim.display` holds the viewer: `body_radius`, `to_screen`,
  `FrameRateCounter` (its `tick` returns `(fps, time_rate)` at the end of each
  window of frames, otherwise `None`), `SimulationWindow` and `main`.

## What it does not do

Bodies pass through each other rather than colliding or merging, and there is
no way to save a system or load one from a file: every run starts from a
freshly generated random system.

## Tests

```
pip install .[test]
pytest
```