"""Random initial conditions and a small printing helper."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable

from .constants import (
    CENTER_X,
    CENTER_Y,
    MAX_DISTANCE,
    MAX_MASS,
    MAX_VELOCITY,
    MIN_DISTANCE,
    MIN_MASS,
    MIN_VELOCITY,
    NUM_OBJECTS,
    Body,
    Vector,
)


def _rng_or_default(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def random_float(
    a: float, b: float, precision: int = 3, rng: random.Random | None = None
) -> float:
    """Return a random value in [a, b] on a grid of 10**-precision."""
    if a > b:
        raise ValueError("lower bound exceeds upper bound")
    rng = _rng_or_default(rng)
    scale = 10.0**precision
    steps = int(b * scale) - int(a * scale) + 1
    return rng.randrange(steps) / scale + a


def random_perpendicular_unit_vectors(
    rng: random.Random | None = None,
) -> tuple[Vector, Vector]:
    """Return a random unit vector and a unit vector perpendicular to it."""
    rng = _rng_or_default(rng)
    pos_x = random_float(-1.0, 1.0, 3, rng)
    pos_y = math.sqrt(1.0 - pos_x * pos_x)
    if rng.randrange(2) == 0:
        pos_y = -pos_y
    vel_x, vel_y = pos_y, pos_x
    if rng.randrange(2) == 0:
        vel_x = -vel_x
    else:
        vel_y = -vel_y
    return (pos_x, pos_y), (vel_x, vel_y)


def random_bodies(
    count: int = NUM_OBJECTS, rng: random.Random | None = None
) -> list[Body]:
    """Create bodies on a ring around the centre moving tangentially."""
    rng = _rng_or_default(rng)
    bodies = []
    for _ in range(count):
        mass = random_float(MIN_MASS, MAX_MASS, 3, rng)
        (ux, uy), (vx, vy) = random_perpendicular_unit_vectors(rng)
        distance = random_float(MIN_DISTANCE, MAX_DISTANCE, 3, rng)
        speed = random_float(MIN_VELOCITY, MAX_VELOCITY, 3, rng)
        bodies.append(
            Body(
                mass=mass,
                position=(ux * distance + CENTER_X, uy * distance + CENTER_Y),
                velocity=(vx * speed, vy * speed),
            )
        )
    return bodies


def _format(values: Iterable[object]) -> str:
    return ", ".join(str(value) for value in values)


def report(*args: object) -> None:
    """Print the arguments separated by commas on one line."""
    print(_format(args))