"""Gravitational accelerations and explicit time stepping."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor

from .constants import G, MIN_ACC_DISTANCE, RUN_LENGTH, TIME_STEP, Body, Vector


def acceleration(target: Body, source: Body) -> Vector:
    """Acceleration that ``source`` exerts on ``target``.

    Bodies closer than the minimum distance do not attract each other.
    """
    dx = source.position[0] - target.position[0]
    dy = source.position[1] - target.position[1]
    r = math.sqrt(dx * dx + dy * dy)
    if r <= MIN_ACC_DISTANCE:
        return 0.0, 0.0
    force = G * (target.mass * source.mass) / (r * r)
    acc = force / target.mass
    return acc * (dx / r), acc * (dy / r)


def _total(index: int, bodies: Sequence[Body], skip_self: bool) -> Vector:
    target = bodies[index]
    ax = ay = 0.0
    for i, source in enumerate(bodies):
        if skip_self and i == index:
            continue
        dx, dy = acceleration(target, source)
        ax += dx
        ay += dy
    return ax, ay


def accelerations(bodies: Sequence[Body]) -> list[Vector]:
    """Net acceleration on each body from all bodies."""
    return [_total(j, bodies, skip_self=False) for j in range(len(bodies))]


def accelerations_parallel(
    bodies: Sequence[Body], run_length: int = RUN_LENGTH, skip_self: bool = True
) -> list[Vector]:
    """Net accelerations computed in worker threads, one per run of bodies."""
    if run_length < 1:
        raise ValueError("run_length must be at least 1")
    count = len(bodies)
    starts = range(0, count, run_length)

    def run(start: int) -> list[Vector]:
        stop = min(start + run_length, count)
        return [_total(j, bodies, skip_self) for j in range(start, stop)]

    result: list[Vector] = []
    with ThreadPoolExecutor() as pool:
        for chunk in pool.map(run, starts):
            result.extend(chunk)
    return result


def advance(bodies: Sequence[Body], accs: Iterable[Vector]) -> list[Vector]:
    """Apply one time step in place and return the new positions."""
    bodies = list(bodies)
    for body, (ax, ay) in zip(bodies, accs):
        vx, vy = body.velocity
        body.velocity = (vx + TIME_STEP * ax, vy + TIME_STEP * ay)
    positions = []
    for body in bodies:
        x, y = body.position
        vx, vy = body.velocity
        body.position = (x + TIME_STEP * vx, y + TIME_STEP * vy)
        positions.append(body.position)
    return positions


def simulate(
    bodies: Iterable[Body], parallel: bool = False, run_length: int = RUN_LENGTH
) -> Iterator[list[Vector]]:
    """Yield the positions of a private copy of ``bodies`` after each step."""
    state = [body.copy() for body in bodies]
    if parallel and run_length < 1:
        raise ValueError("run_length must be at least 1")
    while True:
        if parallel:
            accs = accelerations_parallel(state, run_length)
        else:
            accs = accelerations(state)
        yield advance(state, accs)