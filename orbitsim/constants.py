"""Simulation parameters and the body record they describe."""

from __future__ import annotations

from dataclasses import dataclass

TIME_STEP: float = 0.0001
G: float = 50.0
CANVAS_HEIGHT: int = 800
CANVAS_WIDTH: int = 1200
NUM_OBJECTS: int = 20
CENTER_X: float = 0.0
CENTER_Y: float = 0.0
MIN_DISTANCE: float = 100.0
MAX_DISTANCE: float = 150.0
MIN_VELOCITY: float = 10.0
MAX_VELOCITY: float = 15.0
MIN_MASS: float = 10.0
MAX_MASS: float = 15.0
CHANNEL_SIZE: int = 100
AREA_FACTOR: float = 8.0
SCALING: float = 3.0
MIN_ACC_DISTANCE: float = 5.0
RUN_LENGTH: int = 50

# RGBA colours used to draw bodies.
FILL_COLOR: tuple[int, int, int, int] = (255, 255, 255, 15)
STROKE_COLOR: tuple[int, int, int, int] = (255, 255, 255, 255)

Vector = tuple[float, float]


@dataclass
class Body:
    """A point mass with a position and a velocity in the plane."""

    mass: float
    position: Vector = (0.0, 0.0)
    velocity: Vector = (0.0, 0.0)

    def copy(self) -> Body:
        """Return an independent copy of this body."""
        return Body(self.mass, tuple(self.position), tuple(self.velocity))


SUN = Body(mass=10000.0, position=(CENTER_X, CENTER_Y), velocity=(0.0, 0.0))