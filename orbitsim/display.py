"""Window that animates the simulation and a frame-rate meter."""

from __future__ import annotations

import argparse
import math
import queue
import random
import threading
import time
from collections.abc import Callable, Iterable, Sequence

from .constants import (
    AREA_FACTOR,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    CHANNEL_SIZE,
    FILL_COLOR,
    NUM_OBJECTS,
    RUN_LENGTH,
    SCALING,
    STROKE_COLOR,
    TIME_STEP,
    Body,
    Vector,
)
from .physics import simulate
from .randomize import random_bodies, report


def body_radius(mass: float) -> float:
    """Radius on screen of a body of the given mass."""
    if mass < 0:
        raise ValueError("mass must not be negative")
    volume_term = (mass * 3.0) / (4.0 * math.pi)
    return (volume_term**0.33 * math.sqrt(AREA_FACTOR)) / SCALING


def to_screen(x: float, y: float) -> tuple[float, float]:
    """Map simulation coordinates to canvas coordinates."""
    return x / SCALING + CANVAS_WIDTH / 2, y / SCALING + CANVAS_HEIGHT / 2


class FrameRateCounter:
    """Measures frames per second over windows of a fixed number of frames."""

    def __init__(
        self,
        start: float | None = None,
        interval: int = 10,
        reporter: Callable[..., None] | None = report,
    ) -> None:
        if interval < 1:
            raise ValueError("interval must be at least 1")
        self.interval = interval
        self.reporter = reporter
        self._window_start = time.perf_counter() if start is None else start
        self._count = 0

    def tick(self, now: float | None = None) -> tuple[float, float] | None:
        """Record one frame.

        At the end of each window return ``(fps, time_rate)``, where
        ``time_rate`` is simulated time per second; otherwise return None.
        """
        if now is None:
            now = time.perf_counter()
        self._count += 1
        if self._count % self.interval != 0:
            return None
        elapsed = now - self._window_start
        fps = self.interval / elapsed if elapsed > 0 else math.inf
        time_rate = fps * TIME_STEP
        if self.reporter is not None:
            self.reporter("fps -> ", fps)
            self.reporter("timeRate->", time_rate)
        self._count = 0
        self._window_start = now
        return fps, time_rate


def _hex_color(rgba: tuple[int, int, int, int]) -> str:
    r, g, b, _ = rgba
    return f"#{r:02x}{g:02x}{b:02x}"


class SimulationWindow:
    """A window showing the bodies as circles moved by a background simulation."""

    def __init__(
        self,
        bodies: Iterable[Body],
        parallel: bool = False,
        run_length: int = RUN_LENGTH,
        title: str = "Simulation",
    ) -> None:
        self.bodies: Sequence[Body] = [body.copy() for body in bodies]
        self.parallel = parallel
        self.run_length = run_length
        self.title = title
        self.frames: queue.Queue[list[Vector]] = queue.Queue(maxsize=CHANNEL_SIZE)
        self.counter = FrameRateCounter()
        self._stop = threading.Event()

    def _produce(self) -> None:
        steps = simulate(self.bodies, self.parallel, self.run_length)
        for positions in steps:
            while not self._stop.is_set():
                try:
                    self.frames.put(positions, timeout=0.1)
                    break
                except queue.Full:
                    continue
            if self._stop.is_set():
                return

    def run(self) -> None:
        """Open the window and animate until it is closed."""
        import tkinter

        root = tkinter.Tk()
        root.title(self.title)
        canvas = tkinter.Canvas(
            root, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, background="black",
            highlightthickness=0,
        )
        canvas.pack(fill="both", expand=True)

        fill = _hex_color(FILL_COLOR)
        outline = _hex_color(STROKE_COLOR)
        circles: list[tuple[int, float]] = []
        for body in self.bodies:
            radius = body_radius(body.mass)
            x, y = body.position
            item = canvas.create_oval(
                x - radius, y - radius, x + radius, y + radius,
                fill=fill, outline=outline, width=1, stipple="gray12",
            )
            circles.append((item, radius))

        def animate() -> None:
            if self._stop.is_set():
                return
            try:
                positions = self.frames.get_nowait()
            except queue.Empty:
                root.after(1, animate)
                return
            for (item, radius), (px, py) in zip(circles, positions):
                sx, sy = to_screen(px, py)
                canvas.coords(item, sx - radius, sy - radius, sx + radius, sy + radius)
            self.counter.tick()
            root.after(1, animate)

        def close() -> None:
            self._stop.set()
            root.destroy()

        root.protocol("WM_DELETE_WINDOW", close)
        producer = threading.Thread(target=self._produce, daemon=True)
        producer.start()
        root.after(1, animate)
        try:
            root.mainloop()
        finally:
            self._stop.set()
            producer.join(timeout=1.0)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orbitsim", description="Animate bodies orbiting under gravity."
    )
    parser.add_argument("--count", type=_positive_int, default=NUM_OBJECTS,
                        help="number of bodies")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the initial conditions")
    parser.add_argument("--parallel", action="store_true",
                        help="compute accelerations in worker threads")
    parser.add_argument("--run-length", type=_positive_int, default=RUN_LENGTH,
                        help="bodies per worker when running in parallel")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Start the simulation window."""
    args = _parser().parse_args(argv)
    bodies = random_bodies(args.count, random.Random(args.seed))
    SimulationWindow(bodies, parallel=args.parallel, run_length=args.run_length).run()
    return 0