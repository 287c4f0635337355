import math

import pytest

from orbitsim.constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    NUM_OBJECTS,
    SCALING,
    TIME_STEP,
    Body,
)
from orbitsim.display import (
    FrameRateCounter,
    SimulationWindow,
    body_radius,
    main,
    to_screen,
)


def test_body_radius_zero_mass():
    assert body_radius(0.0) == 0.0


def test_body_radius_increases_with_mass():
    radii = [body_radius(m) for m in (1.0, 10.0, 15.0, 10000.0)]
    assert radii == sorted(radii)
    assert len(set(radii)) == len(radii)


def test_body_radius_scales_with_power_of_mass():
    assert body_radius(80.0) / body_radius(10.0) == pytest.approx(8.0**0.33)


def test_body_radius_rejects_negative_mass():
    with pytest.raises(ValueError):
        body_radius(-1.0)


def test_to_screen_origin_is_canvas_centre():
    assert to_screen(0.0, 0.0) == (CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2)


def test_to_screen_divides_by_scaling():
    sx, sy = to_screen(SCALING * 10, -SCALING * 20)
    assert sx == pytest.approx(CANVAS_WIDTH / 2 + 10)
    assert sy == pytest.approx(CANVAS_HEIGHT / 2 - 20)


def test_frame_rate_counter_reports_every_interval():
    messages = []
    counter = FrameRateCounter(start=0.0, reporter=lambda *a: messages.append(a))
    results = [counter.tick(0.1 * (i + 1)) for i in range(10)]
    assert results[:9] == [None] * 9
    fps, rate = results[9]
    assert fps == pytest.approx(10.0)
    assert rate == pytest.approx(10.0 * TIME_STEP)
    assert [m[0] for m in messages] == ["fps -> ", "timeRate->"]
    assert messages[0][1] == pytest.approx(fps)


def test_frame_rate_counter_restarts_window():
    counter = FrameRateCounter(start=0.0, interval=2, reporter=None)
    assert counter.tick(1.0) is None
    first = counter.tick(2.0)
    assert first[0] == pytest.approx(1.0)
    assert counter.tick(2.5) is None
    second = counter.tick(3.0)
    assert second[0] == pytest.approx(2.0)


def test_frame_rate_counter_zero_elapsed_is_infinite():
    counter = FrameRateCounter(start=5.0, interval=1, reporter=None)
    fps, rate = counter.tick(5.0)
    assert fps == math.inf
    assert rate == math.inf


def test_frame_rate_counter_rejects_bad_interval():
    with pytest.raises(ValueError):
        FrameRateCounter(interval=0)


def test_simulation_window_copies_bodies():
    original = [Body(10.0, (100.0, 0.0), (0.0, 12.0))]
    window = SimulationWindow(original)
    window.bodies[0].position = (1.0, 1.0)
    assert original[0].position == (100.0, 0.0)
    assert window.title == "Simulation"


def test_main_rejects_non_numeric_run_length():
    with pytest.raises(SystemExit) as info:
        main(["--run-length", "abc"])
    assert info.value.code == 2


def test_main_rejects_zero_count():
    with pytest.raises(SystemExit) as info:
        main(["--count", "0"])
    assert info.value.code == 2


def test_default_object_count_matches_constants():
    window = SimulationWindow([Body(1.0)] * NUM_OBJECTS)
    assert len(window.bodies) == NUM_OBJECTS
    assert window.bodies[0] is not window.bodies[1]