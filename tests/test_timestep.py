import pytest

from constants import DT
from gravity.BlackHole import BlackHole
from gravity.galaxy import Galaxy
from gravity.Ship import Ship
from gravity.timestep import FixedStepClock
from gravity.Vec2 import Vec2


def make_galaxy():
    ship = Ship(Vec2(0.8, 0.8), prediction_iterations=3)
    return Galaxy([BlackHole(Vec2(0, 0), 50)], ship=ship, n_stars=40, seed=11)


def snapshot(galaxy):
    return ([s.to_dict() for s in galaxy.stars], galaxy.ship.to_dict(), galaxy.max_velocity)


def test_whole_steps_only():
    clock = FixedStepClock(step=DT)

    assert clock.tick(DT * 0.5) == 0
    assert clock.tick(DT * 0.75) == 1
    assert clock.accumulator == pytest.approx(DT * 0.25)
    assert clock.tick(DT * 3) == 3


def test_speed_scales_elapsed_time():
    clock = FixedStepClock(step=DT, speed=4.0)

    assert clock.tick(DT) == 4
    clock.speed = 0.5
    assert clock.tick(DT) == 0
    assert clock.tick(DT) == 1


def test_slow_frame_runs_every_step_it_owes():
    clock = FixedStepClock(step=DT)

    assert clock.tick(DT * 10.5) == 10
    assert clock.tick(DT * 0.5) == 1


def test_accumulated_steps_match_direct_steps():
    direct = make_galaxy()
    for _ in range(6):
        direct.advance(DT)

    accumulated = make_galaxy()
    clock = FixedStepClock(step=DT)
    ran = 0
    for delta in (DT * 0.5, DT * 1.5, DT * 0.25, DT * 0.75, DT * 3):
        ran += clock.run(delta, accumulated)

    assert ran == 6
    assert snapshot(accumulated) == snapshot(direct)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        FixedStepClock(step=0)
    with pytest.raises(ValueError):
        FixedStepClock().tick(-1.0)
