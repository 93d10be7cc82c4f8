import random

import pytest

from gamelabs.boids import heading_angle
from gamelabs.flock_app import (
    BOID_COLOUR,
    BOID_SIZE,
    ENEMY_SIZE,
    PREDATOR_COLOUR,
    FlockSimulation,
)


def _sim(count=5, seed=1):
    return FlockSimulation(400, 300, count, random.Random(seed))


def test_initial_flock_and_shapes():
    sim = _sim(7)
    assert len(sim.flock) == 7
    shapes = sim.shapes()
    assert len(shapes) == 7
    assert all((s.x, s.y) == (400.0, 300.0) for s in shapes)
    assert all(s.radius == BOID_SIZE and s.colour == BOID_COLOUR for s in shapes)


def test_boids_start_inside_area_and_are_prey():
    sim = _sim(20)
    for boid in sim.flock:
        assert 0 <= boid.location.x < 400
        assert 0 <= boid.location.y < 300
        assert boid.predator is False


def test_toggle_action_round_trip():
    sim = _sim()
    assert sim.action == "flock"
    assert sim.toggle_action() == "swarm"
    assert sim.toggle_action() == "flock"


def test_add_predator():
    sim = _sim(3)
    boid = sim.add_predator(50, 60)
    assert boid.predator is True
    assert len(sim.flock) == 4
    assert sim.flock[3] is boid
    shape = sim.shapes()[-1]
    assert (shape.x, shape.y) == (50.0, 60.0)
    assert shape.radius == ENEMY_SIZE
    assert shape.colour == PREDATOR_COLOUR


@pytest.mark.parametrize("swarm", [False, True])
def test_step_matches_shapes_to_previous_state(swarm):
    sim = _sim(6, seed=3)
    if swarm:
        sim.toggle_action()
    before = [
        (b.location.x, b.location.y, heading_angle(b.velocity)) for b in sim.flock
    ]
    sim.step()
    after = [(s.x, s.y, s.rotation) for s in sim.shapes()]
    assert after == pytest.approx(before)


def test_step_keeps_boids_wrapped_horizontally():
    sim = _sim(10, seed=5)
    for _ in range(20):
        sim.step()
    for boid in sim.flock:
        assert 0 <= boid.location.x <= 400


def test_shapes_returns_a_copy():
    sim = _sim(2)
    shapes = sim.shapes()
    shapes.clear()
    assert len(sim.shapes()) == 2


def test_triangle_points_surround_position():
    sim = _sim(1)
    sim.step()
    shape = sim.shapes()[0]
    points = shape.points()
    assert len(points) == 3
    for px, py in points:
        assert abs(px - shape.x) <= 2 * shape.radius + 1e-9
        assert abs(py - shape.y) <= 2 * shape.radius + 1e-9