import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from boids3d.components import ApplyForceEvent, Boid, Obstacle
from boids3d.flocking import (
    alignment,
    apply_forces,
    attraction_to_target,
    avoid_obstacles,
    cohesion,
    confine_boids,
    flocking_forces,
    is_in_field_of_view,
    separation,
    update_boids,
)
from boids3d.geometry import MIN_HEIGHT, WIDTH, Vec3
from boids3d.settings import BoidSettings, GroupsTargets
from boids3d.spatial import KDTree3

coords = st.floats(min_value=-50.0, max_value=50.0, allow_nan=False)
triples = st.tuples(coords, coords, coords)
vectors = st.builds(Vec3, coords, coords, coords)


def _approx(v, tol=1e-6):
    return pytest.approx(tuple(v), abs=tol)


def _tree(boids):
    return KDTree3([(b.position, b.id) for b in boids])


def test_cohesion_without_neighbours():
    assert cohesion(Vec3(1.0, 2.0, 3.0), [], 20.0) == Vec3()


def test_cohesion_symmetric_neighbours_cancel():
    p = Vec3(1.0, 2.0, 3.0)
    offset = Vec3(4.0, 0.0, 0.0)
    force = cohesion(p, [p + offset, p - offset], 20.0)
    assert tuple(force) == pytest.approx((0.0, 0.0, 0.0), abs=1e-6)


@given(triples, triples)
def test_cohesion_points_towards_neighbour(tp, tn):
    p = Vec3(*tp)
    n = Vec3(*tn)
    force = cohesion(p, [n], 1.0)
    assert tuple(p + force) == pytest.approx(tn, abs=1e-6)


def test_separation_ignores_zero_distance():
    p = Vec3(1.0, 1.0, 1.0)
    assert separation(p, [(p, 0.0)], 20.0) == Vec3()


@given(vectors, vectors)
def test_separation_points_away(p, other):
    distance = (p - other).length()
    force = separation(p, [(other, distance)], 1.0)
    if distance > 0.0:
        assert force.dot(p - other) > 0.0
    else:
        assert force == Vec3()


def test_alignment_without_neighbours():
    assert alignment(Vec3(1.0, 0.0, 0.0), [], 5.0) == Vec3()


@given(triples)
def test_alignment_matching_velocity_is_zero(t):
    v = Vec3(*t)
    force = alignment(v, [v, v], 5.0)
    assert tuple(force) == pytest.approx((0.0, 0.0, 0.0), abs=1e-6)


@given(vectors, vectors)
def test_attraction_is_linear_in_coeff(p, t):
    assert tuple(attraction_to_target(p, t, 2.0)) == _approx(attraction_to_target(p, t, 1.0) * 2.0)
    assert attraction_to_target(t, t, 3.0) == Vec3()


def test_field_of_view_ahead_and_behind():
    p = Vec3()
    v = Vec3(1.0, 0.0, 0.0)
    ahead = Vec3(5.0, 0.0, 0.0)
    assert is_in_field_of_view(p, v, ahead, 90.0) == ahead.length()
    assert is_in_field_of_view(p, v, -ahead, 90.0) is None


def test_field_of_view_without_velocity_sees_everything():
    other = Vec3(-3.0, 0.0, 0.0)
    assert is_in_field_of_view(Vec3(), Vec3(), other, 45.0) == other.length()


def test_lonely_boid_only_feels_attraction():
    settings = BoidSettings()
    targets = GroupsTargets()
    boid = Boid(id=4, group=1, position=Vec3(0.0, 40.0, 0.0), velocity=Vec3(1.0, 0.0, 0.0))
    events = flocking_forces([boid], settings, targets, _tree([boid]))
    assert len(events) == 1
    assert events[0].entity == 4
    expected = attraction_to_target(boid.position, targets[1], settings.attraction_coeff)
    assert tuple(events[0].force) == _approx(expected)


def test_close_pair_repels():
    settings = BoidSettings(attraction_coeff=0.0)
    a = Boid(id=1, group=0, position=Vec3(0.0, 40.0, 0.0), velocity=Vec3(1.0, 0.0, 0.0))
    b = Boid(id=2, group=0, position=Vec3(5.0, 40.0, 0.0), velocity=Vec3(-1.0, 0.0, 0.0))
    events = {e.entity: e.force for e in flocking_forces([a, b], settings, GroupsTargets(), _tree([a, b]))}
    assert events[1].x < 0.0 < events[2].x
    assert tuple(events[1]) == _approx(-events[2])


def test_neighbour_outside_view_is_ignored():
    settings = BoidSettings(attraction_coeff=0.0)
    a = Boid(id=1, group=0, position=Vec3(0.0, 40.0, 0.0), velocity=Vec3(-1.0, 0.0, 0.0))
    b = Boid(id=2, group=0, position=Vec3(5.0, 40.0, 0.0), velocity=Vec3(-1.0, 0.0, 0.0))
    events = {e.entity: e.force for e in flocking_forces([a, b], settings, GroupsTargets(), _tree([a, b]))}
    assert events[1] == Vec3()


def test_unknown_tree_entity_is_skipped():
    settings = BoidSettings(attraction_coeff=0.0)
    a = Boid(id=1, group=0, position=Vec3(0.0, 40.0, 0.0))
    tree = KDTree3([(a.position, 1), (Vec3(2.0, 40.0, 0.0), 99)])
    events = flocking_forces([a], settings, GroupsTargets(), tree)
    assert events == [ApplyForceEvent(1, Vec3())]


def test_obstacle_repels_nearby_boid():
    settings = BoidSettings()
    obstacle = Obstacle(position=Vec3(), radius=10.0)
    near = Boid(id=1, group=0, position=Vec3(15.0, 0.0, 0.0))
    far = Boid(id=2, group=0, position=Vec3(100.0, 0.0, 0.0))
    inside = Boid(id=3, group=0, position=Vec3(5.0, 0.0, 0.0))
    forces = {e.entity: e.force for e in avoid_obstacles([near, far, inside], [obstacle], settings)}
    assert forces[1].x > 0.0
    assert forces[1].y == forces[1].z == 0.0
    assert forces[1].length() <= settings.collision_coeff
    assert forces[2] == Vec3()
    assert forces[3] == Vec3()


def test_apply_forces_accumulates_and_ignores_unknown():
    boid = Boid(id=1, group=0, position=Vec3())
    force = Vec3(1.0, 2.0, 3.0)
    apply_forces([boid], [ApplyForceEvent(1, force), ApplyForceEvent(1, force), ApplyForceEvent(9, force)])
    assert boid.acceleration == force + force


def test_update_raises_slow_boid_to_min_speed():
    settings = BoidSettings()
    start = Vec3(0.0, 40.0, 0.0)
    boid = Boid(id=1, group=0, position=start, velocity=Vec3(1.0, 0.0, 0.0),
                acceleration=Vec3(0.0, 1.0, 0.0))
    update_boids([boid], settings, 0.1)
    assert math.isclose(boid.velocity.length(), settings.min_speed)
    assert tuple(boid.position) == _approx(start + boid.velocity * 0.1)
    assert boid.acceleration == Vec3()
    assert tuple(boid.rotation.rotate(Vec3(0.0, 0.0, 1.0))) == _approx(-boid.velocity.normalize())


def test_update_caps_fast_boid_at_max_speed():
    settings = BoidSettings()
    boid = Boid(id=1, group=0, position=Vec3(), velocity=Vec3(0.0, 0.0, 1000.0))
    update_boids([boid], settings, 0.01)
    assert math.isclose(boid.velocity.length(), settings.max_speed)


def test_update_leaves_resting_boid_in_place():
    boid = Boid(id=1, group=0, position=Vec3(1.0, 2.0, 3.0))
    update_boids([boid], BoidSettings(), 0.5)
    assert boid.position == Vec3(1.0, 2.0, 3.0)
    assert boid.velocity == Vec3()


def test_confine_turns_boids_back():
    settings = BoidSettings()
    left = Boid(id=1, group=0, position=Vec3(-WIDTH / 2 + 1.0, 50.0, 0.0))
    low = Boid(id=2, group=0, position=Vec3(0.0, MIN_HEIGHT, 0.0))
    middle = Boid(id=3, group=0, position=Vec3(0.0, 50.0, 0.0))
    confine_boids([left, low, middle], settings)
    assert left.velocity == Vec3(10.0, 0.0, 0.0)
    assert low.velocity.y == 10.0
    assert middle.velocity == Vec3()


def test_confine_disabled():
    settings = BoidSettings(bounce_against_walls=False)
    boid = Boid(id=1, group=0, position=Vec3(-WIDTH / 2, 0.0, 0.0))
    confine_boids([boid], settings)
    assert boid.velocity == Vec3()