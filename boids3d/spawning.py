"""Creation of boids, obstacles and the flight zone boundary."""

from __future__ import annotations

import itertools
import math
import random
from typing import Optional

from boids3d.components import Boid, Obstacle
from boids3d.geometry import DEPTH, HEIGHT, MIN_HEIGHT, WIDTH, Vec3
from boids3d.settings import BoidSettings

GROUP_COUNT = 2
OBSTACLE_RADIUS = 10.0
OBSTACLE_POSITIONS = (
    Vec3(30.0, 40.0, 0.0),
    Vec3(-30.0, 60.0, 20.0),
    Vec3(0.0, 30.0, -30.0),
)

_boid_ids = itertools.count()


def spawn_boid(settings: BoidSettings, rng: Optional[random.Random] = None) -> Boid:
    """Create one boid at a random place inside the zone, flying at minimum speed."""
    rng = rng if rng is not None else random.Random()
    group = rng.randrange(GROUP_COUNT)
    position = Vec3(
        rng.uniform(-WIDTH * 0.45, WIDTH * 0.45),
        rng.uniform(MIN_HEIGHT, HEIGHT * 0.95),
        rng.uniform(-DEPTH * 0.45, DEPTH * 0.45),
    )
    theta = rng.uniform(0.0, 2.0 * math.pi)
    phi = rng.uniform(0.0, math.pi)
    direction = Vec3(
        math.sin(phi) * math.cos(theta),
        math.sin(phi) * math.sin(theta),
        math.cos(phi),
    )
    return Boid(
        id=next(_boid_ids),
        group=group,
        position=position,
        velocity=direction * settings.min_speed,
    )


def spawn_boids(settings: BoidSettings, rng: Optional[random.Random] = None) -> list[Boid]:
    """Create ``settings.count`` boids."""
    rng = rng if rng is not None else random.Random()
    return [spawn_boid(settings, rng) for _ in range(settings.count)]


def spawn_obstacles() -> list[Obstacle]:
    """Create the fixed spherical obstacles of the scene."""
    return [Obstacle(position, OBSTACLE_RADIUS) for position in OBSTACLE_POSITIONS]


def flight_zone() -> tuple[Vec3, Vec3]:
    """Return the ``(center, half_size)`` of the box drawn around the flight zone."""
    center = Vec3(0.0, HEIGHT / 2.0, 0.0)
    half_size = Vec3(WIDTH / 2.0, HEIGHT / 2.0, DEPTH / 2.0)
    return center, half_size