"""Flocking rules and the per-frame systems that move the boids."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from boids3d.components import ApplyForceEvent, Boid, Obstacle
from boids3d.geometry import DEPTH, HEIGHT, MIN_HEIGHT, WIDTH, Quat, Vec3
from boids3d.settings import BoidSettings
from boids3d.spatial import KDTree3

_WALL_MARGIN = 10.0
_TURN_FACTOR = 10.0
_MODEL_FRONT = Vec3(0.0, 0.0, 1.0)


def cohesion(position: Vec3, neighbors: Sequence[Vec3], coeff: float) -> Vec3:
    """Steer towards the centre of the given neighbours."""
    if not neighbors:
        return Vec3()
    center = sum(neighbors, Vec3()) / len(neighbors)
    return (center - position) * coeff


def separation(position: Vec3, neighbors: Iterable[tuple[Vec3, float]], coeff: float) -> Vec3:
    """Steer away from close neighbours, more strongly the closer they are."""
    force = Vec3()
    for other, distance in neighbors:
        if distance > 0.0:
            force += (position - other) / distance
    return force * coeff


def alignment(velocity: Vec3, neighbors: Sequence[Vec3], coeff: float) -> Vec3:
    """Steer towards the average velocity of the given neighbours."""
    if not neighbors:
        return Vec3()
    average = sum(neighbors, Vec3()) / len(neighbors)
    return (average - velocity) * coeff


def attraction_to_target(position: Vec3, target: Vec3, coeff: float) -> Vec3:
    return (target - position) * coeff


def is_in_field_of_view(
    position: Vec3, velocity: Vec3, other_pos: Vec3, fov_degrees: float
) -> Optional[float]:
    """Return the distance to ``other_pos`` if it is visible, otherwise ``None``."""
    to_other = other_pos - position
    distance = to_other.length()
    if distance <= 0.0 or velocity.length_squared() == 0.0:
        return distance
    cos_fov = math.cos(math.radians(fov_degrees / 2.0))
    if velocity.normalize().dot(to_other.normalize()) >= cos_fov:
        return distance
    return None


def flocking_forces(
    boids: Sequence[Boid],
    settings: BoidSettings,
    targets,
    tree: KDTree3,
) -> list[ApplyForceEvent]:
    """Compute the combined flocking and attraction force for every boid."""
    by_id = {boid.id: boid for boid in boids}
    events = []
    for boid in boids:
        position = boid.position
        cohesion_neighbors: list[Vec3] = []
        repulsion_neighbors: list[tuple[Vec3, float]] = []
        alignment_neighbors: list[Vec3] = []

        for _, neighbor_id in tree.within_distance(position, settings.cohesion_range):
            if neighbor_id is None or neighbor_id == boid.id:
                continue
            neighbor = by_id.get(neighbor_id)
            if neighbor is None:
                continue
            neighbor_pos = neighbor.position
            distance = is_in_field_of_view(
                position, boid.velocity, neighbor_pos, settings.field_of_view
            )
            if distance is None:
                continue
            if distance < settings.separation_range:
                repulsion_neighbors.append((neighbor_pos, distance))
            elif distance < settings.alignment_range:
                alignment_neighbors.append(neighbor.velocity)
            elif distance < settings.cohesion_range:
                cohesion_neighbors.append(neighbor_pos)

        total = (
            cohesion(position, cohesion_neighbors, settings.cohesion_coeff)
            + separation(position, repulsion_neighbors, settings.separation_coeff)
            + alignment(boid.velocity, alignment_neighbors, settings.alignment_coeff)
            + attraction_to_target(position, targets[boid.group], settings.attraction_coeff)
        )
        events.append(ApplyForceEvent(boid.id, total))
    return events


def avoid_obstacles(
    boids: Iterable[Boid], obstacles: Sequence[Obstacle], settings: BoidSettings
) -> list[ApplyForceEvent]:
    """Compute a repulsion force for every boid from nearby obstacle surfaces."""
    reach = settings.separation_range * 2.0
    events = []
    for boid in boids:
        position = boid.position
        force = Vec3()
        for obstacle in obstacles:
            surface_distance = (obstacle.position - position).length() - obstacle.radius
            if 0.0 < surface_distance < reach:
                direction = (position - obstacle.position).normalize_or_zero()
                strength = 1.0 - surface_distance / reach
                force += direction * strength * settings.collision_coeff
        events.append(ApplyForceEvent(boid.id, force))
    return events


def apply_forces(boids: Iterable[Boid], events: Iterable[ApplyForceEvent]) -> None:
    """Add each event's force to its boid's acceleration; unknown entities are ignored."""
    by_id = {boid.id: boid for boid in boids}
    for event in events:
        boid = by_id.get(event.entity)
        if boid is not None:
            boid.acceleration += event.force


def update_boids(boids: Iterable[Boid], settings: BoidSettings, dt: float) -> None:
    """Integrate acceleration and velocity, clamp speed, orient and reset acceleration."""
    for boid in boids:
        velocity = boid.velocity + boid.acceleration * dt
        speed = velocity.length()
        if speed > 0.0:
            if speed < settings.min_speed:
                velocity = velocity.normalize() * settings.min_speed
            elif speed > settings.max_speed:
                velocity = velocity.normalize() * settings.max_speed
        boid.velocity = velocity
        boid.position += velocity * dt
        if velocity.length_squared() > 0.0:
            boid.rotation = Quat.from_rotation_arc(_MODEL_FRONT, -velocity.normalize())
        boid.acceleration = Vec3()


def confine_boids(boids: Iterable[Boid], settings: BoidSettings) -> None:
    """Nudge boids that approach the walls of the flight zone back inwards."""
    if not settings.bounce_against_walls:
        return
    for boid in boids:
        pos = boid.position
        vx, vy, vz = boid.velocity

        if pos.x < -WIDTH / 2.0 + _WALL_MARGIN:
            vx += _TURN_FACTOR
        elif pos.x > WIDTH / 2.0 - _WALL_MARGIN:
            vx -= _TURN_FACTOR

        if pos.y < MIN_HEIGHT + _WALL_MARGIN:
            vy += _TURN_FACTOR
        elif pos.y > HEIGHT - _WALL_MARGIN:
            vy -= _TURN_FACTOR

        if pos.z < -DEPTH / 2.0 + _WALL_MARGIN:
            vz += _TURN_FACTOR
        elif pos.z > DEPTH / 2.0 - _WALL_MARGIN:
            vz -= _TURN_FACTOR

        boid.velocity = Vec3(vx, vy, vz)