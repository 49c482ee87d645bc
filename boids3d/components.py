"""Simulation entities and the events exchanged between systems."""

from __future__ import annotations

from dataclasses import dataclass, field

from boids3d.geometry import Quat, Vec3


@dataclass(eq=False)
class Boid:
    """A flying agent with its transform and motion state."""

    id: int
    group: int
    position: Vec3
    velocity: Vec3 = field(default_factory=Vec3)
    acceleration: Vec3 = field(default_factory=Vec3)
    rotation: Quat = field(default_factory=Quat)


@dataclass(frozen=True)
class Obstacle:
    """A spherical obstacle that boids steer around."""

    position: Vec3
    radius: float


@dataclass(frozen=True)
class ApplyForceEvent:
    """A force to be added to a boid's acceleration."""

    entity: int
    force: Vec3