"""The simulation loop tying spawning, neighbour lookup and flocking together."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

from boids3d.components import Boid, Obstacle
from boids3d.flocking import (
    apply_forces,
    avoid_obstacles,
    confine_boids,
    flocking_forces,
    update_boids,
)
from boids3d.geometry import Vec3
from boids3d.settings import BoidSettings, GroupsTargets
from boids3d.spatial import UPDATE_INTERVAL, KDTree3
from boids3d.spawning import spawn_boids, spawn_obstacles

DEFAULT_DT = 1.0 / 60.0


class Simulation:
    """A flock of boids among obstacles, advanced one frame at a time."""

    def __init__(
        self,
        settings: Optional[BoidSettings] = None,
        *,
        targets: Optional[GroupsTargets] = None,
        boids: Optional[Sequence[Boid]] = None,
        obstacles: Optional[Sequence[Obstacle]] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.settings = settings if settings is not None else BoidSettings()
        self.targets = targets if targets is not None else GroupsTargets()
        rng = random.Random(seed)
        self.boids = list(boids) if boids is not None else spawn_boids(self.settings, rng)
        self.obstacles = list(obstacles) if obstacles is not None else spawn_obstacles()
        self.elapsed = 0.0
        self._since_rebuild = 0.0
        self.tree = self._build_tree()

    def _build_tree(self) -> KDTree3:
        return KDTree3((boid.position, boid.id) for boid in self.boids)

    def step(self, dt: float = DEFAULT_DT) -> None:
        """Advance the simulation by ``dt`` seconds."""
        self._since_rebuild += dt
        if self._since_rebuild >= UPDATE_INTERVAL:
            self.tree = self._build_tree()
            self._since_rebuild = 0.0

        events = flocking_forces(self.boids, self.settings, self.targets, self.tree)
        events += avoid_obstacles(self.boids, self.obstacles, self.settings)
        apply_forces(self.boids, events)
        update_boids(self.boids, self.settings, dt)
        confine_boids(self.boids, self.settings)
        self.elapsed += dt

    def run(self, steps: int, dt: float = DEFAULT_DT) -> list[Boid]:
        """Advance ``steps`` frames and return the boids."""
        if steps < 0:
            raise ValueError("steps must not be negative")
        for _ in range(steps):
            self.step(dt)
        return self.boids


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="boids3d", description="Run a 3D boids simulation.")
    parser.add_argument("--count", type=int, default=BoidSettings().count, help="number of boids")
    parser.add_argument("--steps", type=int, default=60, help="frames to simulate")
    parser.add_argument("--dt", type=float, default=DEFAULT_DT, help="seconds per frame")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    if args.count < 0:
        parser.error("--count must not be negative")
    if args.steps < 0:
        parser.error("--steps must not be negative")

    simulation = Simulation(BoidSettings(count=args.count), seed=args.seed)
    boids = simulation.run(args.steps, args.dt)

    if boids:
        center = sum((b.position for b in boids), Vec3()) / len(boids)
        mean_speed = sum(b.velocity.length() for b in boids) / len(boids)
    else:
        center, mean_speed = Vec3(), 0.0
    print(
        f"{len(boids)} boids after {args.steps} steps ({simulation.elapsed:.3f} s): "
        f"center ({center.x:.2f}, {center.y:.2f}, {center.z:.2f}), "
        f"mean speed {mean_speed:.2f}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())