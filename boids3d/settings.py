"""Tunable flocking parameters and group targets."""

from __future__ import annotations

from dataclasses import dataclass, field

from boids3d.geometry import HEIGHT, WIDTH, Vec3

# Ranges of the settings a user may adjust at run time.
SLIDER_RANGES: dict[str, tuple[float, float]] = {
    "cohesion_coeff": (0.0, 50.0),
    "alignment_coeff": (0.0, 20.0),
    "separation_coeff": (0.0, 50.0),
    "collision_coeff": (0.0, 100.0),
    "attraction_coeff": (0.0, 10.0),
    "cohesion_range": (10.0, 100.0),
    "alignment_range": (10.0, 80.0),
    "separation_range": (5.0, 50.0),
    "min_speed": (10.0, 100.0),
    "max_speed": (50.0, 500.0),
    "field_of_view": (45.0, 180.0),
    "count": (1, 1000),
}

TOGGLES = frozenset({"bounce_against_walls"})


@dataclass
class BoidSettings:
    """Parameters that drive the flocking behaviour."""

    count: int = 1000
    previous_count: int = 200
    size: float = 0.08
    cohesion_range: float = 50.0
    alignment_range: float = 30.0
    separation_range: float = 20.0
    min_distance_between_boids: float = 20.0
    cohesion_coeff: float = 20.0
    alignment_coeff: float = 5.0
    separation_coeff: float = 20.0
    collision_coeff: float = 24.0
    min_speed: float = 20.0
    max_speed: float = 80.0
    bounce_against_walls: bool = True
    attraction_coeff: float = 1.0
    field_of_view: float = 90.0

    def set(self, name: str, value):
        """Adjust a user-facing setting, clamped to its allowed range; return the stored value."""
        if name in TOGGLES:
            stored = bool(value)
        else:
            try:
                low, high = SLIDER_RANGES[name]
            except KeyError:
                raise KeyError(f"{name!r} is not an adjustable setting") from None
            clamped = min(max(value, low), high)
            stored = int(round(clamped)) if name == "count" else float(clamped)
        setattr(self, name, stored)
        return stored


def _default_targets() -> list[Vec3]:
    return [
        Vec3(-WIDTH * 0.3, HEIGHT * 0.5, 0.0),
        Vec3(WIDTH * 0.3, HEIGHT * 0.5, 0.0),
    ]


@dataclass
class GroupsTargets:
    """The point each group of boids is attracted to, indexed by group."""

    targets: list[Vec3] = field(default_factory=_default_targets)

    def __getitem__(self, group: int) -> Vec3:
        return self.targets[group]

    def __len__(self) -> int:
        return len(self.targets)