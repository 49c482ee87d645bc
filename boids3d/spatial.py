"""A three-dimensional k-d tree for neighbour lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Hashable, Iterable, Optional, TypeVar

from boids3d.geometry import Vec3

# Seconds between rebuilds of the tree during a simulation.
UPDATE_INTERVAL = 0.01

E = TypeVar("E", bound=Hashable)


@dataclass
class _Node(Generic[E]):
    position: Vec3
    entity: E
    axis: int
    left: Optional[_Node[E]]
    right: Optional[_Node[E]]


class KDTree3(Generic[E]):
    """A static k-d tree over ``(position, entity)`` pairs."""

    def __init__(self, items: Iterable[tuple[Vec3, E]] = ()) -> None:
        points = list(items)
        self._size = len(points)
        self._root = self._build(points, 0)

    @classmethod
    def _build(cls, points: list[tuple[Vec3, E]], depth: int) -> Optional[_Node[E]]:
        if not points:
            return None
        axis = depth % 3
        points.sort(key=lambda item: item[0][axis])
        middle = len(points) // 2
        position, entity = points[middle]
        return _Node(
            position,
            entity,
            axis,
            cls._build(points[:middle], depth + 1),
            cls._build(points[middle + 1 :], depth + 1),
        )

    def __len__(self) -> int:
        return self._size

    def within_distance(self, position: Vec3, radius: float) -> list[tuple[Vec3, E]]:
        """Return every item no further than ``radius`` from ``position``, nearest first."""
        if radius < 0:
            return []
        radius_sq = radius * radius
        found: list[tuple[float, Vec3, E]] = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node is None:
                continue
            dist_sq = (position - node.position).length_squared()
            if dist_sq <= radius_sq:
                found.append((dist_sq, node.position, node.entity))
            diff = position[node.axis] - node.position[node.axis]
            near, far = (node.left, node.right) if diff < 0 else (node.right, node.left)
            stack.append(near)
            if diff * diff <= radius_sq:
                stack.append(far)
        found.sort(key=lambda item: item[0])
        return [(point, entity) for _, point, entity in found]