"""Vector and quaternion maths, and the dimensions of the flight zone."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

# Flight zone dimensions along X, Y and Z.
WIDTH = 100.0
HEIGHT = 80.0
DEPTH = 100.0

MIN_HEIGHT = 20.0

_ARC_EPSILON = 2.0 * 1.1920929e-07
_GIMBAL_EPSILON = 1e-9


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, axis: int) -> float:
        return (self.x, self.y, self.z)[axis]

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> Vec3:
        if isinstance(factor, Vec3):
            return NotImplemented
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec3:
        if isinstance(divisor, Vec3):
            return NotImplemented
        return Vec3(self.x / divisor, self.y / divisor, self.z / divisor)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> Vec3:
        """Return the unit vector in the same direction; raise on a zero vector."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError("cannot normalize a zero-length or non-finite vector")
        return self / length

    def normalize_or_zero(self) -> Vec3:
        """Return the unit vector, or the zero vector when that is impossible."""
        try:
            return self.normalize()
        except ValueError:
            return Vec3()

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def _any_orthonormal(self) -> Vec3:
        if abs(self.x) > abs(self.y):
            return Vec3(-self.z, 0.0, self.x) / math.hypot(self.x, self.z)
        return Vec3(0.0, self.z, -self.y) / math.hypot(self.y, self.z)


@dataclass(frozen=True)
class Quat:
    """An immutable rotation quaternion; the default is the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __mul__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
        )

    @staticmethod
    def _from_axis_angle(axis: Vec3, angle: float) -> Quat:
        half = angle * 0.5
        s = math.sin(half)
        return Quat(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    def _normalized(self) -> Quat:
        norm = math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)
        return Quat(self.x / norm, self.y / norm, self.z / norm, self.w / norm)

    @staticmethod
    def from_rotation_arc(from_: Vec3, to: Vec3) -> Quat:
        """Shortest rotation taking unit vector ``from_`` onto unit vector ``to``."""
        dot = from_.dot(to)
        if dot > 1.0 - _ARC_EPSILON:
            return Quat()
        if dot < -1.0 + _ARC_EPSILON:
            return Quat._from_axis_angle(from_._any_orthonormal(), math.pi)
        c = from_.cross(to)
        return Quat(c.x, c.y, c.z, 1.0 + dot)._normalized()

    @staticmethod
    def from_euler_yxz(yaw: float, pitch: float, roll: float) -> Quat:
        """Rotation about Y by yaw, then X by pitch, then Z by roll (intrinsic)."""
        return (
            Quat._from_axis_angle(Vec3(0.0, 1.0, 0.0), yaw)
            * Quat._from_axis_angle(Vec3(1.0, 0.0, 0.0), pitch)
            * Quat._from_axis_angle(Vec3(0.0, 0.0, 1.0), roll)
        )

    def to_euler_yxz(self) -> tuple[float, float, float]:
        """Return ``(yaw, pitch, roll)`` such that ``from_euler_yxz`` rebuilds this rotation."""
        x, y, z, w = self.x, self.y, self.z, self.w
        sin_pitch = max(-1.0, min(1.0, -2.0 * (y * z - w * x)))
        pitch = math.asin(sin_pitch)
        if 1.0 - abs(sin_pitch) > _GIMBAL_EPSILON:
            yaw = math.atan2(2.0 * (x * z + w * y), 1.0 - 2.0 * (x * x + y * y))
            roll = math.atan2(2.0 * (x * y + w * z), 1.0 - 2.0 * (x * x + z * z))
        else:
            yaw = math.atan2(-2.0 * (x * z - w * y), 1.0 - 2.0 * (y * y + z * z))
            roll = 0.0
        return yaw, pitch, roll

    def rotate(self, vector: Vec3) -> Vec3:
        u = Vec3(self.x, self.y, self.z)
        t = u.cross(vector) * 2.0
        return vector + t * self.w + u.cross(t)

    def forward(self) -> Vec3:
        """The direction the rotated object faces: its local -Z axis."""
        return self.rotate(Vec3(0.0, 0.0, -1.0))