"""An orbiting camera that circles the origin when dragged."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from boids3d.geometry import Quat, Vec3

_PITCH_LIMIT = math.pi / 2 - 0.01


@dataclass
class CameraSettings:
    """Speeds and limits of the orbit camera."""

    orbit_distance: float = 250.0
    pitch_speed: float = 0.003
    pitch_range: tuple[float, float] = field(default=(-_PITCH_LIMIT, _PITCH_LIMIT))
    roll_speed: float = 1.0
    yaw_speed: float = 0.004


def _quat_from_axes(x_axis: Vec3, y_axis: Vec3, z_axis: Vec3) -> Quat:
    m00, m01, m02 = x_axis
    m10, m11, m12 = y_axis
    m20, m21, m22 = z_axis
    if m22 <= 0.0:
        dif10 = m11 - m00
        omm22 = 1.0 - m22
        if dif10 <= 0.0:
            four_xsq = omm22 - dif10
            inv = 0.5 / math.sqrt(four_xsq)
            return Quat(four_xsq * inv, (m01 + m10) * inv, (m02 + m20) * inv, (m12 - m21) * inv)
        four_ysq = omm22 + dif10
        inv = 0.5 / math.sqrt(four_ysq)
        return Quat((m01 + m10) * inv, four_ysq * inv, (m12 + m21) * inv, (m20 - m02) * inv)
    sum10 = m11 + m00
    opm22 = 1.0 + m22
    if sum10 <= 0.0:
        four_zsq = opm22 - sum10
        inv = 0.5 / math.sqrt(four_zsq)
        return Quat((m02 + m20) * inv, (m12 + m21) * inv, four_zsq * inv, (m01 - m10) * inv)
    four_wsq = opm22 + sum10
    inv = 0.5 / math.sqrt(four_wsq)
    return Quat((m12 - m21) * inv, (m20 - m02) * inv, (m01 - m10) * inv, four_wsq * inv)


def _looking_at(eye: Vec3, target: Vec3, up: Vec3) -> Quat:
    back = (eye - target).normalize()
    right = up.cross(back).normalize()
    true_up = back.cross(right)
    return _quat_from_axes(right, true_up, back)


class OrbitCamera:
    """A camera orbiting the origin, steered by mouse drags."""

    def __init__(
        self,
        settings: Optional[CameraSettings] = None,
        eye: Vec3 = Vec3(200.0, 200.0, 5.0),
        target: Vec3 = Vec3(),
    ) -> None:
        self.settings = settings if settings is not None else CameraSettings()
        self.translation = eye
        self.rotation = _looking_at(eye, target, Vec3(0.0, 1.0, 0.0))

    def orbit(self, delta_x: float, delta_y: float, pressed: bool, dt: float) -> None:
        """Apply accumulated mouse motion while the left button is held."""
        if not pressed:
            return
        settings = self.settings
        delta_pitch = delta_y * settings.pitch_speed
        delta_yaw = delta_x * settings.yaw_speed
        delta_roll = 0.0 * settings.roll_speed * dt

        yaw, pitch, roll = self.rotation.to_euler_yxz()
        low, high = settings.pitch_range
        pitch = min(max(pitch + delta_pitch, low), high)
        self.rotation = Quat.from_euler_yxz(yaw + delta_yaw, pitch, roll + delta_roll)
        self.translation = Vec3() - self.rotation.forward() * settings.orbit_distance