"""2D and 3D camera matrices and angle helpers."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import ClassVar, Sequence

import numpy as np

__all__ = [
    "Projection",
    "Camera2D",
    "Camera3D",
    "short_angle_dist",
    "angle_lerp",
]

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


def _translation(x: float, y: float, z: float) -> np.ndarray:
    m = np.eye(4)
    m[:3, 3] = (x, y, z)
    return m


def _scale(x: float, y: float, z: float) -> np.ndarray:
    return np.diag([x, y, z, 1.0])


def _rotation_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = np.eye(4)
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


def _transform_point(m: np.ndarray, point: Sequence[float]) -> np.ndarray:
    p = np.asarray(point, dtype=float)
    return m[:3, :3] @ p + m[:3, 3]


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def _look_at_rh(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    eye_v = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye_v)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    m = np.eye(4)
    m[0, :3], m[0, 3] = s, -np.dot(s, eye_v)
    m[1, :3], m[1, 3] = u, -np.dot(u, eye_v)
    m[2, :3], m[2, 3] = -f, np.dot(f, eye_v)
    return m


def _perspective_rh_gl(fov_y: float, aspect: float, z_near: float, z_far: float) -> np.ndarray:
    inv_length = 1.0 / (z_near - z_far)
    f = 1.0 / math.tan(0.5 * fov_y)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (z_near + z_far) * inv_length
    m[2, 3] = 2.0 * z_near * z_far * inv_length
    m[3, 2] = -1.0
    return m


def _orthographic_rh_gl(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    m = np.eye(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


class Projection(enum.Enum):
    """Projection type of a 3D camera."""

    PERSPECTIVE = enum.auto()
    ORTHOGRAPHIC = enum.auto()


@dataclass
class Camera2D:
    """A 2D camera: rotation in degrees, zoom, rotation origin and offset."""

    rotation: float = 0.0
    zoom: Vec2 = (1.0, 1.0)
    target: Vec2 = (0.0, 0.0)
    offset: Vec2 = (0.0, 0.0)

    @classmethod
    def from_display_rect(cls, x: float, y: float, w: float, h: float) -> Camera2D:
        """Make camera space match the given rectangle."""
        return cls(
            rotation=0.0,
            zoom=(1.0 / w * 2.0, -1.0 / h * 2.0),
            target=(x + w / 2.0, y + h / 2.0),
            offset=(0.0, 0.0),
        )

    def matrix(self) -> np.ndarray:
        """Return the 4x4 world-to-clip matrix."""
        origin = _translation(-self.target[0], -self.target[1], 0.0)
        rotation = _rotation_z(math.radians(self.rotation))
        scale = _scale(self.zoom[0], self.zoom[1], 1.0)
        translation = _translation(self.offset[0], self.offset[1], 0.0)
        return translation @ ((scale @ rotation) @ origin)

    def depth_enabled(self) -> bool:
        return False

    def world_to_screen(
        self, point: Sequence[float], screen_width: float, screen_height: float
    ) -> Vec2:
        """Map a world position to window coordinates."""
        t = _transform_point(self.matrix(), (point[0], point[1], 0.0))
        return (
            float((t[0] / 2.0 + 0.5) * screen_width),
            float((0.5 - t[1] / 2.0) * screen_height),
        )

    def screen_to_world(
        self, point: Sequence[float], screen_width: float, screen_height: float
    ) -> Vec2:
        """Map window coordinates, such as a mouse position, to world space."""
        nx = point[0] / screen_width * 2.0 - 1.0
        ny = 1.0 - point[1] / screen_height * 2.0
        t = _transform_point(np.linalg.inv(self.matrix()), (nx, ny, 0.0))
        return (float(t[0]), float(t[1]))


@dataclass
class Camera3D:
    """A 3D camera looking from position at target."""

    Z_NEAR: ClassVar[float] = 0.01
    Z_FAR: ClassVar[float] = 10000.0

    position: Vec3 = (0.0, -10.0, 0.0)
    target: Vec3 = (0.0, 0.0, 0.0)
    up: Vec3 = (0.0, 0.0, 1.0)
    fovy: float = 45.0
    aspect: float | None = None
    projection: Projection = Projection.PERSPECTIVE

    def matrix(
        self, screen_width: float | None = None, screen_height: float | None = None
    ) -> np.ndarray:
        """Return the 4x4 view-projection matrix.

        Without an explicit aspect the screen size gives it.
        """
        if self.aspect is not None:
            aspect = self.aspect
        elif screen_width is None or screen_height is None:
            raise ValueError("screen size is required when the camera has no aspect")
        else:
            aspect = screen_width / screen_height

        view = _look_at_rh(self.position, self.target, self.up)
        if self.projection is Projection.PERSPECTIVE:
            proj = _perspective_rh_gl(self.fovy, aspect, self.Z_NEAR, self.Z_FAR)
        else:
            top = self.fovy / 2.0
            right = top * aspect
            proj = _orthographic_rh_gl(-right, right, -top, top, self.Z_NEAR, self.Z_FAR)
        return proj @ view

    def depth_enabled(self) -> bool:
        return True


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed shortest distance in degrees from a0 to a1."""
    full = 360.0
    da = math.fmod(a1 - a0, full)
    return math.fmod(2.0 * da, full) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Interpolate between two angles in degrees along the short way."""
    return a0 + short_angle_dist(a0, a1) * t