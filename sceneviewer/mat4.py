"""Column-major 4x4 matrix for model, view and projection transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .vec3 import Vec3

_SIZE = 16


@dataclass(frozen=True)
class Mat4:
    """An immutable 4x4 matrix stored as 16 floats in column-major order.

    A default-constructed matrix is all zeros. The transform methods return a
    new matrix equal to ``self * transform``.
    """

    data: tuple[float, ...] = (0.0,) * _SIZE

    def __post_init__(self) -> None:
        values = tuple(float(value) for value in self.data)
        if len(values) != _SIZE:
            raise ValueError(f"a 4x4 matrix needs {_SIZE} values, got {len(values)}")
        object.__setattr__(self, "data", values)

    @classmethod
    def identity(cls) -> Mat4:
        """The identity matrix."""
        return cls(tuple(1.0 if i % 5 == 0 else 0.0 for i in range(_SIZE)))

    @classmethod
    def look_at(cls, eye: Vec3, target: Vec3, up: Vec3) -> Mat4:
        """View matrix for a camera at ``eye`` looking at ``target``."""
        forward = (eye - target).normalize()
        right = up.cross(forward).normalize()
        cam_up = forward.cross(right)
        return cls(
            (
                right.x, cam_up.x, forward.x, 0.0,
                right.y, cam_up.y, forward.y, 0.0,
                right.z, cam_up.z, forward.z, 0.0,
                -right.dot(eye), -cam_up.dot(eye), -forward.dot(eye), 1.0,
            )
        )

    @classmethod
    def perspective(cls, fov_radians: float, aspect: float, near: float, far: float) -> Mat4:
        """Perspective projection for the given vertical field of view."""
        f = 1.0 / math.tan(fov_radians / 2.0)
        values = [0.0] * _SIZE
        values[0] = f / aspect
        values[5] = f
        values[10] = (far + near) / (near - far)
        values[11] = (2.0 * far * near) / (near - far)
        values[14] = -1.0
        return cls(tuple(values))

    def translate(self, offset: Vec3) -> Mat4:
        values = list(Mat4.identity().data)
        values[12], values[13], values[14] = offset.x, offset.y, offset.z
        return self * Mat4(tuple(values))

    def scale(self, factors: Vec3) -> Mat4:
        values = list(Mat4.identity().data)
        values[0], values[5], values[10] = factors.x, factors.y, factors.z
        return self * Mat4(tuple(values))

    def rotate(self, angle_radians: float, axis: Vec3) -> Mat4:
        n = axis.normalize()
        x, y, z = n.x, n.y, n.z
        c = math.cos(angle_radians)
        s = math.sin(angle_radians)
        t = 1.0 - c

        values = [0.0] * _SIZE
        values[0] = t * x * x + c
        values[1] = t * x * y - z * s
        values[2] = t * x * z + y * s

        values[4] = t * x * y + z * s
        values[5] = t * y * y + c
        values[6] = t * y * z + x * s

        values[8] = t * x * z - y * s
        values[9] = t * y * z + x * s
        values[10] = t * z * z + c
        values[15] = 1.0
        return self * Mat4(tuple(values))

    def __mul__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        a, b = self.data, other.data
        return Mat4(
            tuple(
                sum(a[row + k * 4] * b[k + col * 4] for k in range(4))
                for col in range(4)
                for row in range(4)
            )
        )

    def __getitem__(self, index):
        return self.data[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.data)