"""Homogeneous four-component vector."""

from __future__ import annotations

from dataclasses import dataclass

from .mat4 import Mat4
from .vec3 import Vec3


@dataclass(frozen=True)
class Vec4:
    """An immutable homogeneous vector; ``matrix * vec4`` transforms it."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def from_vec3(cls, v: Vec3, w: float) -> Vec4:
        """Extend a 3D vector with the given ``w`` component."""
        return cls(v.x, v.y, v.z, w)

    def __rmul__(self, matrix: Mat4) -> Vec4:
        if not isinstance(matrix, Mat4):
            return NotImplemented
        m = matrix.data
        x, y, z, w = self.x, self.y, self.z, self.w
        return Vec4(
            m[0] * x + m[4] * y + m[8] * z + m[12] * w,
            m[1] * x + m[5] * y + m[9] * z + m[13] * w,
            m[2] * x + m[6] * y + m[10] * z + m[14] * w,
            m[3] * x + m[7] * y + m[11] * z + m[15] * w,
        )