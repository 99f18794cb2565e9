"""Matrix helpers and the base class of every cube-shaped scene object."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

import numpy as np

from homerun.geometry import cube_normals, cube_positions, solid_color

X_AXIS = (1.0, 0.0, 0.0)
Y_AXIS = (0.0, 1.0, 0.0)
Z_AXIS = (0.0, 0.0, 1.0)


def _normalize(v: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(v)
    if norm == 0:
        raise ValueError("cannot normalize a zero vector")
    return v / norm


def translate(matrix: np.ndarray, x: float, y: float, z: float) -> np.ndarray:
    """Return matrix followed by a translation, applied to column vectors."""
    t = np.identity(4)
    t[:3, 3] = (x, y, z)
    return np.asarray(matrix, dtype=float) @ t


def rotate(matrix: np.ndarray, degrees: float, axis: Sequence[float]) -> np.ndarray:
    """Return matrix followed by a rotation of degrees about axis."""
    x, y, z = _normalize(np.asarray(axis, dtype=float))
    angle = math.radians(degrees)
    c, s = math.cos(angle), math.sin(angle)
    k = 1.0 - c
    r = np.array(
        [
            [c + x * x * k, x * y * k - z * s, x * z * k + y * s, 0.0],
            [y * x * k + z * s, c + y * y * k, y * z * k - x * s, 0.0],
            [z * x * k - y * s, z * y * k + x * s, c + z * z * k, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return np.asarray(matrix, dtype=float) @ r


def scale(matrix: np.ndarray, x: float, y: float, z: float) -> np.ndarray:
    """Return matrix followed by a scaling along each axis."""
    return np.asarray(matrix, dtype=float) @ np.diag([x, y, z, 1.0])


def look_at(
    eye: Sequence[float], center: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """Return a right-handed view matrix looking from eye towards center."""
    eye_v = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye_v)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -(s @ eye_v)
    m[1, 3] = -(u @ eye_v)
    m[2, 3] = f @ eye_v
    return m


def perspective(fov_degrees: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a right-handed perspective projection with depth in [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    t = math.tan(math.radians(fov_degrees) / 2)
    m = np.zeros((4, 4))
    m[0, 0] = 1 / (aspect * t)
    m[1, 1] = 1 / t
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -2 * far * near / (far - near)
    m[3, 2] = -1.0
    return m


class Bounds(NamedTuple):
    """Axis-aligned box occupied by an object."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float
    z_min: float
    z_max: float


class BasisComponent:
    """A unit cube placed, rotated and stretched in the world."""

    color: tuple[float, float, float] = (1.0, 1.0, 1.0)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._start = (float(x), float(y), float(z))
        self.x_degree = 0.0
        self.y_degree = 0.0
        self.z_degree = 0.0
        self.total_world = np.identity(4)
        self.init_matrix()

    @property
    def vertices(self) -> np.ndarray:
        """Positions and normals of the cube's 36 vertices, six floats each."""
        return np.hstack((cube_positions(), cube_normals()))

    @property
    def colors(self) -> np.ndarray:
        """Per-vertex colours of the cube."""
        return solid_color(*self.color)

    def init_matrix(self) -> None:
        """Put the object at its starting place with unit size."""
        self.x, self.y, self.z = self._start
        self.sx = self.sy = self.sz = 1.0

    def boundaries(self) -> Bounds:
        """Return the box the object occupies."""
        return Bounds(
            self.x - self.sx / 2,
            self.x + self.sx / 2,
            self.y - self.sy / 2,
            self.y + self.sy / 2,
            self.z - self.sz / 2,
            self.z + self.sz / 2,
        )

    def overlaps(self, other: BasisComponent) -> bool:
        """Whether the boxes of the two objects touch or intersect."""
        a, b = self.boundaries(), other.boundaries()
        return (
            a.x_max >= b.x_min
            and a.x_min <= b.x_max
            and a.y_max >= b.y_min
            and a.y_min <= b.y_max
            and a.z_max >= b.z_min
            and a.z_min <= b.z_max
        )

    def world_matrix(self) -> np.ndarray:
        """Compute, store and return the object's model matrix."""
        m = np.identity(4)
        m = rotate(m, self.x_degree, X_AXIS)
        m = rotate(m, self.y_degree, Y_AXIS)
        m = translate(m, self.x, self.y, self.z)
        m = scale(m, self.sx, self.sy, self.sz)
        self.total_world = m
        return m

    def update(self, dt: float) -> None:
        """Advance the object by dt seconds; static objects stay as they are."""