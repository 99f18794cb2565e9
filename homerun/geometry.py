"""Unit-cube mesh data shared by every drawable object."""

from __future__ import annotations

import numpy as np

VERTEX_COUNT = 36

# Each face: its outward normal and two triangles of positions.
_FACES = (
    ((0.0, 0.0, 1.0), (
        (-0.5, 0.5, 0.5), (-0.5, -0.5, 0.5), (0.5, -0.5, 0.5),
        (-0.5, 0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5),
    )),
    ((1.0, 0.0, 0.0), (
        (0.5, 0.5, 0.5), (0.5, -0.5, 0.5), (0.5, -0.5, -0.5),
        (0.5, 0.5, 0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5),
    )),
    ((0.0, 0.0, -1.0), (
        (-0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, -0.5, -0.5),
        (-0.5, -0.5, -0.5), (-0.5, 0.5, -0.5), (0.5, 0.5, -0.5),
    )),
    ((-1.0, 0.0, 0.0), (
        (-0.5, 0.5, 0.5), (-0.5, -0.5, -0.5), (-0.5, -0.5, 0.5),
        (-0.5, -0.5, -0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5),
    )),
    ((0.0, 1.0, 0.0), (
        (-0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (0.5, 0.5, -0.5),
        (-0.5, 0.5, 0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5),
    )),
    ((0.0, -1.0, 0.0), (
        (-0.5, -0.5, 0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5),
        (-0.5, -0.5, 0.5), (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5),
    )),
)

_POSITIONS = np.array(
    [pos for _, positions in _FACES for pos in positions], dtype=np.float32
)
_NORMALS = np.array(
    [normal for normal, positions in _FACES for _ in positions], dtype=np.float32
)


def solid_color(r: float, g: float, b: float) -> np.ndarray:
    """Return per-vertex colours painting the whole cube one colour."""
    return np.tile(np.array([r, g, b], dtype=np.float32), (VERTEX_COUNT, 1))


def cube_positions() -> np.ndarray:
    """Return the 36 triangle vertex positions of a unit cube centred at the origin."""
    return _POSITIONS.copy()


def cube_normals() -> np.ndarray:
    """Return the outward face normal of each of the 36 cube vertices."""
    return _NORMALS.copy()