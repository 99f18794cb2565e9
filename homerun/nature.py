"""Grass rows and the trees standing on them."""

from __future__ import annotations

import numpy as np

from homerun.basis import Y_AXIS, BasisComponent, rotate, scale, translate

ROW_DEPTH = 0.1
TREE_START_X = -0.46
TREE_SPACING = 0.07
LEAF_SPIN = 0.2

_LIGHT_LEAF = (0.7098, 0.8392, 0.1373)
_DARK_LEAF = (0.4549, 0.5451, 0.0902)


class Grass(BasisComponent):
    """A green grass row."""

    color = (0.7333, 0.9961, 0.3294)

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__()

    def init_matrix(self) -> None:
        self.sx, self.sy, self.sz = 2.5, 1.0, ROW_DEPTH
        self.x = 0.0
        self.y = -0.515
        self.z = -(self.index * self.sz)


class Wood(BasisComponent):
    """A tree trunk; the chicken cannot walk through it."""

    color = (0.3059, 0.1373, 0.1765)

    def __init__(self, x_idx: int, z_idx: int) -> None:
        self.x_idx = x_idx
        self.z_idx = z_idx
        super().__init__()

    def init_matrix(self) -> None:
        self.sx, self.sy, self.sz = 0.03, 0.15, 0.03
        self.x = TREE_START_X + TREE_SPACING * self.x_idx
        self.y = 0.0
        self.z = -(self.z_idx * ROW_DEPTH)


class WoodLeaf(BasisComponent):
    """One of three stacked, slowly spinning leaf blocks on a trunk."""

    def __init__(self, x_idx: int, z_idx: int, level: int = 1) -> None:
        if level not in (1, 2, 3):
            raise ValueError(f"leaf level must be 1, 2 or 3, not {level!r}")
        self.x_idx = x_idx
        self.z_idx = z_idx
        self.level = level
        self.color = _DARK_LEAF if level == 2 else _LIGHT_LEAF
        super().__init__()

    def init_matrix(self) -> None:
        self.sx, self.sy, self.sz = 0.05, 0.03, 0.05
        self.x = TREE_START_X + TREE_SPACING * self.x_idx
        self.y = 0.05 + self.sy * (self.level - 1)
        self.z = -(self.z_idx * ROW_DEPTH)

    def update(self, dt: float) -> None:
        """Turn a little further about the vertical axis."""
        self.y_degree += LEAF_SPIN

    def world_matrix(self) -> np.ndarray:
        """Model matrix spinning the leaf about its own centre."""
        m = translate(np.identity(4), self.x, self.y, self.z)
        m = rotate(m, self.y_degree, Y_AXIS)
        m = scale(m, self.sx, self.sy, self.sz)
        self.total_world = m
        return m


def plant_tree(x_idx: int, z_idx: int) -> list[BasisComponent]:
    """Return a trunk and its three leaf blocks, bottom to top."""
    return [Wood(x_idx, z_idx)] + [WoodLeaf(x_idx, z_idx, level) for level in (1, 2, 3)]