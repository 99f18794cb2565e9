"""Fixed decorations: the pink border frame and the red side wall."""

from __future__ import annotations

from homerun.basis import BasisComponent


class Border(BasisComponent):
    """Pink frame drawn far from the course for the corner viewport."""

    color = (1.0, 0.50196, 0.70196)

    def init_matrix(self) -> None:
        self.sx, self.sy, self.sz = 1.0, 0.1, 1.0
        self.x, self.y, self.z = 0.0, 0.1, 30.0


class Wall(BasisComponent):
    """Long red wall along the left edge of the course."""

    color = (1.0, 0.0, 0.0)

    def init_matrix(self) -> None:
        self.x, self.y, self.z = -0.52, 0.20, -7.45
        self.sx, self.sy, self.sz = 0.05, 0.5, 15.0