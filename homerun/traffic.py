"""Roads, the white lane marks painted on them and the cars driving across."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from homerun.basis import BasisComponent
from homerun.carparts import LANE_DEPTH, PART_SPECS, SPAWN_X, CarPart
from homerun.protocol import LEFT, MINUS, PLUS

CAR_SPEED = 0.1
ROW_DEPTH = 0.1
LANE_RANGE = range(-2, 8)
LANE_START_X = -0.46
LANE_SPACING = 0.15


def _check_direction(direction: int) -> int:
    if direction not in (PLUS, MINUS):
        raise ValueError(f"direction must be {PLUS} or {MINUS}, not {direction!r}")
    return direction


class Car(BasisComponent):
    """The body of a car; it carries its cabin, window and wheels along with it."""

    def __init__(
        self,
        direction: int,
        index: int,
        velocity: float = CAR_SPEED,
        rgb: Sequence[float] = (1.0, 1.0, 1.0),
    ) -> None:
        self.direction = _check_direction(direction)
        self.index = index
        self.velocity = float(velocity)
        if len(rgb) != 3:
            raise ValueError("rgb must hold three components")
        self.color = tuple(float(c) for c in rgb)
        super().__init__()
        self.parts = [
            CarPart(kind, direction, index, self.velocity, color=self.color)
            for kind in PART_SPECS
        ]

    def init_matrix(self) -> None:
        """Place the body at the spawn side of its road."""
        self.sx, self.sy, self.sz = 0.07, 0.025, 0.05
        self.x = -SPAWN_X * self.direction
        self.y = 0.005
        self.z = -LANE_DEPTH * self.index

    def move(self, dt: float) -> None:
        """Drive across the road; past the far edge jump back to the spawn edge."""
        self.x += self.velocity * self.direction * dt
        if self.direction == PLUS and self.x > SPAWN_X:
            self.x = -SPAWN_X
        elif self.direction == MINUS and self.x < -SPAWN_X:
            self.x = SPAWN_X

    def update(self, dt: float) -> None:
        """Move the body and every part of the car."""
        self.move(dt)
        for part in self.parts:
            part.update(dt)


class Road(BasisComponent):
    """A grey road row whose cars spawn on one side."""

    color = (0.2824, 0.3059, 0.3608)

    def __init__(self, index: int, car_dir: bool = bool(LEFT)) -> None:
        self.index = index
        self.car_direction = PLUS if int(car_dir) == LEFT else MINUS
        super().__init__()

    def init_matrix(self) -> None:
        self.sx, self.sy, self.sz = 2.5, 1.0, ROW_DEPTH
        self.x = 0.0
        self.y = -0.52
        self.z = -(self.index * self.sz)

    def create_car(self, speed: float, rgb: Sequence[float]) -> Car:
        """Return a car driving along this road at the given speed and colour."""
        return Car(self.car_direction, self.index, speed, rgb)

    def create_lanes(self) -> list[RoadLane]:
        """Return the row of lane marks painted on this road."""
        return [RoadLane(i, self.index) for i in LANE_RANGE]


class RoadLane(BasisComponent):
    """One short lane mark on a road."""

    color = (0.5235, 0.5510, 0.6569)

    def __init__(self, x_idx: int, z_idx: int) -> None:
        self.x_idx = x_idx
        self.z_idx = z_idx
        super().__init__()

    def init_matrix(self) -> None:
        self.sx, self.sy, self.sz = 0.07, 0.01, 0.0115
        self.x = LANE_START_X + LANE_SPACING * self.x_idx
        self.y = -0.02458
        # Half a row further so the mark lies between two lanes of traffic.
        self.z = -(self.z_idx * ROW_DEPTH + ROW_DEPTH / 2)


__all__ = ["Car", "Road", "RoadLane", "CAR_SPEED", "np"]