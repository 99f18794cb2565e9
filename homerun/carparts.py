"""The pieces that make up a car: cabin, window and wheels, all driving sideways."""

from __future__ import annotations

from dataclasses import dataclass

from homerun.basis import BasisComponent
from homerun.protocol import MINUS, PLUS

SPAWN_X = 0.55
LANE_DEPTH = 0.1

_BLACK = (0.0, 0.0, 0.0)
_WHITE = (1.0, 1.0, 1.0)
_WINDOW_BLUE = (0.6294, 0.9078, 0.9216)

_WHEEL_SCALE = (0.015, 0.015, 0.015)
_HUB_SCALE = (0.0075, 0.0075, 0.01501)
_WHEEL_X = 0.02
_WHEEL_Z = 0.018
_WHEEL_Y = -0.01


@dataclass(frozen=True)
class PartSpec:
    """Size, placement relative to the car's lane and colour of one car part."""

    scale: tuple[float, float, float]
    y: float
    y_lift: float = 0.0
    x_offset: float = 0.0
    z_offset: float = 0.0
    color: tuple[float, float, float] | None = None


PART_SPECS: dict[str, PartSpec] = {
    "middle": PartSpec((0.04, 0.03, 0.05), 0.005, y_lift=0.5),
    "window": PartSpec((0.03, 0.017, 0.05001), 0.013, y_lift=0.5, color=_WINDOW_BLUE),
    "wheel_1": PartSpec(_WHEEL_SCALE, _WHEEL_Y, 0.0, -_WHEEL_X, _WHEEL_Z, _BLACK),
    "small_wheel_1": PartSpec(_HUB_SCALE, _WHEEL_Y, 0.0, -_WHEEL_X, _WHEEL_Z, _WHITE),
    "wheel_2": PartSpec(_WHEEL_SCALE, _WHEEL_Y, 0.0, -_WHEEL_X, -_WHEEL_Z, _BLACK),
    "small_wheel_2": PartSpec(_HUB_SCALE, _WHEEL_Y, 0.0, -_WHEEL_X, -_WHEEL_Z, _WHITE),
    "wheel_3": PartSpec(_WHEEL_SCALE, _WHEEL_Y, 0.0, _WHEEL_X, _WHEEL_Z, _BLACK),
    "small_wheel_3": PartSpec(_HUB_SCALE, _WHEEL_Y, 0.0, _WHEEL_X, _WHEEL_Z, _WHITE),
    "wheel_4": PartSpec(_WHEEL_SCALE, _WHEEL_Y, 0.0, _WHEEL_X, -_WHEEL_Z, _BLACK),
    "small_wheel_4": PartSpec(_HUB_SCALE, _WHEEL_Y, 0.0, _WHEEL_X, -_WHEEL_Z, _WHITE),
}


def _check_direction(direction: int) -> int:
    if direction not in (PLUS, MINUS):
        raise ValueError(f"direction must be {PLUS} or {MINUS}, not {direction!r}")
    return direction


class CarPart(BasisComponent):
    """One piece of a car, crossing its road and wrapping round at the far side."""

    def __init__(
        self,
        kind: str,
        direction: int,
        index: int,
        velocity: float,
        color: tuple[float, float, float] | None = None,
    ) -> None:
        try:
            self.spec = PART_SPECS[kind]
        except KeyError:
            raise ValueError(f"unknown car part {kind!r}") from None
        self.kind = kind
        self.direction = _check_direction(direction)
        self.index = index
        self.velocity = float(velocity)
        part_color = self.spec.color if self.spec.color is not None else color
        if part_color is not None:
            self.color = tuple(float(c) for c in part_color)
        super().__init__()

    def init_matrix(self) -> None:
        """Place the part at its car's spawn side of the road."""
        spec = self.spec
        self.sx, self.sy, self.sz = spec.scale
        self.x = -SPAWN_X * self.direction + spec.x_offset
        self.y = spec.y + spec.y_lift * self.sy
        self.z = -LANE_DEPTH * self.index + spec.z_offset

    def move(self, dt: float) -> None:
        """Drive across the road; past the far edge jump back to the spawn edge."""
        self.x += self.velocity * self.direction * dt
        offset = self.spec.x_offset
        if self.direction == PLUS and self.x > SPAWN_X + offset:
            self.x = -SPAWN_X + offset
        elif self.direction == MINUS and self.x < -SPAWN_X + offset:
            self.x = SPAWN_X + offset

    def update(self, dt: float) -> None:
        self.move(dt)


def build_car_parts(direction: int, index: int, velocity: float) -> list[CarPart]:
    """Return the cabin, window and the four wheels with their hubs of one car."""
    _check_direction(direction)
    return [CarPart(kind, direction, index, velocity) for kind in PART_SPECS]