"""Game constants and the JSON packets exchanged between client and server."""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

SERVER_PORT = 9000
PACKET_FREQ = 30
MAX_HEIGHT = 4.0
WOODS_PER_ROW = 12

OFF, ON = 0, 1
MINUS, PLUS = -1, 1
LEFT, RIGHT = 0, 1
FAR, NEAR = 0, 1
ROAD, GRASS = 0, 1
PLAYER, ENEMY = 0, 1


class Toggle(IntEnum):
    """Indices of the client's option toggles."""

    PERSPECTIVE = 0
    LIGHT = 1
    NEAR_FAR = 2
    END = 10


class Dir(IntEnum):
    """Direction a chicken faces or walks."""

    STOP = 0
    SOUTH = 1
    WEST = 2
    NORTH = 3
    EAST = 4


class ProtocolError(ValueError):
    """Raised when a packet is not valid JSON or lacks a required field."""


def _dump(obj: dict[str, Any]) -> str:
    return json.dumps(obj, indent=4, sort_keys=True, ensure_ascii=False)


def _parse(text: str | bytes) -> dict[str, Any]:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ProtocolError(f"invalid JSON packet: {exc}") from exc
    if not isinstance(obj, dict):
        raise ProtocolError("packet must be a JSON object")
    return obj


def _get(obj: dict[str, Any], key: str) -> Any:
    try:
        return obj[key]
    except KeyError:
        raise ProtocolError(f"missing field {key!r}") from None


def _as_bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise ProtocolError(f"field {key!r} must be a boolean")
    return value


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ProtocolError(f"field {key!r} must be an integer")
    return value


def _as_float(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ProtocolError(f"field {key!r} must be a number")
    return float(value)


def _as_list(value: Any, key: str, length: int | None = None) -> list[Any]:
    if not isinstance(value, list):
        raise ProtocolError(f"field {key!r} must be an array")
    if length is not None and len(value) != length:
        raise ProtocolError(f"field {key!r} must hold {length} items")
    return value


@dataclass
class GameReady:
    """Signals that a player is ready to start."""

    ready: bool = False

    def to_json(self) -> str:
        return _dump({"Ready": self.ready})

    @classmethod
    def from_json(cls, text: str | bytes) -> GameReady:
        obj = _parse(text)
        return cls(_as_bool(_get(obj, "Ready"), "Ready"))


@dataclass
class GameOver:
    """Whether the race has ended and which player won."""

    end: bool = False
    winner_ids: list[bool] = field(default_factory=lambda: [False, False])

    def to_json(self) -> str:
        return _dump({"End": self.end, "WinnerID": list(self.winner_ids)})

    @classmethod
    def from_json(cls, text: str | bytes) -> GameOver:
        obj = _parse(text)
        end = _as_bool(_get(obj, "End"), "End")
        winners = [
            _as_bool(v, "WinnerID")
            for v in _as_list(_get(obj, "WinnerID"), "WinnerID", 2)
        ]
        return cls(end, winners)


@dataclass
class InitPlayer:
    """The identifier assigned to a player."""

    player_id: int = 0

    def to_json(self) -> str:
        return _dump({"ID": self.player_id})

    @classmethod
    def from_json(cls, text: str | bytes) -> InitPlayer:
        obj = _parse(text)
        return cls(_as_int(_get(obj, "ID"), "ID"))


@dataclass
class InitRoads:
    """Ground tiles (road or grass) and the spawn side of each road's cars."""

    roads: list[bool] = field(default_factory=list)
    dirs: list[bool] = field(default_factory=list)

    def to_json(self) -> str:
        return _dump({"Roads": list(self.roads), "Dir": list(self.dirs)})

    @classmethod
    def from_json(cls, text: str | bytes) -> InitRoads:
        obj = _parse(text)
        roads = [_as_bool(v, "Roads") for v in _as_list(_get(obj, "Roads"), "Roads")]
        dirs = [_as_bool(v, "Dir") for v in _as_list(_get(obj, "Dir"), "Dir")]
        return cls(roads, dirs)


@dataclass
class InitCars:
    """Velocity and colour of the car on each road."""

    velocities: list[float] = field(default_factory=list)
    colors: list[tuple[float, float, float]] = field(default_factory=list)

    def to_json(self) -> str:
        return _dump(
            {
                "Velocity": list(self.velocities),
                "RGB": [list(rgb) for rgb in self.colors],
            }
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> InitCars:
        obj = _parse(text)
        velocities = [
            _as_float(v, "Velocity")
            for v in _as_list(_get(obj, "Velocity"), "Velocity")
        ]
        colors = [
            tuple(_as_float(c, "RGB") for c in _as_list(rgb, "RGB", 3))
            for rgb in _as_list(_get(obj, "RGB"), "RGB")
        ]
        return cls(velocities, colors)


@dataclass
class InitWoods:
    """Tree placement for each grass row, twelve slots per row."""

    rows: list[tuple[bool, ...]] = field(default_factory=list)

    def to_json(self) -> str:
        return _dump({"Wood": [list(row) for row in self.rows]})

    @classmethod
    def from_json(cls, text: str | bytes) -> InitWoods:
        obj = _parse(text)
        rows = [
            tuple(_as_bool(v, "Wood") for v in _as_list(row, "Wood", WOODS_PER_ROW))
            for row in _as_list(_get(obj, "Wood"), "Wood")
        ]
        return cls(rows)


@dataclass
class UpdateData:
    """A player's position and state, sent every network tick."""

    player_id: int = 0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    face_degree: float = 180.0
    game_over: bool = False
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def to_json(self) -> str:
        with self._lock:
            return _dump(
                {
                    "ID": bool(self.player_id),
                    "OtherPos_x": self.x,
                    "OtherPos_y": self.y,
                    "OtherPos_z": self.z,
                    "OtherFace": self.face_degree,
                    "Over": self.game_over,
                }
            )

    @classmethod
    def from_json(cls, text: str | bytes) -> UpdateData:
        obj = _parse(text)
        return cls(
            player_id=int(_as_bool(_get(obj, "ID"), "ID")),
            x=_as_float(_get(obj, "OtherPos_x"), "OtherPos_x"),
            y=_as_float(_get(obj, "OtherPos_y"), "OtherPos_y"),
            z=_as_float(_get(obj, "OtherPos_z"), "OtherPos_z"),
            face_degree=_as_float(_get(obj, "OtherFace"), "OtherFace"),
            game_over=_as_bool(_get(obj, "Over"), "Over"),
        )

    def copy(self) -> UpdateData:
        """Return an independent snapshot of this data."""
        with self._lock:
            return UpdateData(
                self.player_id, self.x, self.y, self.z, self.face_degree, self.game_over
            )