"""Camera that follows the chicken and produces view and projection matrices."""

from __future__ import annotations

import math

import numpy as np

from homerun.protocol import Dir

_KEY_FACES = {
    "w": (Dir.NORTH, 180.0),
    "s": (Dir.SOUTH, 0.0),
    "a": (Dir.WEST, -90.0),
    "d": (Dir.EAST, 90.0),
}

_LOOK_OFFSETS = {
    Dir.NORTH: (0.0, 0.0, -5.0),
    Dir.SOUTH: (0.0, 0.0, 5.0),
    Dir.EAST: (5.0, 0.0, 0.0),
    Dir.WEST: (-5.0, 0.0, 0.0),
}

_UP = (0.0, 1.0, 0.0)


def _normalize(v: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(v)
    if norm == 0:
        raise ValueError("cannot normalize a zero vector")
    return v / norm


def _look_at(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -(s @ eye)
    m[1, 3] = -(u @ eye)
    m[2, 3] = f @ eye
    return m


def _perspective(fov_degrees: float, aspect: float, near: float, far: float) -> np.ndarray:
    t = math.tan(math.radians(fov_degrees) / 2)
    m = np.zeros((4, 4))
    m[0, 0] = 1 / (aspect * t)
    m[1, 1] = 1 / t
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -2 * far * near / (far - near)
    m[3, 2] = -1.0
    return m


class Camera:
    """Tracks the chicken's position and facing for the different viewpoints."""

    FOV = 45.0
    ASPECT = 1.0
    NEAR = 0.1
    FAR = 50.0

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Return to the starting position, looking nowhere in particular."""
        self.move = np.zeros(3)
        self.face = Dir.STOP
        self.pre_face = Dir.STOP
        self.face_degree = 180.0
        self.position = np.zeros(3)
        self.target = np.zeros(3)
        self.up = np.array(_UP)

    def set_face_dir(self, key: str | int) -> None:
        """Turn for a movement key ('w', 'a', 's', 'd'); Dir.STOP halts and remembers the last facing."""
        if isinstance(key, str) and key in _KEY_FACES:
            self.face, self.face_degree = _KEY_FACES[key]
        elif key == Dir.STOP or key == "\0":
            if self.face != Dir.STOP:
                self.pre_face = self.face
            self.face = Dir.STOP

    def follow(self, x: float, y: float, z: float) -> None:
        """Move the camera's anchor to the chicken's position."""
        self.move = np.array([x, y, z], dtype=float)

    def _view(self, position, target, up=_UP) -> np.ndarray:
        self.position = np.asarray(position, dtype=float)
        self.target = np.asarray(target, dtype=float)
        self.up = np.asarray(up, dtype=float)
        return _look_at(self.position, self.target, self.up)

    def third_person_view(self, near: bool) -> np.ndarray:
        """View from behind and above the chicken, close or far."""
        mx, my, mz = self.move
        if near:
            position = (mx, my + 0.05, 0.2 + mz)
        else:
            position = (0.1 + mx, 0.5 + my, 0.5 + mz)
        return self._view(position, (mx, my, mz))

    def first_person_view(self) -> np.ndarray:
        """View from the chicken's eyes in the direction it faces or last faced."""
        if self.face != Dir.STOP:
            face, lift = self.face, 0.015
        else:
            face, lift = self.pre_face, 0.01
        if face in _LOOK_OFFSETS:
            mx, my, mz = self.move
            dx, dy, dz = _LOOK_OFFSETS[face]
            return self._view((mx, my + lift, mz), (mx + dx, my + dy, mz + dz))
        return self._view(self.position, self.target)

    def chicken_view(self) -> np.ndarray:
        """Close view fixed on the chicken from the front."""
        mx, my, mz = self.move
        return self._view((0.05 + mx, my + 0.1, -0.07 + mz), (mx, my, mz))

    def border_view(self) -> np.ndarray:
        """Top-down view onto the border frame."""
        my = self.move[1]
        return self._view((0.0, my + 0.5, 30.0), (0.0, my, 30.0), (0.0, 0.0, -1.0))

    def projection(self) -> np.ndarray:
        """Perspective projection used for every view."""
        return _perspective(self.FOV, self.ASPECT, self.NEAR, self.FAR)