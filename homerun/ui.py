"""Full-screen textured panel shown for the start and result screens."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import NamedTuple

import numpy as np

from homerun.basis import scale, translate

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_PNG_CHANNELS = {0: 1, 2: 3, 3: 3, 4: 2, 6: 4}


def window_to_gl(x: float, y: float, width: float, height: float) -> tuple[float, float]:
    """Convert window pixel coordinates to normalized device coordinates."""
    if width <= 0 or height <= 0:
        raise ValueError("window size must be positive")
    half_w, half_h = width / 2.0, height / 2.0
    return (x - half_w) / half_w, (half_h - y) / half_h


class ImageInfo(NamedTuple):
    """Basic facts about an image file used as a panel texture."""

    name: str
    width: int
    height: int
    channels: int


def _read_png_header(path: str | Path) -> ImageInfo:
    with open(path, "rb") as fh:
        head = fh.read(33)
    if len(head) < 33 or not head.startswith(_PNG_SIGNATURE) or head[12:16] != b"IHDR":
        raise ValueError(f"{path} is not a PNG image")
    width, height = struct.unpack(">II", head[16:24])
    color_type = head[25]
    channels = _PNG_CHANNELS.get(color_type)
    if channels is None:
        raise ValueError(f"{path} has an unknown PNG colour type {color_type}")
    return ImageInfo(str(path), width, height, channels)


class Panel:
    """A quad covering the screen, moved and stretched by its world matrix."""

    VERTICES = ((-1.0, 1.0, 0.99), (-1.0, -1.0, 0.99), (1.0, -1.0, 0.99), (1.0, 1.0, 0.99))
    NORMALS = ((0.0, 0.0, -1.0),) * 4
    TEX_COORDS = ((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0))
    INDICES = (0, 1, 2, 2, 3, 0)

    def __init__(self, image: str | Path | None = None) -> None:
        self.world = np.identity(4)
        self.image: ImageInfo | None = None
        if image is not None:
            self.change_image(image)

    def resize(self, sx: float, sy: float, sz: float) -> None:
        """Stretch the panel about its own centre."""
        self.world = scale(self.world, sx, sy, sz)

    def move(self, dx: float, dy: float, dz: float) -> None:
        """Shift the panel in screen space."""
        self.world = translate(np.identity(4), dx, dy, dz) @ self.world

    def contains(self, x: float, y: float) -> bool:
        """Whether the screen point lies between the panel's lower-left and upper-right corners."""
        lb = self.world @ np.array([-1.0, -1.0, 0.0, 1.0])
        rt = self.world @ np.array([1.0, 1.0, 0.0, 1.0])
        return bool(lb[0] <= x <= rt[0] and lb[1] <= y <= rt[1])

    def change_image(self, name: str | Path) -> ImageInfo:
        """Use the named RGB or RGBA PNG file as the panel's texture."""
        info = _read_png_header(name)
        if info.channels not in (3, 4):
            raise ValueError(f"{name} must have 3 or 4 channels, not {info.channels}")
        self.image = info
        return info