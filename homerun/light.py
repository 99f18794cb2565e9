"""Scene light whose colour shifts from day to sunset to night along the course."""

from __future__ import annotations

SUNSET_END = 7.0
NIGHT_END = 20.0


def interpolate(a: float, b: float, t: float) -> float:
    """Linear interpolation from a (t=0) to b (t=1)."""
    return a + t * (b - a)


class Light:
    """Light position and colour, tinted by how far the chicken has gone."""

    def __init__(self) -> None:
        self.position = (5.0, 15.0, -7.0)
        self.color = (1.0, 1.0, 1.0)
        self.sunset_t = 0.0
        self.night_t = 0.0

    def update(self, chicken_z: float) -> tuple[float, float, float]:
        """Tint the light for the chicken's z position and return the colour."""
        distance = -chicken_z
        if 0 <= distance <= SUNSET_END:
            self.sunset_t = distance / SUNSET_END
            self.set_sunset(self.sunset_t)
        elif SUNSET_END < distance <= NIGHT_END:
            self.night_t = distance / SUNSET_END - self.sunset_t
            self.set_night(self.night_t)
        return self.color

    def set_sunset(self, t: float) -> None:
        """Blend from white daylight to the sunset colour."""
        self.color = (
            interpolate(1.0, 1.0, t),
            interpolate(1.0, 0.4, t),
            interpolate(1.0, 0.5, t),
        )

    def set_night(self, t: float) -> None:
        """Blend from the sunset colour to the night colour."""
        self.color = (
            interpolate(1.0, 0.3, t),
            interpolate(0.4, 0.3, t),
            interpolate(0.5, 0.5, t),
        )