"""Day/night cycle: time of day, sun angle, ambient light and sky colour."""

from __future__ import annotations

import math

MAX_TIME = 24000
DAY_AMBIENT = 15
NIGHT_AMBIENT = 4
DAY_SKY_COLOR = (0.529, 0.808, 0.922)
NIGHT_SKY_COLOR = (0.02, 0.02, 0.08)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


class Sky:
    """Time of day in ticks, wrapping at MAX_TIME; 0 is sunrise."""

    def __init__(self) -> None:
        self._time = 0

    def __repr__(self) -> str:
        return f"Sky(time={self._time})"

    @property
    def time(self) -> int:
        return self._time

    @time.setter
    def time(self, value: int) -> None:
        self._time = value % MAX_TIME

    def tick(self, ticks: int = 1) -> None:
        """Advance the time; negative values move it back."""
        self._time = (self._time + ticks) % MAX_TIME

    def sun_angle(self) -> float:
        """Sun angle in degrees: 0 at sunrise, 90 at noon, 180 at sunset."""
        return (self._time / MAX_TIME * 360.0) % 360.0

    def _day_factor(self) -> float:
        sun_sin = math.sin(math.radians(self.sun_angle()))
        return max(0.0, min(1.0, (sun_sin + 1.0) / 2.0))

    def ambient_light(self) -> int:
        """Ambient light level between the night and day levels."""
        ambient = _lerp(NIGHT_AMBIENT, DAY_AMBIENT, self._day_factor())
        return math.floor(ambient + 0.5)

    def sky_color(self) -> tuple[float, float, float]:
        """RGB sky colour blended between night and day."""
        t = self._day_factor()
        return tuple(_lerp(n, d, t) for n, d in zip(NIGHT_SKY_COLOR, DAY_SKY_COLOR))

    def fog_color(self) -> tuple[float, float, float]:
        """Fog colour; matches the sky so the horizon blends."""
        return self.sky_color()

    def is_day(self) -> bool:
        return self._time < MAX_TIME // 2

    def is_night(self) -> bool:
        return self._time >= MAX_TIME // 2