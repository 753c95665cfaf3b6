"""User settings with clamped values and a key=value file format."""

from __future__ import annotations

import os
import re

DEFAULT_RENDER_DISTANCE = 8
MIN_RENDER_DISTANCE = 2
MAX_RENDER_DISTANCE = 32

DEFAULT_FOV = 70
MIN_FOV = 30
MAX_FOV = 110

DEFAULT_VOLUME = 1.0
MIN_VOLUME = 0.0
MAX_VOLUME = 1.0

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group())


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group())


def _clamp(value, low, high):
    return max(low, min(high, value))


class Settings:
    """Render distance, field of view and volume, each kept within its range."""

    def __init__(self) -> None:
        self._render_distance = DEFAULT_RENDER_DISTANCE
        self._fov = DEFAULT_FOV
        self._volume = DEFAULT_VOLUME

    def __repr__(self) -> str:
        return (
            f"Settings(render_distance={self._render_distance}, "
            f"fov={self._fov}, volume={self._volume})"
        )

    @property
    def render_distance(self) -> int:
        return self._render_distance

    @render_distance.setter
    def render_distance(self, distance: int) -> None:
        self._render_distance = _clamp(int(distance), MIN_RENDER_DISTANCE, MAX_RENDER_DISTANCE)

    @property
    def fov(self) -> int:
        return self._fov

    @fov.setter
    def fov(self, fov: int) -> None:
        self._fov = _clamp(int(fov), MIN_FOV, MAX_FOV)

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, volume: float) -> None:
        self._volume = _clamp(float(volume), MIN_VOLUME, MAX_VOLUME)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the settings as key=value lines."""
        with open(path, "w", encoding="utf-8") as f:
            f.write(f"render_distance={self._render_distance}\n")
            f.write(f"fov={self._fov}\n")
            f.write(f"volume={self._volume:g}\n")

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read key=value lines; blank lines, '#' comments and unknown keys are skipped."""
        with open(path, encoding="utf-8") as f:
            for line in f:
                line = line.rstrip("\n")
                if not line or line.startswith("#"):
                    continue
                key, sep, value = line.partition("=")
                if not sep:
                    continue
                if key == "render_distance":
                    self.render_distance = _parse_int(value)
                elif key == "fov":
                    self.fov = _parse_int(value)
                elif key == "volume":
                    self.volume = _parse_float(value)