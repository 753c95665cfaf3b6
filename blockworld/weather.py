"""Weather state with fade-in and fade-out of precipitation intensity."""

from __future__ import annotations

import enum


class WeatherState(enum.Enum):
    CLEAR = "clear"
    RAIN = "rain"
    SNOW = "snow"


def _biome_name(biome) -> str:
    name = biome.name if isinstance(biome, enum.Enum) else str(biome)
    return name.lower()


class WeatherSystem:
    """Current weather and its intensity, which fades over a transition duration."""

    def __init__(self) -> None:
        self._state = WeatherState.CLEAR
        self._intensity = 0.0
        self._transition_duration = 5.0
        self._transitioning = False

    def __repr__(self) -> str:
        return f"WeatherSystem({self._state.name}, intensity={self._intensity:.2f})"

    @property
    def weather(self) -> WeatherState:
        return self._state

    @property
    def intensity(self) -> float:
        """Precipitation intensity in [0, 1]."""
        return self._intensity

    @property
    def transitioning(self) -> bool:
        return self._transitioning

    @property
    def transition_duration(self) -> float:
        return self._transition_duration

    @transition_duration.setter
    def transition_duration(self, seconds: float) -> None:
        self._transition_duration = max(0.0, float(seconds))

    def set_weather(self, state: WeatherState) -> None:
        """Change the weather, starting a fade when moving to or from clear."""
        if state == self._state and not self._transitioning:
            return
        old = self._state
        self._state = state
        if state is WeatherState.CLEAR and old is not WeatherState.CLEAR:
            self._transitioning = True
        elif state is not WeatherState.CLEAR and old is WeatherState.CLEAR:
            self._intensity = 0.0
            self._transitioning = True
        else:
            self._transitioning = False

    def weather_for_biome(self, biome) -> WeatherState:
        """Weather as seen in a biome: deserts stay clear, tundra turns rain to snow.

        The biome is an enum member or a string naming it.
        """
        name = _biome_name(biome)
        if name == "desert":
            return WeatherState.CLEAR
        if name == "tundra" and self._state is WeatherState.RAIN:
            return WeatherState.SNOW
        return self._state

    def update(self, dt: float) -> None:
        """Advance the fade by dt seconds."""
        if not self._transitioning:
            return
        duration = self._transition_duration
        rate = 1.0 / duration if duration > 0.0 else 1000.0
        if self._state is WeatherState.CLEAR:
            self._intensity -= rate * dt
            if self._intensity <= 0.0:
                self._intensity = 0.0
                self._transitioning = False
        else:
            self._intensity += rate * dt
            if self._intensity >= 1.0:
                self._intensity = 1.0
                self._transitioning = False