"""Race tracks and the observers that follow their changes."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TrackObserver(ABC):
    """Something that reacts when a track changes."""

    @abstractmethod
    def track_update(self, track: Track) -> None:
        """Called after ``track`` has changed."""


class Track:
    """A track with a surface, a difficulty, a number of curves and weather."""

    def __init__(
        self, surface: str, difficulty: float, nr_curves: int, weather: str
    ) -> None:
        self.surface = surface
        self.difficulty = float(difficulty)
        self._nr_curves = nr_curves
        self._weather = weather
        self._observers: list[TrackObserver] = []

    @property
    def weather(self) -> str:
        return self._weather

    @weather.setter
    def weather(self, value: str) -> None:
        self._weather = value
        self.notify_observers()

    @property
    def nr_curves(self) -> int:
        return self._nr_curves

    @nr_curves.setter
    def nr_curves(self, value: int) -> None:
        self._nr_curves = value
        self.notify_observers()

    def add_observer(self, observer: TrackObserver) -> None:
        """Register ``observer`` to be told about changes."""
        self._observers.append(observer)

    def notify_observers(self) -> None:
        """Tell every registered observer, in order, that the track changed."""
        for observer in self._observers:
            observer.track_update(self)

    def __str__(self) -> str:
        return (
            f"Track: {self.surface} Difficulty: {self.difficulty:g} "
            f"Weather: {self.weather} Number of curves: {self.nr_curves}\n"
        )


class OffRoadTrack(Track):
    """A rough track off the road."""

    def __init__(self, nr_curves: int, weather: str) -> None:
        super().__init__("OffRoadTrack", 1.5, nr_curves, weather)


class PavementTrack(Track):
    """A paved track."""

    def __init__(self, nr_curves: int, weather: str) -> None:
        super().__init__("Pavement", 1.0, nr_curves, weather)