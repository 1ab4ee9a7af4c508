"""Ways of driving a car."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from racesim.cars import Car
from racesim.tracks import Track


class DrivingTechnique(ABC):
    """A style of driving that changes a car's speed and fuel."""

    @abstractmethod
    def drive(self, car: Car) -> None:
        """Drive ``car`` one step in this style."""


class Aggressive(DrivingTechnique):
    """Hard acceleration, heavy fuel use."""

    def drive(self, car: Car) -> None:
        car.accelerate(15)
        car.consume_fuel(10)


class Economical(DrivingTechnique):
    """Gentle acceleration, light fuel use."""

    def drive(self, car: Car) -> None:
        car.accelerate(5)
        car.consume_fuel(2)


class Mode(Enum):
    """The style a flexible driver has settled on."""

    AGGRESSIVE = "aggresive"
    ECONOMICAL = "economical"
    BALANCED = "balanced"


_MODE_EFFECTS = {
    Mode.AGGRESSIVE: (14, 9),
    Mode.ECONOMICAL: (6, 3),
    Mode.BALANCED: (10, 5),
}


class Flexible(DrivingTechnique):
    """A driver who adapts to the track's weather and difficulty."""

    def __init__(self) -> None:
        self.mode = Mode.BALANCED

    def update_from_track(self, track: Track) -> None:
        """Choose a mode that suits ``track``."""
        if track.weather == "rainy" or track.difficulty > 10:
            self.mode = Mode.ECONOMICAL
        elif track.weather == "sunny" or track.difficulty > 1.2:
            self.mode = Mode.AGGRESSIVE
        else:
            self.mode = Mode.BALANCED

    def drive(self, car: Car) -> None:
        speed, fuel = _MODE_EFFECTS[self.mode]
        car.accelerate(speed)
        car.consume_fuel(fuel)