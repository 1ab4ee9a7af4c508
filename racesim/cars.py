"""Cars that take part in a race, and the error raised when an engine overheats."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

_SPEED_LIMIT = 350.0
_FUEL_PER_SPEED = 0.5


class Overheated(RuntimeError):
    """Raised when a car is pushed beyond the speed its engine can take."""


class Car(ABC):
    """A car with a name, a current speed and a fuel reserve."""

    _count: ClassVar[int] = 0
    _total_distance: ClassVar[float] = 0.0

    def __init__(self, name: str, fuel: float) -> None:
        self.name = name
        self.speed = 0.0
        self.fuel = float(fuel)
        Car._count += 1

    def __del__(self) -> None:
        Car._count -= 1

    @classmethod
    def car_count(cls) -> int:
        """Number of cars currently alive."""
        return Car._count

    @classmethod
    def total_distance(cls) -> float:
        """Distance driven by all cars together."""
        return Car._total_distance

    def add_distance(self, km: float) -> None:
        """Add ``km`` to the distance shared by all cars."""
        Car._total_distance += km

    def accelerate(self, amount: float) -> None:
        """Raise the speed by ``amount``, burning fuel in proportion."""
        if self.speed > _SPEED_LIMIT:
            raise Overheated(
                "Motor supraincalzit! Trebuie sa incetiniti sau masina va face boom!"
            )
        self.speed += amount
        self.consume_fuel(amount * _FUEL_PER_SPEED)

    def consume_fuel(self, amount: float) -> None:
        """Burn ``amount`` of fuel; the reserve never drops below zero."""
        self.fuel = max(self.fuel - amount, 0.0)

    @abstractmethod
    def score(self) -> float:
        """The car's race score."""

    def __str__(self) -> str:
        return f"Car: {self.name}  Spped: {self.speed:g} fuel: {self.fuel:g}"


class SUV(Car):
    """A heavy car with a large tank."""

    def __init__(self, name: str) -> None:
        super().__init__(name, 130)

    def score(self) -> float:
        return self.speed * 1.0 + self.fuel * 0.4


class SportsCar(Car):
    """A fast car with a small tank."""

    def __init__(self, name: str) -> None:
        super().__init__(name, 100)

    def score(self) -> float:
        return self.speed * 1.2 + self.fuel * 0.3


class Enduro(Car):
    """A car built for endurance."""

    def __init__(self, name: str) -> None:
        super().__init__(name, 130)

    def score(self) -> float:
        return self.speed * 0.9 + self.fuel * 0.6


class TunedSportsCar(SportsCar):
    """A sports car that leaves the garage already moving."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.accelerate(10)

    def score(self) -> float:
        return self.speed * 1.5 + self.fuel * 0.2