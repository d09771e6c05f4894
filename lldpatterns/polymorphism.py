"""Vehicles handled by type checks, and vehicles handled through one interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass


def _say(message: str) -> str:
    print(message)
    return message


@dataclass
class MotorBike:
    """A bike that shares nothing with other vehicles."""

    brand: str
    model: str
    year: int

    def start(self) -> str:
        return _say("Bike has been started")

    def stop(self) -> str:
        return _say("Bike has been stopped")


@dataclass
class BadCar:
    """A car that shares nothing with other vehicles."""

    brand: str
    model: str
    year: int
    number_of_doors: int = 0

    def start(self) -> str:
        return _say("car has been started")

    def stop(self) -> str:
        return _say("Car has been stopeed")


def bad_polymorphism(vehicles: Iterable[object] | None = None) -> None:
    """Inspect vehicles by checking each one's concrete type.

    Raises TypeError on the first object that is neither kind of vehicle.
    """
    if vehicles is None:
        vehicles = [
            BadCar(brand="Ford", model="Focus", year=2008, number_of_doors=5),
            MotorBike(brand="Honda", model="Scoopy", year=2018),
        ]
    for vehicle in vehicles:
        if isinstance(vehicle, MotorBike):
            print(f"Inspecting {vehicle.brand} {vehicle.model} (Bike)")
        elif isinstance(vehicle, BadCar):
            print(f"Inspecting {vehicle.brand} {vehicle.model} (Car)")
        else:
            raise TypeError("Object is not a valid vehicle")
        vehicle.start()
        vehicle.stop()


@dataclass
class Vehicle(ABC):
    """Anything that has a brand and model and can be started and stopped."""

    brand: str
    model: str
    year: int

    @abstractmethod
    def start(self) -> str:
        """Start the vehicle and return the announcement."""

    @abstractmethod
    def stop(self) -> str:
        """Stop the vehicle and return the announcement."""


@dataclass
class Car(Vehicle):
    number_of_doors: int = 0
    number_of_wheels: int = 0

    def start(self) -> str:
        return _say("car has been started")

    def stop(self) -> str:
        return _say("car has been stopped")


@dataclass
class Bike(Vehicle):
    number_of_wheels: int = 0

    def start(self) -> str:
        return _say("bike has been started")

    def stop(self) -> str:
        return _say("bike has been stopped")


@dataclass
class Plane(Vehicle):
    number_of_doors: int = 0

    def start(self) -> str:
        return _say("plane has been started")

    def stop(self) -> str:
        return _say("plane has been stopped")


def good_polymorphism(vehicles: Iterable[Vehicle] | None = None) -> None:
    """Inspect vehicles through the common interface alone."""
    if vehicles is None:
        vehicles = [
            Car(brand="Ford", model="Focus", year=2008, number_of_doors=5),
            Bike(brand="Honda", model="Scoopy", year=2018),
            Plane(brand="Boeing", model="747", year=2015, number_of_doors=16),
        ]
    for vehicle in vehicles:
        print(f"Inspecting {vehicle.brand} {vehicle.model} ({type(vehicle).__name__})")
        vehicle.start()
        vehicle.stop()