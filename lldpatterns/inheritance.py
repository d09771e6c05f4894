"""Vehicles sharing fields and behaviour through a common base."""

from __future__ import annotations

from dataclasses import dataclass


def _say(message: str) -> str:
    print(message)
    return message


@dataclass
class GoodVehicle:
    """The fields and behaviour every vehicle has."""

    brand: str
    model: str
    year: str

    def start(self) -> str:
        """Announce the start and return the announcement."""
        return _say("vehicle is starting")

    def stop(self) -> str:
        """Announce the stop and return the announcement."""
        return _say("vehicle has stopped")


@dataclass
class Car(GoodVehicle):
    """A vehicle with wheels and doors."""

    number_of_wheels: int = 0
    number_of_doors: int = 0


@dataclass
class Bike(GoodVehicle):
    """A vehicle with wheels."""

    number_of_wheels: int = 0


def good_inheritance() -> None:
    """Show two vehicles reusing the base behaviour."""
    vehicle1 = Bike(brand="Ford", model="T90", year="2020", number_of_wheels=4)
    vehicle2 = Car(
        brand="BMW", model="S1000RR", year="2020", number_of_wheels=4, number_of_doors=4
    )

    print("\nBike Details:", vehicle2.brand, vehicle2.model, vehicle2.year)
    vehicle1.start()
    vehicle1.stop()

    print("Car Details:", vehicle1.brand, vehicle1.model, vehicle1.year)
    vehicle2.start()
    vehicle2.stop()