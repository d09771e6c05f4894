"""Workers behind one wide interface, and workers behind narrow ones."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CannotEatError(NotImplementedError):
    """Raised when a worker is asked to eat but cannot."""


def _announce(line: str) -> str:
    """Print an action line and hand it back to the caller."""
    print(line)
    return line


class Human:
    def work(self) -> str:
        return _announce("Human is working")

    def eat(self) -> str:
        return _announce("Human is eating")


class Robot:
    def work(self) -> str:
        return _announce("Robot is working")

    def eat(self) -> str:
        raise CannotEatError("Robots don't eat")


def bad_interface_segregation() -> None:
    """Drive a human and a robot through the same wide interface; the robot fails."""
    for worker in (Human(), Robot()):
        worker.eat()
        worker.work()


class Workable(ABC):
    @abstractmethod
    def work(self) -> str:
        """Do some work."""


class Eatable(ABC):
    @abstractmethod
    def eat(self) -> str:
        """Eat."""


class HumanBeing(Workable, Eatable):
    def work(self) -> str:
        return _announce("Human being is working")

    def eat(self) -> str:
        return _announce("human being is eating")


class Robo(Workable):
    def work(self) -> str:
        return _announce("Robo is working")


def good_interface_segregation() -> None:
    """Drive each worker only through the interfaces it really has."""
    workers: list[Workable] = [HumanBeing(), Robo()]
    for worker in workers:
        worker.work()

    eater: Eatable = HumanBeing()
    eater.eat()