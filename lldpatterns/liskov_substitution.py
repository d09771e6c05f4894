"""Birds forced to fly, and birds that fly only when they can."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CannotFlyError(NotImplementedError):
    """Raised when a bird is asked to fly but cannot."""


def _announce(line: str) -> str:
    """Print an action line and hand it back to the caller."""
    print(line)
    return line


class Sparrow:
    def fly(self) -> str:
        return _announce("Sparrow is flying")


class Ostrich:
    def fly(self) -> str:
        raise CannotFlyError("Ostrich can't fly")


def bad_make_bird_fly(bird) -> None:
    """Make any object with a fly method fly."""
    bird.fly()


def bad_liskov() -> None:
    """Fly a sparrow, then fail on an ostrich that cannot honour the contract."""
    bad_make_bird_fly(Sparrow())
    bad_make_bird_fly(Ostrich())


class Bird(ABC):
    """Every bird can walk."""

    @abstractmethod
    def walk(self) -> str:
        """Walk."""


class FlyingBird(Bird):
    """A bird that can also fly."""

    @abstractmethod
    def fly(self) -> str:
        """Fly."""


class Eagle(FlyingBird):
    def walk(self) -> str:
        return _announce("Eagle is walking")

    def fly(self) -> str:
        return _announce("Eagle is flying")


class Kiwi(Bird):
    def walk(self) -> str:
        return _announce("Kiwi is walking")


def make_bird_fly(bird: FlyingBird) -> None:
    """Make a flying bird fly."""
    bird.fly()


def make_bird_walk(bird: Bird) -> None:
    """Make any bird walk."""
    bird.walk()


def good_liskov() -> None:
    """Show walking for every bird and flying only for flying birds."""
    eagle = Eagle()
    make_bird_walk(eagle)
    make_bird_fly(eagle)

    kiwi = Kiwi()
    make_bird_walk(kiwi)