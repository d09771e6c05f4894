"""Command that runs every demonstration in turn."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from lldpatterns import (
    abstraction,
    adapter,
    builder,
    decorator,
    dependency_inversion,
    encapsulation,
    factory,
    inheritance,
    interface_segregation,
    liskov_substitution,
    observer,
    open_closed,
    polymorphism,
    prototype,
    single_responsibility,
    singleton,
    strategy,
)

DEMONSTRATIONS: tuple[Callable[[], None], ...] = (
    # Object-oriented basics
    encapsulation.bad_encapsulation,
    encapsulation.good_encapsulation,
    abstraction.bad_send_gmail,
    abstraction.good_send_gmail,
    inheritance.good_inheritance,
    polymorphism.bad_polymorphism,
    polymorphism.good_polymorphism,
    # SOLID principles
    single_responsibility.good_single_responsibility,
    single_responsibility.bad_single_responsibility,
    open_closed.bad_open_closed,
    open_closed.good_open_closed,
    liskov_substitution.good_liskov,
    interface_segregation.good_interface_segregation,
    dependency_inversion.bad_dependency_inversion,
    dependency_inversion.good_dependency_inversion,
    # Creational patterns
    singleton.bad_singleton,
    singleton.good_singleton,
    factory.good_factory_pattern,
    factory.bad_factory_pattern,
    builder.bad_builder,
    builder.good_builder,
    prototype.bad_prototype,
    prototype.good_prototype,
    # Behavioural patterns
    observer.bad_observer,
    observer.good_observer,
    strategy.bad_strategy,
    strategy.good_strategy,
    # Structural patterns
    adapter.bad_adapter,
    adapter.good_adapter,
    decorator.bad_decorator,
    decorator.good_decorator,
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run every demonstration in order and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="lldpatterns",
        description="Show object-oriented principles and design patterns, "
        "each done badly and then well.",
    )
    parser.parse_args(argv)

    for demonstration in DEMONSTRATIONS:
        demonstration()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())