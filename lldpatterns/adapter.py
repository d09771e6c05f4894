"""A client bypassing a legacy printer, and an adapter that fits it to an interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class LegacyPrinter:
    """An existing printer with its own method name."""

    def print(self, msg: str) -> None:
        print("Legacy Printer:", msg)


class BadPrinter:
    """A client that is handed the legacy printer but writes the text itself."""

    def print_directly(self, legacy: LegacyPrinter, msg: str) -> None:
        print(msg, end="")


def bad_adapter() -> None:
    """Show the text written without going through any adapter."""
    BadPrinter().print_directly(LegacyPrinter(), "No Adapter Used ❌")


class Printer(ABC):
    """The interface clients expect."""

    @abstractmethod
    def print_message(self, msg: str) -> None:
        """Print the message."""


@dataclass
class LegacyPrinterAdapter(Printer):
    """Makes a LegacyPrinter usable wherever a Printer is expected."""

    legacy: LegacyPrinter = field(default_factory=LegacyPrinter)

    def print_message(self, msg: str) -> None:
        self.legacy.print(msg)


def good_adapter() -> None:
    """Print through the expected interface, backed by the legacy printer."""
    printer: Printer = LegacyPrinterAdapter(legacy=LegacyPrinter())
    printer.print_message("Using Adapter Pattern ✅")