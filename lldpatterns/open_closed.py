"""Discounts chosen by a type switch, and discounts as interchangeable classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


def _format_number(value: float) -> str:
    """Render a float without a trailing '.0' when it is whole."""
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


@dataclass
class BadInvoice:
    """An invoice whose discount kind is a bare string."""

    amount: float
    type: str


def calculate_discount(invoice: BadInvoice) -> float:
    """Return the discount for an invoice; unknown kinds get none."""
    rates = {"regular": 0.1, "premium": 0.2, "vip": 0.3}
    rate = rates.get(invoice.type)
    if rate is None:
        return 0
    return invoice.amount * rate


class Discount(ABC):
    """A way of working out the discount on an amount."""

    @abstractmethod
    def calculate(self, amount: float) -> float:
        """Return the discount for the amount."""


class RegularDiscount(Discount):
    def calculate(self, amount: float) -> float:
        return amount * 0.1


class PremiumDiscount(Discount):
    def calculate(self, amount: float) -> float:
        return amount * 0.2


class VipDiscount(Discount):
    def calculate(self, amount: float) -> float:
        return amount * 0.3


def bad_open_closed() -> None:
    """Show a discount worked out by the type switch."""
    invoice = BadInvoice(amount=1000, type="regular")
    print("\nDiscount:", _format_number(calculate_discount(invoice)))


def good_open_closed() -> list[float]:
    """Show discounts worked out by swapping discount classes; return them."""
    amount = 1000.0
    labelled: list[tuple[str, Discount]] = [
        ("Regular Discount", RegularDiscount()),
        ("Premium Discount", PremiumDiscount()),
        ("Premium Discount", VipDiscount()),
    ]
    discounts = []
    for label, strategy in labelled:
        discount = strategy.calculate(amount)
        print(label, _format_number(discount))
        discounts.append(discount)
    return discounts