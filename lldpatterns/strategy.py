"""Checkout discounts chosen by a type switch, and by a pluggable strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


def _format_number(value: float) -> str:
    """Render a float without a trailing '.0' when it is whole."""
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


@dataclass
class BadCart:
    """A cart whose pricing rules are a switch on a bare user-type string."""

    user_type: str

    def checkout(self, amount: float) -> float:
        """Return the price to pay; unknown user types pay in full."""
        if self.user_type == "regular":
            return amount * 0.9
        if self.user_type == "premium":
            return amount * 0.8
        if self.user_type == "vip":
            return amount * 0.7
        return amount


def bad_strategy() -> None:
    """Show checkout prices by switching the cart's user type."""
    cart = BadCart(user_type="regular")
    print("Regular:", _format_number(cart.checkout(1000)))

    cart.user_type = "premium"
    print("Premium:", _format_number(cart.checkout(1000)))

    cart.user_type = "vip"
    print("VIP:", _format_number(cart.checkout(1000)))


class DiscountStrategy(ABC):
    """A rule that turns a full amount into the amount to pay."""

    @abstractmethod
    def calculate(self, amount: float) -> float:
        """Return the amount to pay."""


class RegularDiscount(DiscountStrategy):
    def calculate(self, amount: float) -> float:
        return amount * 0.9  # 10% off


class PremiumDiscount(DiscountStrategy):
    def calculate(self, amount: float) -> float:
        return amount * 0.8  # 20% off


class VIPDiscount(DiscountStrategy):
    def calculate(self, amount: float) -> float:
        return amount * 0.7  # 30% off


@dataclass
class Cart:
    """A cart that prices its checkout with whichever strategy it holds."""

    strategy: DiscountStrategy

    def checkout(self, amount: float) -> float:
        """Return the amount to pay under the current strategy."""
        return self.strategy.calculate(amount)


def good_strategy() -> None:
    """Show checkout prices by swapping the cart's strategy."""
    cart = Cart(strategy=RegularDiscount())
    print("Regular:", _format_number(cart.checkout(1000)))

    cart.strategy = PremiumDiscount()
    print("Premium:", _format_number(cart.checkout(1000)))

    cart.strategy = VIPDiscount()
    print("VIP:", _format_number(cart.checkout(1000)))