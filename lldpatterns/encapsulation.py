"""Bank accounts with and without protected state."""

from __future__ import annotations

from dataclasses import dataclass


def _format_number(value: float) -> str:
    """Render a float the way a plain value print shows it: no trailing '.0'."""
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


@dataclass
class BadBankAccount:
    """An account whose balance anyone may overwrite, even with nonsense."""

    balance: float = 0.0


class BankAccount:
    """An account whose balance changes only through checked operations."""

    def __init__(self) -> None:
        self._balance = 0.0

    def deposit(self, amount: float) -> None:
        """Add a positive amount to the balance."""
        if amount <= 0:
            raise ValueError("amount is lesser than the zero which is not allowed")
        self._balance += amount

    def withdraw(self, amount: float) -> None:
        """Take a positive amount, no larger than the balance, out of the account."""
        if amount <= 0:
            raise ValueError("amount is lesser than zero which is not allowed")
        if amount > self._balance:
            raise ValueError("insufficient balance in your account")
        self._balance -= amount

    @property
    def balance(self) -> float:
        """The current balance."""
        return self._balance


def bad_encapsulation() -> None:
    """Show an account driven into a negative balance by direct assignment."""
    account = BadBankAccount(balance=0.0)
    account.balance = -1
    print(_format_number(account.balance))


def good_encapsulation() -> None:
    """Show deposits and withdrawals going through the account's own checks."""
    account = BankAccount()
    print("Initial Balance", _format_number(account.balance))

    try:
        account.deposit(45)
    except ValueError as err:
        print("Error:", err)

    try:
        account.withdraw(40)
    except ValueError as err:
        print("Error:", err)

    print("Final balance", _format_number(account.balance))