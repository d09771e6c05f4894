"""Users that persist and greet themselves, and users served by separate services."""

from __future__ import annotations

from dataclasses import dataclass


def _say(text: str) -> str:
    print(text, end="")
    return text


@dataclass
class BadUser:
    """A user that also knows how to store itself and send its own mail."""

    name: str
    email: str

    def save(self) -> str:
        """Store the user and return the text written."""
        return _say(f"\nSaving the data to the database {self.name}\n")

    def send_welcome_email(self) -> str:
        """Greet the user and return the text written."""
        return _say(f"\nHi {self.name} welcome to the team")


@dataclass
class User:
    """Plain user data with no behaviour of its own."""

    name: str
    email: str


class UserRepository:
    """Stores users."""

    def save(self, user: User) -> str:
        return _say(f"\nUser has been saved with user name {user.name}")


class EmailService:
    """Sends mail to users."""

    def send_welcome_email(self, user: User) -> str:
        return _say(f"\nWelcome to the team buddy {user.name}")


def bad_single_responsibility() -> None:
    """Show a user that saves itself and sends its own welcome mail."""
    user = BadUser(name="Selva", email="selva@example.com")
    user.save()
    user.send_welcome_email()


def good_single_responsibility() -> None:
    """Show storage and mail handled by their own services."""
    user = User(name="Selva", email="selva@example.com")
    UserRepository().save(user)
    EmailService().send_welcome_email(user)