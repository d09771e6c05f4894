"""A user service tied to one notifier, and one that takes any notifier."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class EmailNotifier:
    """A concrete mail notifier."""

    def send_email(self, message: str) -> None:
        print("Email Sent", message)


@dataclass
class UserService:
    """Registers users and always mails them through the concrete notifier."""

    email_notifier: EmailNotifier = field(default_factory=EmailNotifier)

    def register_user(self, user_name: str) -> None:
        print("User Registered", user_name)
        self.email_notifier.send_email("Hi you're welcome " + user_name)


class Notifier(ABC):
    """Anything that can deliver a message."""

    @abstractmethod
    def send(self, message: str) -> None:
        """Deliver the message."""


class GmailNotifier(Notifier):
    def send(self, message: str) -> None:
        print("Email sent", message)


class SMSNotifier(Notifier):
    def send(self, message: str) -> None:
        print("SMS Sent", message)


class UserServices:
    """Registers users and greets them through whichever notifier it is given."""

    def __init__(self, notifier: Notifier) -> None:
        self.notifier = notifier

    def register_user(self, user_name: str) -> None:
        print("User registered", user_name)
        self.notifier.send("hi MR " + user_name)


def bad_dependency_inversion() -> None:
    """Register a user through the service bound to mail."""
    UserService(email_notifier=EmailNotifier()).register_user("selva")


def good_dependency_inversion() -> None:
    """Register users through services given different notifiers."""
    UserServices(GmailNotifier()).register_user("selva")
    UserServices(SMSNotifier()).register_user("kumar")