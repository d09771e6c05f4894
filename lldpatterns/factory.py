"""Notifiers picked by hand-written branches, and notifiers made by a factory."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BadEmailNotifier:
    def send(self, message: str) -> None:
        print("Sending Email:", message)


class BadSMSNotifier:
    def send(self, message: str) -> None:
        print("Sending SMS:", message)


class Notifier(ABC):
    """Anything that can deliver a message."""

    @abstractmethod
    def send(self, message: str) -> None:
        """Deliver the message."""


class EmailNotifier(Notifier):
    def send(self, message: str) -> None:
        print("Sending Email ", message)


class SMSNotifier(Notifier):
    def send(self, message: str) -> None:
        print("Sending SMS ", message)


_NOTIFIERS: dict[str, type[Notifier]] = {
    "Email": EmailNotifier,
    "SMS": SMSNotifier,
}


def get_notifier(notifier_type: str) -> Notifier:
    """Return a notifier for "Email" or "SMS".

    Raises ValueError for any other kind.
    """
    try:
        return _NOTIFIERS[notifier_type]()
    except KeyError:
        raise ValueError(f"unknown notifier type: {notifier_type!r}") from None


def bad_factory_pattern(notification_type: str = "sms") -> None:
    """Pick and drive a notifier with branches spread through the caller."""
    if notification_type == "email":
        notifier: object = EmailNotifier()
    elif notification_type == "sms":
        notifier = BadSMSNotifier()
    else:
        print("Unknown notifier type")
        return

    if isinstance(notifier, EmailNotifier):
        notifier.send("Email message!")
    elif isinstance(notifier, BadSMSNotifier):
        notifier.send("SMS message!")


def good_factory_pattern() -> None:
    """Obtain notifiers from the factory and use them through one interface."""
    get_notifier("Email").send("Hello via Email")
    get_notifier("SMS").send("Hello via SMS")