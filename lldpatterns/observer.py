"""Publishers wired to fixed subscribers, and publishers with pluggable observers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class BadEmailSubscriber:
    """A mail subscriber the publisher must know by its concrete type."""

    email: str

    def receive_email(self, message: str) -> None:
        print("Email sent to", self.email, "with message:", message)


@dataclass
class BadSMSSubscriber:
    """A text-message subscriber the publisher must know by its concrete type."""

    phone: str

    def receive_sms(self, message: str) -> None:
        print("SMS sent to", self.phone, "with message:", message)


@dataclass
class BadPublisher:
    """A publisher hard-wired to one subscriber of each concrete kind."""

    email_subscriber: BadEmailSubscriber | None = None
    sms_subscriber: BadSMSSubscriber | None = None

    def notify_all(self, message: str) -> None:
        """Call each subscriber that is present through its own method."""
        if self.email_subscriber is not None:
            self.email_subscriber.receive_email(message)
        if self.sms_subscriber is not None:
            self.sms_subscriber.receive_sms(message)


def bad_observer() -> None:
    """Show a notification pushed through hard-wired subscribers."""
    publisher = BadPublisher(
        email_subscriber=BadEmailSubscriber(email="baduser@example.com"),
        sms_subscriber=BadSMSSubscriber(phone="[phone]"),
    )
    publisher.notify_all("🚫 Tightly Coupled Notification Sent")


class Observer(ABC):
    """Anything that wants to hear about published messages."""

    @abstractmethod
    def update(self, message: str) -> None:
        """Receive a published message."""


class NewsPublisher:
    """Keeps a list of observers and tells each of them about every message."""

    def __init__(self) -> None:
        self._subscribers: list[Observer] = []

    @property
    def subscribers(self) -> tuple[Observer, ...]:
        """The registered observers, in registration order."""
        return tuple(self._subscribers)

    def register(self, observer: Observer) -> None:
        """Add an observer to the end of the list."""
        self._subscribers.append(observer)

    def unregister(self, observer: Observer) -> None:
        """Remove the first registration of this very observer, if any."""
        for position, subscriber in enumerate(self._subscribers):
            if subscriber is observer:
                del self._subscribers[position]
                break

    def notify_all(self, message: str) -> None:
        """Pass the message to every observer in registration order."""
        for subscriber in self._subscribers:
            subscriber.update(message)


@dataclass(eq=False)
class EmailSubscriber(Observer):
    email: str

    def update(self, message: str) -> None:
        print("Email to", self.email, "received:", message)


@dataclass(eq=False)
class SMSSubscriber(Observer):
    phone: str

    def update(self, message: str) -> None:
        print("SMS to", self.phone, "received:", message)


def good_observer() -> None:
    """Show observers registered, notified, and one of them removed."""
    publisher = NewsPublisher()

    email_sub = EmailSubscriber(email="user@example.com")
    sms_sub = SMSSubscriber(phone="[phone]")

    publisher.register(email_sub)
    publisher.register(sms_sub)

    publisher.notify_all("🚀 New Article Published: Go Design Patterns")

    publisher.unregister(email_sub)

    publisher.notify_all("📢 Update: Observer Pattern Explained in Depth!")