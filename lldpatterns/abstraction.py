"""Sending mail with the steps exposed, and with the steps hidden."""

from __future__ import annotations


def _announce(line: str) -> str:
    """Print a progress line and hand it back to the caller."""
    print(line)
    return line


class SendEmail:
    """A mail client whose every step the caller must run in the right order."""

    def connect(self) -> str:
        return _announce("connecting to gmail server")

    def authenticate(self) -> str:
        return _announce("Authenticating...")

    def send_gmail(self) -> str:
        return _announce("Email has been sent")

    def disconnect(self) -> str:
        return _announce("disconnecting from the gmail server")


class MailSender:
    """A mail client that runs the connection steps itself."""

    def _connect(self) -> str:
        return _announce("connecting to the gmail server")

    def _authenticate(self) -> str:
        return _announce("authenticating...")

    def _disconnect(self) -> str:
        return _announce("disconnected from the gmail server")

    def send_gmail(self) -> None:
        """Connect, authenticate, send and disconnect in one call."""
        self._connect()
        self._authenticate()
        _announce("sending the gmail")
        self._disconnect()


def bad_send_gmail() -> None:
    """Send a mail by driving each step by hand."""
    sender = SendEmail()
    sender.connect()
    sender.authenticate()
    sender.send_gmail()
    sender.disconnect()


def good_send_gmail() -> None:
    """Send a mail through the single public operation."""
    MailSender().send_gmail()