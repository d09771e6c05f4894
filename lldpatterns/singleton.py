"""Loggers created once: without a guard, and behind a lock."""

from __future__ import annotations

import threading


class BadLogger:
    """A logger whose single instance is created without any guard."""

    _instance: BadLogger | None = None

    def log(self, message: str) -> None:
        print("Log:", message)


def bad_get_logger() -> BadLogger:
    """Return the shared BadLogger, creating it on first use.

    Not safe when several threads ask for it at once.
    """
    if BadLogger._instance is None:
        print("Creating a new instance of Logger")
        BadLogger._instance = BadLogger()
    return BadLogger._instance


class Logger:
    """A logger of which exactly one instance is ever created."""

    def log(self, message: str) -> None:
        print("Log:", message)


_instance: Logger | None = None
_lock = threading.Lock()


def get_logger() -> Logger:
    """Return the shared Logger, creating it exactly once even under threads."""
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                print("Creating a new instance of Logger")
                _instance = Logger()
    return _instance


def bad_singleton() -> None:
    """Show two lookups of the unguarded logger giving one instance."""
    logger1 = bad_get_logger()
    logger2 = bad_get_logger()

    logger1.log("Hello from logger1")
    logger2.log("Hello from logger2")

    print("Same instance?", str(logger1 is logger2).lower())


def good_singleton() -> None:
    """Show two lookups of the guarded logger giving one instance."""
    logger1 = get_logger()
    logger2 = get_logger()

    logger1.log("This is the first log.")
    logger2.log("This is the second log.")

    print("Same instance?", str(logger1 is logger2).lower())