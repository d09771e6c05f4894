"""Documents created from scratch each time, and documents cloned from a prototype."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class BadDocument:
    """A document that is always built anew."""

    title: str
    content: str


def bad_prototype() -> None:
    """Show two documents built by repeating the same content by hand."""
    doc1 = BadDocument(title="Doc 1", content="This is the same content")
    doc2 = BadDocument(title="Doc 2", content="This is the same content")

    print("Doc1:", doc1.title, "-", doc1.content)
    print("Doc2:", doc2.title, "-", doc2.content)


@dataclass
class Document:
    """A document that can serve as a prototype for copies."""

    title: str
    content: str

    def clone(self) -> Document:
        """Return a shallow copy of the document."""
        return copy.copy(self)


def good_prototype() -> None:
    """Show two documents cloned from one original and then retitled."""
    original = Document(
        title="Prototype Design Pattern",
        content="This is a reusable template.",
    )

    clone1 = original.clone()
    clone1.title = "Clone 1"

    clone2 = original.clone()
    clone2.title = "Clone 2"

    print("Original:", original.title, "-", original.content)
    print("Clone 1:", clone1.title, "-", clone1.content)
    print("Clone 2:", clone2.title, "-", clone2.content)