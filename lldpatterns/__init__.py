"""Examples of OOP principles, SOLID and design patterns in poor and better forms."""

__version__ = "0.1.0"