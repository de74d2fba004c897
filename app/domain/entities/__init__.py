"""Domain entities exposed by the application."""

from .greeting import Greeting, GreetingConfiguration

__all__ = [
    "Greeting",
    "GreetingConfiguration",
]
