"""Aggregate application use cases."""

from .create_greeting import create_greeting
from .load_greeting_configuration import (
    describe_greeting_configuration,
    load_greeting_configuration,
)

__all__ = [
    "create_greeting",
    "describe_greeting_configuration",
    "load_greeting_configuration",
]
