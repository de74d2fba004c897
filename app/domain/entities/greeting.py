from dataclasses import dataclass

from pydantic import SecretStr


@dataclass(frozen=True)
class Greeting:
    """Represents the message returned by greeting endpoints."""

    message: str


@dataclass(frozen=True)
class GreetingConfiguration:
    """Values bound from the ``greeting`` configuration namespace.

    ``handshake_private_key`` is wrapped in :class:`SecretStr` so that the
    dataclass ``repr`` and any accidental formatting show a mask instead of
    the key material.
    """

    message: str
    handshake_type: str
    handshake_private_key: SecretStr
