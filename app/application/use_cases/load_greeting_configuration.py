"""Bind the ``greeting`` configuration namespace into a typed record."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import SecretStr

from app.domain.entities.greeting import GreetingConfiguration
from app.domain.errors import MissingConfigurationKey
from app.infrastructure.config_sources import ConfigSource, ResolvedValue, resolve

logger = logging.getLogger(__name__)

CONFIG_PREFIX = "greeting"
MESSAGE_KEY = f"{CONFIG_PREFIX}.message"
HANDSHAKE_TYPE_KEY = f"{CONFIG_PREFIX}.handshake"
HANDSHAKE_PRIVATE_KEY_KEY = f"{CONFIG_PREFIX}.handshake.privateKey"

REQUIRED_KEYS: tuple[str, ...] = (
    MESSAGE_KEY,
    HANDSHAKE_TYPE_KEY,
    HANDSHAKE_PRIVATE_KEY_KEY,
)
SECRET_KEYS: frozenset[str] = frozenset({HANDSHAKE_PRIVATE_KEY_KEY})


def load_greeting_configuration(
    sources: Sequence[ConfigSource],
) -> GreetingConfiguration:
    """Resolve every greeting key and return the bound configuration.

    All keys are looked up before failing so that a single
    :class:`MissingConfigurationKey` reports every absent key at once.
    """

    message = resolve(sources, MESSAGE_KEY)
    handshake_type = resolve(sources, HANDSHAKE_TYPE_KEY)
    handshake_private_key = resolve(sources, HANDSHAKE_PRIVATE_KEY_KEY)

    missing = [
        key
        for key, resolved in (
            (MESSAGE_KEY, message),
            (HANDSHAKE_TYPE_KEY, handshake_type),
            (HANDSHAKE_PRIVATE_KEY_KEY, handshake_private_key),
        )
        if resolved is None
    ]
    if missing:
        raise MissingConfigurationKey(missing)

    for resolved in (message, handshake_type, handshake_private_key):
        logger.debug("Resolved %s from %s", resolved.key, resolved.source)
    logger.info(
        "Greeting configuration loaded (handshake type: %s)", handshake_type.value
    )

    return GreetingConfiguration(
        message=message.value,
        handshake_type=handshake_type.value,
        handshake_private_key=SecretStr(handshake_private_key.value),
    )


def describe_greeting_configuration(
    sources: Sequence[ConfigSource],
) -> dict[str, str | None]:
    """Return the name of the source resolving each key, or ``None``.

    Values are never included in the result.
    """

    origins: dict[str, str | None] = {}
    for key in REQUIRED_KEYS:
        resolved: ResolvedValue | None = resolve(sources, key)
        origins[key] = resolved.source if resolved is not None else None
    return origins


__all__ = [
    "HANDSHAKE_PRIVATE_KEY_KEY",
    "HANDSHAKE_TYPE_KEY",
    "MESSAGE_KEY",
    "REQUIRED_KEYS",
    "SECRET_KEYS",
    "describe_greeting_configuration",
    "load_greeting_configuration",
]
