"""Configuration sources that resolve dotted keys to raw string values.

Sources are consulted from the highest ordinal to the lowest and the first
non-empty value wins:

* process environment (300)
* ``.env`` file (295)
* mounted secrets directory (290), e.g. files rendered by a Vault agent
* ``application.properties`` (250)

Environment style sources try the key as written, then with every
non-alphanumeric character replaced by ``_`` and finally the uppercased form,
so ``greeting.handshake.privateKey`` is also found as
``GREETING_HANDSHAKE_PRIVATEKEY``.
"""

from __future__ import annotations

import logging
import os
import re
import string
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from dotenv import dotenv_values

from app.config import ENV_FILE, Settings
from app.domain.errors import MalformedConfigurationValue

logger = logging.getLogger(__name__)

ENVIRONMENT_ORDINAL = 300
DOTENV_ORDINAL = 295
SECRETS_DIRECTORY_ORDINAL = 290
PROPERTIES_FILE_ORDINAL = 250

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")
_PROPERTIES_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_PROPERTIES_WHITESPACE = " \t\f"
_PROPERTIES_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


class ConfigSource(Protocol):
    """A named, ordered provider of raw configuration values."""

    name: str
    ordinal: int

    def get_value(self, key: str) -> str | None:
        ...


@dataclass(frozen=True)
class ResolvedValue:
    """A configuration value together with the source that supplied it."""

    key: str
    value: str = field(repr=False)
    source: str


def environment_names(key: str) -> list[str]:
    """Return the variable names checked for ``key``, most specific first."""

    sanitized = _NON_ALPHANUMERIC.sub("_", key)
    return list(dict.fromkeys((key, sanitized, sanitized.upper())))


class EnvironmentConfigSource:
    """Read values from a mapping of environment variables."""

    def __init__(
        self,
        environ: Mapping[str, str | None] | None = None,
        *,
        name: str = "environment",
        ordinal: int = ENVIRONMENT_ORDINAL,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self.name = name
        self.ordinal = ordinal

    def get_value(self, key: str) -> str | None:
        for candidate in environment_names(key):
            value = self._environ.get(candidate)
            if value:
                return value
        return None


class DotenvConfigSource(EnvironmentConfigSource):
    """Read values from a ``.env`` file using the environment naming rules."""

    def __init__(self, path: Path, *, ordinal: int = DOTENV_ORDINAL) -> None:
        values: Mapping[str, str | None] = {}
        if path.is_file():
            values = dotenv_values(path, encoding="utf-8")
        else:
            logger.debug("No .env file found at %s", path)
        super().__init__(values, name=f"dotenv:{path}", ordinal=ordinal)


class SecretsDirectoryConfigSource:
    """Read values from files in a directory, one file per key.

    The file name is matched against the same candidates as environment
    variables. Trailing line breaks are removed from the content.
    """

    def __init__(
        self, directory: Path, *, ordinal: int = SECRETS_DIRECTORY_ORDINAL
    ) -> None:
        self.directory = directory
        self.name = f"secrets:{directory}"
        self.ordinal = ordinal
        if not directory.is_dir():
            logger.warning("Secrets directory %s does not exist; skipping it", directory)

    def get_value(self, key: str) -> str | None:
        if not self.directory.is_dir():
            return None

        for candidate in environment_names(key):
            if "/" in candidate or os.sep in candidate or candidate in {".", ".."}:
                continue
            path = self.directory / candidate
            if not path.is_file():
                continue
            try:
                content = path.read_bytes().decode("utf-8")
            except UnicodeDecodeError as exc:
                raise MalformedConfigurationValue(
                    key, self.name, "secret file is not valid UTF-8"
                ) from exc
            value = content.rstrip("\r\n")
            if value:
                return value
        return None


def _ends_with_continuation(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterable[str]:
    """Yield property entries with comments removed and continuations joined."""

    buffer: str | None = None
    for raw_line in _PROPERTIES_LINE_BREAK.split(text):
        line = raw_line.lstrip(_PROPERTIES_WHITESPACE)
        if buffer is None:
            if not line or line[0] in "#!":
                continue
            buffer = ""
        if _ends_with_continuation(line):
            buffer += line[:-1]
            continue
        yield buffer + line
        buffer = None
    if buffer:
        yield buffer


def _split_entry(line: str) -> tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in "=:" or char in _PROPERTIES_WHITESPACE:
            break
        index += 1

    key = line[:index]
    rest = line[index:].lstrip(_PROPERTIES_WHITESPACE)
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(_PROPERTIES_WHITESPACE)
    return key, rest


def _unescape(text: str) -> str:
    chars: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char != "\\":
            chars.append(char)
            index += 1
            continue

        index += 1
        if index >= len(text):
            break
        escaped = text[index]
        if escaped == "u":
            digits = text[index + 1 : index + 5]
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                raise ValueError("invalid \\uXXXX escape sequence")
            chars.append(chr(int(digits, 16)))
            index += 5
            continue
        chars.append(_PROPERTIES_ESCAPES.get(escaped, escaped))
        index += 1
    return "".join(chars)


def parse_properties(text: str, *, source: str = "properties") -> dict[str, str]:
    """Parse Java ``.properties`` content into a dictionary.

    Later entries override earlier ones with the same key.
    """

    properties: dict[str, str] = {}
    for line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        try:
            key = _unescape(raw_key)
        except ValueError as exc:
            raise MalformedConfigurationValue(raw_key, source, str(exc)) from exc
        try:
            properties[key] = _unescape(raw_value)
        except ValueError as exc:
            raise MalformedConfigurationValue(key, source, str(exc)) from exc
    return properties


class PropertiesFileConfigSource:
    """Read values from an ``application.properties`` file.

    With an active ``profile``, ``%<profile>.<key>`` entries take precedence
    over the plain ``<key>`` entry.
    """

    def __init__(
        self,
        path: Path,
        *,
        profile: str | None = None,
        ordinal: int = PROPERTIES_FILE_ORDINAL,
    ) -> None:
        self.path = path
        self.profile = profile
        self.name = f"properties:{path}"
        self.ordinal = ordinal
        if path.is_file():
            try:
                text = path.read_bytes().decode("utf-8")
            except UnicodeDecodeError as exc:
                raise MalformedConfigurationValue(
                    str(path), self.name, "properties file is not valid UTF-8"
                ) from exc
            self._properties = parse_properties(text, source=self.name)
        else:
            logger.debug("No properties file found at %s", path)
            self._properties = {}

    def get_value(self, key: str) -> str | None:
        if self.profile:
            value = self._properties.get(f"%{self.profile}.{key}")
            if value:
                return value
        return self._properties.get(key) or None


def resolve(sources: Sequence[ConfigSource], key: str) -> ResolvedValue | None:
    """Return the value of ``key`` from the highest ordinal source defining it."""

    for source in sorted(sources, key=lambda item: item.ordinal, reverse=True):
        value = source.get_value(key)
        if value:
            return ResolvedValue(key=key, value=value, source=source.name)
    return None


def build_config_sources(settings: Settings) -> list[ConfigSource]:
    """Create the default source chain for the provided settings."""

    sources: list[ConfigSource] = [
        EnvironmentConfigSource(),
        DotenvConfigSource(Path(ENV_FILE)),
    ]
    if settings.secrets_dir is not None:
        sources.append(SecretsDirectoryConfigSource(settings.secrets_dir))
    if settings.config_file is not None:
        sources.append(
            PropertiesFileConfigSource(settings.config_file, profile=settings.profile)
        )

    logger.debug(
        "Configuration sources: %s",
        ", ".join(f"{source.name} ({source.ordinal})" for source in sources),
    )
    return sources


__all__ = [
    "ConfigSource",
    "DotenvConfigSource",
    "EnvironmentConfigSource",
    "PropertiesFileConfigSource",
    "ResolvedValue",
    "SecretsDirectoryConfigSource",
    "build_config_sources",
    "environment_names",
    "parse_properties",
    "resolve",
]
