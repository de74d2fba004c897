"""Logging setup and masking of secret values in log output."""

from __future__ import annotations

import logging
from collections.abc import Iterable

REDACTED = "**********"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class SecretRedactionFilter(logging.Filter):
    """Replace registered secret values in every record with a mask.

    The record message is formatted once, redacted and stored back with
    empty ``args`` so later handlers see the masked text only.
    """

    def __init__(self, secrets: Iterable[str] = ()) -> None:
        super().__init__()
        self._secrets: set[str] = set()
        self.add_secrets(secrets)

    def add_secrets(self, secrets: Iterable[str]) -> None:
        self._secrets.update(secret for secret in secrets if secret)

    def redact(self, text: str) -> str:
        # Longest first so a secret containing another one is masked whole.
        for secret in sorted(self._secrets, key=len, reverse=True):
            text = text.replace(secret, REDACTED)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        if not self._secrets:
            return True

        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Left for the handler to report through handleError.
            return True
        redacted = self.redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        if record.exc_info and not record.exc_text:
            record.exc_text = logging.Formatter().formatException(record.exc_info)
        if record.exc_text:
            record.exc_text = self.redact(record.exc_text)
        return True


_redaction_filter = SecretRedactionFilter()


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger and attach the shared redaction filter."""

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)

    handlers = list(root.handlers)
    # Server loggers keep their own handlers and do not propagate to root.
    for name in SERVER_LOGGERS:
        handlers.extend(logging.getLogger(name).handlers)
    for handler in handlers:
        if _redaction_filter not in handler.filters:
            handler.addFilter(_redaction_filter)


def register_secrets(*secrets: str) -> None:
    """Mask the provided values in all log output from now on."""

    _redaction_filter.add_secrets(secrets)


def get_redaction_filter() -> SecretRedactionFilter:
    """Return the filter shared by the root and server handlers."""

    return _redaction_filter


__all__ = [
    "REDACTED",
    "SERVER_LOGGERS",
    "SecretRedactionFilter",
    "configure_logging",
    "get_redaction_filter",
    "register_secrets",
]
