"""Logging helpers for pgtemporal.

Codec diagnostics are attached to log records as a typed ``DecodeEvent`` so
handlers can render the offending value, zone mode and detected shape
without parsing the message text.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import msgspec

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = ("DecodeEvent", "DecodeEventFormatter", "configure_logging", "get_logger", "log_decode_event")

ROOT_LOGGER_NAME = "pgtemporal"
EVENT_ATTRIBUTE = "decode_event"


class DecodeEvent(msgspec.Struct, frozen=True):
    """A string the codec could not turn into a valid instant."""

    value: str
    mode: str | None = None
    shape: str | None = None


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the ``pgtemporal`` namespace.

    Args:
        name: Dotted suffix such as ``"core.codec"``. Omit for the root logger.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def log_decode_event(logger: logging.Logger, message: str, event: DecodeEvent, level: int = logging.DEBUG) -> None:
    """Log ``message`` with ``event`` attached as ``record.decode_event``."""
    if logger.isEnabledFor(level):
        logger.log(level, message, extra={EVENT_ATTRIBUTE: event}, stacklevel=2)


class DecodeEventFormatter(logging.Formatter):
    """Render records as one JSON object, inlining any attached ``DecodeEvent``."""

    def format(self, record: LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        event = getattr(record, EVENT_ATTRIBUTE, None)
        if isinstance(event, DecodeEvent):
            entry.update(msgspec.structs.asdict(event))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return msgspec.json.encode(entry).decode("utf-8")


def configure_logging(level: str = "INFO", structured: bool = True, stream: Any = None) -> logging.Handler:
    """Send pgtemporal records to a stream, replacing earlier handlers.

    Args:
        level: Logging level name for the ``pgtemporal`` logger.
        structured: Use ``DecodeEventFormatter`` (JSON) rather than plain text.
        stream: Target stream. Defaults to ``sys.stderr``.

    Returns:
        The installed handler.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    if structured:
        handler.setFormatter(DecodeEventFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root_logger.addHandler(handler)
    root_logger.propagate = False
    return handler
