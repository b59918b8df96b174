"""Logging helpers for the SNES bridge client."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from logging import Handler
from logging.config import dictConfig
from logging.handlers import SysLogHandler
from pathlib import Path
from typing import Any

import msgspec

from .model import ClientConfig

SYSLOG_SOCKET = Path("/dev/log")
SYSLOG_SOCKET_FALLBACK = Path("/var/run/log")

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RECORD_ATTRIBUTES = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def _extra_value(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        # Payloads are machine code and memory dumps, rendered like log_hexdump.
        return f"[{bytes(value).hex(' ').upper()}]"
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


class StructuredLogFormatter(logging.Formatter):
    """One JSON object per line; ``snesbridge.`` is dropped from logger names."""

    PREFIX = "snesbridge."

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, Any] = {
            "ts": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name.removeprefix(self.PREFIX),
            "message": record.getMessage(),
        }

        extra = {
            key: _extra_value(value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
        }
        if extra:
            payload["extra"] = extra
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)

        return msgspec.json.encode(payload).decode("utf-8")


def _find_syslog_socket() -> Path | None:
    for candidate in (SYSLOG_SOCKET, SYSLOG_SOCKET_FALLBACK):
        if candidate.exists():
            return candidate
    return None


def _build_handler(use_syslog: bool = False) -> Handler:
    if not use_syslog:
        return logging.StreamHandler()

    socket_path = _find_syslog_socket()
    if socket_path is None:
        return logging.StreamHandler()

    syslog_handler = SysLogHandler(
        address=str(socket_path),
        facility=SysLogHandler.LOG_USER,
    )
    syslog_handler.ident = "snesbridge "
    return syslog_handler


def configure_logging(config: ClientConfig) -> None:
    """Configure root logging based on client settings."""

    level_name = "DEBUG" if config.debug_logging else "INFO"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {
                    "()": "snesbridge.config.logging.StructuredLogFormatter",
                }
            },
            "handlers": {
                "snesbridge": {
                    "()": _build_handler,
                    "use_syslog": config.log_syslog,
                    "level": level_name,
                    "formatter": "structured",
                }
            },
            "root": {
                "level": level_name,
                "handlers": ["snesbridge"],
            },
        }
    )

    logging.getLogger("snesbridge").info("Logging configured at level %s", level_name)
