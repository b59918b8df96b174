"""Shared constants for the SNES bridge client."""

from __future__ import annotations

from typing import Final

DEFAULT_ADDRESS: Final[str] = "ws://localhost:8080"
DEFAULT_TIMEOUT: Final[float] = 1.0
DEFAULT_RECEIVE_BUFFER_SIZE: Final[int] = 0x1000
DEFAULT_CLOSE_REASON: Final[str] = "Gwaa"
DEFAULT_DEBUG_LOGGING: Final[bool] = False
DEFAULT_LOG_SYSLOG: Final[bool] = False

ALLOWED_URL_SCHEMES: Final[frozenset[str]] = frozenset({"ws", "wss"})
CONFIG_TABLE: Final[str] = "snesbridge"

__all__ = [
    "ALLOWED_URL_SCHEMES",
    "CONFIG_TABLE",
    "DEFAULT_ADDRESS",
    "DEFAULT_CLOSE_REASON",
    "DEFAULT_DEBUG_LOGGING",
    "DEFAULT_LOG_SYSLOG",
    "DEFAULT_RECEIVE_BUFFER_SIZE",
    "DEFAULT_TIMEOUT",
]
