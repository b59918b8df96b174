"""Data model for SNES bridge client configuration."""

from __future__ import annotations

from dataclasses import dataclass

from ..const import (
    DEFAULT_ADDRESS,
    DEFAULT_CLOSE_REASON,
    DEFAULT_DEBUG_LOGGING,
    DEFAULT_LOG_SYSLOG,
    DEFAULT_RECEIVE_BUFFER_SIZE,
    DEFAULT_TIMEOUT,
)


@dataclass(slots=True)
class ClientConfig:
    """Strongly typed configuration for the client."""

    address: str = DEFAULT_ADDRESS
    timeout: float = DEFAULT_TIMEOUT
    receive_buffer_size: int = DEFAULT_RECEIVE_BUFFER_SIZE
    origin: str | None = None
    close_reason: str = DEFAULT_CLOSE_REASON
    debug_logging: bool = DEFAULT_DEBUG_LOGGING
    log_syslog: bool = DEFAULT_LOG_SYSLOG
