"""General-purpose utilities for the SNES bridge client."""

from __future__ import annotations

import logging

__all__ = [
    "log_hexdump",
]


def log_hexdump(logger_instance: logging.Logger, level: int, label: str, data: bytes) -> None:
    """Log binary data as uppercase hex pairs.

    Format: [HEXDUMP] %s (%d bytes): %s
    """
    if not logger_instance.isEnabledFor(level):
        return

    hex_str = data.hex(" ").upper()
    logger_instance.log(level, "[HEXDUMP] %s (%d bytes): %s", label, len(data), hex_str)
