"""SNES bridge: async client for the usb2snes websocket protocol."""

__version__ = "1.0.0"

from .client import Snes
from .config import ClientConfig, load_client_config
from .config.logging import configure_logging
from .errors import (
    InvalidReplyError,
    NotConnectedError,
    OutOfRangeError,
    SizeMismatchError,
    SnesConnectionError,
    SnesError,
    TransportError,
)
from .protocol.protocol import ROM_START, SRAM_START, WRAM_SIZE, WRAM_START
from .protocol.structures import DeviceInfo, DeviceKind, MemoryWrite
from .state.connection import ConnectionState

__all__ = [
    "ClientConfig",
    "ConnectionState",
    "DeviceInfo",
    "DeviceKind",
    "InvalidReplyError",
    "MemoryWrite",
    "NotConnectedError",
    "OutOfRangeError",
    "ROM_START",
    "SRAM_START",
    "SizeMismatchError",
    "Snes",
    "SnesConnectionError",
    "SnesError",
    "TransportError",
    "WRAM_SIZE",
    "WRAM_START",
    "configure_logging",
    "load_client_config",
]
