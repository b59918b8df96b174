"""Transport abstractions (websocket) for the SNES bridge client."""

from .base import Transport, TransportFactory, TransportState
from .buffer import ReceiveBuffer
from .websocket_client import WebSocketTransport

__all__ = [
    "ReceiveBuffer",
    "Transport",
    "TransportFactory",
    "TransportState",
    "WebSocketTransport",
]
