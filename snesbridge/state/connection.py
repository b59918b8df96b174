"""Connection state tracking for the SNES bridge client."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..transport.base import TransportState


class ConnectionState(Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    OPEN = "open"
    ABORTED = "aborted"
    CLOSED = "closed"


_TRANSPORT_TO_CONNECTION: dict[TransportState, ConnectionState] = {
    TransportState.NEW: ConnectionState.DISCONNECTED,
    TransportState.CONNECTING: ConnectionState.CONNECTING,
    TransportState.OPEN: ConnectionState.OPEN,
    TransportState.CLOSED: ConnectionState.CLOSED,
}


@dataclass(slots=True)
class ConnectionStatus:
    """Last observed transport state plus the sticky failure latch.

    The latch wins over whatever the transport reports: once a transport
    failure has been observed the link stays ABORTED until the next
    connect attempt resets it.
    """

    transport_state: TransportState = TransportState.NEW
    aborted: bool = False

    def resolve(self) -> ConnectionState:
        if self.aborted:
            return ConnectionState.ABORTED
        return _TRANSPORT_TO_CONNECTION[self.transport_state]

    def mark_aborted(self) -> None:
        self.aborted = True

    def reset(self) -> None:
        self.transport_state = TransportState.NEW
        self.aborted = False
