"""Transport contract consumed by the connection lifecycle."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Protocol

from ..protocol.structures import FrameKind


class TransportState(Enum):
    NEW = "new"
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSED = "closed"


class Transport(Protocol):
    """Bidirectional message channel carrying text and binary frames.

    Every coroutine may block until its peer responds; callers bound them
    with a timeout and treat any raised exception as a transport failure.
    """

    @property
    def state(self) -> TransportState: ...

    def set_timeout(self, timeout: float) -> None: ...

    async def connect(self, address: str) -> None: ...

    async def send_text(self, text: str) -> None: ...

    async def send_binary(self, data: bytes) -> None: ...

    async def receive(self) -> tuple[FrameKind, bytes]: ...

    async def close(self, reason: str) -> None: ...


# Called with the current timeout in seconds.
TransportFactory = Callable[[float], Transport]
