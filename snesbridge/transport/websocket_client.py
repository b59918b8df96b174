"""Websocket transport built on ``websocket-client``.

The library is blocking, so every call is pushed to a worker thread with
``asyncio.to_thread``. The socket carries its own timeout so a worker left
behind by a cancelled await still unblocks on its own.
"""

from __future__ import annotations

import asyncio
import logging

import websocket

from ..protocol.structures import FrameKind
from .base import TransportState

logger = logging.getLogger("snesbridge.transport")


class WebSocketTransport:
    """Single websocket connection to a usb2snes-compatible server."""

    def __init__(self, *, timeout: float, origin: str | None = None) -> None:
        self._timeout = timeout
        self._origin = origin
        self._socket = websocket.WebSocket(enable_multithread=True)
        self._state = TransportState.NEW

    @property
    def state(self) -> TransportState:
        if self._state is TransportState.OPEN and not self._socket.connected:
            return TransportState.CLOSED
        return self._state

    def set_timeout(self, timeout: float) -> None:
        self._timeout = timeout
        self._socket.settimeout(timeout)

    async def connect(self, address: str) -> None:
        options: dict[str, object] = {"timeout": self._timeout}
        if self._origin:
            options["origin"] = self._origin
        self._state = TransportState.CONNECTING
        try:
            await asyncio.to_thread(self._socket.connect, address, **options)
        except (OSError, websocket.WebSocketException, asyncio.CancelledError):
            self._state = TransportState.CLOSED
            self._socket.shutdown()
            raise
        self._state = TransportState.OPEN
        logger.debug("Websocket connected to %s", address)

    async def send_text(self, text: str) -> None:
        await asyncio.to_thread(self._socket.send, text)

    async def send_binary(self, data: bytes) -> None:
        await asyncio.to_thread(self._socket.send_binary, data)

    async def receive(self) -> tuple[FrameKind, bytes]:
        opcode, data = await asyncio.to_thread(self._socket.recv_data)
        if isinstance(data, str):
            data = data.encode("utf-8")
        if opcode == websocket.ABNF.OPCODE_TEXT:
            return FrameKind.TEXT, bytes(data)
        if opcode == websocket.ABNF.OPCODE_BINARY:
            return FrameKind.BINARY, bytes(data)
        if opcode == websocket.ABNF.OPCODE_CLOSE:
            self._state = TransportState.CLOSED
            raise websocket.WebSocketConnectionClosedException("Connection closed by server")
        raise websocket.WebSocketProtocolException(f"Unexpected frame opcode 0x{opcode:X}")

    async def close(self, reason: str) -> None:
        if self._state is not TransportState.OPEN:
            self._state = TransportState.CLOSED
            return
        try:
            await asyncio.to_thread(
                self._socket.close,
                status=websocket.STATUS_NORMAL,
                reason=reason.encode("utf-8"),
                timeout=self._timeout,
            )
        finally:
            self._state = TransportState.CLOSED
