"""Connection lifecycle for the SNES bridge client.

``Link`` exclusively owns the transport handle and the shared receive
buffer. Every network operation is bounded by the configured timeout and
any transport failure latches the link into ABORTED.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import msgspec

from ..const import DEFAULT_ADDRESS, DEFAULT_CLOSE_REASON
from ..errors import NotConnectedError, SnesConnectionError, TransportError
from ..protocol.encoding import decode_response, encode_request
from ..protocol.structures import FrameKind, Request, Response
from ..state.connection import ConnectionState, ConnectionStatus
from ..transport.base import Transport, TransportFactory, TransportState
from ..transport.buffer import ReceiveBuffer
from ..util import log_hexdump

logger = logging.getLogger("snesbridge.link")

T = TypeVar("T")


class Link:
    """One logical websocket connection to a usb2snes server."""

    def __init__(
        self,
        *,
        transport_factory: TransportFactory,
        timeout: float,
        receive_buffer_size: int,
        default_address: str = DEFAULT_ADDRESS,
        close_reason: str = DEFAULT_CLOSE_REASON,
    ) -> None:
        self._transport_factory = transport_factory
        self._timeout = self._require_positive_timeout(timeout)
        self._default_address = default_address
        self._close_reason = close_reason
        self._transport: Transport | None = None
        self._status = ConnectionStatus()
        self._buffer = ReceiveBuffer(receive_buffer_size)

    @property
    def timeout(self) -> float:
        return self._timeout

    def set_timeout(self, timeout: float) -> None:
        self._timeout = self._require_positive_timeout(timeout)
        if self._transport is not None:
            self._transport.set_timeout(self._timeout)

    @property
    def state(self) -> ConnectionState:
        transport = self._transport
        if transport is not None:
            self._status.transport_state = transport.state
        return self._status.resolve()

    def check_open(self) -> None:
        state = self.state
        if state is not ConnectionState.OPEN:
            raise NotConnectedError(f"Websocket is not open (state={state.value}).")

    async def connect(self, address: str | None = None) -> None:
        if self.state is ConnectionState.OPEN:
            return

        target = address or self._default_address
        previous = self._transport
        if previous is not None and previous.state is not TransportState.CLOSED:
            await self._discard_transport(previous)

        transport = self._transport_factory(self._timeout)
        self._transport = transport
        self._status.reset()
        self._buffer.clear()

        logger.info("Connecting to %s", target)
        try:
            async with asyncio.timeout(self._timeout):
                await transport.connect(target)
        except TimeoutError as exc:
            self._status.mark_aborted()
            logger.warning("Connection to %s timed out after %.2fs", target, self._timeout)
            raise SnesConnectionError(f"Unable to connect to {target}: timed out.") from exc
        except Exception as exc:
            self._status.mark_aborted()
            logger.warning("Connection to %s failed: %s", target, exc)
            raise SnesConnectionError(f"Unable to connect to {target}.") from exc

        logger.info("Connected to %s", target)

    async def close(self) -> None:
        transport = self._transport
        if transport is None:
            return
        if self._status.aborted:
            await self._discard_transport(transport)
            return
        await self._run_io("Closing connection", lambda: transport.close(self._close_reason))
        logger.info("Connection closed")

    async def _discard_transport(self, transport: Transport) -> None:
        """Best-effort close of a failed transport; never raises and leaves the latch alone."""
        try:
            async with asyncio.timeout(self._timeout):
                await transport.close(self._close_reason)
        except TimeoutError:
            logger.warning("Closing stale connection timed out after %.2fs", self._timeout)
        except Exception as exc:
            logger.warning("Closing stale connection failed: %s", exc)
        else:
            logger.debug("Stale connection closed")

    async def send_request(self, request: Request) -> None:
        transport = self._require_transport()
        text = encode_request(request)
        logger.debug("Sending request %s", text)
        await self._run_io("Sending data", lambda: transport.send_text(text))

    async def send_bytes(self, data: bytes) -> None:
        transport = self._require_transport()
        log_hexdump(logger, logging.DEBUG, "Sending payload", data)
        await self._run_io("Sending data", lambda: transport.send_binary(data))

    async def receive_response(self) -> Response:
        self._receive_into_buffer(FrameKind.TEXT, await self._receive())
        try:
            return decode_response(self._buffer.view())
        except msgspec.DecodeError as exc:
            self._status.mark_aborted()
            logger.warning("Discarding undecodable reply (%d bytes): %s", self._buffer.length, exc)
            raise TransportError("Receiving data failed: malformed reply.") from exc

    async def receive_bytes(self) -> bytes:
        self._receive_into_buffer(FrameKind.BINARY, await self._receive())
        return self._buffer.to_bytes()

    async def _receive(self) -> tuple[FrameKind, bytes]:
        transport = self._require_transport()
        return await self._run_io("Receiving data", transport.receive)

    def _receive_into_buffer(self, expected: FrameKind, frame: tuple[FrameKind, bytes]) -> None:
        kind, data = frame
        if kind is not expected:
            self._status.mark_aborted()
            logger.warning("Expected %s frame, received %s frame", expected.value, kind.value)
            raise TransportError(
                f"Receiving data failed: expected {expected.value} frame, got {kind.value}."
            )
        self._buffer.fill(data)

    async def _run_io(self, operation: str, call: Callable[[], Awaitable[T]]) -> T:
        try:
            async with asyncio.timeout(self._timeout):
                return await call()
        except TimeoutError as exc:
            self._status.mark_aborted()
            logger.warning("%s timed out after %.2fs", operation, self._timeout)
            raise TransportError(f"{operation} failed: timed out.") from exc
        except Exception as exc:
            self._status.mark_aborted()
            logger.warning("%s failed: %s", operation, exc)
            raise TransportError(f"{operation} failed.") from exc

    def _require_transport(self) -> Transport:
        transport = self._transport
        if transport is None:
            raise NotConnectedError("Websocket is not open (state=disconnected).")
        return transport

    @staticmethod
    def _require_positive_timeout(timeout: float) -> float:
        if timeout <= 0:
            raise ValueError("timeout must be a positive number of seconds")
        return float(timeout)
