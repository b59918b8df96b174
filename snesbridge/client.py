"""Async client for usb2snes-compatible websocket servers.

Round trips that expect a reply (device list, info, memory read/write) go
through a single-flight gate so replies can never be matched to the wrong
request. Attach, Name, Boot, Menu and Reset are single sends that skip the
gate; issuing them while a gated exchange is in flight gives no ordering
guarantee between the two.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import TracebackType
from typing import Self

from .config.model import ClientConfig
from .errors import SizeMismatchError
from .protocol.protocol import Opcode
from .protocol.structures import DeviceInfo, DeviceKind, MemoryWrite, Request
from .services.link import Link
from .services.memory import build_read_request, classify_device, plan_writes
from .services.single_flight import SingleFlightGuard
from .state.connection import ConnectionState
from .transport.base import Transport, TransportFactory
from .transport.websocket_client import WebSocketTransport

logger = logging.getLogger("snesbridge.client")


class Snes:
    """Controller-side handle on one usb2snes connection."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport_factory: TransportFactory | None = None,
    ) -> None:
        self.config = config if config is not None else ClientConfig()
        self._link = Link(
            transport_factory=transport_factory or self._default_transport_factory,
            timeout=self.config.timeout,
            receive_buffer_size=self.config.receive_buffer_size,
            default_address=self.config.address,
            close_reason=self.config.close_reason,
        )
        self._guard = SingleFlightGuard()
        self._device: str | None = None
        self._device_kind = DeviceKind.GENERIC

    def _default_transport_factory(self, timeout: float) -> Transport:
        return WebSocketTransport(timeout=timeout, origin=self.config.origin)

    async def __aenter__(self) -> Self:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        # An aborted link still holds a socket; close() releases it without raising.
        if self.state is not ConnectionState.CLOSED:
            await self.close()

    # --- Connection ---

    @property
    def state(self) -> ConnectionState:
        return self._link.state

    @property
    def timeout(self) -> float:
        return self._link.timeout

    def set_timeout(self, timeout: float) -> None:
        self._link.set_timeout(timeout)

    async def connect(self, address: str | None = None) -> None:
        await self._link.connect(address)

    async def close(self) -> None:
        await self._link.close()

    # --- Device ---

    @property
    def device(self) -> str | None:
        return self._device

    @property
    def device_kind(self) -> DeviceKind:
        return self._device_kind

    async def list_devices(self) -> list[str]:
        self._link.check_open()
        async with self._guard.hold(Opcode.DEVICE_LIST):
            self._link.check_open()
            await self._link.send_request(Request(opcode=Opcode.DEVICE_LIST))
            response = await self._link.receive_response()
        return list(response.results)

    async def attach(self, device: str) -> None:
        self._link.check_open()
        await self._link.send_request(Request(opcode=Opcode.ATTACH, operands=(device,)))
        self._device = device
        self._device_kind = classify_device(device)
        logger.info("Attached to %s (%s)", device, self._device_kind.value)

    async def info(self) -> DeviceInfo:
        """Query firmware, version and running ROM of the attached device."""
        self._link.check_open()
        operands = (self._device,) if self._device is not None else ()
        async with self._guard.hold(Opcode.INFO):
            self._link.check_open()
            await self._link.send_request(Request(opcode=Opcode.INFO, operands=operands))
            response = await self._link.receive_response()
        return DeviceInfo.from_response(response)

    async def name(self, name: str) -> None:
        await self._send_only(Request(opcode=Opcode.NAME, operands=(name,)))

    async def boot(self, rom: str) -> None:
        await self._send_only(Request(opcode=Opcode.BOOT, operands=(rom,)))

    async def menu(self) -> None:
        await self._send_only(Request(opcode=Opcode.MENU))

    async def reset(self) -> None:
        await self._send_only(Request(opcode=Opcode.RESET))

    async def _send_only(self, request: Request) -> None:
        self._link.check_open()
        await self._link.send_request(request)

    # --- Memory ---

    async def read_memory(self, address: int, size: int) -> bytes:
        """Read ``size`` bytes at an absolute address.

        Raises ``SizeMismatchError`` when the device returns a different
        number of bytes.
        """
        request = build_read_request(address, size)
        self._link.check_open()
        async with self._guard.hold(Opcode.GET_ADDRESS):
            self._link.check_open()
            await self._link.send_request(request)
            data = await self._link.receive_bytes()

        if len(data) != size:
            logger.warning(
                "Read of 0x%06X returned 0x%X bytes, expected 0x%X",
                address,
                len(data),
                size,
            )
            raise SizeMismatchError(address, size, len(data))
        return data

    async def write_memory(self, writes: Sequence[MemoryWrite]) -> None:
        """Write a batch in caller order.

        Devices that run injected code get one synthesized payload; any write
        outside WRAM fails the whole batch with ``OutOfRangeError`` before
        anything is sent.
        """
        self._link.check_open()
        async with self._guard.hold(Opcode.PUT_ADDRESS):
            self._link.check_open()
            frames = plan_writes(self._device_kind, writes)
            for request, payload in frames:
                await self._link.send_request(request)
                await self._link.send_bytes(payload)
        logger.debug("Wrote %d region(s) with %d command(s)", len(writes), len(frames))
