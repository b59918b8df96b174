"""Memory access planning for the SNES bridge client.

Reads and generic writes use the caller's absolute addresses unchanged.
Devices that execute injected code get a single synthesized payload
instead of one ``PutAddress`` per write.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..errors import OutOfRangeError
from ..protocol import protocol
from ..protocol.encoding import format_address, format_hex
from ..protocol.protocol import Opcode, Space
from ..protocol.structures import DeviceKind, MemoryWrite, Request
from .injection import build_injection_payload

logger = logging.getLogger("snesbridge.service.memory")

# Each planned frame is a command followed by its binary payload.
PlannedFrame = tuple[Request, bytes]


def classify_device(device: str) -> DeviceKind:
    """Decide the write strategy from the device name reported by the server."""
    lowered = device.lower()
    if any(token in lowered for token in protocol.DIRECT_MEMORY_NAME_TOKENS):
        return DeviceKind.DIRECT_MEMORY
    if (
        len(device) == protocol.SERIAL_PORT_NAME_LENGTH
        and device.startswith(protocol.SERIAL_PORT_NAME_PREFIX)
    ):
        return DeviceKind.DIRECT_MEMORY
    return DeviceKind.GENERIC


def check_wram_range(write: MemoryWrite) -> None:
    if write.address < protocol.WRAM_START or write.end > protocol.WRAM_END:
        raise OutOfRangeError(write.address, len(write.data))


def build_read_request(address: int, size: int) -> Request:
    return Request(
        opcode=Opcode.GET_ADDRESS,
        space=Space.SNES,
        operands=(format_address(address), format_hex(size)),
    )


def build_put_request(write: MemoryWrite) -> Request:
    return Request(
        opcode=Opcode.PUT_ADDRESS,
        space=Space.SNES,
        operands=(format_address(write.address), format_hex(len(write.data))),
    )


def build_injection_request(payload: bytes) -> Request:
    return Request(
        opcode=Opcode.PUT_ADDRESS,
        space=Space.CMD,
        operands=(
            protocol.INJECTION_TRIGGER_ADDRESS,
            format_hex(len(payload) - 1),
            protocol.INJECTION_TRIGGER_ADDRESS,
            protocol.INJECTION_EXECUTE_FLAG,
        ),
    )


def plan_writes(kind: DeviceKind, writes: Sequence[MemoryWrite]) -> list[PlannedFrame]:
    """Return the command/payload pairs that carry out ``writes`` in order.

    Raises ``OutOfRangeError`` before anything is planned when a direct
    memory device is asked to write outside WRAM.
    """
    if kind is DeviceKind.GENERIC:
        return [(build_put_request(write), bytes(write.data)) for write in writes]

    for write in writes:
        check_wram_range(write)
    payload = build_injection_payload(writes)
    logger.debug(
        "Synthesized %d-byte payload for %d write(s)",
        len(payload),
        len(writes),
    )
    return [(build_injection_request(payload), payload)]
