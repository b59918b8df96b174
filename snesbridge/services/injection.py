"""65816 payload synthesis for direct WRAM writes on SD2SNES-class devices.

The firmware executes a payload uploaded to its command area. The payload
built here disables interrupts, switches to an 8-bit accumulator, saves
registers, then performs one ``LDA #imm`` / ``STA long`` pair per byte
before clearing the trigger flag and returning to the game.

Work RAM is only reachable from the console through its native banks
(0x7E/0x7F), so caller addresses in the external WRAM window are rebased
onto 0x7E0000.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..protocol import protocol
from ..protocol.structures import STORE_BYTE_STRUCT, MemoryWrite


def translate_wram_address(address: int) -> int:
    """Map an address in the external WRAM window to the console's native bank."""
    return address - protocol.WRAM_START + protocol.NATIVE_WRAM_BANK_START


def build_store_byte(value: int, device_address: int) -> bytes:
    return STORE_BYTE_STRUCT.build(
        {"load": {"value": value}, "store": {"address": device_address}}
    )


def build_injection_payload(writes: Iterable[MemoryWrite]) -> bytes:
    """Return prologue + one 6-byte store per byte + epilogue.

    Bytes are emitted in ascending offset within each write and in caller
    order across writes. Range checks are the caller's job.
    """
    payload = bytearray(protocol.INJECTION_PROLOGUE)
    for write in writes:
        device_address = translate_wram_address(write.address)
        for offset, value in enumerate(write.data):
            payload += build_store_byte(value, device_address + offset)
    payload += protocol.INJECTION_EPILOGUE
    return bytes(payload)
