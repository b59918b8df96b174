"""SNES bridge data structures.

Wire messages are msgspec structs; machine-code layouts for payload
injection are declared with Construct.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Self

import msgspec
from construct import (  # type: ignore
    Const,
    Int8ul,
    Int24ul,
    Struct as BinStruct,
)

from ..errors import InvalidReplyError
from . import protocol
from .protocol import Opcode, Space

# --- Wire Messages ---


class Request(msgspec.Struct, frozen=True, rename="pascal"):
    """A single command frame sent to the server."""

    opcode: Opcode
    space: Space = Space.SNES
    operands: tuple[str, ...] = ()


class Response(msgspec.Struct, frozen=True, rename="pascal"):
    """A text reply from the server; results are positional per opcode."""

    results: list[str] = []


class DeviceInfo(msgspec.Struct, frozen=True):
    firmware_version: str
    version_string: str
    rom: str
    flags: str = ""

    @classmethod
    def from_response(cls, response: Response) -> Self:
        results = response.results
        if len(results) < 3:
            raise InvalidReplyError(
                f"Info reply needs at least 3 results, got {len(results)}"
            )
        return cls(
            firmware_version=results[0],
            version_string=results[1],
            rom=results[2],
            flags=results[3] if len(results) > 4 else "",
        )


class MemoryWrite(msgspec.Struct, frozen=True):
    """Bytes to store at an absolute address of the caller-facing memory map."""

    address: int
    data: bytes

    @property
    def end(self) -> int:
        return self.address + len(self.data)


class DeviceKind(Enum):
    GENERIC = "generic"
    DIRECT_MEMORY = "direct_memory"


class FrameKind(Enum):
    TEXT = "text"
    BINARY = "binary"


# --- 65816 Instruction Layouts ---

LDA_IMMEDIATE_STRUCT: Any = BinStruct(
    "opcode" / Const(bytes([protocol.Cpu65816.LDA_IMMEDIATE])),
    "value" / Int8ul,
)

STA_LONG_STRUCT: Any = BinStruct(
    "opcode" / Const(bytes([protocol.Cpu65816.STA_LONG])),
    "address" / Int24ul,
)

STORE_BYTE_STRUCT: Any = BinStruct(
    "load" / LDA_IMMEDIATE_STRUCT,
    "store" / STA_LONG_STRUCT,
)


__all__ = [
    "DeviceInfo",
    "DeviceKind",
    "FrameKind",
    "LDA_IMMEDIATE_STRUCT",
    "MemoryWrite",
    "Request",
    "Response",
    "STA_LONG_STRUCT",
    "STORE_BYTE_STRUCT",
]
