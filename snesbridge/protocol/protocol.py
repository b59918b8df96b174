"""Protocol constants for the usb2snes websocket protocol."""
from __future__ import annotations
from enum import IntEnum, StrEnum
from typing import Final

# Caller-facing absolute address map.
ROM_START: Final[int] = 0x000000
WRAM_START: Final[int] = 0xF50000
WRAM_SIZE: Final[int] = 0x020000
WRAM_END: Final[int] = WRAM_START + WRAM_SIZE
SRAM_START: Final[int] = 0xE00000

# Native bank of work RAM as seen by code running on the console.
NATIVE_WRAM_BANK_START: Final[int] = 0x7E0000
MAX_SNES_ADDRESS: Final[int] = 0xFFFFFF

ADDRESS_HEX_DIGITS: Final[int] = 6

# Payload injection into the SD2SNES command area.
INJECTION_TRIGGER_ADDRESS: Final[str] = "2C00"
INJECTION_EXECUTE_FLAG: Final[str] = "1"
INJECTION_PROLOGUE: Final[bytes] = bytes([0x00, 0xE2, 0x20, 0x48, 0xEB, 0x48])
INJECTION_EPILOGUE: Final[bytes] = bytes(
    [0xA9, 0x00, 0x8F, 0x00, 0x2C, 0x00, 0x68, 0xEB, 0x68, 0x28, 0x6C, 0xEA, 0xFF, 0x08]
)

DIRECT_MEMORY_NAME_TOKENS: Final[tuple[str, ...]] = ("sd2snes", "fxpakpro")
SERIAL_PORT_NAME_PREFIX: Final[str] = "COM"
SERIAL_PORT_NAME_LENGTH: Final[int] = 4


class Opcode(StrEnum):
    DEVICE_LIST = "DeviceList"
    ATTACH = "Attach"
    INFO = "Info"
    NAME = "Name"
    BOOT = "Boot"
    MENU = "Menu"
    RESET = "Reset"
    GET_ADDRESS = "GetAddress"
    PUT_ADDRESS = "PutAddress"


class Space(StrEnum):
    SNES = "SNES"
    CMD = "CMD"


class Cpu65816(IntEnum):
    """65816 opcodes emitted by the payload builder."""

    LDA_IMMEDIATE = 0xA9
    STA_LONG = 0x8F
