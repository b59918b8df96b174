"""Exception hierarchy for the SNES bridge client."""

from __future__ import annotations


class SnesError(Exception):
    """Base class for every failure raised by the client."""


class NotConnectedError(SnesError):
    """Raised when an operation is attempted while the link is not open."""


class SnesConnectionError(SnesError, ConnectionError):
    """Raised when the websocket cannot be opened within the timeout."""


class TransportError(SnesError):
    """Raised when a send, receive or close fails at the transport layer."""


class InvalidReplyError(SnesError):
    """Raised when a reply does not have the shape its opcode requires."""


class SizeMismatchError(SnesError):
    """Raised when a memory read returns a different byte count than requested."""

    def __init__(self, address: int, expected: int, actual: int) -> None:
        super().__init__(
            f"Error reading 0x{address:06X}: expected 0x{expected:X} bytes, got 0x{actual:X}."
        )
        self.address = address
        self.expected = expected
        self.actual = actual


class OutOfRangeError(SnesError, ValueError):
    """Raised when a write does not fit the attached device's writable window."""

    def __init__(self, address: int, size: int) -> None:
        super().__init__(f"Write at 0x{address:06X} for 0x{size:X} bytes out of range.")
        self.address = address
        self.size = size


__all__ = [
    "InvalidReplyError",
    "NotConnectedError",
    "OutOfRangeError",
    "SizeMismatchError",
    "SnesConnectionError",
    "SnesError",
    "TransportError",
]
