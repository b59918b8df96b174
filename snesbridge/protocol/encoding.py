"""Wire encoding helpers for the usb2snes protocol.

Requests go out as one JSON text frame each; replies come back as JSON text
frames carrying a flat ``Results`` list. Integers travel as uppercase hex
strings without a ``0x`` prefix.
"""

from __future__ import annotations

import msgspec

from . import protocol
from .structures import Request, Response

_ENCODER = msgspec.json.Encoder()
_RESPONSE_DECODER = msgspec.json.Decoder(Response)


def encode_request(request: Request) -> str:
    return _ENCODER.encode(request).decode("utf-8")


def decode_response(payload: str | bytes | bytearray | memoryview) -> Response:
    """Parse one text frame. Raises ``msgspec.DecodeError`` on malformed input."""
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    return _RESPONSE_DECODER.decode(payload)


def format_address(value: int) -> str:
    """Return a 24-bit address as six uppercase hex digits (``0x7E0010`` -> ``7E0010``)."""
    if not 0 <= value <= protocol.MAX_SNES_ADDRESS:
        raise ValueError(f"address out of 24-bit range: {value:#x}")
    return f"{value:0{protocol.ADDRESS_HEX_DIGITS}X}"


def format_hex(value: int) -> str:
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return f"{value:X}"
