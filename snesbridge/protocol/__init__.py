"""Protocol helper utilities for the SNES bridge client."""

from .encoding import decode_response, encode_request, format_address, format_hex
from . import protocol, structures

__all__ = [
    "decode_response",
    "encode_request",
    "format_address",
    "format_hex",
    "protocol",
    "structures",
]
