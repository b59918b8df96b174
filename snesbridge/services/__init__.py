"""Client services: connection lifecycle, single-flight gate, memory access."""

from .link import Link
from .single_flight import SingleFlightGuard

__all__ = ["Link", "SingleFlightGuard"]
