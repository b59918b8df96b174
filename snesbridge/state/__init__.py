"""Runtime state helpers for the SNES bridge client."""

from .connection import ConnectionState, ConnectionStatus

__all__ = ["ConnectionState", "ConnectionStatus"]
