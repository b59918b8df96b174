"""Configuration helpers for the SNES bridge client."""

from . import logging, settings  # noqa: F401  # pyright: ignore[reportUnusedImport]
from .model import ClientConfig
from .settings import load_client_config

__all__ = ["ClientConfig", "load_client_config"]
