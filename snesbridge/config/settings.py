"""Settings loader for the SNES bridge client.

Configuration comes from the ``[snesbridge]`` table of a TOML file when a
path is given, and from built-in defaults otherwise. Environment variables
are not consulted.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from ..const import CONFIG_TABLE
from .model import ClientConfig
from .schema import ClientConfigSchema

logger = logging.getLogger(__name__)


def _load_raw_config(path: str | Path | None) -> dict[str, Any]:
    if path is None:
        return {}

    config_path = Path(path)
    with config_path.open("rb") as handle:
        document = tomllib.load(handle)

    section = document.get(CONFIG_TABLE)
    if section is None:
        logger.warning("No [%s] table in %s; using defaults.", CONFIG_TABLE, config_path)
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"[{CONFIG_TABLE}] in {config_path} must be a table")
    return dict(section)


def load_client_config(path: str | Path | None = None) -> ClientConfig:
    """Load and validate configuration.

    Raises ``marshmallow.ValidationError`` for invalid values and
    ``tomllib.TOMLDecodeError`` / ``OSError`` for unreadable files.
    """
    raw = _load_raw_config(path)
    return ClientConfigSchema().load(raw)


__all__ = ["ClientConfig", "load_client_config"]
