"""Pytest configuration for SNES bridge tests."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

from snesbridge.client import Snes  # noqa: E402
from snesbridge.config.model import ClientConfig  # noqa: E402
from tests.fakes import TEST_TIMEOUT, FakeTransportFactory  # noqa: E402


@pytest.fixture(autouse=True)
def reset_logging_handlers():
    """Close and remove all logging handlers after each test to prevent ResourceWarnings."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        try:
            handler.close()
        except (OSError, RuntimeError):
            pass
        root.removeHandler(handler)


@pytest.fixture()
def client_config() -> ClientConfig:
    return ClientConfig(address="ws://127.0.0.1:8080", timeout=TEST_TIMEOUT)


@pytest.fixture()
def transport_factory() -> FakeTransportFactory:
    return FakeTransportFactory()


@pytest.fixture()
def snes(client_config: ClientConfig, transport_factory: FakeTransportFactory) -> Snes:
    return Snes(client_config, transport_factory=transport_factory)
