"""Tests for the websocket-client transport adapter."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock, patch

import pytest
import websocket

from snesbridge.protocol.structures import FrameKind
from snesbridge.transport.base import TransportState
from snesbridge.transport.websocket_client import WebSocketTransport


@pytest.fixture()
def socket_mock():
    with patch.object(websocket, "WebSocket") as socket_cls:
        sock = MagicMock()
        sock.connected = True
        socket_cls.return_value = sock
        yield sock


def test_connect_passes_timeout_and_origin(socket_mock: MagicMock) -> None:
    transport = WebSocketTransport(timeout=0.5, origin="http://localhost")

    asyncio.run(transport.connect("ws://localhost:8080"))

    socket_mock.connect.assert_called_once_with(
        "ws://localhost:8080", timeout=0.5, origin="http://localhost"
    )
    assert transport.state is TransportState.OPEN


def test_connect_failure_shuts_socket_down(socket_mock: MagicMock) -> None:
    socket_mock.connect.side_effect = ConnectionRefusedError("refused")
    transport = WebSocketTransport(timeout=0.5)

    with pytest.raises(ConnectionRefusedError):
        asyncio.run(transport.connect("ws://localhost:8080"))

    socket_mock.shutdown.assert_called_once_with()
    assert transport.state is TransportState.CLOSED


def test_state_follows_dropped_socket(socket_mock: MagicMock) -> None:
    transport = WebSocketTransport(timeout=0.5)
    asyncio.run(transport.connect("ws://localhost:8080"))

    socket_mock.connected = False

    assert transport.state is TransportState.CLOSED


def test_send_text_and_binary(socket_mock: MagicMock) -> None:
    transport = WebSocketTransport(timeout=0.5)

    async def _run() -> None:
        await transport.connect("ws://localhost:8080")
        await transport.send_text('{"Opcode":"Menu"}')
        await transport.send_binary(b"\x01\x02")

    asyncio.run(_run())

    socket_mock.send.assert_called_once_with('{"Opcode":"Menu"}')
    socket_mock.send_binary.assert_called_once_with(b"\x01\x02")


def test_receive_maps_frame_opcodes(socket_mock: MagicMock) -> None:
    socket_mock.recv_data.side_effect = [
        (websocket.ABNF.OPCODE_TEXT, '{"Results":[]}'),
        (websocket.ABNF.OPCODE_BINARY, b"\xff\x00"),
    ]
    transport = WebSocketTransport(timeout=0.5)

    async def _run() -> list[tuple[FrameKind, bytes]]:
        return [await transport.receive(), await transport.receive()]

    frames = asyncio.run(_run())

    assert frames == [
        (FrameKind.TEXT, b'{"Results":[]}'),
        (FrameKind.BINARY, b"\xff\x00"),
    ]


def test_receive_close_frame_raises(socket_mock: MagicMock) -> None:
    socket_mock.recv_data.return_value = (websocket.ABNF.OPCODE_CLOSE, b"")
    transport = WebSocketTransport(timeout=0.5)

    async def _run() -> None:
        await transport.connect("ws://localhost:8080")
        await transport.receive()

    with pytest.raises(websocket.WebSocketConnectionClosedException):
        asyncio.run(_run())
    assert transport.state is TransportState.CLOSED


def test_set_timeout_updates_socket(socket_mock: MagicMock) -> None:
    transport = WebSocketTransport(timeout=0.5)

    transport.set_timeout(3.0)

    socket_mock.settimeout.assert_called_once_with(3.0)


def test_close_sends_normal_status_with_reason(socket_mock: MagicMock) -> None:
    transport = WebSocketTransport(timeout=0.5)

    async def _run() -> None:
        await transport.connect("ws://localhost:8080")
        await transport.close("Gwaa")

    asyncio.run(_run())

    socket_mock.close.assert_called_once_with(
        status=websocket.STATUS_NORMAL, reason=b"Gwaa", timeout=0.5
    )
    assert transport.state is TransportState.CLOSED


def test_close_before_connect_is_local(socket_mock: MagicMock) -> None:
    transport = WebSocketTransport(timeout=0.5)

    asyncio.run(transport.close("Gwaa"))

    socket_mock.close.assert_not_called()
    assert transport.state is TransportState.CLOSED
