"""Tests for the reusable receive buffer."""

from __future__ import annotations

import pytest

from snesbridge.transport.buffer import ReceiveBuffer


def test_shorter_frame_hides_stale_bytes() -> None:
    buffer = ReceiveBuffer(16)
    buffer.fill(b"0123456789")
    buffer.fill(b"abc")

    assert buffer.length == 3
    assert buffer.to_bytes() == b"abc"
    assert bytes(buffer.view()) == b"abc"
    assert buffer.text() == "abc"


def test_buffer_grows_for_large_frames() -> None:
    buffer = ReceiveBuffer(4)
    buffer.fill(bytes(range(10)))

    assert buffer.capacity == 10
    assert buffer.to_bytes() == bytes(range(10))


def test_clear_resets_length() -> None:
    buffer = ReceiveBuffer(8)
    buffer.fill(b"data")
    buffer.clear()

    assert buffer.length == 0
    assert buffer.to_bytes() == b""


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ReceiveBuffer(0)
