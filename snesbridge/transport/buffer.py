"""Reusable receive arena with explicit length tracking."""

from __future__ import annotations


class ReceiveBuffer:
    """A bytearray reused across receives.

    Only the first ``length`` bytes belong to the most recent frame; readers
    always go through :meth:`view` or :meth:`to_bytes`, so bytes left over
    from a longer earlier frame are never exposed.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self._arena = bytearray(capacity)
        self._length = 0

    @property
    def capacity(self) -> int:
        return len(self._arena)

    @property
    def length(self) -> int:
        return self._length

    def fill(self, data: bytes | bytearray | memoryview) -> int:
        size = len(data)
        if size > len(self._arena):
            self._arena.extend(bytes(size - len(self._arena)))
        self._arena[:size] = data
        self._length = size
        return size

    def clear(self) -> None:
        self._length = 0

    def view(self) -> memoryview:
        return memoryview(self._arena)[: self._length]

    def to_bytes(self) -> bytes:
        return bytes(self._arena[: self._length])

    def text(self, encoding: str = "utf-8") -> str:
        return self._arena[: self._length].decode(encoding)
