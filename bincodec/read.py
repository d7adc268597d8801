"""Sources of bytes for decoding."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .errors import UnexpectedEnd

__all__ = ["Reader", "SliceReader"]


class Reader(ABC):
    """A source of owned bytes.

    ``peek_read`` and ``consume`` are an optional fast path for readers that
    wrap a buffer: a reader that returns data from ``peek_read`` must also
    advance past it in ``consume``.
    """

    @abstractmethod
    def read(self, n: int) -> bytes:
        """Return exactly ``n`` bytes, or raise a ``DecodeError``."""

    def peek_read(self, n: int) -> bytes | None:
        """Return the next ``n`` bytes without consuming them, if possible."""
        return None

    def consume(self, n: int) -> None:
        """Skip ``n`` bytes previously seen through ``peek_read``."""


class SliceReader(Reader):
    """A reader over an in-memory bytes-like object.

    Besides ``read`` it offers ``take_bytes``, which hands out a slice of the
    underlying data.
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._data) - self._pos

    @property
    def remaining(self) -> bytes:
        """The bytes that have not been read yet."""
        return self._data[self._pos :]

    def read(self, n: int) -> bytes:
        """Return the next ``n`` bytes, raising ``UnexpectedEnd`` if too few remain."""
        return self.take_bytes(n)

    def peek_read(self, n: int) -> bytes | None:
        """Return the next ``n`` bytes without consuming them, or None if too few remain."""
        if n > len(self):
            return None
        return self._data[self._pos : self._pos + n]

    def consume(self, n: int) -> None:
        """Skip ``n`` bytes; skipping past the end leaves the reader empty."""
        self._pos = min(self._pos + n, len(self._data))

    def take_bytes(self, length: int) -> bytes:
        """Return the next ``length`` bytes, raising ``UnexpectedEnd`` if too few remain."""
        available = len(self)
        if length > available:
            raise UnexpectedEnd(additional=length - available)
        start = self._pos
        self._pos += length
        return self._data[start : self._pos]