"""The decoder: a reader, a configuration and a running count of bytes read."""

from __future__ import annotations

import sys

from .config import Configuration
from .errors import LimitExceeded
from .read import Reader

__all__ = ["Decoder"]

_USIZE_MAX = sys.maxsize * 2 + 1


class Decoder:
    """Reads values from ``reader`` according to ``config``.

    When the configuration carries a byte limit, every decoding step first
    claims the bytes it is about to read. Claims that push the running total
    past the limit raise ``LimitExceeded``.
    """

    def __init__(self, reader: Reader, config: Configuration) -> None:
        self.reader = reader
        self.config = config
        self._bytes_read = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(reader={self.reader!r}, config={self.config!r}, "
            f"bytes_read={self._bytes_read})"
        )

    @property
    def bytes_read(self) -> int:
        """Bytes claimed so far; stays 0 when the configuration has no limit."""
        return self._bytes_read

    def claim_bytes_read(self, n: int) -> None:
        """Claim that ``n`` bytes are about to be read, enforcing the limit."""
        limit = self.config.limit
        if limit is None:
            return
        total = self._bytes_read + n
        if total > _USIZE_MAX:
            raise LimitExceeded()
        self._bytes_read = total
        if total > limit:
            raise LimitExceeded()

    def unclaim_bytes_read(self, n: int) -> None:
        """Give back ``n`` previously claimed bytes.

        Containers claim ``length * item_size`` up front so that a huge length
        is refused before anything is built, then give back one item's worth
        before decoding each item so it is not counted twice.
        """
        if self.config.limit is not None:
            self._bytes_read -= n

    def claim_container_read(self, length: int, item_size: int) -> None:
        """Claim room for ``length`` items of ``item_size`` bytes each."""
        if self.config.limit is None:
            return
        total = length * item_size
        if total > _USIZE_MAX:
            raise LimitExceeded()
        self.claim_bytes_read(total)