"""Decoding of compound values: arrays, options, results, tuples, ranges,
bounds and durations, plus decoding a whole value from a byte string."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from .config import Configuration
from .decoder import Decoder
from .errors import AllowedRange, InvalidDuration, UnexpectedVariant
from .primitives import decode_option_variant, decode_u8, decode_u32, decode_u64
from .read import SliceReader

__all__ = [
    "Duration",
    "BoundKind",
    "Bound",
    "decode_array",
    "decode_option",
    "decode_result",
    "decode_tuple",
    "decode_range",
    "decode_range_inclusive",
    "decode_bound",
    "decode_duration",
    "decode_from_slice",
]

T = TypeVar("T")
E = TypeVar("E")

_NANOS_PER_SEC = 1_000_000_000
_U64_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class Duration:
    """A span of time as whole seconds plus nanoseconds below one second."""

    secs: int
    nanos: int

    def __post_init__(self) -> None:
        if self.secs < 0 or self.secs > _U64_MAX:
            raise ValueError(f"secs out of range: {self.secs}")
        if not 0 <= self.nanos < _NANOS_PER_SEC:
            raise ValueError(f"nanos out of range: {self.nanos}")


class BoundKind(Enum):
    """The kind of a range endpoint, valued by its wire discriminant."""

    UNBOUNDED = 0
    INCLUDED = 1
    EXCLUDED = 2


@dataclass(frozen=True)
class Bound:
    """One endpoint of a range; ``value`` is None when unbounded."""

    kind: BoundKind
    value: Any = None


def decode_array(
    decoder: Decoder,
    item: Callable[[Decoder], T],
    length: int,
    item_size: int,
) -> list[T]:
    """Decode a fixed-length array of ``length`` items, with no length prefix.

    ``item_size`` is the in-memory size of one item, used to claim room for
    the whole array against the byte limit before anything is decoded.
    """
    decoder.claim_container_read(length, item_size)
    if item is decode_u8:
        return list(decoder.reader.read(length))
    result = []
    for _ in range(length):
        decoder.unclaim_bytes_read(item_size)
        result.append(item(decoder))
    return result


def decode_option(decoder: Decoder, item: Callable[[Decoder], T]) -> T | None:
    """Decode an optional value: a 0/1 tag byte, then the value if present."""
    if decode_option_variant(decoder, "Option"):
        return item(decoder)
    return None


def decode_result(
    decoder: Decoder,
    ok: Callable[[Decoder], T],
    err: Callable[[Decoder], E],
) -> tuple[bool, T | E]:
    """Decode a result as ``(True, value)`` for success or ``(False, error)``."""
    tag = decode_u32(decoder)
    if tag == 0:
        return True, ok(decoder)
    if tag == 1:
        return False, err(decoder)
    raise UnexpectedVariant(found=tag, type_name="Result", allowed=AllowedRange(0, 1))


def decode_tuple(decoder: Decoder, *args: Callable[[Decoder], Any]) -> tuple[Any, ...]:
    """Decode one value with each of ``args`` in turn and return them as a tuple."""
    return tuple(decode(decoder) for decode in args)


def decode_range(decoder: Decoder, item: Callable[[Decoder], T]) -> tuple[T, T]:
    """Decode a half-open range as ``(start, end)``."""
    start = item(decoder)
    end = item(decoder)
    return start, end


def decode_range_inclusive(decoder: Decoder, item: Callable[[Decoder], T]) -> tuple[T, T]:
    """Decode an inclusive range as ``(start, end)``."""
    start = item(decoder)
    end = item(decoder)
    return start, end


def decode_bound(decoder: Decoder, item: Callable[[Decoder], T]) -> Bound:
    """Decode a range endpoint: a u32 tag, then the value unless unbounded."""
    tag = decode_u32(decoder)
    if tag == BoundKind.UNBOUNDED.value:
        return Bound(BoundKind.UNBOUNDED)
    if tag == BoundKind.INCLUDED.value:
        return Bound(BoundKind.INCLUDED, item(decoder))
    if tag == BoundKind.EXCLUDED.value:
        return Bound(BoundKind.EXCLUDED, item(decoder))
    raise UnexpectedVariant(found=tag, type_name="Bound", allowed=AllowedRange(0, 2))


def decode_duration(decoder: Decoder) -> Duration:
    """Decode a duration as u64 seconds and u32 nanoseconds.

    Nanoseconds of a second or more are carried into the seconds; a carry
    that overflows the seconds raises ``InvalidDuration``.
    """
    secs = decode_u64(decoder)
    nanos = decode_u32(decoder)
    carry, rest = divmod(nanos, _NANOS_PER_SEC)
    if secs + carry > _U64_MAX:
        raise InvalidDuration(secs, nanos)
    return Duration(secs + carry, rest)


def decode_from_slice(
    data: bytes | bytearray | memoryview,
    config: Configuration,
    decode: Callable[[Decoder], T],
) -> tuple[T, int]:
    """Decode one value from ``data``; return it with the number of bytes used."""
    reader = SliceReader(data)
    total = len(reader)
    value = decode(Decoder(reader, config))
    return value, total - len(reader)