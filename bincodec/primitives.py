"""Decoding of the primitive types: integers, floats, bools, chars, strings."""

from __future__ import annotations

import struct
import sys
from collections.abc import Callable

from .config import IntEncoding
from .decoder import Decoder
from .errors import (
    AllowedRange,
    DecodeError,
    IntegerType,
    InvalidBooleanValue,
    InvalidCharEncoding,
    NonZeroTypeIsZero,
    OutsideUsizeRange,
    UnexpectedVariant,
    Utf8Error,
)

__all__ = [
    "decode_bool",
    "decode_u8",
    "decode_u16",
    "decode_u32",
    "decode_u64",
    "decode_u128",
    "decode_usize",
    "decode_i8",
    "decode_i16",
    "decode_i32",
    "decode_i64",
    "decode_i128",
    "decode_isize",
    "decode_nonzero",
    "decode_f32",
    "decode_f64",
    "decode_char",
    "decode_unit",
    "decode_option_variant",
    "decode_slice_len",
    "decode_bytes",
    "decode_str",
]

_USIZE_MAX = sys.maxsize * 2 + 1

_SINGLE_BYTE_MAX = 250
_RESERVED_MARKER = 255
_MARKERS = {
    251: (2, "u16"),
    252: (4, "u32"),
    253: (8, "u64"),
    254: (16, "u128"),
}


class _InvalidIntegerType(DecodeError):
    """A variable-length integer is wider than the type being decoded."""

    def __init__(self, expected: IntegerType, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"invalid integer type: expected {expected.value}, found {found}")


def _utf8_char_width(first: int) -> int:
    if first <= 0x7F:
        return 1
    if 0xC2 <= first <= 0xDF:
        return 2
    if 0xE0 <= first <= 0xEF:
        return 3
    if 0xF0 <= first <= 0xF4:
        return 4
    return 0


def _read_uint(decoder: Decoder, width: int, *, signed: bool = False) -> int:
    data = decoder.reader.read(width)
    return int.from_bytes(data, decoder.config.endian.value, signed=signed)


def _varint_unsigned(decoder: Decoder, width: int, expected: IntegerType) -> int:
    marker = decoder.reader.read(1)[0]
    if marker <= _SINGLE_BYTE_MAX:
        return marker
    if marker == _RESERVED_MARKER:
        raise _InvalidIntegerType(expected, "reserved")
    marker_width, found = _MARKERS[marker]
    if marker_width > width:
        raise _InvalidIntegerType(expected, found)
    return _read_uint(decoder, marker_width)


def _unzigzag(n: int) -> int:
    return -((n + 1) // 2) if n & 1 else n // 2


def _unsigned(decoder: Decoder, width: int, itype: IntegerType) -> int:
    decoder.claim_bytes_read(width)
    if decoder.config.int_encoding is IntEncoding.VARIABLE:
        return _varint_unsigned(decoder, width, itype)
    return _read_uint(decoder, width)


def _signed(decoder: Decoder, width: int, itype: IntegerType) -> int:
    decoder.claim_bytes_read(width)
    if decoder.config.int_encoding is IntEncoding.VARIABLE:
        return _unzigzag(_varint_unsigned(decoder, width, itype))
    return _read_uint(decoder, width, signed=True)


def decode_u8(decoder: Decoder) -> int:
    """Decode a single unsigned byte."""
    decoder.claim_bytes_read(1)
    peeked = decoder.reader.peek_read(1)
    if peeked is not None:
        decoder.reader.consume(1)
        return peeked[0]
    return decoder.reader.read(1)[0]


def decode_bool(decoder: Decoder) -> bool:
    """Decode a bool written as a byte that must be 0 or 1."""
    value = decode_u8(decoder)
    if value == 0:
        return False
    if value == 1:
        return True
    raise InvalidBooleanValue(value)


def decode_u16(decoder: Decoder) -> int:
    """Decode a u16."""
    return _unsigned(decoder, 2, IntegerType.U16)


def decode_u32(decoder: Decoder) -> int:
    """Decode a u32."""
    return _unsigned(decoder, 4, IntegerType.U32)


def decode_u64(decoder: Decoder) -> int:
    """Decode a u64."""
    return _unsigned(decoder, 8, IntegerType.U64)


def decode_u128(decoder: Decoder) -> int:
    """Decode a u128."""
    return _unsigned(decoder, 16, IntegerType.U128)


def decode_usize(decoder: Decoder) -> int:
    """Decode a usize, written on the wire as a u64."""
    value = _unsigned(decoder, 8, IntegerType.USIZE)
    if value > _USIZE_MAX:
        raise OutsideUsizeRange(value)
    return value


def decode_i8(decoder: Decoder) -> int:
    """Decode a single signed byte; never variable-length."""
    decoder.claim_bytes_read(1)
    return int.from_bytes(decoder.reader.read(1), "little", signed=True)


def decode_i16(decoder: Decoder) -> int:
    """Decode an i16."""
    return _signed(decoder, 2, IntegerType.I16)


def decode_i32(decoder: Decoder) -> int:
    """Decode an i32."""
    return _signed(decoder, 4, IntegerType.I32)


def decode_i64(decoder: Decoder) -> int:
    """Decode an i64."""
    return _signed(decoder, 8, IntegerType.I64)


def decode_i128(decoder: Decoder) -> int:
    """Decode an i128."""
    return _signed(decoder, 16, IntegerType.I128)


def decode_isize(decoder: Decoder) -> int:
    """Decode an isize, written on the wire as an i64."""
    return _signed(decoder, 8, IntegerType.ISIZE)


_INTEGER_DECODERS: dict[IntegerType, Callable[[Decoder], int]] = {
    IntegerType.U8: decode_u8,
    IntegerType.U16: decode_u16,
    IntegerType.U32: decode_u32,
    IntegerType.U64: decode_u64,
    IntegerType.U128: decode_u128,
    IntegerType.USIZE: decode_usize,
    IntegerType.I8: decode_i8,
    IntegerType.I16: decode_i16,
    IntegerType.I32: decode_i32,
    IntegerType.I64: decode_i64,
    IntegerType.I128: decode_i128,
    IntegerType.ISIZE: decode_isize,
}


def decode_nonzero(decoder: Decoder, integer_type: IntegerType) -> int:
    """Decode an integer of ``integer_type`` that must not be zero."""
    value = _INTEGER_DECODERS[integer_type](decoder)
    if value == 0:
        raise NonZeroTypeIsZero(integer_type)
    return value


def _decode_float(decoder: Decoder, width: int, code: str) -> float:
    decoder.claim_bytes_read(width)
    data = decoder.reader.read(width)
    prefix = "<" if decoder.config.endian.value == "little" else ">"
    return struct.unpack(prefix + code, data)[0]


def decode_f32(decoder: Decoder) -> float:
    """Decode a 32-bit float."""
    return _decode_float(decoder, 4, "f")


def decode_f64(decoder: Decoder) -> float:
    """Decode a 64-bit float."""
    return _decode_float(decoder, 8, "d")


def decode_char(decoder: Decoder) -> str:
    """Decode one character written as its UTF-8 bytes."""
    first = decoder.reader.read(1)
    width = _utf8_char_width(first[0])
    if width == 0:
        raise InvalidCharEncoding(first.ljust(4, b"\x00"))
    # The width is only known after the first byte, so the claim comes late.
    decoder.claim_bytes_read(width)
    if width == 1:
        return chr(first[0])
    data = first + decoder.reader.read(width - 1)
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        raise InvalidCharEncoding(data.ljust(4, b"\x00")) from None
    return text[0]


def decode_unit(decoder: Decoder) -> None:
    """Decode the unit value, which occupies no bytes."""
    return None


def decode_option_variant(decoder: Decoder, type_name: str) -> bool:
    """Decode only the tag of an option: True for Some, False for None."""
    tag = decode_u8(decoder)
    if tag == 0:
        return False
    if tag == 1:
        return True
    raise UnexpectedVariant(found=tag, type_name=type_name, allowed=AllowedRange(0, 1))


def decode_slice_len(decoder: Decoder) -> int:
    """Decode the length prefix of a slice or container."""
    value = decode_u64(decoder)
    if value > _USIZE_MAX:
        raise OutsideUsizeRange(value)
    return value


def decode_bytes(decoder: Decoder) -> bytes:
    """Decode a length-prefixed byte string."""
    length = decode_slice_len(decoder)
    decoder.claim_bytes_read(length)
    return decoder.reader.read(length)


def decode_str(decoder: Decoder) -> str:
    """Decode a length-prefixed UTF-8 string."""
    data = decode_bytes(decoder)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise Utf8Error(exc) from exc