"""Configuration of the wire format: byte order, integer encoding and byte limit.

Use the same configuration for encoding and decoding. The options that share a
setting replace each other, so the last call wins:

- ``with_little_endian`` / ``with_big_endian``
- ``with_fixed_int_encoding`` / ``with_variable_int_encoding``
- ``with_limit`` / ``with_no_limit``
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum

__all__ = ["Endian", "IntEncoding", "Configuration", "standard", "legacy"]


class Endian(Enum):
    """Byte order used for multi-byte integers and floats."""

    LITTLE = "little"
    BIG = "big"


class IntEncoding(Enum):
    """How integers, lengths and enum discriminants are written."""

    FIXED = "fixed"
    VARIABLE = "variable"


@dataclass(frozen=True)
class Configuration:
    """An immutable set of encoding options.

    Every ``with_*`` method returns a new configuration and leaves this one
    untouched.

    Variable integer encoding writes an unsigned value ``u`` as:

    1. a single byte when ``u < 251``;
    2. byte 251 followed by a u16 when ``u < 2**16``;
    3. byte 252 followed by a u32 when ``u < 2**32``;
    4. byte 253 followed by a u64 when ``u < 2**64``;
    5. byte 254 followed by a u128 otherwise.

    Signed values are zigzag-mapped to unsigned first. Fixed encoding writes
    integers at their full width, enum discriminants as u32 and lengths as u64.
    """

    endian: Endian = Endian.LITTLE
    int_encoding: IntEncoding = IntEncoding.VARIABLE
    limit: int | None = None

    def with_big_endian(self) -> Configuration:
        """Encode all integer types in big endian."""
        return dataclasses.replace(self, endian=Endian.BIG)

    def with_little_endian(self) -> Configuration:
        """Encode all integer types in little endian."""
        return dataclasses.replace(self, endian=Endian.LITTLE)

    def with_variable_int_encoding(self) -> Configuration:
        """Encode integers with the variable-length scheme."""
        return dataclasses.replace(self, int_encoding=IntEncoding.VARIABLE)

    def with_fixed_int_encoding(self) -> Configuration:
        """Encode integers at their full, fixed width."""
        return dataclasses.replace(self, int_encoding=IntEncoding.FIXED)

    def with_limit(self, limit: int) -> Configuration:
        """Refuse to read more than ``limit`` bytes."""
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise TypeError(f"limit must be an int, not {type(limit).__name__}")
        if limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")
        return dataclasses.replace(self, limit=limit)

    def with_no_limit(self) -> Configuration:
        """Remove the byte limit."""
        return dataclasses.replace(self, limit=None)


def standard() -> Configuration:
    """The default configuration: little endian, variable int encoding, no limit."""
    return Configuration()


def legacy() -> Configuration:
    """The older default: little endian, fixed int encoding, no limit."""
    return Configuration(int_encoding=IntEncoding.FIXED)