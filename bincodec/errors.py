"""Errors raised while decoding, and the descriptions they carry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "IntegerType",
    "AllowedRange",
    "AllowedValues",
    "DecodeError",
    "UnexpectedEnd",
    "LimitExceeded",
    "InvalidBooleanValue",
    "NonZeroTypeIsZero",
    "OutsideUsizeRange",
    "InvalidCharEncoding",
    "Utf8Error",
    "UnexpectedVariant",
    "InvalidDuration",
    "EmptyEnum",
]


class IntegerType(Enum):
    """The integer types a decoded value can belong to."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    USIZE = "usize"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    ISIZE = "isize"


@dataclass(frozen=True)
class AllowedRange:
    """Enum discriminants allowed in the inclusive range ``min..=max``."""

    min: int
    max: int

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.min <= value <= self.max

    def __str__(self) -> str:
        return f"{self.min}..={self.max}"


@dataclass(frozen=True)
class AllowedValues:
    """Enum discriminants allowed as an explicit set of values."""

    values: tuple[int, ...]

    def __contains__(self, value: object) -> bool:
        return value in self.values

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.values) + "]"


class DecodeError(Exception):
    """Base class of every error raised while decoding."""


class UnexpectedEnd(DecodeError):
    """The input ended; ``additional`` more bytes were needed."""

    def __init__(self, additional: int) -> None:
        self.additional = additional
        super().__init__(f"unexpected end of input, {additional} more byte(s) needed")


class LimitExceeded(DecodeError):
    """The configured byte limit was exceeded."""

    def __init__(self) -> None:
        super().__init__("the configured byte limit was exceeded")


class InvalidBooleanValue(DecodeError):
    """A boolean byte was neither 0 nor 1."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"invalid boolean value: {value}")


class NonZeroTypeIsZero(DecodeError):
    """A non-zero integer type decoded as zero."""

    def __init__(self, non_zero_type: IntegerType) -> None:
        self.non_zero_type = non_zero_type
        super().__init__(f"non-zero {non_zero_type.value} was zero")


class OutsideUsizeRange(DecodeError):
    """A length or usize does not fit the platform's size type."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"value {value} is outside the usize range")


class InvalidCharEncoding(DecodeError):
    """The bytes of a char are not valid UTF-8."""

    def __init__(self, data: bytes) -> None:
        self.data = bytes(data)
        super().__init__(f"invalid char encoding: {self.data!r}")


class Utf8Error(DecodeError):
    """A string was not valid UTF-8."""

    def __init__(self, inner: UnicodeDecodeError) -> None:
        self.inner = inner
        super().__init__(f"invalid UTF-8: {inner}")


class UnexpectedVariant(DecodeError):
    """An enum discriminant that the type does not define."""

    def __init__(
        self,
        found: int,
        type_name: str,
        allowed: AllowedRange | AllowedValues,
    ) -> None:
        self.found = found
        self.type_name = type_name
        self.allowed = allowed
        super().__init__(
            f"unexpected variant {found} for {type_name}, allowed: {allowed}"
        )


class InvalidDuration(DecodeError):
    """A duration whose seconds overflow once nanoseconds are carried over."""

    def __init__(self, secs: int, nanos: int) -> None:
        self.secs = secs
        self.nanos = nanos
        super().__init__(f"invalid duration: {secs} s and {nanos} ns")


class EmptyEnum(DecodeError):
    """An attempt to decode an enum that has no variants."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"cannot decode empty enum {type_name}")