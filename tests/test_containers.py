import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bincodec.config import legacy, standard
from bincodec.containers import (
    Bound,
    BoundKind,
    Duration,
    decode_array,
    decode_bound,
    decode_duration,
    decode_from_slice,
    decode_option,
    decode_range,
    decode_range_inclusive,
    decode_result,
    decode_tuple,
)
from bincodec.errors import (
    AllowedRange,
    InvalidDuration,
    LimitExceeded,
    UnexpectedEnd,
    UnexpectedVariant,
)
from bincodec.primitives import (
    decode_f32,
    decode_i32,
    decode_u8,
    decode_u32,
    decode_u64,
)

CONFIGS = [
    legacy(),
    legacy().with_big_endian(),
    standard(),
    standard().with_big_endian(),
]


def test_decode_from_slice_reports_bytes_used():
    value, used = decode_from_slice(b"\x05\xff", standard(), decode_u32)
    assert (value, used) == (5, 1)


def test_option_some_legacy():
    result = decode_from_slice(
        b"\x01\x05\x00\x00\x00", legacy(), lambda d: decode_option(d, decode_u32)
    )
    assert result == (5, 5)


def test_option_some_big_endian():
    result = decode_from_slice(
        b"\x01\x00\x00\x00\x05",
        legacy().with_big_endian(),
        lambda d: decode_option(d, decode_u32),
    )
    assert result == (5, 5)


@pytest.mark.parametrize("config", CONFIGS)
def test_option_none(config):
    result = decode_from_slice(b"\x00", config, lambda d: decode_option(d, decode_u32))
    assert result == (None, 1)


def test_option_bad_tag():
    with pytest.raises(UnexpectedVariant) as info:
        decode_from_slice(b"\x02", standard(), lambda d: decode_option(d, decode_u32))
    assert info.value.found == 2
    assert info.value.allowed == AllowedRange(0, 1)


def test_result_ok_legacy():
    data = struct.pack("<II", 0, 5)
    result = decode_from_slice(
        data, legacy(), lambda d: decode_result(d, decode_u32, decode_u8)
    )
    assert result == ((True, 5), 8)


def test_result_err_legacy():
    data = struct.pack("<IB", 1, 5)
    result = decode_from_slice(
        data, legacy(), lambda d: decode_result(d, decode_u32, decode_u8)
    )
    assert result == ((False, 5), 5)


def test_result_bad_tag():
    with pytest.raises(UnexpectedVariant) as info:
        decode_from_slice(
            b"\x02", standard(), lambda d: decode_result(d, decode_u32, decode_u8)
        )
    assert info.value.found == 2
    assert info.value.allowed == AllowedRange(0, 1)


@pytest.mark.parametrize("config", CONFIGS)
@pytest.mark.parametrize("length", range(0, 33))
def test_u8_arrays(config, length):
    data = bytes(range(1, length + 1))
    result = decode_from_slice(
        data, config, lambda d: decode_array(d, decode_u8, length, 1)
    )
    assert result == (list(data), length)


@pytest.mark.parametrize("config", [legacy(), legacy().with_big_endian()])
def test_u32_array(config):
    fmt = ("<" if config.endian.value == "little" else ">") + "III"
    data = struct.pack(fmt, 7, 8, 9)
    result = decode_from_slice(
        data, config, lambda d: decode_array(d, decode_u32, 3, 4)
    )
    assert result == ([7, 8, 9], 12)


def test_array_within_limit():
    data = struct.pack("<II", 1, 2)
    result = decode_from_slice(
        data, legacy().with_limit(8), lambda d: decode_array(d, decode_u32, 2, 4)
    )
    assert result[0] == [1, 2]


def test_array_over_limit():
    data = struct.pack("<II", 1, 2)
    with pytest.raises(LimitExceeded):
        decode_from_slice(
            data, legacy().with_limit(7), lambda d: decode_array(d, decode_u32, 2, 4)
        )


def test_u8_array_over_limit():
    with pytest.raises(LimitExceeded):
        decode_from_slice(
            b"\x01\x02\x03\x04",
            standard().with_limit(3),
            lambda d: decode_array(d, decode_u8, 4, 1),
        )


def test_array_short_input():
    with pytest.raises(UnexpectedEnd):
        decode_from_slice(b"\x01\x02", standard(), lambda d: decode_array(d, decode_u8, 3, 1))


@given(st.lists(st.integers(0, 255), max_size=64))
def test_u8_array_roundtrip(values):
    data = bytes(values)
    result, used = decode_from_slice(
        data, standard(), lambda d: decode_array(d, decode_u8, len(values), 1)
    )
    assert result == values
    assert used == len(values)


def test_single_tuple_varint():
    # zigzag maps 1 to 2
    assert decode_from_slice(b"\x02", standard(), lambda d: decode_tuple(d, decode_i32)) == (
        (1,),
        1,
    )


def test_float_tuple():
    data = struct.pack("<fff", 2.0, 3.0, 4.0)
    result = decode_from_slice(
        data, legacy(), lambda d: decode_tuple(d, decode_f32, decode_f32, decode_f32)
    )
    assert result == ((2.0, 3.0, 4.0), 12)


@given(st.lists(st.integers(0, 2**32 - 1), max_size=16))
def test_tuple_of_u32_roundtrip(values):
    data = struct.pack("<" + "I" * len(values), *values)
    decoders = [decode_u32] * len(values)
    result, used = decode_from_slice(data, legacy(), lambda d: decode_tuple(d, *decoders))
    assert result == tuple(values)
    assert used == len(data)


def test_range():
    assert decode_from_slice(b"\x01\x05", standard(), lambda d: decode_range(d, decode_u32)) == (
        (1, 5),
        2,
    )


def test_range_inclusive():
    data = struct.pack("<II", 3, 9)
    result = decode_from_slice(data, legacy(), lambda d: decode_range_inclusive(d, decode_u32))
    assert result == ((3, 9), 8)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x00", Bound(BoundKind.UNBOUNDED)),
        (b"\x01\x07", Bound(BoundKind.INCLUDED, 7)),
        (b"\x02\x07", Bound(BoundKind.EXCLUDED, 7)),
    ],
)
def test_bound(data, expected):
    result = decode_from_slice(data, standard(), lambda d: decode_bound(d, decode_u8))
    assert result == (expected, len(data))


def test_bound_bad_tag():
    with pytest.raises(UnexpectedVariant) as info:
        decode_from_slice(b"\x03", standard(), lambda d: decode_bound(d, decode_u8))
    assert info.value.found == 3
    assert info.value.allowed == AllowedRange(0, 2)


def test_duration_legacy():
    data = struct.pack("<QI", 3, 500)
    assert decode_from_slice(data, legacy(), decode_duration) == (Duration(3, 500), 12)


def test_duration_carries_nanos():
    data = struct.pack("<QI", 1, 1_500_000_000)
    duration, _ = decode_from_slice(data, legacy(), decode_duration)
    assert duration == Duration(2, 500_000_000)


def test_duration_overflow():
    data = struct.pack("<QI", 2**64 - 1, 1_000_000_000)
    with pytest.raises(InvalidDuration) as info:
        decode_from_slice(data, legacy(), decode_duration)
    assert info.value.secs == 2**64 - 1


def test_duration_rejects_bad_nanos():
    with pytest.raises(ValueError):
        Duration(0, 1_000_000_000)


def test_nested_option_of_u64():
    data = b"\x01" + struct.pack(">Q", 42)
    result = decode_from_slice(
        data, legacy().with_big_endian(), lambda d: decode_option(d, decode_u64)
    )
    assert result == (42, 9)