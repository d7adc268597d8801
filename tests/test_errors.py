from bincodec.errors import (
    AllowedRange,
    AllowedValues,
    DecodeError,
    EmptyEnum,
    IntegerType,
    InvalidBooleanValue,
    InvalidCharEncoding,
    InvalidDuration,
    LimitExceeded,
    NonZeroTypeIsZero,
    OutsideUsizeRange,
    UnexpectedEnd,
    UnexpectedVariant,
    Utf8Error,
)


def _unicode_error():
    try:
        b"\xff".decode("utf-8")
    except UnicodeDecodeError as exc:
        return exc
    raise AssertionError("expected a decoding failure")


def test_all_errors_are_decode_errors_with_messages():
    errors = [
        UnexpectedEnd(3),
        LimitExceeded(),
        InvalidBooleanValue(7),
        NonZeroTypeIsZero(IntegerType.U32),
        OutsideUsizeRange(2**70),
        InvalidCharEncoding(b"\xff\x00\x00\x00"),
        Utf8Error(_unicode_error()),
        UnexpectedVariant(9, "Option", AllowedRange(0, 1)),
        InvalidDuration(2**64 - 1, 1_000_000_000),
        EmptyEnum("Never"),
    ]
    assert len(errors) == 10
    for error in errors:
        try:
            raise error
        except DecodeError as caught:
            assert caught is error
        message = str(error)
        assert message.strip() != ""
        assert len(message) > 5


def test_unexpected_end_carries_additional():
    err = UnexpectedEnd(3)
    assert err.additional == 3
    assert "3" in str(err)


def test_invalid_boolean_carries_value():
    err = InvalidBooleanValue(7)
    assert err.value == 7
    assert "7" in str(err)


def test_nonzero_names_type():
    err = NonZeroTypeIsZero(IntegerType.I128)
    assert err.non_zero_type is IntegerType.I128
    assert IntegerType.I128.value in str(err)


def test_outside_usize_keeps_value():
    assert OutsideUsizeRange(2**70).value == 2**70


def test_invalid_char_encoding_keeps_bytes():
    err = InvalidCharEncoding(bytearray(b"\xc3\x28\x00\x00"))
    assert err.data == b"\xc3\x28\x00\x00"
    assert isinstance(err.data, bytes)


def test_utf8_error_wraps_inner():
    inner = _unicode_error()
    err = Utf8Error(inner)
    assert err.inner is inner


def test_unexpected_variant_fields():
    allowed = AllowedRange(min=0, max=2)
    err = UnexpectedVariant(found=5, type_name="Bound", allowed=allowed)
    assert err.found == 5
    assert err.type_name == "Bound"
    assert err.allowed == allowed
    assert "Bound" in str(err)
    assert str(allowed) in str(err)


def test_invalid_duration_fields():
    err = InvalidDuration(secs=10, nanos=20)
    assert (err.secs, err.nanos) == (10, 20)


def test_empty_enum_type_name():
    assert EmptyEnum("Never").type_name == "Never"
    assert "Never" in str(EmptyEnum("Never"))


def test_allowed_range_is_inclusive():
    allowed = AllowedRange(0, 2)
    assert 0 in allowed
    assert 2 in allowed
    assert 3 not in allowed
    assert -1 not in allowed
    assert "x" not in allowed


def test_allowed_range_str():
    assert str(AllowedRange(0, 1)) == "0..=1"


def test_allowed_values_membership():
    allowed = AllowedValues((1, 5, 10))
    assert 5 in allowed
    assert 2 not in allowed
    for value in allowed.values:
        assert str(value) in str(allowed)


def test_allowed_values_equality():
    assert AllowedValues((1, 2)) == AllowedValues((1, 2))
    assert AllowedRange(0, 1) == AllowedRange(min=0, max=1)


def test_integer_type_lookup_by_value():
    for member in IntegerType:
        assert IntegerType(member.value) is member
    assert len(IntegerType) == 12