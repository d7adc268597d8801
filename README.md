# bincodec

Reads data written in the bincode binary format. The format is compact and schema-driven: the wire carries no field names and no type tags. You describe what to expect with decode functions and schemas.

## Configuration

The encoder and the decoder must agree on a `bincodec.config.Configuration`. There are two presets:

- `standard()`: little endian, variable-length integers, no byte limit.
- `legacy()`: little endian, fixed-size integers, no byte limit.

Each `with_*` method returns a new, frozen configuration. Settings that cover the same option replace each other:

- `with_little_endian` / `with_big_endian`
- `with_fixed_int_encoding` / `with_variable_int_encoding`
- `with_limit` / `with_no_limit`

```python
from bincodec.config import standard

config = standard().with_big_endian().with_fixed_int_encoding().with_limit(1024)
```

`with_limit` raises `TypeError` for a value that is not an int and `ValueError` for a negative one.

### Variable-length integers

With variable integer encoding, an unsigned value from 0 to 250 is a single byte. A larger value is a marker byte followed by an integer in the configured byte order:

| Marker | Width    |
|--------|----------|
| 251    | 16 bits  |
| 252    | 32 bits  |
| 253    | 64 bits  |
| 254    | 128 bits |

Marker 255 is reserved and is rejected. So is a marker wider than the type being decoded.

Signed values are zigzag-mapped, so `0, -1, 1, -2, 2` are stored as `0, 1, 2, 3, 4`.

`u8` and `i8` are always a single byte.

With fixed encoding, every integer is written at its full width. `usize` and `isize`, and container lengths, take 64 bits.

### Byte limit

When a limit is set, the `Decoder` keeps a running count of the bytes it has claimed. A claim that takes the count past the limit raises `LimitExceeded`.

Length-prefixed byte strings and strings claim their whole length before they are read. `decode_array` claims `length * item_size` before it decodes any item. Either way, a hostile length is refused early.

## Decoding a value

`bincodec.containers.decode_from_slice(data, config, decode)` decodes one value. It returns the value together with the number of bytes consumed.

```python
from bincodec.config import legacy, standard
from bincodec.containers import decode_from_slice, decode_option
from bincodec.primitives import decode_u32

value, used = decode_from_slice(b"\x05", standard(), decode_u32)
# value == 5, used == 1

value, used = decode_from_slice(
    b"\x01\x05\x00\x00\x00",
    legacy(),
    lambda d: decode_option(d, decode_u32),
)
# value == 5, used == 5
```

A decode function is any callable that takes a `bincodec.decoder.Decoder`.

### Building blocks in `bincodec.primitives`

- `decode_bool`: the byte must be 0 or 1.
- Unsigned integers: `decode_u8`, `decode_u16`, `decode_u32`, `decode_u64`, `decode_u128`, `decode_usize`.
- Signed integers: `decode_i8`, `decode_i16`, `decode_i32`, `decode_i64`, `decode_i128`, `decode_isize`.
- `decode_nonzero(decoder, integer_type)`: decodes an integer of the given `IntegerType` and rejects zero.
- `decode_f32`, `decode_f64`.
- `decode_char`: one character, written as its UTF-8 bytes.
- `decode_bytes`, `decode_str`: length-prefixed byte strings and UTF-8 strings.
- `decode_unit`, `decode_option_variant`, `decode_slice_len`.

### Compound values in `bincodec.containers`

- `decode_array(decoder, item, length, item_size)`: a fixed-length list with no length prefix.
- `decode_option(decoder, item)`: a 0/1 tag byte, then the value if present. Returns `None` when the value is absent.
- `decode_result(decoder, ok, err)`: a `u32` tag. Returns `(True, value)` for success or `(False, error)` for failure.
- `decode_tuple(decoder, *args)`: one value per decode function, in order.
- `decode_range` and `decode_range_inclusive`: return `(start, end)`.
- `decode_bound(decoder, item)`: returns a `Bound` whose `kind` is a `BoundKind` (`UNBOUNDED`, `INCLUDED` or `EXCLUDED`).
- `decode_duration`: returns a `Duration` built from `u64` seconds and `u32` nanoseconds. Whole seconds in the nanoseconds are carried into `secs`. A carry that overflows 64 bits raises `InvalidDuration`.

## Structs and enums

`bincodec.schema.StructSchema` describes a struct as an ordered tuple of `Field`s. The fields are decoded back to back. The values are passed by name to `factory`; without a factory the schema returns a dict.

`bincodec.enums.EnumSchema` describes an enum as a tuple of `Variant`s. It reads the variant's position as a `u32`, then that variant's fields. Without a factory, a variant decodes to `(name, {field: value})`.

Schemas are callable, so they can be used wherever a decode function is expected.

```python
from bincodec.config import standard
from bincodec.containers import decode_from_slice
from bincodec.enums import EnumSchema, Variant
from bincodec.schema import Field, StructSchema
from bincodec.primitives import decode_u32

point = StructSchema("Point", (Field("x", decode_u32), Field("y", decode_u32)))
decode_from_slice(b"\x01\x02", standard(), point)
# ({"x": 1, "y": 2}, 2)

shape = EnumSchema("Shape", (
    Variant("Empty"),
    Variant("Circle", (Field("radius", decode_u32),)),
))
decode_from_slice(b"\x01\x05", standard(), shape)
# (("Circle", {"radius": 5}), 2)
```

An index past the last variant raises `UnexpectedVariant`. The error's `allowed` is what `EnumSchema.allowed()` returns:

- an `AllowedRange(0, n - 1)` in the usual case;
- an `AllowedValues` listing the indexes when any variant sets an explicit `value`.

An explicit `value` does not change the wire index. Decoding an enum with no variants raises `EmptyEnum`.

## Readers

`bincodec.read.SliceReader` reads from an in-memory bytes-like object. Its `take_bytes` raises `UnexpectedEnd` with the number of missing bytes.

You can supply another source by subclassing `Reader` and implementing `read(n)`. It may also provide the optional `peek_read` and `consume` pair, which `decode_u8` uses when available.

## Errors

Every decoding failure is a subclass of `bincodec.errors.DecodeError`:

- `UnexpectedEnd`
- `LimitExceeded`
- `InvalidBooleanValue`
- `NonZeroTypeIsZero`
- `OutsideUsizeRange`
- `InvalidCharEncoding`
- `Utf8Error`
- `UnexpectedVariant`
- `InvalidDuration`
- `EmptyEnum`

## What this package does not do

The package only decodes. It has no encoder, so it cannot produce bincode data. It has no command-line tool. It provides no decoders for maps, sets or variable-length sequences of arbitrary items; build those from `decode_slice_len` and your own item function if you need them.