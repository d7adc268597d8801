"""Enum schemas: a u32 discriminant followed by the fields of the chosen variant."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .decoder import Decoder
from .errors import AllowedRange, AllowedValues, EmptyEnum, UnexpectedVariant
from .primitives import decode_u32
from .schema import Field

__all__ = ["Variant", "EnumSchema"]


@dataclass(frozen=True)
class Variant:
    """One variant of an enum: a name, its fields and how to build it.

    ``value`` records an explicit discriminant given in the declaration. The
    wire discriminant is always the variant's position; an explicit value
    only changes how the allowed discriminants are reported in errors.
    Without a ``factory`` a decoded variant is returned as
    ``(name, {field: value, ...})``.
    """

    name: str
    fields: tuple[Field, ...] = ()
    value: int | None = None
    factory: Callable[..., Any] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("a variant needs a non-empty name")
        fields = tuple(self.fields)
        object.__setattr__(self, "fields", fields)
        seen: set[str] = set()
        for item in fields:
            if item.name in seen:
                raise ValueError(f"duplicate field {item.name!r} in variant {self.name}")
            seen.add(item.name)

    def decode(self, decoder: Decoder) -> Any:
        """Decode the fields of this variant in order and build it."""
        values = {item.name: item.decode(decoder) for item in self.fields}
        if self.factory is None:
            return self.name, values
        return self.factory(**values)


@dataclass(frozen=True)
class EnumSchema:
    """The layout of an enum: its variants in declaration order.

    A value is written as its variant's index as a u32, then that variant's
    fields back to back. A schema is itself a decode function.
    """

    name: str
    variants: tuple[Variant, ...] = ()

    def __post_init__(self) -> None:
        variants = tuple(self.variants)
        object.__setattr__(self, "variants", variants)
        seen: set[str] = set()
        for variant in variants:
            if variant.name in seen:
                raise ValueError(f"duplicate variant {variant.name!r} in enum {self.name}")
            seen.add(variant.name)

    def allowed(self) -> AllowedRange | AllowedValues:
        """The discriminants this enum accepts, as reported in errors.

        An explicit list when any variant declares its own value, otherwise
        the range from 0 to the last index.
        """
        count = len(self.variants)
        if count == 0 or any(v.value is not None for v in self.variants):
            return AllowedValues(tuple(range(count)))
        return AllowedRange(0, count - 1)

    def decode(self, decoder: Decoder) -> Any:
        """Decode the discriminant, then the fields of the variant it selects."""
        if not self.variants:
            raise EmptyEnum(self.name)
        index = decode_u32(decoder)
        if index >= len(self.variants):
            raise UnexpectedVariant(found=index, type_name=self.name, allowed=self.allowed())
        return self.variants[index].decode(decoder)

    def __call__(self, decoder: Decoder) -> Any:
        return self.decode(decoder)