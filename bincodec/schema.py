"""Struct schemas: an ordered list of fields decoded one after another."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .decoder import Decoder

__all__ = ["Field", "StructSchema"]


@dataclass(frozen=True)
class Field:
    """A named field of a struct and the function that decodes its value."""

    name: str
    decode: Callable[[Decoder], Any]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("a field needs a non-empty name")
        if not callable(self.decode):
            raise TypeError(f"decoder of field {self.name!r} is not callable")


@dataclass(frozen=True)
class StructSchema:
    """The layout of a struct: its fields, decoded in declaration order.

    Fields are written back to back with no tags, padding or length prefix.
    The decoded values are passed by name to ``factory``; without a factory
    they are returned as a dict. A schema is itself a decode function, so it
    can be used as the item of an array, option or another struct.
    """

    name: str
    fields: tuple[Field, ...] = ()
    factory: Callable[..., Any] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        fields = tuple(self.fields)
        object.__setattr__(self, "fields", fields)
        seen: set[str] = set()
        for item in fields:
            if item.name in seen:
                raise ValueError(f"duplicate field {item.name!r} in struct {self.name}")
            seen.add(item.name)

    def decode(self, decoder: Decoder) -> Any:
        """Decode every field in order and build the struct from the values."""
        values = {item.name: item.decode(decoder) for item in self.fields}
        if self.factory is None:
            return values
        return self.factory(**values)

    def __call__(self, decoder: Decoder) -> Any:
        return self.decode(decoder)