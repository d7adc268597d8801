"""Decoding of the bincode binary serialization format: configuration, readers,
primitive and compound decoders, and struct and enum schemas."""

__version__ = "0.1.0"
__all__ = ["config", "errors", "read", "decoder", "primitives", "containers", "schema", "enums"]