"""
The digest type.

A `Digest` is the fixed-size output of a hash function and the only value the
tree ever stores. It is a `bytes` subclass, so equality and hashing are
byte-wise and a digest compares equal to the raw bytes it wraps.
"""

from __future__ import annotations

from typing import Any, Iterable

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray` / `memoryview`
      - Hex strings, with or without a '0x' prefix (e.g. "0xdeadbeef" or "deadbeef")
      - Iterables of integers in [0, 255]

    Raises:
      ValueError / TypeError if conversion is not possible or out-of-range.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return bytes.fromhex(value.removeprefix("0x"))
    if isinstance(value, Iterable):
        return bytes(bytearray(value))
    raise TypeError(f"Cannot build a digest from {type(value).__name__}")


class Digest(bytes):
    """
    An immutable, non-empty hash output.

    The length is whatever the producing hash function emits (32 bytes for the
    256-bit variants, 64 for SHA3-512). The tree enforces that all digests it
    combines share one length.
    """

    def __new__(cls, value: Any) -> Self:
        """
        Create a new digest.

        Args:
            value: Any value coercible to bytes (see `_coerce_to_bytes`).

        Raises:
            ValueError: If the value is empty or not valid hex.
        """
        data = _coerce_to_bytes(value)
        if not data:
            raise ValueError("Digest cannot be empty")
        return super().__new__(cls, data)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into pydantic validation.

        Python input is accepted as an existing `Digest` or as non-empty bytes.
        JSON input is a hex string. Serialization to JSON writes hex.
        """
        from_value = core_schema.no_info_plain_validator_function(cls)

        python_schema = core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                core_schema.chain_schema([core_schema.bytes_schema(min_length=1), from_value]),
            ]
        )
        json_schema = core_schema.chain_schema([core_schema.str_schema(), from_value])

        return core_schema.json_or_python_schema(
            json_schema=json_schema,
            python_schema=python_schema,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda d: d.hex(), when_used="json"
            ),
        )

    def __repr__(self) -> str:
        return f"Digest({self.hex()})"
