"""
Fixed-length byte array types.

Block hashes are carried around as `Bytes32`, an immutable `bytes` subclass
whose length is checked on construction.
"""

from __future__ import annotations

from typing import Any, ClassVar, SupportsIndex

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a bytes-like input to immutable `bytes`.

    Text is not accepted here, use `from_hex` for that.

    Raises:
      TypeError: If `value` is not `bytes` or `bytearray`.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise TypeError(f"Cannot build bytes from {type(value).__name__}")


class BaseBytes(bytes):
    """
    A base class for fixed-length byte types that inherits from `bytes`.

    Subclasses set:
      - `LENGTH`: exact number of bytes the instance must contain.
    """

    LENGTH: ClassVar[int]
    """The exact number of bytes (overridden by subclasses)."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create and validate a new Bytes instance.

        Args:
            value: Raw `bytes` or `bytearray`.

        Raises:
            TypeError: If `value` is not bytes-like.
            ValueError: If the byte length differs from `LENGTH`.
        """
        if not hasattr(cls, "LENGTH"):
            raise TypeError(f"{cls.__name__} must define LENGTH")

        b = _coerce_to_bytes(value)
        if len(b) != cls.LENGTH:
            raise ValueError(f"{cls.__name__} expects exactly {cls.LENGTH} bytes, got {len(b)}")
        return super().__new__(cls, b)

    @classmethod
    def from_hex(cls, text: str) -> Self:
        """
        Decode a hex string of exactly `2 * LENGTH` digits.

        Unlike plain `bytes.fromhex`, whitespace between digit pairs is
        rejected. Hashes written by other tools never carry any.
        An optional '0x' prefix is accepted.

        Raises:
            ValueError: If the text has the wrong length or a non-hex character.
        """
        digits = text.removeprefix("0x")
        if len(digits) != 2 * cls.LENGTH:
            raise ValueError(
                f"{cls.__name__} expects {2 * cls.LENGTH} hex digits, got {len(digits)}"
            )
        if not _HEX_DIGITS.issuperset(digits):
            raise ValueError(f"{cls.__name__} hex string contains non-hex characters")
        return cls(bytes.fromhex(digits))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        1. If the input is already an instance of the class, accept it.
        2. Otherwise, validate raw bytes of the exact LENGTH and wrap them.
        3. For serialization (e.g., to JSON), convert to hex string.
        """
        from_bytes_validator = core_schema.no_info_plain_validator_function(cls)

        python_schema = core_schema.chain_schema(
            [
                core_schema.bytes_schema(min_length=cls.LENGTH, max_length=cls.LENGTH),
                from_bytes_validator,
            ]
        )

        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                python_schema,
            ],
            serialization=core_schema.plain_serializer_function_ser_schema(lambda x: x.hex()),
        )

    def __repr__(self) -> str:
        """Return a string representation of the bytes."""
        tname = type(self).__name__
        return f"{tname}({self.hex()})"

    def __hash__(self) -> int:
        """Return the hash of the bytes."""
        return hash((type(self), bytes(self)))

    def hex(self, sep: str | bytes | None = None, bytes_per_sep: SupportsIndex = 1) -> str:
        """Return the hexadecimal string representation of the underlying bytes."""
        return bytes(self).hex() if sep is None else bytes(self).hex(sep, bytes_per_sep)


class Bytes32(BaseBytes):
    """Fixed-size byte array of exactly 32 bytes."""

    LENGTH = 32
