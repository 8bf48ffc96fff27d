"""Unsigned integer types."""

from __future__ import annotations

from typing import Any, ClassVar, Literal, SupportsIndex

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self


class BaseUint(int):
    """
    A base class for fixed-width unsigned integers that inherits from `int`.

    Only the bitwise operators are overridden: they are closed over the type,
    so combining two lanes can never silently widen past `BITS`.
    """

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    def __new__(cls, value: Any) -> Self:
        """
        Create and validate a new Uint instance.

        Raises:
            TypeError: If `value` is not an `int` (booleans are rejected too).
            OverflowError: If `value` is outside the allowed range [0, 2**BITS - 1].
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        int_value = int(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def max_value(cls) -> Self:
        """The largest representable value (all bits set)."""
        return cls(2**cls.BITS - 1)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            """Pydantic validation function that calls the class constructor."""
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        return core_schema.json_or_python_schema(
            json_schema=core_schema.int_schema(ge=0, lt=2**cls.BITS),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Hook into Pydantic's JSON Schema generation system."""
        json_schema = handler(core_schema)
        json_schema.update(format=f"uint{cls.BITS}")
        return json_schema

    def to_bytes(
        self,
        length: SupportsIndex | None = None,
        byteorder: Literal["little", "big"] = "little",
        *,
        signed: bool = False,
    ) -> bytes:
        """
        Return an array of bytes representing the integer.

        Defaults to little-endian and a fixed length based on `BITS`.
        """
        actual_length = self.BITS // 8 if length is None else int(length)
        return super().to_bytes(length=actual_length, byteorder=byteorder, signed=signed)

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """Parse exactly `BITS // 8` little-endian bytes into a value."""
        if len(data) != cls.BITS // 8:
            raise ValueError(
                f"{cls.__name__} expects exactly {cls.BITS // 8} bytes, got {len(data)}"
            )
        return cls(int.from_bytes(data, "little"))

    def _raise_type_error(self, other: Any, op_symbol: str) -> None:
        """Helper to raise a consistent TypeError."""
        raise TypeError(
            f"Unsupported operand type(s) for {op_symbol}: "
            f"'{type(self).__name__}' and '{type(other).__name__}'"
        )

    def __and__(self, other: Any) -> Self:
        """Handle the bitwise AND operator (`&`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "&")
        return type(self)(super().__and__(other))

    def __rand__(self, other: Any) -> Self:
        """Handle the reverse bitwise AND operator (`&`)."""
        return self.__and__(other)

    def __or__(self, other: Any) -> Self:
        """Handle the bitwise OR operator (`|`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "|")
        return type(self)(super().__or__(other))

    def __ror__(self, other: Any) -> Self:
        """Handle the reverse bitwise OR operator (`|`)."""
        return self.__or__(other)

    def __xor__(self, other: Any) -> Self:
        """Handle the bitwise XOR operator (`^`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "^")
        return type(self)(super().__xor__(other))

    def __rxor__(self, other: Any) -> Self:
        """Handle the reverse bitwise XOR operator (`^`)."""
        return self.__xor__(other)

    def __invert__(self) -> Self:
        """
        Handle the bitwise NOT operator (`~`).

        Python's `int.__invert__` yields a negative number; here the
        complement is taken within `BITS` bits instead.
        """
        return type(self)((2**self.BITS - 1) ^ int(self))

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"{type(self).__name__}({int(self):#0{self.BITS // 4 + 2}x})"

    def __str__(self) -> str:
        """Return the informal, user-friendly string representation."""
        return str(int(self))


class Uint64(BaseUint):
    """A type representing a 64-bit unsigned integer (uint64)."""

    BITS = 64
