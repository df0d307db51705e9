"""
Input and Output Handlers
Turn arbitrary Python values into bytes for the converters and
materialize decoded bytes as the requested output type
"""

import math
from typing import Any, Tuple

import numpy as np

from .constants import MAX_SAFE_FLOAT_INTEGER
from .exceptions import ConfigurationError, InputTypeError
from .settings import Settings


def _byteorder(little_endian: bool) -> str:
    return "little" if little_endian else "big"


def _dtype(code: str, little_endian: bool) -> np.dtype:
    return np.dtype(code).newbyteorder("<" if little_endian else ">")


class BytesInput:
    """Accepts only bytes-like input (bytes, bytearray, memoryview, arrays)."""

    @staticmethod
    def to_bytes(value: Any, settings: Settings = None) -> Tuple[bytes, bool, str]:
        if isinstance(value, np.ndarray):
            return value.tobytes(), False, "bytes"
        if isinstance(value, (list, tuple)):
            try:
                return bytes(value), False, "bytes"
            except (TypeError, ValueError):
                raise InputTypeError("A list input must contain integers in range(256).") from None
        try:
            return bytes(memoryview(value)), False, "bytes"
        except TypeError:
            raise InputTypeError("The provided input type can not be processed.") from None


class BytesOutput:
    """Returns bytes as bytes, bytearray, memoryview or uint8 array."""

    type_list = ("bytes", "bytearray", "uint8", "view")

    @classmethod
    def get_type(cls, output_type: str) -> str:
        if output_type not in cls.type_list:
            raise ConfigurationError(f"Unknown output type: '{output_type}'")
        return output_type

    @classmethod
    def compile(cls, data: bytes, output_type: str, little_endian: bool = False, negative: bool = False):
        output_type = cls.get_type(output_type)

        if output_type == "bytearray":
            return bytearray(data)
        if output_type == "view":
            return memoryview(bytes(data))
        if output_type == "uint8":
            return np.frombuffer(bytes(data), dtype=np.uint8).copy()
        return bytes(data)


class SmartInput:
    """
    Advanced input handler.

    Converts text, integers of any size, floats, byte buffers, numpy
    arrays and nested lists/tuples of those into bytes.
    """

    @staticmethod
    def floating_points(value: float, little_endian: bool = False) -> bytes:
        """Pack a number as IEEE-754 float64."""
        return np.array([value], dtype=_dtype("f8", little_endian)).tobytes()

    @staticmethod
    def integers(value: int, little_endian: bool = False) -> bytes:
        """
        Pack an integer into the smallest fitting width.

        Widths are 2, 4 or 8 bytes, bigger values take the smallest multiple
        of 8 bytes. Negative values are stored as two's complement.

        Args:
            value: Integer to pack
            little_endian: Byte order

        Returns:
            bytes: Packed integer
        """
        if value < 0:
            if value >= -0x8000:
                width = 2
            elif value >= -0x80000000:
                width = 4
            else:
                # sign bit included
                width = 8 * math.ceil(((value + 1).bit_length() + 1) / 64)
        elif value > 0:
            if value <= 0xFFFF:
                width = 2
            elif value <= 0xFFFFFFFF:
                width = 4
            else:
                width = 8 * math.ceil(value.bit_length() / 64)
        else:
            width = 2

        return value.to_bytes(width, _byteorder(little_endian), signed=value < 0)

    @classmethod
    def to_bytes(cls, value: Any, settings: Settings) -> Tuple[bytes, bool, str]:
        """
        Convert a value into bytes.

        Args:
            value: Input value
            settings: Converter settings (little_endian, signed, number_mode)

        Returns:
            tuple: (bytes, negative flag, type hint)

        Raises:
            InputTypeError: If the value can not be converted
        """
        negative = False

        if isinstance(value, (bytes, bytearray, memoryview, np.ndarray)):
            return BytesInput.to_bytes(value)[0], False, "bytes"

        if isinstance(value, str):
            return value.encode("utf-8"), False, "str"

        if isinstance(value, bool) or value is None:
            raise InputTypeError("The provided input type can not be processed.")

        if isinstance(value, (int, np.integer)):
            value = int(value)
            if settings.signed and value < 0:
                negative = True
                value = -value

            if settings.number_mode:
                return cls.floating_points(value, settings.little_endian), negative, "float"
            return cls.integers(value, settings.little_endian), negative, "int"

        if isinstance(value, (float, np.floating)):
            value = float(value)
            if math.isnan(value):
                raise InputTypeError("Cannot proceed. Input is NaN.")
            if math.isinf(value):
                raise InputTypeError("Cannot proceed. Input is Infinity.")

            if settings.signed and value < 0:
                negative = True
                value = -value

            if (not settings.number_mode and value.is_integer()
                    and abs(value) <= MAX_SAFE_FLOAT_INTEGER):
                return cls.integers(int(value), settings.little_endian), negative, "int"
            return cls.floating_points(value, settings.little_endian), negative, "float"

        if isinstance(value, (list, tuple)):
            collection = bytearray()
            for elem in value:
                collection += cls.to_bytes(elem, settings)[0]
            return bytes(collection), False, "bytes"

        raise InputTypeError("The provided input type can not be processed.")


class SmartOutput:
    """
    Advanced output handler.

    Materializes bytes as bytes-like objects, numpy arrays of fixed width
    integers or floats, Python ints/floats of any size or text.
    """

    type_list = (
        "bigint_n",
        "bytearray",
        "bytes",
        "float32",
        "float64",
        "float_n",
        "int8",
        "int16",
        "int32",
        "int64",
        "int_n",
        "str",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uint_n",
        "view",
    )

    # numpy dtype codes of the fixed width types
    array_types = {
        "int8": "i1",
        "uint8": "u1",
        "int16": "i2",
        "uint16": "u2",
        "int32": "i4",
        "uint32": "u4",
        "int64": "i8",
        "uint64": "u8",
        "float32": "f4",
        "float64": "f8",
    }

    @classmethod
    def get_type(cls, output_type: str) -> str:
        if output_type not in cls.type_list:
            raise ConfigurationError(f"Unknown output type: '{output_type}'")
        return output_type

    @staticmethod
    def pad_to_width(data: bytes, width: int, little_endian: bool, negative: bool) -> bytes:
        """
        Fill bytes up to a multiple of an element width.

        Negative values longer than a byte are filled with 0xFF to keep the
        two's complement intact. Padding goes behind little-endian data and
        in front of big-endian data.
        """
        delta = (width - len(data) % width) % width
        if not delta:
            return bytes(data)

        fill = b"\xff" if negative and len(data) > 1 else b"\x00"
        if little_endian:
            return bytes(data) + fill * delta
        return fill * delta + bytes(data)

    @classmethod
    def make_array(cls, data: bytes, output_type: str, little_endian: bool, negative: bool) -> np.ndarray:
        dtype = _dtype(cls.array_types[output_type], little_endian)
        buffer = cls.pad_to_width(data, dtype.itemsize, little_endian, negative)
        return np.frombuffer(buffer, dtype=dtype).copy()

    @classmethod
    def compile(cls, data: bytes, output_type: str, little_endian: bool = False, negative: bool = False):
        """
        Materialize decoded bytes.

        A negative flag (signed conversion) is applied to the magnitude
        first; byte-like output then holds the two's complement bytes of
        the negative value.

        Args:
            data: Decoded bytes (magnitude if negative is set)
            output_type: One of ``type_list``
            little_endian: Byte order of data
            negative: The magnitude belongs to a negative number

        Returns:
            Output of the requested type
        """
        output_type = cls.get_type(output_type)
        data = bytes(data)

        if negative:
            if output_type.startswith("float"):
                n = -cls.compile(data, "float_n", little_endian)
                if output_type == "float_n":
                    return n
                # the IEEE-754 view holds the negated float, not integer bytes
                return np.array([n], dtype=_dtype(cls.array_types[output_type], little_endian))

            n = -cls.compile(data, "uint_n", little_endian)
            if output_type in ("int_n", "bigint_n"):
                return n
            data = SmartInput.to_bytes(n, Settings(little_endian=little_endian))[0]

        if output_type == "bytes":
            return data

        if output_type == "bytearray":
            return bytearray(data)

        if output_type == "view":
            return memoryview(data)

        if output_type == "str":
            return data.decode("utf-8", errors="replace")

        if output_type in ("uint_n", "int_n", "bigint_n"):
            # a single byte is always read unsigned
            if len(data) == 1:
                return data[0]
            return int.from_bytes(
                data,
                _byteorder(little_endian),
                signed=output_type != "uint_n"
            )

        if output_type == "float_n":
            if len(data) <= 4:
                width, code = 4, "f4"
            elif len(data) <= 8:
                width, code = 8, "f8"
            else:
                raise InputTypeError("The provided input is too complex to be converted into a floating point.")

            buffer = cls.pad_to_width(data, width, little_endian, negative)
            return float(np.frombuffer(buffer, dtype=_dtype(code, little_endian))[0])

        return cls.make_array(data, output_type, little_endian, negative)
