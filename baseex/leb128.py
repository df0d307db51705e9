"""
LEB128 Converter
Little Endian Base 128 variable-length integer encoding (signed and unsigned)

There is no real charset, the output are the raw LEB128 bytes. For
storing them as text a hexadecimal surface ("hex" version) is available.
"""

import logging
from dataclasses import replace

from .constants import (
    DECIMAL_CHARSET,
    HEX_CHARSET,
    LEB128_CONTINUATION_BIT,
    LEB128_GROUP_BITS,
    LEB128_PAYLOAD_MASK,
    LEB128_SIGN_BIT,
)
from .converter import BaseConverter
from .exceptions import InputTypeError
from .io_handlers import BytesInput
from .settings import CharsetTable, Settings
from .template import BaseTemplate, extract_sign


logger = logging.getLogger(__name__)


class LEB128(BaseTemplate):
    """
    LEB128 encoder/decoder.

    Any input the input handler accepts is bridged to an integer via
    base 10 and emitted as 7-bit groups, least significant group first.
    Signed mode uses two's complement sign extension over the variable
    length; without it negative values are rejected.
    """

    def __init__(self, **defaults):
        """
        Initialize the converter.

        Args:
            **defaults: Default settings (signed, version, output_type, ...)
        """
        super().__init__(charset_tools=False)

        # Charsets are placeholders, only the version names matter.
        self.charsets = CharsetTable(0, {"default": "", "hex": ""})

        self.converter = BaseConverter(10, 0, 0)
        self.hexlify = BaseConverter(16, 1, 2)

        self.settings = Settings(little_endian=True)
        self.has_signed_mode = True
        self.mutable = {"signed"}

        self._apply_defaults(defaults)

    def encode(self, data, **overrides):
        """
        Encode a value as LEB128.

        Args:
            data: Input according to the input handler (int, bytes, ...)
            **overrides: Settings for this call

        Returns:
            bytes or str: LEB128 bytes, or their hex string for version "hex"

        Raises:
            InputTypeError: If the value is negative in unsigned mode
        """
        settings = self._settings(overrides)
        signed = settings.signed

        # Let the input handler always split the sign, the mode decides
        # whether a negative value is valid.
        input_bytes, negative, _ = self.input_handler.to_bytes(data, replace(settings, signed=True))

        base10 = self.converter.encode(input_bytes, None, settings.little_endian)[0]
        n = int(base10)

        if negative:
            if not signed:
                raise InputTypeError("Negative values in unsigned mode are invalid.")
            n = -n

        output = bytearray()

        if signed:
            while True:
                byte = n & LEB128_PAYLOAD_MASK
                n >>= LEB128_GROUP_BITS
                # stop once the rest is pure sign extension of this group
                if (n == 0 and not byte & LEB128_SIGN_BIT) or (n == -1 and byte & LEB128_SIGN_BIT):
                    output.append(byte)
                    break
                output.append(byte | LEB128_CONTINUATION_BIT)
        else:
            while True:
                byte = n & LEB128_PAYLOAD_MASK
                n >>= LEB128_GROUP_BITS
                if n == 0:
                    output.append(byte)
                    break
                output.append(byte | LEB128_CONTINUATION_BIT)

        logger.debug(f"LEB128 encoded {len(output)} bytes (signed={signed})")

        if settings.version == "hex":
            return self.hexlify.encode(output, HEX_CHARSET, False)[0]

        return bytes(output)

    def decode(self, data, **overrides):
        """
        Decode LEB128 bytes (or their hex string).

        Args:
            data: Bytes-like LEB128 input, or a hex string for version "hex"
            **overrides: Settings for this call

        Returns:
            Decoded value according to ``output_type``
        """
        settings = self._settings(overrides)

        if settings.version == "hex":
            input_bytes = self.hexlify.decode(str(data).lower(), HEX_CHARSET, False)
        else:
            input_bytes = BytesInput.to_bytes(data)[0]

        if len(input_bytes) <= 1 and not any(input_bytes):
            return self.output_handler.compile(b"\x00", settings.output_type, True)

        n = 0
        shift = -LEB128_GROUP_BITS
        for byte in input_bytes:
            shift += LEB128_GROUP_BITS
            n += (byte & LEB128_PAYLOAD_MASK) << shift

        if settings.signed and input_bytes[-1] & LEB128_SIGN_BIT:
            n |= -(1 << (shift + LEB128_GROUP_BITS))

        decimal_num, negative = extract_sign(str(n))
        output = self.converter.decode(decimal_num, DECIMAL_CHARSET, True)

        return self.output_handler.compile(output, settings.output_type, True, negative)
