"""
Base Converter
Core block-wise conversion between bytes and digit strings of any radix
"""

import logging

from . import big_radix
from .block_sizer import (
    BlockSizes,
    check_radix,
    guess_block_sizes,
    max_digits,
    min_digits,
)
from .constants import BYTE_RADIX
from .exceptions import ConfigurationError, InputTypeError


logger = logging.getLogger(__name__)


class BaseConverter:
    """
    Converts bytes to strings of a given radix and back.

    Input bytes are grouped into blocks of ``bytes_per_block`` bytes, each
    block becoming exactly ``digits_per_block`` digits. A block size of
    zero turns the whole input into one unbounded integer.
    """

    def __init__(self, radix, bytes_per_block=None, digits_per_block=None, pad_value=0):
        """
        Initialize the converter.

        Args:
            radix: Radix of the digit strings (2 to 256)
            bytes_per_block: Bytes per block (guessed if omitted, 0 = unlimited)
            digits_per_block: Digits per block (guessed if omitted, 0 = unlimited)
            pad_value: Digit value appended to incomplete big-endian blocks
                during decoding (default: 0)
        """
        self.radix = check_radix(radix)

        if bytes_per_block is not None and digits_per_block is not None:
            if (bytes_per_block == 0) != (digits_per_block == 0):
                raise ConfigurationError(
                    "Block sizes must be both zero or both positive, "
                    f"got ({bytes_per_block}, {digits_per_block})"
                )
            self.block_sizes = BlockSizes(bytes_per_block, digits_per_block)
        else:
            self.block_sizes = guess_block_sizes(radix)

        if not 0 <= pad_value < radix:
            raise ConfigurationError(f"Pad value {pad_value} is not a digit of radix {radix}")
        self.pad_value = pad_value

        logger.debug(f"BaseConverter radix={radix} blocks={self.block_sizes}")

    @property
    def bytes_per_block(self):
        return self.block_sizes.bytes_per_block

    @property
    def digits_per_block(self):
        return self.block_sizes.digits_per_block

    def encode(self, input_bytes, charset, little_endian=False, replacer=None):
        """
        Encode bytes into a string of the converter's radix.

        Args:
            input_bytes: Bytes-like input
            charset: Characters for the digits (``None`` is only valid for
                radix 10, which then returns the plain decimal string)
            little_endian: Treat the input as least significant byte first
            replacer: Optional ``replacer(frame, zero_padding) -> str``,
                applied to every encoded block

        Returns:
            tuple: (encoded string, amount of zero bytes added as padding)
        """
        byte_array = list(bytes(input_bytes))

        bs = self.bytes_per_block
        if bs == 0:
            bs = len(byte_array)

        zero_padding = (bs - len(byte_array) % bs) % bs if bs else 0
        zero_array = [0] * zero_padding

        if little_endian:
            # Blocks are walked from left to right, so the least
            # significant byte has to come last.
            byte_array.reverse()
            byte_array = zero_array + byte_array
        else:
            byte_array = byte_array + zero_array

        # Decimal digits are canonical, no charset lookup needed.
        if self.radix == 10 and charset is None:
            return str(big_radix.from_bytes(byte_array)), 0

        if charset is None:
            raise ConfigurationError(f"A charset is required for radix {self.radix}")

        if not byte_array:
            return "", 0

        output = []
        for i in range(0, len(byte_array), bs):
            n = big_radix.from_bytes(byte_array[i:i + bs])
            digits = big_radix.to_digits(n, self.radix)

            # Null bytes yield fewer digits, fill them up.
            if len(digits) < self.digits_per_block:
                digits = [0] * (self.digits_per_block - len(digits)) + digits

            frame = "".join(charset[digit] for digit in digits)

            if replacer is not None:
                frame = replacer(frame, zero_padding)

            output.append(frame)

        return "".join(output), zero_padding

    def decode(self, input_base_str, charset, little_endian=False):
        """
        Decode a string of the converter's radix into bytes.

        Characters which are not part of the charset are skipped, so
        separators or line breaks may be part of the input.

        Args:
            input_base_str: Encoded string
            charset: Characters for the digits
            little_endian: Byte order of the result

        Returns:
            bytes: Decoded bytes

        Raises:
            InputTypeError: If a digit block does not fit into bytes_per_block bytes
        """
        if not input_base_str:
            return b""

        lookup = {char: index for index, char in enumerate(charset)}
        digits = [lookup[c] for c in input_base_str if c in lookup]
        if not digits:
            return b""

        bs = self.digits_per_block
        pad_count = 0

        if bs == 0:
            bs = len(digits)
        else:
            pad_count = (bs - len(digits) % bs) % bs
            if little_endian:
                # leading padding must not change the block value
                digits = [0] * pad_count + digits
            else:
                digits = digits + [self.pad_value] * pad_count

        block_limit = big_radix.power(BYTE_RADIX, self.bytes_per_block)

        b256_array = bytearray()
        for i in range(0, len(digits), bs):
            n = big_radix.from_digits(digits[i:i + bs], self.radix)
            if self.bytes_per_block and n >= block_limit:
                raise InputTypeError(
                    f"Input '{input_base_str}' holds a block whose value exceeds "
                    f"{self.bytes_per_block} bytes."
                )
            b256_array += big_radix.to_bytes(n, self.bytes_per_block)

        if self.bytes_per_block == 0:
            if little_endian:
                b256_array.reverse()
        elif little_endian:
            # Padding bytes sit in front of the reversed data.
            padding = self.pad_bytes(pad_count, little_endian=True)
            del b256_array[:padding]
            b256_array.reverse()
        else:
            padding = self.pad_bytes(pad_count)
            if padding:
                del b256_array[-padding:]

        return bytes(b256_array)

    def pad_chars(self, byte_count, little_endian=False):
        """
        Number of characters which only carry padding.

        For big endian these are the trailing characters of the last block
        whose combined value fits into ``byte_count`` zero bytes, for
        little endian the leading zero digits of the first block.

        Args:
            byte_count: Zero bytes added as padding during encoding

        Returns:
            int: Characters which can be removed from the encoded string
        """
        if not self.bytes_per_block or not byte_count:
            return 0
        if little_endian:
            data_bytes = self.bytes_per_block - byte_count
            return self.digits_per_block - min_digits(self.radix, data_bytes)
        return max_digits(self.radix, byte_count)

    def pad_bytes(self, char_count, little_endian=False):
        """
        Number of decoded bytes which belong to padding.

        Inverse of ``pad_chars``: the largest byte count smaller than one
        block whose padding characters do not exceed ``char_count``.

        Args:
            char_count: Characters added to complete the last block

        Returns:
            int: Bytes to remove from the decoded output
        """
        if not self.bytes_per_block or not char_count:
            return 0
        return max(
            (
                byte_count
                for byte_count in range(self.bytes_per_block)
                if self.pad_chars(byte_count, little_endian) <= char_count
            ),
            default=0,
        )
