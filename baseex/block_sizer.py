"""
Block Sizer
Derives the byte/digit group sizes which make block-wise conversion exact
"""

import logging
from typing import NamedTuple

from .constants import BYTE_RADIX
from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)

MIN_RADIX = 2
MAX_RADIX = 256

# Radix 10 has no natural byte granularity and is converted as one
# unbounded integer.
UNBLOCKED_RADIX = 10


class BlockSizes(NamedTuple):
    """Pair of group sizes, ``(0, 0)`` means the input is a single block."""
    bytes_per_block: int
    digits_per_block: int

    @property
    def unblocked(self) -> bool:
        return self.bytes_per_block == 0


UNBLOCKED = BlockSizes(0, 0)


def check_radix(radix: int) -> int:
    """
    Validate a radix for block conversion.

    Raises:
        ConfigurationError: If the radix is not an int in [2, 256]
    """
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise ConfigurationError(f"Radix must be an integer, got {radix!r}")
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise ConfigurationError(
            f"Unsupported radix: {radix}. "
            f"Supported radices are {MIN_RADIX} to {MAX_RADIX}."
        )
    return radix


def min_digits(radix: int, byte_count: int) -> int:
    """Smallest digit count ``m`` with ``radix**m >= 256**byte_count``."""
    limit = BYTE_RADIX ** byte_count
    m = 0
    capacity = 1
    while capacity < limit:
        capacity *= radix
        m += 1
    return m


def max_digits(radix: int, byte_count: int) -> int:
    """Largest digit count ``k`` with ``radix**k <= 256**byte_count``."""
    limit = BYTE_RADIX ** byte_count
    k = 0
    capacity = radix
    while capacity <= limit:
        capacity *= radix
        k += 1
    return k


def guess_block_sizes(radix: int) -> BlockSizes:
    """
    Find the block sizes for a radix.

    First the amount of digits needed to represent one byte's worth of
    conditions is estimated (the radix itself below 8, otherwise
    ``ceil(256 / radix)``, reduced while it is a multiple of 8 bigger
    than 8). Then the smallest byte count whose value space covers that
    many digits is searched, and the digit count is calculated for
    exactly that many bytes. All comparisons use exact integer powers.

    Args:
        radix: Target radix (2 to 256)

    Returns:
        BlockSizes: ``(bytes_per_block, digits_per_block)``, or the
        unblocked sentinel ``(0, 0)`` for radix 10

    Example:
        >>> guess_block_sizes(64)
        BlockSizes(bytes_per_block=3, digits_per_block=4)
    """
    check_radix(radix)

    if radix == UNBLOCKED_RADIX:
        return UNBLOCKED

    if radix < 8:
        digits_estimate = radix
    else:
        digits_estimate = -(-BYTE_RADIX // radix)

    while digits_estimate > 8 and not digits_estimate % 8:
        digits_estimate //= 8

    # bytes * 8 * ln(2) / ln(radix) >= digits_estimate
    target = radix ** digits_estimate
    bytes_per_block = 0
    while BYTE_RADIX ** bytes_per_block < target:
        bytes_per_block += 1

    sizes = BlockSizes(bytes_per_block, min_digits(radix, bytes_per_block))
    logger.debug(f"Block sizes for radix {radix}: {sizes}")
    return sizes
