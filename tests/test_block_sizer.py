"""
Tests for block size derivation
"""

import pytest

from baseex.block_sizer import (
    UNBLOCKED,
    check_radix,
    guess_block_sizes,
    max_digits,
    min_digits,
)
from baseex.exceptions import ConfigurationError


@pytest.mark.parametrize("radix, expected", [
    (2, (1, 8)),
    (7, (3, 9)),
    (16, (1, 2)),
    (32, (5, 8)),
    (64, (3, 4)),
    (85, (4, 5)),
    (91, (3, 4)),
    (256, (1, 1)),
])
def test_conventional_groupings(radix, expected):
    assert tuple(guess_block_sizes(radix)) == expected


def test_radix_10_is_unblocked():
    sizes = guess_block_sizes(10)
    assert sizes == UNBLOCKED
    assert sizes.unblocked


@pytest.mark.parametrize("radix", [r for r in range(2, 257) if r != 10])
def test_block_is_exact_and_reversible(radix):
    bs, ds = guess_block_sizes(radix)
    assert bs > 0 and ds > 0
    # every block value fits into the digits ...
    assert radix ** ds >= 256 ** bs
    # ... and one digit less would not be enough
    assert radix ** (ds - 1) < 256 ** bs


def test_digit_capacity_helpers():
    assert min_digits(16, 1) == 2
    assert max_digits(16, 1) == 2
    assert min_digits(85, 4) == 5
    assert max_digits(85, 4) == 4
    assert min_digits(7, 0) == 0
    assert max_digits(7, 0) == 0


@pytest.mark.parametrize("radix", [0, 1, 257, 2.0, True, "16"])
def test_invalid_radix(radix):
    with pytest.raises(ConfigurationError):
        check_radix(radix)
