"""
Tests for SimpleBase (unblocked integer bases)
"""

import pytest

from baseex.exceptions import ConfigurationError, InputTypeError
from baseex.template import SimpleBase


@pytest.mark.parametrize("radix, value, expected", [
    (2, 5, "101"),
    (16, 255, "ff"),
    (16, 0, "0"),
    (36, 1295, "zz"),
    (62, 61, "Z"),
    (10, 65536, "65536"),
])
def test_encode_integers(radix, value, expected):
    assert SimpleBase(radix).encode(value) == expected


@pytest.mark.parametrize("radix", [2, 7, 16, 36, 62])
@pytest.mark.parametrize("value", [1, 255, 65535, 2 ** 40 + 3, -1, -300, -(2 ** 70)])
def test_integer_round_trip(radix, value):
    codec = SimpleBase(radix)
    # int_n reads the magnitude bytes as two's complement, positives need uint_n
    output_type = "int_n" if value < 0 else "uint_n"
    assert codec.decode(codec.encode(value), output_type=output_type) == value


def test_negative_values_carry_a_sign():
    codec = SimpleBase(16)
    assert codec.encode(-255) == "-ff"
    assert codec.decode("-ff", output_type="int_n") == -255


def test_sign_without_signed_mode():
    codec = SimpleBase(16, signed=False)
    with pytest.raises(InputTypeError):
        codec.decode("-ff")


def test_upper_case():
    codec = SimpleBase(16)
    assert codec.encode(48879, upper=True) == "BEEF"
    assert codec.decode("BEEF", output_type="uint_n") == 48879


def test_upper_case_only_up_to_radix_36():
    with pytest.raises(ConfigurationError):
        SimpleBase(62).encode(1, upper=True)


def test_little_endian_input():
    codec = SimpleBase(16)
    assert codec.encode(b"\x01\x02", little_endian=True) == "201"
    assert codec.decode("201", little_endian=True) == b"\x01\x02"


@pytest.mark.parametrize("radix", [1, 63, "16"])
def test_invalid_radix(radix):
    with pytest.raises(ConfigurationError):
        SimpleBase(radix)
