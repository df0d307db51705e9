"""
Tests for RadixCodec and the generic codec front-end
"""

import pytest

from baseex.constants import BASE32_CHARSET, BASE64_CHARSET, HEX_CHARSET
from baseex.exceptions import ConfigurationError
from baseex.template import BaseTemplate, RadixCodec


@pytest.mark.parametrize("radix", [r for r in range(2, 257) if r != 10])
@pytest.mark.parametrize("little_endian", [False, True])
def test_round_trip_every_radix(radix, little_endian, make_charset):
    codec = RadixCodec(make_charset(radix))
    bs = codec.converter.bytes_per_block

    for length in range(2 * bs + 2):
        for fill in (0x00, 0x01, 0xFF):
            data = bytes([fill] * length)
            encoded = codec.encode(data, little_endian=little_endian)
            assert codec.decode(encoded, little_endian=little_endian) == data

        data = bytes(range(200, 200 + length)) if length <= 56 else bytes(length)
        encoded = codec.encode(data, little_endian=little_endian)
        assert codec.decode(encoded, little_endian=little_endian) == data


def test_round_trip_samples(sample_bytes):
    codec = RadixCodec(BASE32_CHARSET)
    for data in sample_bytes:
        assert codec.decode(codec.encode(data)) == data


def test_base64_matches_rfc_4648():
    b64 = RadixCodec(BASE64_CHARSET, pad_char="=")

    assert b64.encode(b"A") == "QQ"
    assert b64.encode(b"A", padding=True) == "QQ=="
    assert b64.encode(b"Hello, World!", padding=True) == "SGVsbG8sIFdvcmxkIQ=="
    assert b64.decode("SGVsbG8sIFdvcmxkIQ==") == b"Hello, World!"


def test_base32_matches_rfc_4648():
    b32 = RadixCodec(BASE32_CHARSET, pad_char="=", padding=True)
    assert b32.encode(b"foobar") == "MZXW6YTBOI======"
    assert b32.decode("MZXW6YTBOI======") == b"foobar"


def test_padding_needs_pad_char():
    with pytest.raises(ConfigurationError):
        RadixCodec(BASE64_CHARSET).encode(b"A", padding=True)


def test_invalid_pad_char():
    with pytest.raises(ConfigurationError):
        RadixCodec(BASE64_CHARSET, pad_char="A")
    with pytest.raises(ConfigurationError):
        RadixCodec(BASE64_CHARSET, pad_char="==")


def test_text_output_type():
    codec = RadixCodec(HEX_CHARSET)
    assert codec.encode("hi") == "6869"
    assert codec.decode("6869", output_type="str") == "hi"


def test_unknown_setting_and_output_type():
    codec = RadixCodec(HEX_CHARSET)
    with pytest.raises(ConfigurationError):
        codec.encode(b"\x01", colour="red")
    with pytest.raises(ConfigurationError):
        codec.decode("01", output_type="complex128")
    with pytest.raises(ConfigurationError):
        codec.encode(b"\x01", signed=True)


def test_with_charset_returns_new_codec():
    codec = RadixCodec(HEX_CHARSET)
    upper = codec.with_charset("upper", HEX_CHARSET.upper())

    assert upper.encode(b"\xab", version="upper") == "AB"
    assert upper.decode("AB", version="upper") == b"\xab"
    assert "upper" not in codec.charsets
    with pytest.raises(ConfigurationError):
        codec.encode(b"\xab", version="upper")


@pytest.mark.parametrize("charset, message", [
    ("0123456789abcdeF0", "length"),
    ("0123456789abcdee", "repetitive"),
    (42, "types"),
])
def test_with_charset_validation(charset, message):
    codec = RadixCodec(HEX_CHARSET)
    with pytest.raises(ConfigurationError, match=message):
        codec.with_charset("broken", charset)


def test_with_charset_name_must_be_str():
    with pytest.raises(ConfigurationError):
        RadixCodec(HEX_CHARSET).with_charset(1, HEX_CHARSET)


def test_with_defaults_returns_new_codec():
    codec = RadixCodec(HEX_CHARSET)
    le = codec.with_defaults(little_endian=True)

    assert le.settings.little_endian
    assert not codec.settings.little_endian
    assert le.encode(b"\x01\x02") == "0201"


def test_replacer_hook():
    class DashedHex(RadixCodec):
        def _replacer(self, settings):
            return lambda frame, zero_padding: frame + "-"

    codec = DashedHex(HEX_CHARSET)
    assert codec.encode(b"\x01\x02") == "01-02-"
    assert codec.decode("01-02-") == b"\x01\x02"


def test_radix_codec_is_a_template():
    assert isinstance(RadixCodec(HEX_CHARSET), BaseTemplate)
    assert RadixCodec(HEX_CHARSET).radix == 16
