"""
Tests for the settings bundle and the charset registry
"""

import logging

import pytest

from baseex.exceptions import ConfigurationError
from baseex.settings import CharsetTable, Settings


def test_defaults():
    settings = Settings()
    assert settings.output_type == "bytes"
    assert settings.version == "default"
    assert not settings.little_endian


def test_merge_returns_new_instance():
    settings = Settings()
    merged = settings.merge({"little_endian": True}, mutable={"little_endian"})

    assert merged.little_endian
    assert not settings.little_endian


def test_merge_without_overrides():
    settings = Settings()
    assert settings.merge({}) is settings


def test_locked_switch():
    with pytest.raises(ConfigurationError, match="not allowed"):
        Settings().merge({"signed": True})

    # repeating the current value is fine
    assert not Settings().merge({"signed": False}).signed


def test_unknown_setting():
    with pytest.raises(ConfigurationError, match="Unknown setting"):
        Settings().merge({"endianness": "little"})


def test_unknown_version_and_output_type():
    with pytest.raises(ConfigurationError, match="version"):
        Settings().merge({"version": "b"}, versions=["default"])
    with pytest.raises(ConfigurationError, match="output type"):
        Settings().merge({"output_type": "x"}, output_types=["bytes"])


def test_number_mode_implies_float_output():
    assert Settings().merge({"number_mode": True}).output_type == "float_n"
    assert Settings().merge({"number_mode": True, "output_type": "bytes"}).output_type == "bytes"


def test_padding_is_dropped_in_signed_mode(caplog):
    with caplog.at_level(logging.WARNING, logger="baseex.settings"):
        settings = Settings(signed=True).merge({"padding": True}, mutable={"padding"})

    assert not settings.padding
    assert "Padding was set to false" in caplog.text


def test_charset_table_is_read_only():
    table = CharsetTable(2).add("default", "01")
    extended = table.add("ab", ["a", "b"])

    assert list(table) == ["default"]
    assert dict(extended) == {"default": "01", "ab": "ab"}

    with pytest.raises(TypeError):
        table["x"] = "xy"


def test_charset_table_rejects_multi_char_elements():
    with pytest.raises(ConfigurationError):
        CharsetTable(2).add("default", ["0", "12"])
