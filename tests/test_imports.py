"""
Test script to validate all imports of the baseex package
"""

import importlib
import os

import pytest

import baseex


MODULES = [
    "baseex.constants",
    "baseex.exceptions",
    "baseex.big_radix",
    "baseex.block_sizer",
    "baseex.converter",
    "baseex.settings",
    "baseex.io_handlers",
    "baseex.template",
    "baseex.leb128",
    "baseex.decimal_arithmetic",
    "baseex.base_phi",
    "baseex.config",
    "baseex.cli",
]


@pytest.mark.parametrize("name", MODULES)
def test_module_imports(name):
    assert importlib.import_module(name) is not None


def test_public_names():
    for name in baseex.__all__:
        assert hasattr(baseex, name), name


def test_quick_functional_check():
    """Every codec survives one round trip"""
    assert baseex.RadixCodec(baseex.BASE64_CHARSET).decode(baseex.RadixCodec(baseex.BASE64_CHARSET).encode(b"abc")) == b"abc"
    assert baseex.SimpleBase(16).encode(255) == "ff"
    assert baseex.LEB128().encode(300) == b"\xac\x02"
    assert baseex.BasePhi().encode(2) == "10.01"


def test_errors_share_a_base():
    for error in (baseex.ConfigurationError, baseex.InputTypeError, baseex.CharsetError):
        assert issubclass(error, baseex.BaseExError)


def test_config_defaults(monkeypatch, tmp_path):
    from baseex.config import load_config

    for name in ("BASEEX_LOG_LEVEL", "BASEEX_PHI_PRECISION", "BASEEX_PHI_APPROX_DIGITS", "BASEEX_OUTPUT_TYPE"):
        monkeypatch.delenv(name, raising=False)

    config = load_config(tmp_path / "missing.env")
    assert config == {
        'LOG_LEVEL': 'WARNING',
        'PHI_PRECISION': baseex.PHI_PRECISION,
        'PHI_APPROX_DIGITS': baseex.PHI_APPROX_DIGITS,
        'OUTPUT_TYPE': 'bytes',
    }


def test_config_from_dotenv(monkeypatch, tmp_path):
    from baseex.config import load_config

    monkeypatch.delenv("BASEEX_PHI_PRECISION", raising=False)
    dotenv = tmp_path / ".env"
    dotenv.write_text("BASEEX_PHI_PRECISION=200\n")

    try:
        assert load_config(dotenv)['PHI_PRECISION'] == 200
    finally:
        os.environ.pop("BASEEX_PHI_PRECISION", None)
