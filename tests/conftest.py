"""
Shared fixtures for the BaseEx tests
"""

import os
import sys

import pytest

# Make the baseex package importable without installing it
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))

if project_root not in sys.path:
    sys.path.insert(0, project_root)


@pytest.fixture
def sample_bytes():
    """Byte strings with the usual suspects: empty, zeros, high bytes, text."""
    return [
        b"",
        b"\x00",
        b"\x00\x00\x00",
        b"\x00\x01",
        b"\x01\x00",
        b"\xff",
        b"\xff\xff\xff\xff\xff",
        b"Hello, World!",
        bytes(range(256)),
    ]


@pytest.fixture
def make_charset():
    """Factory for a charset of any radix (unique, no '-' or '=')."""
    def _make(radix):
        return "".join(chr(0x100 + i) for i in range(radix))
    return _make
