"""
BaseEx Package
Converts bytes to and from strings of arbitrary radix, LEB128 and the
golden ratio base (BasePhi)
"""

from .constants import (
    PHI_DIGITS,
    PHI_PRECISION,
    PHI_APPROX_DIGITS,
    DECIMAL_CHARSET,
    HEX_CHARSET,
    SIMPLE_CHARSET,
    PHI_CHARSET,
    BASE32_CHARSET,
    BASE64_CHARSET
)

from .exceptions import (
    BaseExError,
    ConfigurationError,
    InputTypeError,
    CharsetError,
    PrecisionWarning
)

from . import big_radix

from .block_sizer import BlockSizes, guess_block_sizes

from .converter import BaseConverter

from .settings import Settings, CharsetTable

from .io_handlers import BytesInput, BytesOutput, SmartInput, SmartOutput

from .template import BaseTemplate, RadixCodec, SimpleBase

from .leb128 import LEB128

from .decimal_arithmetic import DecimalArithmetic

from .base_phi import BasePhi

__all__ = [
    # Constants
    'PHI_DIGITS',
    'PHI_PRECISION',
    'PHI_APPROX_DIGITS',
    'DECIMAL_CHARSET',
    'HEX_CHARSET',
    'SIMPLE_CHARSET',
    'PHI_CHARSET',
    'BASE32_CHARSET',
    'BASE64_CHARSET',

    # Errors
    'BaseExError',
    'ConfigurationError',
    'InputTypeError',
    'CharsetError',
    'PrecisionWarning',

    # Core
    'big_radix',
    'BlockSizes',
    'guess_block_sizes',
    'BaseConverter',

    # Settings and IO
    'Settings',
    'CharsetTable',
    'BytesInput',
    'BytesOutput',
    'SmartInput',
    'SmartOutput',

    # Codecs
    'BaseTemplate',
    'RadixCodec',
    'SimpleBase',
    'LEB128',
    'DecimalArithmetic',
    'BasePhi'
]
