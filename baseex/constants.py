"""
BaseEx Constants
Numeric constants and default charsets shared by the converters
"""

# Golden ratio (φ) to 120 decimal places. BasePhi recomputes φ at the
# working precision of its arithmetic provider; this literal is the
# reference value used for sanity checks.
PHI_DIGITS = (
    "1.6180339887498948482045868343656381177203091798057628621354486227"
    "05260462818902449707207204189391137484754088075386891752"
)

# Decimal significant digits used by BasePhi arithmetic
PHI_PRECISION = 150

# Decimal places used to decide that a BasePhi remainder is zero
PHI_APPROX_DIGITS = 50

# Radix for byte values
BYTE_RADIX = 256

# Decimal digits, used by every base-10 bridge
DECIMAL_CHARSET = "0123456789"

# Lower case hex digits (LEB128 hex surface, SimpleBase)
HEX_CHARSET = "0123456789abcdef"

# Charset of SimpleBase (radix 2 to 62)
SIMPLE_CHARSET = (
    "0123456789"
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

# Two-symbol charset of BasePhi
PHI_CHARSET = "01"

# RFC 4648 alphabets, ready to use with RadixCodec
BASE32_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE64_CHARSET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789+/"
)

# LEB128 payload and continuation bits
LEB128_PAYLOAD_MASK = 0x7F
LEB128_CONTINUATION_BIT = 0x80
LEB128_SIGN_BIT = 0x40
LEB128_GROUP_BITS = 7

# Integer range boundaries of the input coercion layer
MAX_SAFE_FLOAT_INTEGER = 2 ** 53
