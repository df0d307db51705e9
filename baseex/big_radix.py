"""
BigRadix
Arbitrary-precision magnitude arithmetic used by the base converters

Python integers are unbounded, so these helpers are thin. Their job is to
keep the core honest: every value is a non-negative magnitude (signs are
carried separately as flags), byte conversions never truncate and no
floating-point value ever takes part in integer work.
"""


def _check_magnitude(n):
    if n < 0:
        raise ValueError(f"Magnitude must not be negative: {n}")


def from_bytes(data, little_endian=False):
    """
    Interpret a byte sequence as an unsigned integer.

    Args:
        data: Bytes-like object or iterable of ints in range(256)
        little_endian: Least significant byte first (default: False)

    Returns:
        int: Magnitude represented by the bytes (0 for an empty sequence)
    """
    return int.from_bytes(bytes(data), "little" if little_endian else "big")


def to_bytes(n, byte_len=0):
    """
    Convert a magnitude to big-endian bytes.

    The result is left-padded with zero bytes up to ``byte_len``. A value
    which needs more bytes than ``byte_len`` is returned in full, never cut.

    Args:
        n: Non-negative integer
        byte_len: Minimum length of the result (default: 0, minimal length)

    Returns:
        bytes: Big-endian representation (at least one byte)
    """
    _check_magnitude(n)
    needed = max(1, (n.bit_length() + 7) // 8)
    return n.to_bytes(max(needed, byte_len), "big")


def divmod_small(n, divisor):
    """
    Divide a magnitude by a small positive divisor.

    Args:
        n: Non-negative integer
        divisor: Positive integer (a radix, at most 2**16 in practice)

    Returns:
        tuple: (quotient, remainder)
    """
    _check_magnitude(n)
    if divisor <= 0:
        raise ValueError(f"Divisor must be positive: {divisor}")
    return divmod(n, divisor)


def power(radix, exponent):
    """Exact ``radix ** exponent`` for a non-negative exponent."""
    _check_magnitude(exponent)
    return radix ** exponent


def add(a, b):
    _check_magnitude(a)
    _check_magnitude(b)
    return a + b


def subtract(a, b):
    """Subtract ``b`` from ``a``; the result must stay a magnitude."""
    _check_magnitude(b)
    result = a - b
    _check_magnitude(result)
    return result


def multiply_small(n, factor):
    _check_magnitude(n)
    _check_magnitude(factor)
    return n * factor


def compare(a, b):
    """Three-way comparison, returns -1, 0 or 1."""
    return (a > b) - (a < b)


def to_digits(n, radix):
    """
    Split a magnitude into digits of the given radix.

    The value is divided by the radix until the quotient is less than the
    radix; each remainder is prepended.

    Args:
        n: Non-negative integer
        radix: Target radix (>= 2)

    Returns:
        list: Digits, most significant first ([0] for zero)
    """
    digits = []
    q = n
    while q >= radix:
        q, r = divmod_small(q, radix)
        digits.append(r)
    digits.append(q)
    digits.reverse()
    return digits


def from_digits(digits, radix):
    """
    Rebuild a magnitude from its digits via positional weights.

    Args:
        digits: Sequence of ints in range(radix), most significant first
        radix: Source radix

    Returns:
        int: Σ digit[j] * radix^(len-1-j)
    """
    n = 0
    for digit in digits:
        # Horner form of the positional sum
        n = add(multiply_small(n, radix), digit)
    return n
