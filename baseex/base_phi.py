"""
BasePhi Converter
Representation of numbers in the irrational base φ (golden ratio)

Integers and (in decimal mode) real numbers are decomposed greedily into
powers of φ. Powers are never computed by exponentiation but walked with
the recurrence φ^(k+1) = φ^k + φ^(k-1), forward and backward.
"""

import logging
import numbers
import warnings
from decimal import Decimal

import numpy as np

from .constants import DECIMAL_CHARSET, PHI_CHARSET
from .converter import BaseConverter
from .decimal_arithmetic import DecimalArithmetic
from .exceptions import CharsetError, InputTypeError, PrecisionWarning
from .io_handlers import SmartOutput
from .settings import CharsetTable, Settings
from .template import BaseTemplate, extract_sign


logger = logging.getLogger(__name__)


class BasePhi(BaseTemplate):
    """
    Base phi encoder/decoder.

    Byte input is bridged to a decimal integer first. In decimal mode a
    real number is encoded directly and decoding returns a float.
    """

    def __init__(self, arithmetic=None, **defaults):
        """
        Initialize the converter.

        Args:
            arithmetic: Decimal arithmetic provider (default: DecimalArithmetic())
            **defaults: Default settings (decimal_mode, output_type, version, ...)
        """
        super().__init__()

        self.arithmetic = arithmetic if arithmetic is not None else DecimalArithmetic()

        # radix is φ, but the representation only needs two chars
        self.charsets = CharsetTable(2).add("default", PHI_CHARSET)

        # always have a numerical input
        self.b10 = BaseConverter(10, 0, 0)

        self.settings = Settings(signed=True)
        self.has_signed_mode = True
        self.mutable = {"decimal_mode"}

        self._apply_defaults(defaults)

    def _next_phi_exp(self, last, cur):
        """(φ^(k-1), φ^k) -> (φ^k, φ^(k+1))"""
        return cur, self.arithmetic.add(last, cur)

    def _prev_phi_exp(self, cur, prev):
        """(φ^k, φ^(k+1)) -> (φ^(k-1), φ^k)"""
        return self.arithmetic.subtract(prev, cur), cur

    def _fits(self, power, n):
        # power <= n, tolerating rounding noise below the zero threshold
        return self.arithmetic.is_zero(self.arithmetic.subtract(power, n)) or self.arithmetic.compare(power, n) <= 0

    def _input_number(self, data, settings):
        """Return the magnitude as Decimal and the negative flag."""
        if settings.decimal_mode:
            if isinstance(data, bool) or not isinstance(data, (numbers.Real, Decimal)):
                raise InputTypeError("When running the converter in decimal mode, only numbers are allowed.")

            n = self.arithmetic.number(data)
            if not n.is_finite():
                raise InputTypeError(f"Cannot proceed. Input is {data}.")

            if n < 0:
                return self.arithmetic.context.minus(n), True
            return n, False

        input_bytes, negative, _ = self.input_handler.to_bytes(data, settings)
        n = self.arithmetic.number(self.b10.encode(input_bytes, None, settings.little_endian)[0])
        return n, negative

    def decompose(self, n):
        """
        Greedy decomposition of a magnitude into powers of φ.

        Args:
            n: Non-negative Decimal

        Returns:
            tuple: (exponents >= 0 descending, negative exponents descending)
        """
        exponents = []
        dec_exponents = []

        # smallest exponent whose power reaches n
        last = self.arithmetic.number(1)
        cur = self.arithmetic.phi
        exp = 1
        while self.arithmetic.compare(cur, n) < 0:
            last, cur = self._next_phi_exp(last, cur)
            exp += 1

        prev = self.arithmetic.add(last, cur)
        max_steps = exp + 5 * self.arithmetic.precision + 16
        steps = 0

        while not self.arithmetic.is_zero(n):

            # step down until the power fits into n
            while not self._fits(cur, n):
                cur, prev = self._prev_phi_exp(cur, prev)
                exp -= 1
                steps += 1

                if self.arithmetic.compare(cur, 0) <= 0 or steps > max_steps:
                    warnings.warn(
                        "Could not find an exact base-phi representation. Value is approximated.",
                        PrecisionWarning,
                        stacklevel=3
                    )
                    return exponents, dec_exponents

            if exp >= 0:
                exponents.append(exp)
            else:
                dec_exponents.append(exp)

            n = self.arithmetic.subtract(n, cur)

        logger.debug(f"BasePhi decomposition: {len(exponents)} integer and {len(dec_exponents)} fractional digits")
        return exponents, dec_exponents

    def encode(self, data, **overrides):
        """
        Encode a value as base phi string.

        Args:
            data: Input according to the input handler, or a real number
                in decimal mode
            **overrides: Settings for this call

        Returns:
            str: Base phi string, e.g. ``'10.01'`` for 2
        """
        settings = self._settings(overrides)
        charset = self.charsets[settings.version]

        n, negative = self._input_number(data, settings)
        sign = "-" if negative else ""

        # 0 and 1 are digits of their own
        for digit in (0, 1):
            if self.arithmetic.compare(n, digit) == 0:
                return sign + charset[digit]

        exponents, dec_exponents = self.decompose(n)

        int_part = set(exponents)
        if exponents:
            output = "".join(
                charset[1] if exp in int_part else charset[0]
                for exp in range(exponents[0], -1, -1)
            )
        else:
            output = charset[0]

        if dec_exponents:
            frac_part = set(dec_exponents)
            output += "." + "".join(
                charset[1] if exp in frac_part else charset[0]
                for exp in range(-1, dec_exponents[-1] - 1, -1)
            )

        return sign + output

    def decode(self, text, **overrides):
        """
        Decode a base phi string.

        Args:
            text: Base phi string
            **overrides: Settings for this call

        Returns:
            float in decimal mode or for float output types, otherwise output according to ``output_type``

        Raises:
            CharsetError: If a character is neither a digit nor the radix point
        """
        settings = self._settings(overrides)
        charset = self.charsets[settings.version]

        text, negative = extract_sign(str(text).strip())
        int_str, _, dec_str = text.partition(".")

        n = self.arithmetic.number(0)

        last = self.arithmetic.subtract(self.arithmetic.phi, 1)
        cur = self.arithmetic.number(1)
        for char in reversed(int_str):
            index = charset.find(char)
            if index == 1:
                n = self.arithmetic.add(n, cur)
            elif index != 0:
                raise CharsetError(char)
            last, cur = self._next_phi_exp(last, cur)

        if dec_str:
            prev = self.arithmetic.number(1)
            cur = self.arithmetic.subtract(self.arithmetic.phi, prev)
            for char in dec_str:
                index = charset.find(char)
                if index == 1:
                    n = self.arithmetic.add(n, cur)
                elif index != 0:
                    raise CharsetError(char)
                cur, prev = self._prev_phi_exp(cur, prev)

        if settings.decimal_mode or settings.output_type.startswith("float"):
            value = self.arithmetic.to_float(n)
            if negative:
                value = -value
            if settings.decimal_mode or settings.output_type == "float_n":
                return value
            # float views hold the decoded number itself, not its integer bytes
            return np.array([value], dtype=SmartOutput.array_types[settings.output_type])

        output = self.b10.decode(self.arithmetic.to_integer_string(n), DECIMAL_CHARSET, settings.little_endian)

        return self.output_handler.compile(output, settings.output_type, settings.little_endian, negative)
