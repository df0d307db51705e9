"""
Decimal Arithmetic Provider
Arbitrary-precision decimal operations injected into BasePhi
"""

import numbers
from decimal import ROUND_HALF_UP, Context, Decimal, localcontext

from .constants import PHI_APPROX_DIGITS, PHI_PRECISION
from .exceptions import ConfigurationError


class DecimalArithmetic:
    """
    Decimal arithmetic with a fixed number of significant digits.

    Wraps a ``decimal.Context`` so BasePhi never touches the global
    decimal context. Exactness of every BasePhi result depends on the
    precision chosen here.
    """

    def __init__(self, precision=PHI_PRECISION, approx_digits=PHI_APPROX_DIGITS):
        """
        Initialize the provider.

        Args:
            precision: Significant decimal digits of every result (default: 150)
            approx_digits: Decimal places used by ``is_zero`` (default: 50)
        """
        if precision <= approx_digits:
            raise ConfigurationError(
                f"Precision ({precision}) must be bigger than the approximation digits ({approx_digits})"
            )

        self.precision = precision
        self.approx_digits = approx_digits
        self.context = Context(prec=precision, rounding=ROUND_HALF_UP)

        # φ = (1 + √5) / 2 at the working precision
        self.phi = self.context.divide(
            self.context.add(1, self.context.sqrt(Decimal(5))),
            2
        )

    def number(self, value):
        """Convert an int, real number, str or Decimal into a Decimal of this context."""
        if isinstance(value, (Decimal, str)):
            return self.context.create_decimal(value)
        if isinstance(value, numbers.Integral):
            return self.context.create_decimal(int(value))
        if isinstance(value, numbers.Rational):
            # exact fractions divide at the working precision
            return self.context.divide(Decimal(int(value.numerator)), Decimal(int(value.denominator)))
        if isinstance(value, numbers.Real):
            # shortest repr, 0.1 stays 0.1
            return self.context.create_decimal(repr(float(value)))
        return self.context.create_decimal(value)

    def add(self, a, b):
        return self.context.add(a, b)

    def subtract(self, a, b):
        return self.context.subtract(a, b)

    def multiply(self, a, n):
        """Multiply by an integer."""
        return self.context.multiply(a, n)

    def compare(self, a, b):
        """Three-way comparison, returns -1, 0 or 1."""
        return int(self.context.compare(a, b))

    def round(self, a, digits=0):
        """Round half up to ``digits`` decimal places."""
        with localcontext() as ctx:
            # enough room for the integer part and the kept decimals
            ctx.prec = max(self.precision, a.adjusted() + digits + 2)
            return a.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)

    def is_zero(self, a):
        """True if ``a`` rounds to zero at ``approx_digits`` decimal places."""
        return self.round(self.context.abs(a), self.approx_digits).is_zero()

    def to_integer_string(self, a):
        """Nearest integer as a plain decimal string."""
        return format(self.round(a), "f")

    def to_float(self, a):
        return float(a)
