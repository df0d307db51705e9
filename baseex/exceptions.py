"""
Error types raised by the BaseEx converters.
"""


class BaseExError(Exception):
    """Base error of the package"""
    pass


class ConfigurationError(BaseExError, ValueError):
    """Invalid charset, radix, setting or output type"""
    pass


class InputTypeError(BaseExError, TypeError):
    """Input value can not be converted with the current settings"""
    pass


class CharsetError(BaseExError, ValueError):
    """Decoder met a character which is not part of the active charset"""

    def __init__(self, char):
        self.char = char
        super().__init__(f"Character '{char}' is not part of the charset.")


class PrecisionWarning(UserWarning):
    """Exact representation could not be found, result is approximated"""
    pass
