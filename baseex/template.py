"""
Codec front-ends built on BaseConverter.

BaseTemplate wires settings, input coercion, the converter and output
materialization together. RadixCodec and SimpleBase are ready to use
codecs for arbitrary charsets and for the classic integer bases.
"""

import copy
import logging
import re
from typing import Any, Callable, Optional, Set, Tuple

from .constants import SIMPLE_CHARSET
from .converter import BaseConverter
from .exceptions import ConfigurationError, InputTypeError
from .io_handlers import BytesInput, BytesOutput, SmartInput, SmartOutput
from .settings import CharsetTable, Settings


logger = logging.getLogger(__name__)


def to_signed_str(output: str, negative: bool, zero: str = "0") -> str:
    """Strip leading zero digits (keeping one) and prefix a minus sign."""
    output = re.sub(f"^{re.escape(zero)}+(?!$)", "", output)
    if negative:
        output = "-" + output
    return output


def extract_sign(text: str) -> Tuple[str, bool]:
    """Split a leading minus sign from a string."""
    if text.startswith("-"):
        return text[1:], True
    return text, False


class BaseTemplate:
    """
    Base of every codec.

    Subclasses set ``converter``, ``charsets``, ``settings`` (defaults)
    and ``mutable`` (switches a caller may change), then call
    ``_apply_defaults`` with the user's constructor settings. The hook
    methods ``_replacer``, ``_post_encode``, ``_pre_decode`` and
    ``_post_decode`` customize the generic pipeline.
    """

    def __init__(self, bytes_only: bool = False, charset_tools: bool = True):
        """
        Initialize the template.

        Args:
            bytes_only: Accept and return bytes only, no type coercion
            charset_tools: Allow registering new charsets
        """
        self.converter: Optional[BaseConverter] = None
        self.charsets = CharsetTable(0)
        self.settings = Settings()
        self.mutable: Set[str] = set()
        self.has_signed_mode = False
        self.charset_tools = charset_tools

        if bytes_only:
            self.input_handler, self.output_handler = BytesInput, BytesOutput
        else:
            self.input_handler, self.output_handler = SmartInput, SmartOutput

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(versions={list(self.charsets)}, settings={self.settings})"

    def _settings(self, overrides) -> Settings:
        return self.settings.merge(
            overrides,
            mutable=self.mutable,
            versions=list(self.charsets),
            output_types=self.output_handler.type_list
        )

    def _apply_defaults(self, defaults) -> None:
        self.settings = self._settings(defaults)

    def with_defaults(self, **defaults) -> "BaseTemplate":
        """Return a copy of the codec with different default settings."""
        codec = copy.copy(self)
        codec.settings = self._settings(defaults)
        return codec

    def with_charset(self, name: str, charset) -> "BaseTemplate":
        """
        Return a copy of the codec with an additional charset.

        Args:
            name: Version name for the new charset
            charset: String, list or tuple with exactly ``radix`` unique chars

        Returns:
            BaseTemplate: New codec, the called instance is unchanged

        Raises:
            ConfigurationError: If the codec has no charset tools or the
                charset is invalid
        """
        if not self.charset_tools:
            raise ConfigurationError(f"{self.__class__.__name__} does not support custom charsets.")

        codec = copy.copy(self)
        codec.charsets = self.charsets.add(name, charset)
        logger.info(f"New charset added with the name '{name}' and ready to use")
        return codec

    # Hooks

    def _replacer(self, settings: Settings) -> Optional[Callable[[str, int], str]]:
        return None

    def _post_encode(self, output: str, zero_padding: int, settings: Settings) -> str:
        return output

    def _pre_decode(self, text: str, settings: Settings) -> str:
        return text

    def _post_decode(self, output: bytes, text: str, settings: Settings) -> bytes:
        return output

    # Pipeline

    def encode(self, data: Any, **overrides) -> str:
        """
        Encode a value.

        Args:
            data: Any input the input handler accepts
            **overrides: Settings for this call

        Returns:
            str: Encoded string
        """
        settings = self._settings(overrides)
        charset = self.charsets[settings.version]

        input_bytes, negative, _ = self.input_handler.to_bytes(data, settings)

        output, zero_padding = self.converter.encode(
            input_bytes,
            charset,
            settings.little_endian,
            self._replacer(settings)
        )

        if settings.signed:
            output = to_signed_str(output, negative, charset[0])

        if settings.upper:
            output = output.upper()

        return self._post_encode(output, zero_padding, settings)

    def decode(self, text: Any, **overrides):
        """
        Decode a string.

        Args:
            text: Encoded string
            **overrides: Settings for this call

        Returns:
            Decoded value according to ``output_type``

        Raises:
            InputTypeError: If the input carries a sign but signed mode is off
        """
        settings = self._settings(overrides)

        if isinstance(text, (bytes, bytearray)):
            text = text.decode("utf-8")
        text = str(text)

        negative = False
        if self.has_signed_mode:
            text, negative = extract_sign(text)
            if negative and not settings.signed:
                raise InputTypeError(
                    "The input is signed but the converter is not set to treat input as signed.\n"
                    "You can pass 'signed=True' to the decode function or when constructing the converter."
                )

        # single case charsets are stored lower case
        if "upper" in self.mutable:
            text = text.lower()

        text = self._pre_decode(text, settings)

        output = self.converter.decode(text, self.charsets[settings.version], settings.little_endian)
        output = self._post_decode(output, text, settings)

        return self.output_handler.compile(output, settings.output_type, settings.little_endian, negative)


class RadixCodec(BaseTemplate):
    """
    Block codec for any charset of 2 to 256 characters.

    The byte/digit block sizes are derived from the charset length.
    Characters which only carry the zero padding of the last block are
    removed from the output, so every byte string survives the round trip
    unchanged. With a ``pad_char`` and ``padding=True`` the removed
    characters are replaced by pad characters (Base64 style "=").

    Example:
        >>> b64 = RadixCodec(BASE64_CHARSET, pad_char="=")
        >>> b64.encode(b"A", padding=True)
        'QQ=='
    """

    def __init__(self, charset, pad_char: Optional[str] = None, bytes_only: bool = False, **defaults):
        super().__init__(bytes_only=bytes_only)

        radix = len(charset)
        # highest digit: a truncated block decodes to the encoded bytes
        self.converter = BaseConverter(radix, pad_value=radix - 1)
        self.charsets = CharsetTable(radix).add("default", charset)

        if pad_char is not None and (len(pad_char) != 1 or pad_char in self.charsets["default"]):
            raise ConfigurationError("The pad character must be a single character outside of the charset.")
        self.pad_char = pad_char

        self.mutable = {"little_endian"}
        if pad_char is not None:
            self.mutable.add("padding")

        self._apply_defaults(defaults)

    @property
    def radix(self) -> int:
        return self.converter.radix

    def _post_encode(self, output, zero_padding, settings):
        trim = self.converter.pad_chars(zero_padding, settings.little_endian)
        if not trim:
            return output

        padding = self.pad_char * trim if settings.padding else ""
        if settings.little_endian:
            return padding + output[trim:]
        return output[:-trim] + padding


class SimpleBase(BaseTemplate):
    """
    Integer bases 2 to 62.

    Converts the whole input as one integer (no blocks), so the output
    is the plain positional notation, e.g. ``SimpleBase(16).encode(255)``
    gives ``'ff'``. Signed by default; the case of the output can be
    switched for radices up to 36.
    """

    def __init__(self, radix: int, bytes_only: bool = False, **defaults):
        super().__init__(bytes_only=bytes_only)

        if isinstance(radix, bool) or not isinstance(radix, int) or not 2 <= radix <= len(SIMPLE_CHARSET):
            raise ConfigurationError(f"SimpleBase supports radices from 2 to {len(SIMPLE_CHARSET)}, got {radix!r}")

        self.converter = BaseConverter(radix, 0, 0)
        self.charsets = CharsetTable(radix).add("default", SIMPLE_CHARSET[:radix])

        self.has_signed_mode = True
        self.settings = Settings(signed=True)
        self.mutable = {"little_endian", "signed"}
        if radix <= 36:
            self.mutable.add("upper")

        self._apply_defaults(defaults)

    @property
    def radix(self) -> int:
        return self.converter.radix
