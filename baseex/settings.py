"""
Converter settings and charset registry.
Both are immutable: every change produces a new object.
"""

import logging
from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional

from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)

# Boolean settings a converter may lock
SWITCHES = ("little_endian", "padding", "signed", "upper", "decimal_mode")


@dataclass(frozen=True)
class Settings:
    """
    Settings bundle handed to converters and IO handlers.

    Attributes:
        little_endian: Byte order of integer input/output
        number_mode: Treat every number as a float64
        output_type: Type tag for the output handler
        padding: Fill up encoded output with pad characters
        signed: Carry a sign instead of using two's complement
        upper: Upper case output
        version: Name of the active charset
        decimal_mode: Encode real numbers directly (BasePhi)
    """
    little_endian: bool = False
    number_mode: bool = False
    output_type: str = "bytes"
    padding: bool = False
    signed: bool = False
    upper: bool = False
    version: str = "default"
    decimal_mode: bool = False

    def merge(
        self,
        overrides: Mapping[str, Any],
        mutable: Iterable[str] = (),
        versions: Optional[Iterable[str]] = None,
        output_types: Optional[Iterable[str]] = None
    ) -> "Settings":
        """
        Apply per-call overrides.

        Args:
            overrides: Setting names mapped to new values
            mutable: Switches the converter allows to change
            versions: Valid charset names (unchecked if None)
            output_types: Valid output types (unchecked if None)

        Returns:
            Settings: New settings instance

        Raises:
            ConfigurationError: Unknown setting, locked switch, unknown
                version or output type
        """
        if not overrides:
            return self

        known = {f.name for f in fields(self)}
        mutable = set(mutable)
        changes: Dict[str, Any] = {}

        for name, value in overrides.items():
            if name not in known:
                raise ConfigurationError(
                    f"Unknown setting: '{name}'. "
                    f"Valid settings are: {', '.join(sorted(known))}"
                )

            if name in SWITCHES:
                value = bool(value)
                if value != getattr(self, name) and name not in mutable:
                    raise ConfigurationError(
                        f"Setting '{name}' is not allowed for this type of converter."
                    )

            elif name == "version":
                if versions is not None and value not in versions:
                    raise ConfigurationError(
                        f"Unknown version (charset): '{value}'. "
                        f"Options are: {', '.join(versions)}"
                    )

            elif name == "output_type":
                if output_types is not None and value not in output_types:
                    raise ConfigurationError(
                        f"Unknown output type: '{value}'. "
                        f"Valid output types are: {', '.join(output_types)}"
                    )

            else:
                value = bool(value)

            changes[name] = value

        # number mode keeps the natural float type unless told otherwise
        if changes.get("number_mode") and "output_type" not in changes:
            changes["output_type"] = "float_n"

        settings = replace(self, **changes)

        if settings.padding and settings.signed:
            logger.warning("Padding was set to false due to the signed conversion.")
            settings = replace(settings, padding=False)

        return settings


class CharsetTable(Mapping):
    """
    Read-only registry of named charsets for one radix.

    ``add`` validates a charset and returns a new table, the table it was
    called on stays untouched.
    """

    def __init__(self, radix: int, charsets: Optional[Mapping[str, str]] = None):
        self.radix = radix
        self._charsets = MappingProxyType(dict(charsets or {}))

    def __getitem__(self, name: str) -> str:
        return self._charsets[name]

    def __iter__(self):
        return iter(self._charsets)

    def __len__(self) -> int:
        return len(self._charsets)

    def __repr__(self) -> str:
        return f"CharsetTable(radix={self.radix}, versions={list(self._charsets)})"

    def add(self, name: str, charset) -> "CharsetTable":
        """
        Register a charset under a name.

        Args:
            name: Key of the new charset
            charset: String, list or tuple of single characters

        Returns:
            CharsetTable: New table containing the charset

        Raises:
            ConfigurationError: Invalid name, type, duplicates or length
        """
        if not isinstance(name, str):
            raise ConfigurationError("The charset name must be a string.")

        if not isinstance(charset, (str, list, tuple)):
            raise ConfigurationError("The charset must be one of the types:\n'str', 'list', 'tuple'.")

        chars = list(charset)
        if any(not isinstance(c, str) or len(c) != 1 for c in chars):
            raise ConfigurationError("Every element of the charset must be a single character.")

        unique = len(set(chars))
        if unique == self.radix and len(chars) == self.radix:
            charsets = dict(self._charsets)
            charsets[name] = "".join(chars)
            return CharsetTable(self.radix, charsets)

        if len(chars) == self.radix:
            raise ConfigurationError(
                "There were repetitive chars found in your charset. Make sure each char is unique."
            )
        raise ConfigurationError(f"The length of the charset must be {self.radix}.")
