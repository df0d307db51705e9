"""
Environment Configuration
Reads BASEEX_* variables (optionally from a .env file)
"""

import os

from dotenv import load_dotenv

from .constants import PHI_APPROX_DIGITS, PHI_PRECISION
from .exceptions import ConfigurationError


def _int_env(name, default):
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got '{value}'") from None


def load_config(dotenv_path=None):
    """
    Load the process configuration.

    Args:
        dotenv_path: Optional path of a .env file (default: search upwards
            from the working directory)

    Returns:
        dict: Configuration values
    """
    load_dotenv(dotenv_path)

    return {
        'LOG_LEVEL': os.getenv('BASEEX_LOG_LEVEL', 'WARNING').upper(),
        'PHI_PRECISION': _int_env('BASEEX_PHI_PRECISION', PHI_PRECISION),
        'PHI_APPROX_DIGITS': _int_env('BASEEX_PHI_APPROX_DIGITS', PHI_APPROX_DIGITS),
        'OUTPUT_TYPE': os.getenv('BASEEX_OUTPUT_TYPE', 'bytes'),
    }
