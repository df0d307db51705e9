#!/usr/bin/env python3
"""
BaseEx Command Line
Encode and decode values with the LEB128, BasePhi, radix and simple codecs
"""

import argparse
import logging
import sys

from .base_phi import BasePhi
from .config import load_config
from .constants import BASE64_CHARSET, SIMPLE_CHARSET
from .decimal_arithmetic import DecimalArithmetic
from .exceptions import BaseExError, ConfigurationError
from .leb128 import LEB128
from .template import RadixCodec, SimpleBase


logger = logging.getLogger(__name__)

CODECS = ('leb128', 'phi', 'radix', 'simple')


def build_codec(args, config):
    """
    Create the codec selected on the command line.

    Args:
        args: Parsed arguments
        config: Configuration from load_config()

    Returns:
        BaseTemplate: Codec instance
    """
    if args.codec == 'leb128':
        return LEB128()

    if args.codec == 'phi':
        arithmetic = DecimalArithmetic(config['PHI_PRECISION'], config['PHI_APPROX_DIGITS'])
        return BasePhi(arithmetic)

    if args.codec == 'simple':
        return SimpleBase(args.radix or 16)

    # radix codec: explicit charset, a prefix of the simple charset or Base64
    if args.charset:
        return RadixCodec(args.charset)
    if args.radix:
        if args.radix > len(SIMPLE_CHARSET):
            raise ConfigurationError(f"Radix {args.radix} needs an explicit --charset")
        return RadixCodec(SIMPLE_CHARSET[:args.radix])
    return RadixCodec(BASE64_CHARSET, pad_char='=', padding=True)


def parse_value(text, args):
    """Interpret an encode argument as hex bytes, number or text."""
    if args.hex:
        try:
            return bytes.fromhex(text)
        except ValueError:
            raise ConfigurationError(f"'{text}' is not a valid hex string") from None

    if args.decimal:
        try:
            return float(text)
        except ValueError:
            raise ConfigurationError(f"'{text}' is not a number") from None

    try:
        return int(text)
    except ValueError:
        return text


def format_result(result):
    """Render a codec result for stdout, bytes as hex."""
    if isinstance(result, (bytes, bytearray, memoryview)):
        return bytes(result).hex()
    if hasattr(result, 'tolist'):
        return ' '.join(str(x) for x in result.tolist())
    return str(result)


def run(args, config):
    codec = build_codec(args, config)

    overrides = {}
    if args.signed:
        overrides['signed'] = True
    if args.little_endian:
        overrides['little_endian'] = True
    if args.decimal:
        overrides['decimal_mode'] = True

    if args.command == 'encode':
        value = parse_value(args.value, args)
        logger.debug(f"Encoding {value!r} with {codec!r}")
        return codec.encode(value, **overrides)

    if args.codec == 'leb128':
        # raw LEB128 bytes are passed as hex on the command line
        overrides['version'] = 'hex'

    if not args.decimal:
        overrides['output_type'] = args.output_type or config['OUTPUT_TYPE']

    logger.debug(f"Decoding '{args.value}' with {codec!r}")
    return codec.decode(args.value, **overrides)


def main(argv=None):
    """Main entry point with CLI argument parsing"""
    parser = argparse.ArgumentParser(
        prog='baseex',
        description="Convert values to and from LEB128, base phi and arbitrary radices",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # LEB128 bytes of 624485 (printed as hex)
  baseex encode leb128 624485

  # Signed LEB128 back to an integer
  baseex decode leb128 ff7e --signed --output-type int_n

  # Golden ratio base, integers and real numbers
  baseex encode phi 12
  baseex encode phi 0.5 --decimal

  # Base64 of a text, base 36 of a number
  baseex encode radix Hello
  baseex encode simple 1295 --radix 36
        """
    )

    parser.add_argument(
        'command',
        choices=['encode', 'decode'],
        help='Direction of the conversion'
    )

    parser.add_argument(
        'codec',
        choices=CODECS,
        help='Codec: leb128, phi (golden ratio base), radix (blocked, any charset) or simple (integer bases 2-62)'
    )

    parser.add_argument(
        'value',
        type=str,
        help='Value to encode or string to decode'
    )

    parser.add_argument(
        '--charset',
        type=str,
        default=None,
        help='Charset of the radix codec (its length is the radix)'
    )

    parser.add_argument(
        '--radix',
        type=int,
        default=None,
        help='Radix of the simple codec (default: 16) or of the radix codec without --charset'
    )

    parser.add_argument(
        '--signed',
        action='store_true',
        help='Signed conversion'
    )

    parser.add_argument(
        '--little-endian',
        action='store_true',
        help='Little endian byte order'
    )

    parser.add_argument(
        '--hex',
        action='store_true',
        help='Encode input is a hex string of raw bytes'
    )

    parser.add_argument(
        '--decimal',
        action='store_true',
        help='Decimal mode of the phi codec (real numbers)'
    )

    parser.add_argument(
        '--output-type',
        type=str,
        default=None,
        help='Output type of decode, e.g. bytes, str, int_n, uint_n (default: BASEEX_OUTPUT_TYPE or bytes)'
    )

    args = parser.parse_args(argv)

    try:
        config = load_config()
        logging.basicConfig(
            level=getattr(logging, config['LOG_LEVEL'], logging.WARNING),
            format='%(asctime)s %(levelname)s %(name)s: %(message)s'
        )

        result = run(args, config)
    except BaseExError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(format_result(result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
