#!/usr/bin/env python3

#    Copyright 2026 Two Sigma Open Source, LLC
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.

"""Command-line driver for describing and narrowing float bit patterns.

Examples::

    floatbits describe 0x3f000000
    floatbits describe 0x3c00 --width 16
    floatbits describe 0.1 --float --buffer-size 12
    floatbits narrow 65520 --float
    floatbits -v sweep --count 100000 --seed 7
"""

import argparse
import itertools
import logging
import os
import sys
from collections import Counter

from floatbits.config import (
    BINARY32,
    DEFAULT_SWEEP_COUNT,
    DEFAULT_SWEEP_SEED,
    LOG_FORMAT,
    LOG_LEVEL_ENV_VAR,
    SUPPORTED_WIDTHS,
)
from floatbits.exceptions import FloatBitsError
from floatbits.models.buffer_model import FormatBuffer
from floatbits.models.decode_model import FloatClass, classify
from floatbits.models.format_model import describe, format_bits
from floatbits.models.narrow_model import narrow
from floatbits.utils.bit_utils import float16_to_bits, float32_to_bits
from floatbits.utils.float_logger import FloatLogger
from floatbits.utils.sampling import boundary_patterns, class_census, random_patterns
from floatbits.utils.validation import ensure_layout


def parse_pattern(text: str, as_float: bool, width: int) -> int:
    """Turn a command-line operand into a bit pattern.

    Args:
        text: Integer literal (0x/0b/0o prefixes allowed) or, with
            ``as_float``, a Python float literal
        as_float: Reinterpret a native float instead of reading raw bits
        width: Target width in bits

    Returns:
        Unsigned bit pattern

    Raises:
        ValueError: If the operand cannot be parsed
    """
    if as_float:
        value = float(text)
        return float16_to_bits(value) if width == 16 else float32_to_bits(value)
    return int(text, 0)


def configure_logging(verbosity: int) -> None:
    """Configure root logging from -v count, falling back to the environment."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        name = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def cmd_describe(args: argparse.Namespace) -> int:
    """Print the description of one pattern."""
    bits = parse_pattern(args.pattern, args.float, args.width)
    buf = FormatBuffer(args.buffer_size) if args.buffer_size is not None else None
    print(format_bits(bits, args.width, buf))
    return 0


def cmd_narrow(args: argparse.Namespace) -> int:
    """Print a binary32 pattern, its binary16 narrowing and both descriptions."""
    bits32 = parse_pattern(args.pattern, args.float, 32)
    bits16 = narrow(bits32)
    print(f"binary32 0x{bits32:08x}  {describe(bits32, 32)}")
    print(f"binary16 0x{bits16:04x}      {describe(bits16, 16)}")
    return 0


def cmd_sweep(args: argparse.Namespace) -> int:
    """Classify boundary plus random patterns and print a census."""
    layout = ensure_layout(args.width)
    patterns = list(
        itertools.chain(
            boundary_patterns(layout),
            random_patterns(layout, args.count, args.seed),
        )
    )
    total = len(patterns)
    census = class_census(patterns, layout)
    counts = {float_class.value: census[float_class] for float_class in FloatClass}
    FloatLogger.log_class_census(f"{layout.name} classification census", counts, total)
    for name, count in counts.items():
        print(f"{name:10s} {count}")

    if layout is BINARY32:
        narrowed: Counter[FloatClass] = Counter(
            classify(narrow(bits), 16) for bits in patterns
        )
        narrowed_counts = {c.value: narrowed[c] for c in FloatClass}
        FloatLogger.log_class_census(
            "binary16 results after narrowing", narrowed_counts, total
        )
        for name, count in narrowed_counts.items():
            print(f"narrowed {name:10s} {count}")
    return 0


def _add_pattern_arguments(
    parser: argparse.ArgumentParser, with_width: bool
) -> None:
    """Add the operand, --float and optionally --width arguments."""
    parser.add_argument("pattern", help="Bit pattern (e.g. 0x3f000000)")
    parser.add_argument(
        "--float",
        action="store_true",
        help="Treat PATTERN as a float value and use its bits",
    )
    if with_width:
        parser.add_argument(
            "--width",
            type=int,
            choices=SUPPORTED_WIDTHS,
            default=32,
            help="Pattern width in bits",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="floatbits",
        description="Describe IEEE 754 bit patterns and narrow binary32 to binary16",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help=f"Log verbosity (-v info, -vv debug); default from ${LOG_LEVEL_ENV_VAR}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    describe_parser = subparsers.add_parser("describe", help="Describe one bit pattern")
    _add_pattern_arguments(describe_parser, with_width=True)
    describe_parser.add_argument(
        "--buffer-size",
        type=int,
        default=None,
        help="Format into a fixed buffer of this many bytes (terminator included)",
    )
    describe_parser.set_defaults(func=cmd_describe)

    narrow_parser = subparsers.add_parser(
        "narrow", help="Convert binary32 bits to binary16"
    )
    _add_pattern_arguments(narrow_parser, with_width=False)
    narrow_parser.set_defaults(func=cmd_narrow)

    sweep_parser = subparsers.add_parser(
        "sweep", help="Classification census over sampled patterns"
    )
    sweep_parser.add_argument(
        "--width",
        type=int,
        choices=SUPPORTED_WIDTHS,
        default=32,
        help="Pattern width in bits",
    )
    sweep_parser.add_argument(
        "--count",
        type=int,
        default=DEFAULT_SWEEP_COUNT,
        help="Number of random patterns",
    )
    sweep_parser.add_argument(
        "--seed", type=int, default=DEFAULT_SWEEP_SEED, help="Random seed"
    )
    sweep_parser.set_defaults(func=cmd_sweep)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command-line driver.

    Returns:
        0 on success, 1 if an operand was invalid
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        return args.func(args)
    except (FloatBitsError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
