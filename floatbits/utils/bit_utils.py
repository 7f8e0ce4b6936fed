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

"""Bit reinterpretation and field helpers.

BIT UTILS
=========

This module provides the checked reinterpretation primitive used wherever
a native float and an integer bit pattern have to be viewed as the same
storage:

- transmute(): copy the bytes of one struct type into another of equal size
- float32/float16 <-> bits helpers built on top of it
- bit field extraction and binary digit rendering

Reinterpretation never converts a value. The only value conversion here is
Python's 64-bit float being narrowed to the native float of the format
before its bits are taken, which is what storing into a C float does.
"""

import math
import struct

from floatbits.config import (
    BINARY16,
    BINARY32,
    FP16_CANONICAL_NAN,
    FP16_NEG_INF,
    FP16_POS_INF,
    FP32_CANONICAL_NAN,
    FP32_NEG_INF,
    FP32_POS_INF,
    FloatLayout,
)
from floatbits.exceptions import ReinterpretError
from floatbits.float_types import Bits16, Bits32
from floatbits.utils.validation import ensure_bit_pattern

__all__ = [
    "transmute",
    "float32_to_bits",
    "bits_to_float32",
    "float16_to_bits",
    "bits_to_float16",
    "extract_field",
    "binary_digits",
]

# Fixed little-endian byte order, no padding
_BYTE_ORDER = "<"


def transmute(value: int | float, source: str, target: str) -> int | float:
    """Reinterpret the storage of ``value`` as another type of the same size.

    Args:
        value: Value to reinterpret
        source: struct format code describing ``value`` (e.g. "f", "I")
        target: struct format code to read the same bytes back as

    Returns:
        The bytes of ``value`` read back as ``target``

    Raises:
        ReinterpretError: If the two codes have different sizes

    Example:
        >>> hex(transmute(0.5, "f", "I"))
        '0x3f000000'
        >>> transmute(0x3C00, "H", "e")
        1.0
    """
    source_fmt = _BYTE_ORDER + source
    target_fmt = _BYTE_ORDER + target
    if struct.calcsize(source_fmt) != struct.calcsize(target_fmt):
        raise ReinterpretError(
            f"cannot reinterpret {source!r} ({struct.calcsize(source_fmt)} bytes) "
            f"as {target!r} ({struct.calcsize(target_fmt)} bytes)",
            source=source,
            target=target,
        )
    return struct.unpack(target_fmt, struct.pack(source_fmt, value))[0]


def _float_to_bits(
    f: float, layout: FloatLayout, nan: int, pos_inf: int, neg_inf: int
) -> int:
    if math.isnan(f):
        # Sign is kept, payload is not
        return nan | (layout.sign_mask if math.copysign(1.0, f) < 0.0 else 0)
    if math.isinf(f):
        return neg_inf if f < 0.0 else pos_inf
    try:
        return transmute(f, layout.float_code, layout.int_code)
    except OverflowError:
        # Value too large for the format: saturate to signed infinity.
        return neg_inf if f < 0.0 else pos_inf


def float32_to_bits(f: float) -> Bits32:
    """Convert a native float to its IEEE 754 single-precision bit pattern."""
    return Bits32(
        _float_to_bits(
            float(f), BINARY32, FP32_CANONICAL_NAN, FP32_POS_INF, FP32_NEG_INF
        )
    )


def bits_to_float32(bits: int) -> float:
    """Convert a 32-bit pattern to the IEEE 754 single-precision float it encodes."""
    bits = ensure_bit_pattern(bits, BINARY32)
    return transmute(bits, BINARY32.int_code, BINARY32.float_code)


def float16_to_bits(f: float) -> Bits16:
    """Convert a native float to its IEEE 754 half-precision bit pattern."""
    return Bits16(
        _float_to_bits(
            float(f), BINARY16, FP16_CANONICAL_NAN, FP16_POS_INF, FP16_NEG_INF
        )
    )


def bits_to_float16(bits: int) -> float:
    """Convert a 16-bit pattern to the IEEE 754 half-precision float it encodes."""
    bits = ensure_bit_pattern(bits, BINARY16)
    return transmute(bits, BINARY16.int_code, BINARY16.float_code)


def extract_field(bits: int, shift: int, width: int) -> int:
    """Extract an unsigned bit field.

    Args:
        bits: Source pattern
        shift: Bit position of the field's least significant bit
        width: Field width in bits

    Returns:
        The field value, right-aligned

    Example:
        >>> extract_field(0x3F800000, 23, 8)  # binary32 exponent of 1.0
        127
    """
    return (bits >> shift) & ((1 << width) - 1)


def binary_digits(value: int, width: int) -> str:
    """Render ``value`` as exactly ``width`` binary digits, MSB first."""
    return format(value, f"0{width}b")
