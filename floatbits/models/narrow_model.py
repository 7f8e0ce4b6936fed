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

"""IEEE 754 binary32 to binary16 conversion model.

Narrow Model
============

Converts a single-precision bit pattern to the nearest half-precision bit
pattern using round-to-nearest, ties-to-even (RNE). The conversion is
total: every one of the 2^32 inputs maps to exactly one output and nothing
is raised for in-domain input.

Conversion paths, by unbiased binary32 exponent ``e``:
    - e == 128, m == 0    infinity -> signed infinity
    - e == 128, m != 0    NaN -> signed NaN with significand 1 (payload dropped)
    - zero                signed zero
    - e < -24             underflow -> signed zero (binary32 subnormals included)
    - e + 15 >= 31        overflow -> signed infinity
    - e + 15 <= 0         binary16 subnormal: hidden bit restored, shifted right
                          by 14 - (e + 15), then rounded
    - otherwise           binary16 normal: top 10 significand bits, rounded

Rounding (RNE):
    round bit 0                  -> truncate
    round bit 1, sticky set      -> round up
    round bit 1, sticky clear    -> tie: round up only if the candidate is odd

A rounded-up significand of 0x400 carries into the exponent field when the
fields are packed (see decode_model.pack). This takes the largest subnormal
to the smallest normal, the top of a binade to the next one, and 65504 plus
half an ulp to infinity.
"""

from floatbits.config import BINARY16, BINARY32, FP16_MIN_NAN, NARROW_SHIFT
from floatbits.float_types import Bits16
from floatbits.models.decode_model import FloatClass, decode, pack
from floatbits.utils.bit_utils import float32_to_bits
from floatbits.utils.float_logger import FloatLogger

# Smallest unbiased exponent that is not flushed to zero outright
UNDERFLOW_EXPONENT = -24
# Exponent field value that means inf/NaN in binary16
_FP16_EXP_SPECIAL = BINARY16.exponent_max
# Binary32 hidden bit, restored for values that become binary16 subnormals
_FP32_HIDDEN_BIT = 1 << BINARY32.significand_width


def round_half_even(candidate: int, round_bit: int, sticky: bool) -> int:
    """Apply round-to-nearest, ties-to-even to a truncated significand.

    Args:
        candidate: Significand with the discarded bits already shifted out
        round_bit: The highest discarded bit
        sticky: True if any discarded bit below the round bit was set

    Returns:
        ``candidate`` or ``candidate + 1``
    """
    if not round_bit:
        result = candidate
    elif sticky:
        result = candidate + 1
    else:
        # Exact tie: pick the even neighbour
        result = candidate + (candidate & 1)
    FloatLogger.log_rounding(candidate, round_bit, sticky, result)
    return result


def _narrow_fields(bits32: int) -> tuple[int, int, int, str]:
    """Compute (sign, exponent_field, significand, path) of the binary16 result."""
    fields = decode(bits32, BINARY32)
    sign = fields.sign
    float_class = fields.float_class

    if float_class is FloatClass.INFINITY:
        return sign, _FP16_EXP_SPECIAL, 0, "inf"
    if float_class is FloatClass.NAN:
        return sign, _FP16_EXP_SPECIAL, FP16_MIN_NAN & BINARY16.significand_mask, "nan"
    if float_class is FloatClass.ZERO:
        return sign, 0, 0, "zero"

    exponent = fields.unbiased_exponent
    if exponent < UNDERFLOW_EXPONENT:
        return sign, 0, 0, "underflow"

    exponent16 = exponent + BINARY16.bias
    if exponent16 >= _FP16_EXP_SPECIAL:
        return sign, _FP16_EXP_SPECIAL, 0, "overflow"

    significand = fields.significand
    if exponent16 <= 0:
        full = significand | _FP32_HIDDEN_BIT
        # Align to the 2^-24 grid of binary16 subnormals: 14 - (e + 15)
        shift = NARROW_SHIFT + 1 - exponent16
        candidate = full >> shift
        round_bit = (full >> (shift - 1)) & 1
        sticky = (full & ((1 << (shift - 1)) - 1)) != 0
        return sign, 0, round_half_even(candidate, round_bit, sticky), "subnormal"

    candidate = significand >> NARROW_SHIFT
    round_bit = (significand >> (NARROW_SHIFT - 1)) & 1
    sticky = (significand & ((1 << (NARROW_SHIFT - 1)) - 1)) != 0
    return sign, exponent16, round_half_even(candidate, round_bit, sticky), "normal"


def narrow(bits32: int) -> Bits16:
    """Convert a binary32 pattern to the nearest binary16 pattern (RNE).

    Args:
        bits32: IEEE 754 single-precision bit pattern

    Returns:
        IEEE 754 half-precision bit pattern

    Raises:
        BitWidthError: If ``bits32`` is not a 32-bit unsigned pattern

    Example:
        >>> hex(narrow(0x3F000000))  # 0.5
        '0x3800'
        >>> hex(narrow(0x477FF000))  # 65520.0 rounds up to infinity
        '0x7c00'
    """
    sign, exponent_field, significand, path = _narrow_fields(bits32)
    bits16 = Bits16(pack(sign, exponent_field, significand, BINARY16))
    FloatLogger.log_narrow(bits32, bits16, path)
    return bits16


def narrow_float(value: float) -> Bits16:
    """Store a native float as binary32, then narrow its bits to binary16."""
    return narrow(float32_to_bits(value))
