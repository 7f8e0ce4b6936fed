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

"""IEEE 754 field decoding and classification.

Decode Model
============

Splits a bit pattern into its sign, biased exponent and significand fields
for any supported layout, and classifies it. Classification looks only at
the fields:

    exponent field == 0          -> ZERO (m == 0) or SUBNORMAL (m != 0)
    exponent field == all ones   -> INFINITY (m == 0) or NAN (m != 0)
    anything else                -> NORMAL

Both the formatter and the width converter start from ``decode``.
"""

from dataclasses import dataclass
from enum import Enum

from floatbits.config import BINARY32, FloatLayout
from floatbits.float_types import BiasedExponent, BitPattern, Exponent
from floatbits.utils.bit_utils import extract_field
from floatbits.utils.validation import ensure_bit_pattern, ensure_layout


class FloatClass(Enum):
    """Class of an IEEE 754 value, independent of sign."""

    ZERO = "zero"
    INFINITY = "infinity"
    NAN = "nan"
    SUBNORMAL = "subnormal"
    NORMAL = "normal"


@dataclass(frozen=True)
class DecodedFloat:
    """Fields of one bit pattern.

    Attributes:
        layout: Layout the pattern was decoded with
        sign: Sign bit (0 or 1)
        exponent_field: Biased exponent as stored
        significand: Stored significand bits, without the implicit bit
    """

    layout: FloatLayout
    sign: int
    exponent_field: BiasedExponent
    significand: int

    @property
    def negative(self) -> bool:
        return self.sign == 1

    @property
    def float_class(self) -> FloatClass:
        if self.exponent_field == 0:
            return FloatClass.ZERO if self.significand == 0 else FloatClass.SUBNORMAL
        if self.exponent_field == self.layout.exponent_max:
            return FloatClass.INFINITY if self.significand == 0 else FloatClass.NAN
        return FloatClass.NORMAL

    @property
    def unbiased_exponent(self) -> Exponent:
        """Exponent field minus bias (-bias for zeros and subnormals)."""
        return Exponent(self.exponent_field - self.layout.bias)

    @property
    def display_exponent(self) -> Exponent:
        """Exponent the value is scaled by.

        Subnormals share the minimum normal exponent; they are not scaled
        by 2^-bias.
        """
        if self.exponent_field == 0:
            return Exponent(self.layout.min_normal_exponent)
        return self.unbiased_exponent


def decode(bits: int, width: int | FloatLayout = BINARY32) -> DecodedFloat:
    """Split a bit pattern into sign, exponent and significand fields.

    Args:
        bits: Unsigned bit pattern
        width: 32, 16, or a FloatLayout

    Returns:
        DecodedFloat for the pattern

    Raises:
        UnsupportedWidthError: If the width is not supported
        BitWidthError: If the pattern does not fit the width
    """
    layout = ensure_layout(width)
    bits = ensure_bit_pattern(bits, layout)
    return DecodedFloat(
        layout=layout,
        sign=extract_field(bits, layout.sign_shift, 1),
        exponent_field=BiasedExponent(
            extract_field(bits, layout.significand_width, layout.exponent_width)
        ),
        significand=extract_field(bits, 0, layout.significand_width),
    )


def classify(bits: int, width: int | FloatLayout = BINARY32) -> FloatClass:
    """Classify a bit pattern as zero, infinity, NaN, subnormal or normal."""
    return decode(bits, width).float_class


def pack(
    sign: int,
    exponent_field: int,
    significand: int,
    width: int | FloatLayout = BINARY32,
) -> BitPattern:
    """Assemble a bit pattern from its fields.

    The exponent and significand are added rather than OR-ed, so a
    significand that has been rounded up to 2^significand_width carries
    into the exponent field. That carry is what turns the largest
    significand plus one ulp into the next binade (or into infinity).

    Args:
        sign: Sign bit (0 or 1)
        exponent_field: Biased exponent field
        significand: Significand, at most 2^significand_width
        width: 32, 16, or a FloatLayout

    Returns:
        The packed pattern
    """
    layout = ensure_layout(width)
    magnitude = (exponent_field << layout.significand_width) + significand
    sign_bit = (sign & 1) << layout.sign_shift
    return BitPattern(sign_bit | (magnitude & (layout.mask >> 1)))
