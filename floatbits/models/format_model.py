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

"""Textual description of IEEE 754 bit patterns.

Format Model
============

Renders the structure of a binary32 or binary16 pattern as fixed-format
text. One routine serves both widths; only the layout differs.

Output Format:
    Zero        "+0" / "-0"
    Infinity    "+INF" / "-INF"
    NaN         "NaN"  (no sign glyph, the sign bit is not shown)
    Subnormal   "<sign>0.<significand bits> 2^<min normal exponent>"
    Normal      "<sign>1.<significand bits> 2^<exponent>"

The significand is printed as exactly 23 (binary32) or 10 (binary16)
binary digits, most significant first. The only space is the one before
"2^". Subnormals are printed with a leading 0 and the minimum normal
exponent (-126 / -14), which is the scale they actually have.

Example:
    >>> describe(0x3F000000)
    '+1.00000000000000000000000 2^-1'
    >>> describe(0x0001, 16)
    '+0.0000000001 2^-14'
"""

from typing import Any

from floatbits.config import BINARY16, BINARY32, FloatLayout
from floatbits.models.buffer_model import FormatBuffer, write_terminated
from floatbits.models.decode_model import FloatClass, decode
from floatbits.utils.bit_utils import binary_digits, float16_to_bits, float32_to_bits

SIGN_GLYPHS = ("+", "-")
NAN_TEXT = "NaN"
INF_TEXT = "INF"
ZERO_TEXT = "0"


def describe(bits: int, width: int | FloatLayout = 32) -> str:
    """Describe a bit pattern's sign, significand and exponent.

    Args:
        bits: Unsigned bit pattern
        width: 32, 16, or a FloatLayout

    Returns:
        The full description, never truncated

    Raises:
        UnsupportedWidthError: If the width is not supported
        BitWidthError: If the pattern does not fit the width
    """
    fields = decode(bits, width)
    float_class = fields.float_class

    if float_class is FloatClass.NAN:
        return NAN_TEXT

    sign = SIGN_GLYPHS[fields.sign]
    if float_class is FloatClass.ZERO:
        return sign + ZERO_TEXT
    if float_class is FloatClass.INFINITY:
        return sign + INF_TEXT

    leading = "0" if float_class is FloatClass.SUBNORMAL else "1"
    digits = binary_digits(fields.significand, fields.layout.significand_width)
    return f"{sign}{leading}.{digits} 2^{fields.display_exponent}"


def format_bits(bits: int, width: int | FloatLayout = 32, buf: Any = None) -> str:
    """Format a bit pattern, optionally into a caller-owned fixed buffer.

    Args:
        bits: Unsigned bit pattern
        width: 32, 16, or a FloatLayout
        buf: Optional FormatBuffer or writable bytes-like buffer. The text
            is stored NUL-terminated and truncated to fit.

    Returns:
        The text stored in ``buf``, or the full description when no buffer
        is given
    """
    text = describe(bits, width)
    if buf is None:
        return text
    if isinstance(buf, FormatBuffer):
        return buf.write(text)
    return write_terminated(buf, text)


def format_float32(value: float, buf: Any = None) -> str:
    """Format a native float by the bits of its single-precision storage."""
    return format_bits(float32_to_bits(value), BINARY32, buf)


def format_float16(value: float, buf: Any = None) -> str:
    """Format a native float by the bits of its half-precision storage."""
    return format_bits(float16_to_bits(value), BINARY16, buf)
