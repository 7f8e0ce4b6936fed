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

"""Bit-accurate models of IEEE 754 decoding, formatting and narrowing.

Modules
-------
decode_model
    Field extraction and classification for any supported layout:
    - DecodedFloat (sign, biased exponent, significand)
    - FloatClass (zero, infinity, NaN, subnormal, normal)
    - pack() with carry from significand into exponent

format_model
    Fixed-format text descriptions, e.g. "+1.00000000000000000000000 2^-1"

buffer_model
    Fixed-capacity NUL-terminated output buffers with silent truncation

narrow_model
    binary32 -> binary16 conversion with round-to-nearest-even

Usage
-----
::

    from floatbits.models.narrow_model import narrow
    from floatbits.models.format_model import describe

    half = narrow(0x3F000000)  # Returns 0x3800
    text = describe(half, 16)  # Returns "+1.0000000000 2^-1"
"""

from floatbits.models.buffer_model import FormatBuffer
from floatbits.models.decode_model import FloatClass, classify, decode, pack
from floatbits.models.format_model import describe, format_bits
from floatbits.models.narrow_model import narrow, round_half_even

__all__ = [
    "FormatBuffer",
    "FloatClass",
    "classify",
    "decode",
    "pack",
    "describe",
    "format_bits",
    "narrow",
    "round_half_even",
]
