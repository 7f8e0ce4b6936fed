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

"""floatbits: IEEE 754 binary32/binary16 bit pattern toolkit.

This package describes the structure of single- and half-precision bit
patterns as fixed-format text and converts binary32 patterns to the
nearest binary16 pattern with round-to-nearest, ties-to-even.

Package Structure
-----------------

Subpackages:
    models
        Decoding/classification, the formatter, bounded output buffers and
        the binary32 -> binary16 converter

    utils
        Bit reinterpretation, input validation, structured logging and
        pattern sampling

Modules:
    config
        Layouts (BINARY32, BINARY16), masks, special patterns and defaults

    float_types
        Type aliases for bit patterns and exponents

    exceptions
        Exception hierarchy for out-of-domain inputs

    cli
        The ``floatbits`` command-line driver

Quick Start
-----------
::

    >>> from floatbits import describe, narrow
    >>> describe(0x3F000000)
    '+1.00000000000000000000000 2^-1'
    >>> hex(narrow(0x3F000000))
    '0x3800'
    >>> describe(narrow(0x3F000000), 16)
    '+1.0000000000 2^-1'
"""

from floatbits.config import BINARY16, BINARY32, FloatLayout
from floatbits.exceptions import (
    BitWidthError,
    FloatBitsError,
    ReinterpretError,
    UnsupportedWidthError,
)
from floatbits.models.buffer_model import FormatBuffer
from floatbits.models.decode_model import DecodedFloat, FloatClass, classify, decode
from floatbits.models.format_model import (
    describe,
    format_bits,
    format_float16,
    format_float32,
)
from floatbits.models.narrow_model import narrow, narrow_float
from floatbits.utils.bit_utils import (
    bits_to_float16,
    bits_to_float32,
    float16_to_bits,
    float32_to_bits,
    transmute,
)

__version__ = "0.1.0"

__all__ = [
    "BINARY16",
    "BINARY32",
    "FloatLayout",
    "BitWidthError",
    "FloatBitsError",
    "ReinterpretError",
    "UnsupportedWidthError",
    "FormatBuffer",
    "DecodedFloat",
    "FloatClass",
    "classify",
    "decode",
    "describe",
    "format_bits",
    "format_float16",
    "format_float32",
    "narrow",
    "narrow_float",
    "bits_to_float16",
    "bits_to_float32",
    "float16_to_bits",
    "float32_to_bits",
    "transmute",
]
