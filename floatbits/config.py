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

"""Central configuration constants for floatbits.

Config
======

Bit layouts of the two supported IEEE 754 interchange formats, the masks
and special patterns derived from them, and the few defaults used by the
formatter and the command-line driver.

Every layout-dependent routine in the package takes a ``FloatLayout`` rather
than hard-coding field widths, so binary32 and binary16 share one code path.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FloatLayout:
    """Field geometry of an IEEE 754 binary interchange format.

    Attributes:
        name: Human-readable format name ("binary32", "binary16")
        total_width: Total number of bits in the pattern
        exponent_width: Number of biased exponent bits
        significand_width: Number of stored (trailing) significand bits
        bias: Exponent bias
        float_code: struct format code for the native float of this width
        int_code: struct format code for the unsigned integer of this width
    """

    name: str
    total_width: int
    exponent_width: int
    significand_width: int
    bias: int
    float_code: str
    int_code: str

    @property
    def mask(self) -> int:
        """All-ones mask covering the whole pattern."""
        return (1 << self.total_width) - 1

    @property
    def sign_shift(self) -> int:
        return self.total_width - 1

    @property
    def sign_mask(self) -> int:
        return 1 << self.sign_shift

    @property
    def exponent_max(self) -> int:
        """Biased exponent field value reserved for infinities and NaNs."""
        return (1 << self.exponent_width) - 1

    @property
    def exponent_mask(self) -> int:
        return self.exponent_max << self.significand_width

    @property
    def significand_mask(self) -> int:
        return (1 << self.significand_width) - 1

    @property
    def min_normal_exponent(self) -> int:
        """Unbiased exponent of the smallest normal value (also used for subnormals)."""
        return 1 - self.bias

    @property
    def max_normal_exponent(self) -> int:
        return self.exponent_max - 1 - self.bias


BINARY32 = FloatLayout(
    name="binary32",
    total_width=32,
    exponent_width=8,
    significand_width=23,
    bias=127,
    float_code="f",
    int_code="I",
)

BINARY16 = FloatLayout(
    name="binary16",
    total_width=16,
    exponent_width=5,
    significand_width=10,
    bias=15,
    float_code="e",
    int_code="H",
)

# Width in bits -> layout
LAYOUTS: dict[int, FloatLayout] = {
    BINARY32.total_width: BINARY32,
    BINARY16.total_width: BINARY16,
}
SUPPORTED_WIDTHS = tuple(sorted(LAYOUTS, reverse=True))


# IEEE 754 single-precision special patterns
FP32_POS_INF = 0x7F800000
FP32_NEG_INF = 0xFF800000
FP32_CANONICAL_NAN = 0x7FC00000  # Canonical quiet NaN

# IEEE 754 half-precision special patterns
FP16_POS_INF = 0x7C00
FP16_NEG_INF = 0xFC00
FP16_MIN_NAN = 0x7C01  # Exponent all-ones, smallest nonzero significand
FP16_CANONICAL_NAN = 0x7E00

# Narrowing: the binary16 significand keeps the top 10 of 23 bits
NARROW_SHIFT = BINARY32.significand_width - BINARY16.significand_width

# Formatter defaults
DEFAULT_BUFFER_SIZE = 64
STRING_TERMINATOR = 0

# Logging
LOGGER_NAME = "floatbits"
LOG_LEVEL_ENV_VAR = "FLOATBITS_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Sweep defaults for the command-line driver
DEFAULT_SWEEP_COUNT = 10000
DEFAULT_SWEEP_SEED = 0
