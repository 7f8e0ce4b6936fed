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

"""Utility functions for floatbits.

Modules
-------
bit_utils
    Checked bit reinterpretation (transmute) and float <-> bits helpers

validation
    Width and bit pattern checks raising package exceptions

float_logger
    Structured logging for narrowing, truncation and census summaries

sampling
    Boundary and seeded random bit patterns, classification census
"""

from floatbits.utils.bit_utils import (
    bits_to_float16,
    bits_to_float32,
    float16_to_bits,
    float32_to_bits,
    transmute,
)
from floatbits.utils.validation import ensure_bit_pattern, ensure_layout

# Note: FloatLogger and sampling are not imported at package level to avoid
# circular imports with models. Import them directly when needed.

__all__ = [
    "bits_to_float16",
    "bits_to_float32",
    "float16_to_bits",
    "float32_to_bits",
    "transmute",
    "ensure_bit_pattern",
    "ensure_layout",
]
