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

"""Type aliases for bit patterns and exponent values.

Types
=====

NewTypes that keep raw integers of different meaning apart in signatures.
They are plain ints at run time.
"""

from typing import NewType

# Bit patterns
BitPattern = NewType("BitPattern", int)
"""Unsigned bit pattern of a supported width (16 or 32 bits)."""

Bits32 = NewType("Bits32", int)
"""IEEE 754 binary32 bit pattern (0 to 2^32-1)."""

Bits16 = NewType("Bits16", int)
"""IEEE 754 binary16 bit pattern (0 to 2^16-1)."""

# Exponents
BiasedExponent = NewType("BiasedExponent", int)
"""Raw exponent field value as stored in the pattern."""

Exponent = NewType("Exponent", int)
"""Unbiased (true) exponent."""
