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

"""Bit pattern sampling for sweeps and property checks.

Sampling
========

The pattern space is too large to walk exhaustively for binary32, so sweeps
combine two sources:

    1. Boundary patterns: every combination of sign, the interesting
       exponent fields (0, 1, bias-1, bias, max-1, max) and the interesting
       significands (0, 1, top bit, all ones, all ones minus one)
    2. Uniformly random patterns from a seeded ``random.Random``

``class_census`` tallies how the patterns classify.
"""

import random
from collections import Counter
from collections.abc import Iterable, Iterator

from floatbits.config import FloatLayout
from floatbits.models.decode_model import FloatClass, classify, pack


def boundary_patterns(layout: FloatLayout) -> list[int]:
    """Return the boundary patterns of a layout, sorted and without duplicates."""
    exponents = {
        0,
        1,
        layout.bias - 1,
        layout.bias,
        layout.exponent_max - 1,
        layout.exponent_max,
    }
    top = 1 << (layout.significand_width - 1)
    significands = {
        0,
        1,
        top,
        top | 1,
        layout.significand_mask,
        layout.significand_mask - 1,
    }
    patterns = {
        pack(sign, exponent, significand, layout)
        for sign in (0, 1)
        for exponent in exponents
        for significand in significands
    }
    return sorted(patterns)


def random_patterns(
    layout: FloatLayout, count: int, seed: int | None = None
) -> Iterator[int]:
    """Yield ``count`` uniformly random patterns of the layout's width.

    Args:
        layout: Layout giving the pattern width
        count: Number of patterns to produce
        seed: Seed for reproducible sequences (None for OS entropy)
    """
    rng = random.Random(seed)
    for _ in range(count):
        yield rng.getrandbits(layout.total_width)


def class_census(patterns: Iterable[int], layout: FloatLayout) -> Counter[FloatClass]:
    """Count how many of ``patterns`` fall in each FloatClass.

    Every class is present in the result, with a count of 0 if unseen.
    """
    census: Counter[FloatClass] = Counter(dict.fromkeys(FloatClass, 0))
    for bits in patterns:
        census[classify(bits, layout)] += 1
    return census
