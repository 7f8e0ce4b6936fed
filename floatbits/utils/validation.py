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

"""Input validation for bit patterns, widths and output buffers.

Validation Utilities
====================

The public entry points accept plain Python integers, which are unbounded
and signed. These helpers check that an input actually lies in the domain
of the operation and raise a package exception with context when it does
not.

Provided Utilities:
    - ensure_layout(): Resolve a width (16/32) or layout to a FloatLayout
    - ensure_bit_pattern(): Check that an integer fits a layout
    - ensure_writable_buffer(): Check a caller-supplied output buffer

Example:
    >>> ensure_bit_pattern(0x3F000000, BINARY32)
    1056964608
    >>> ensure_bit_pattern(0x10000, BINARY16)
    Traceback (most recent call last):
        ...
    floatbits.exceptions.BitWidthError: 0x10000 does not fit in 16 bits
"""

import operator
from typing import Any

from floatbits.config import LAYOUTS, SUPPORTED_WIDTHS, FloatLayout
from floatbits.exceptions import BitWidthError, UnsupportedWidthError


def ensure_layout(width: int | FloatLayout) -> FloatLayout:
    """Resolve a width in bits, or a layout, to a supported FloatLayout.

    Args:
        width: 32, 16, or a FloatLayout instance

    Returns:
        The layout for that width

    Raises:
        UnsupportedWidthError: If the width is not one of SUPPORTED_WIDTHS
    """
    if isinstance(width, FloatLayout):
        return width
    layout = LAYOUTS.get(width)
    if layout is None:
        raise UnsupportedWidthError(
            f"unsupported float width {width!r}, expected one of {SUPPORTED_WIDTHS}",
            width=width,
            supported=SUPPORTED_WIDTHS,
        )
    return layout


def ensure_bit_pattern(bits: Any, layout: FloatLayout) -> int:
    """Ensure a value is an unsigned pattern that fits the layout.

    Integer-like objects (numpy scalars, IntEnum members) are accepted
    through ``operator.index``; floats and strings are not.

    Args:
        bits: Candidate bit pattern
        layout: Layout the pattern must fit

    Returns:
        The pattern as a plain int

    Raises:
        TypeError: If ``bits`` is not integer-like
        BitWidthError: If the pattern is negative or wider than the layout
    """
    value = operator.index(bits)
    if value < 0 or value > layout.mask:
        raise BitWidthError(
            f"{value:#x} does not fit in {layout.total_width} bits",
            value=value,
            width=layout.total_width,
        )
    return value


def ensure_writable_buffer(buf: Any) -> memoryview:
    """Return a writable byte view of a caller-supplied buffer.

    Args:
        buf: bytearray, memoryview or any writable buffer-protocol object

    Returns:
        A one-dimensional unsigned-byte memoryview over ``buf``

    Raises:
        TypeError: If the buffer is read-only or not a buffer at all
    """
    view = memoryview(buf)
    if view.readonly:
        raise TypeError(f"output buffer of type {type(buf).__name__} is read-only")
    return view.cast("B")
