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

"""Custom exceptions for floatbits.

Exceptions
==========

The conversions themselves are total over their input domains and never
raise. These exceptions only report inputs that are outside the domain:
patterns that do not fit the requested width, unsupported widths, and
reinterpretations between storage types of different sizes.
"""


class FloatBitsError(Exception):
    """Base exception for all floatbits failures.

    Callers can catch every package-specific error with a single handler.
    """

    pass


class BitWidthError(FloatBitsError):
    """Bit pattern does not fit the layout it was given for.

    Raised for negative patterns and for patterns with bits set above the
    most significant bit of the format.
    """

    def __init__(
        self, message: str, value: int | None = None, width: int | None = None
    ):
        """Initialize bit width error with context.

        Args:
            message: Error description
            value: The offending pattern
            width: Width of the layout in bits (16 or 32)
        """
        super().__init__(message)
        self.value = value
        self.width = width


class UnsupportedWidthError(FloatBitsError):
    """Requested float width is not one of the supported formats."""

    def __init__(
        self,
        message: str,
        width: int | None = None,
        supported: tuple[int, ...] | None = None,
    ):
        """Initialize unsupported width error.

        Args:
            message: Error description
            width: The requested width
            supported: Widths that are supported
        """
        super().__init__(message)
        self.width = width
        self.supported = supported or ()


class ReinterpretError(FloatBitsError):
    """Bit reinterpretation between storage types of unequal size.

    A reinterpretation copies bits, it never converts values, so the source
    and target storage must be exactly the same number of bytes.
    """

    def __init__(
        self, message: str, source: str | None = None, target: str | None = None
    ):
        """Initialize reinterpret error.

        Args:
            message: Error description
            source: struct format code of the source storage
            target: struct format code of the target storage
        """
        super().__init__(message)
        self.source = source
        self.target = target
