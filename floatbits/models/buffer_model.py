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

"""Fixed-capacity, NUL-terminated output buffers.

Buffer Model
============

The formatter can write into storage owned by the caller, with the same
guarantees as a bounded C string write:

    1. At most capacity - 1 characters are stored
    2. A NUL byte follows the stored characters
    3. The last byte of the buffer is always NUL
    4. Output that does not fit is cut silently; the stored text is
       always a prefix of the full text

A zero-capacity buffer is left untouched and receives the empty string.

Usage:
    Either hand ``format_bits`` a bytearray the caller owns:

        raw = bytearray(16)
        format_bits(0x3F000000, 32, raw)

    or use the FormatBuffer wrapper, which also decodes the text back:

        buf = FormatBuffer(16)
        format_bits(0x3F000000, 32, buf)
        buf.text  # '+1.000000000000'
"""

from typing import Any

from floatbits.config import DEFAULT_BUFFER_SIZE, STRING_TERMINATOR
from floatbits.utils.float_logger import FloatLogger
from floatbits.utils.validation import ensure_writable_buffer

ENCODING = "ascii"


def write_terminated(buf: Any, text: str) -> str:
    """Write ``text`` into a fixed-size buffer as a NUL-terminated string.

    Args:
        buf: Writable buffer (bytearray, memoryview, ...) owned by the caller
        text: ASCII text to store

    Returns:
        The part of ``text`` that was stored
    """
    view = ensure_writable_buffer(buf)
    capacity = len(view)
    if capacity == 0:
        return ""

    # Reserve the final byte for the terminator before writing anything.
    limit = capacity - 1
    stored = text[:limit]
    encoded = stored.encode(ENCODING)
    view[: len(encoded)] = encoded
    view[len(encoded)] = STRING_TERMINATOR
    view[limit] = STRING_TERMINATOR

    if len(stored) < len(text):
        FloatLogger.log_truncation(text, capacity, len(stored))
    return stored


def read_terminated(buf: Any) -> str:
    """Read a NUL-terminated ASCII string back out of a buffer."""
    raw = bytes(memoryview(buf).cast("B"))
    end = raw.find(STRING_TERMINATOR)
    if end < 0:
        end = len(raw)
    return raw[:end].decode(ENCODING)


class FormatBuffer:
    """Caller-owned output buffer of fixed capacity.

    Wraps a bytearray and exposes the stored text. Instances are plain
    mutable objects; share one between threads only with external locking.

    Attributes:
        raw: Underlying storage, terminator included
    """

    def __init__(self, capacity: int = DEFAULT_BUFFER_SIZE) -> None:
        """Allocate a zero-filled buffer.

        Args:
            capacity: Size in bytes, terminator included (0 is allowed)

        Raises:
            ValueError: If capacity is negative
        """
        if capacity < 0:
            raise ValueError(f"buffer capacity must be non-negative, got {capacity}")
        self.raw = bytearray(capacity)

    def __len__(self) -> int:
        return len(self.raw)

    def __repr__(self) -> str:
        return f"FormatBuffer(capacity={self.capacity}, text={self.text!r})"

    @property
    def capacity(self) -> int:
        return len(self.raw)

    @property
    def text(self) -> str:
        """Stored text, up to the first NUL."""
        return read_terminated(self.raw)

    def write(self, text: str) -> str:
        """Store ``text`` with bounded, NUL-terminated semantics.

        Returns:
            The part of ``text`` that fit
        """
        return write_terminated(self.raw, text)

    def clear(self) -> None:
        """Zero the whole buffer."""
        self.raw[:] = bytes(self.capacity)
