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

"""Tests for input validation, sampling helpers and output buffers."""

from __future__ import annotations

import pytest

from floatbits.config import BINARY16, BINARY32
from floatbits.exceptions import BitWidthError, FloatBitsError, UnsupportedWidthError
from floatbits.models.buffer_model import (
    FormatBuffer,
    read_terminated,
    write_terminated,
)
from floatbits.models.decode_model import FloatClass
from floatbits.utils.sampling import boundary_patterns, class_census, random_patterns
from floatbits.utils.validation import (
    ensure_bit_pattern,
    ensure_layout,
    ensure_writable_buffer,
)


class TestEnsureLayout:
    def test_widths(self) -> None:
        assert ensure_layout(32) is BINARY32
        assert ensure_layout(16) is BINARY16

    def test_layout_passthrough(self) -> None:
        assert ensure_layout(BINARY16) is BINARY16

    @pytest.mark.parametrize("width", [0, 8, 64, 128])
    def test_unsupported(self, width: int) -> None:
        with pytest.raises(UnsupportedWidthError):
            ensure_layout(width)

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(FloatBitsError):
            ensure_layout(64)


class TestEnsureBitPattern:
    def test_bounds(self) -> None:
        assert ensure_bit_pattern(0, BINARY16) == 0
        assert ensure_bit_pattern(0xFFFF, BINARY16) == 0xFFFF
        assert ensure_bit_pattern(0xFFFFFFFF, BINARY32) == 0xFFFFFFFF

    @pytest.mark.parametrize("bits", [-1, 0x10000])
    def test_out_of_range(self, bits: int) -> None:
        with pytest.raises(BitWidthError):
            ensure_bit_pattern(bits, BINARY16)

    def test_non_integer(self) -> None:
        with pytest.raises(TypeError):
            ensure_bit_pattern("0x3c00", BINARY16)


class TestEnsureWritableBuffer:
    def test_bytearray_view(self) -> None:
        view = ensure_writable_buffer(bytearray(4))
        assert len(view) == 4
        assert view.format == "B"

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            ensure_writable_buffer(bytes(4))


class TestFormatBuffer:
    def test_default_capacity(self) -> None:
        assert FormatBuffer().capacity == 64

    def test_negative_capacity(self) -> None:
        with pytest.raises(ValueError):
            FormatBuffer(-1)

    def test_write_and_clear(self) -> None:
        buf = FormatBuffer(6)
        assert buf.write("+1.0101") == "+1.01"
        assert buf.text == "+1.01"
        buf.clear()
        assert buf.text == ""
        assert buf.raw == bytearray(6)

    def test_shorter_write_terminates_early(self) -> None:
        buf = FormatBuffer(8)
        buf.write("-1.11111")
        assert buf.write("+0") == "+0"
        assert buf.text == "+0"

    def test_read_terminated_without_nul(self) -> None:
        assert read_terminated(b"abc") == "abc"

    def test_write_terminated_reports_stored_prefix(self) -> None:
        raw = bytearray(4)
        assert write_terminated(raw, "NaN") == "NaN"
        assert raw == bytearray(b"NaN\x00")


class TestSampling:
    def test_boundary_patterns_fit_layout(self) -> None:
        for layout in (BINARY32, BINARY16):
            patterns = boundary_patterns(layout)
            assert patterns == sorted(set(patterns))
            assert all(0 <= bits <= layout.mask for bits in patterns)

    def test_boundary_patterns_cover_every_class(self) -> None:
        for layout in (BINARY32, BINARY16):
            census = class_census(boundary_patterns(layout), layout)
            assert all(census[float_class] > 0 for float_class in FloatClass)

    def test_random_patterns_reproducible(self) -> None:
        first = list(random_patterns(BINARY32, 100, seed=5))
        second = list(random_patterns(BINARY32, 100, seed=5))
        assert first == second
        assert len(first) == 100
        assert all(0 <= bits <= BINARY32.mask for bits in first)

    def test_census_reports_unseen_classes(self) -> None:
        census = class_census([0x3C00], BINARY16)
        assert census[FloatClass.NORMAL] == 1
        assert census[FloatClass.NAN] == 0
        assert sum(census.values()) == 1
