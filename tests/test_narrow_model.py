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

"""Tests for binary32 -> binary16 narrowing with round-to-nearest-even."""

from __future__ import annotations

import logging

import pytest

from floatbits.config import BINARY32, LOGGER_NAME
from floatbits.exceptions import BitWidthError
from floatbits.models.decode_model import FloatClass, classify
from floatbits.models.format_model import describe
from floatbits.models.narrow_model import narrow, narrow_float, round_half_even
from floatbits.utils.bit_utils import bits_to_float16, float32_to_bits
from floatbits.utils.sampling import boundary_patterns, random_patterns


class TestSpecialValues:
    @pytest.mark.parametrize(
        ("bits32", "bits16"),
        [
            (0x00000000, 0x0000),
            (0x80000000, 0x8000),
            (0x7F800000, 0x7C00),
            (0xFF800000, 0xFC00),
        ],
    )
    def test_signed_zero_and_infinity(self, bits32: int, bits16: int) -> None:
        assert narrow(bits32) == bits16

    @pytest.mark.parametrize("bits32", [0x7FC00000, 0x7F800001, 0x7FFFFFFF])
    def test_nan_minimal_encoding(self, bits32: int) -> None:
        assert narrow(bits32) == 0x7C01
        assert narrow(bits32 | 0x80000000) == 0xFC01

    def test_nan_stays_nan(self) -> None:
        assert classify(narrow(0x7FA00000), 16) is FloatClass.NAN


class TestExactValues:
    def test_half_round_trip(self) -> None:
        bits16 = narrow(float32_to_bits(0.5))
        assert bits16 == 0x3800
        assert describe(bits16, 16) == "+1.0000000000 2^-1"
        assert describe(float32_to_bits(0.5)) == "+1.00000000000000000000000 2^-1"

    @pytest.mark.parametrize(
        ("value", "bits16"),
        [
            (1.0, 0x3C00),
            (-2.0, 0xC000),
            (65504.0, 0x7BFF),
            (2.0**-14, 0x0400),
            (2.0**-24, 0x0001),
            (-(2.0**-24), 0x8001),
            (1023 * 2.0**-24, 0x03FF),
        ],
    )
    def test_representable_values(self, value: float, bits16: int) -> None:
        assert narrow_float(value) == bits16

    def test_every_binary16_value_survives_widening(self) -> None:
        for bits16 in range(1 << 16):
            if classify(bits16, 16) is FloatClass.NAN:
                continue
            bits32 = float32_to_bits(bits_to_float16(bits16))
            assert narrow(bits32) == bits16, hex(bits16)


class TestRoundToNearestEven:
    def test_truncate_when_round_bit_clear(self) -> None:
        assert narrow(0x3F800FFF) == 0x3C00

    def test_round_up_when_sticky_set(self) -> None:
        assert narrow(0x3F801001) == 0x3C01

    def test_tie_with_even_candidate_stays(self) -> None:
        # 1 + 2^-11: halfway between 0x3C00 and 0x3C01
        assert narrow(0x3F801000) == 0x3C00

    def test_tie_with_odd_candidate_rounds_up(self) -> None:
        # 1 + 3 * 2^-11: halfway between 0x3C01 and 0x3C02
        assert narrow(0x3F803000) == 0x3C02

    def test_subnormal_tie_even_below(self) -> None:
        # 2.5 * 2^-24 -> 2 * 2^-24
        assert narrow(0x34200000) == 0x0002

    def test_subnormal_tie_even_above(self) -> None:
        # 3.5 * 2^-24 -> 4 * 2^-24
        assert narrow(0x34600000) == 0x0004

    @pytest.mark.parametrize(
        ("candidate", "round_bit", "sticky", "expected"),
        [
            (0x100, 0, False, 0x100),
            (0x100, 0, True, 0x100),
            (0x100, 1, True, 0x101),
            (0x100, 1, False, 0x100),
            (0x101, 1, False, 0x102),
            (0x3FF, 1, False, 0x400),
        ],
    )
    def test_round_half_even(
        self, candidate: int, round_bit: int, sticky: bool, expected: int
    ) -> None:
        assert round_half_even(candidate, round_bit, sticky) == expected


class TestCarryPropagation:
    def test_carry_into_next_binade(self) -> None:
        # 1.99951171875 rounds to 2.0
        assert narrow(0x3FFFF000) == 0x4000

    def test_carry_into_odd_exponent_field(self) -> None:
        # Exponent field 1 with all-ones significand rounds to exponent field 2
        assert narrow(0x38FFF000) == 0x0800

    def test_carry_into_infinity(self) -> None:
        # 65520 is halfway between 65504 and 65536 and rounds to even: infinity
        assert narrow(0x477FF000) == 0x7C00
        assert narrow(0xC77FF000) == 0xFC00

    def test_just_below_overflow_threshold(self) -> None:
        assert narrow(0x477FEFFF) == 0x7BFF

    def test_largest_subnormal_carries_to_smallest_normal(self) -> None:
        assert narrow(0x387FF000) == 0x0400

    def test_largest_subnormal_kept(self) -> None:
        assert narrow(0x387FC000) == 0x03FF


class TestRangeLimits:
    def test_exponent_minus_25_underflows(self) -> None:
        assert narrow(0x33000000) == 0x0000
        assert narrow(0xB3000000) == 0x8000
        assert narrow(0x337FFFFF) == 0x0000

    def test_exponent_minus_24_uses_subnormal_path(self) -> None:
        assert narrow(0x33800000) == 0x0001
        assert narrow(0x33A00000) == 0x0001
        # 1.5 * 2^-24 is a tie between 1 and 2 ulps; 2 is even
        assert narrow(0x33C00000) == 0x0002
        assert narrow(0xB3C00000) == 0x8002

    def test_binary32_subnormals_flush_to_signed_zero(self) -> None:
        assert narrow(0x00000001) == 0x0000
        assert narrow(0x807FFFFF) == 0x8000

    def test_overflow_to_signed_infinity(self) -> None:
        assert narrow(0x47800000) == 0x7C00  # 65536
        assert narrow(0x7F7FFFFF) == 0x7C00
        assert narrow(0xFF7FFFFF) == 0xFC00

    def test_first_overflow_binade_never_yields_nan(self) -> None:
        # Unbiased exponent 16 with a nonzero significand
        assert narrow(0x47C00000) == 0x7C00
        assert narrow(0x47FFFFFF) == 0x7C00


class TestTotality:
    def test_sampled_outputs_are_16_bit(self) -> None:
        for bits32 in boundary_patterns(BINARY32) + list(
            random_patterns(BINARY32, 20000, seed=99)
        ):
            bits16 = narrow(bits32)
            assert 0 <= bits16 <= 0xFFFF
            assert (bits16 >> 15) == (bits32 >> 31)
            assert (classify(bits16, 16) is FloatClass.NAN) == (
                classify(bits32) is FloatClass.NAN
            )

    def test_rejects_wide_input(self) -> None:
        with pytest.raises(BitWidthError):
            narrow(1 << 32)


class TestLogging:
    def test_debug_log_names_path(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            narrow(0x477FF000)
        messages = [record.getMessage() for record in caplog.records]
        assert any("[normal]" in message for message in messages)
        assert any("tie" in message and "[UP]" in message for message in messages)

    def test_silent_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            narrow(0x3F801000)
        assert caplog.records == []
