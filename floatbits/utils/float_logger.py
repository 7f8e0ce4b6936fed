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

"""Structured logging for conversions and formatting.

Float Logger
============

Provides formatted, context-rich log lines for narrowing decisions, output
truncation and sampling census summaries. All messages go to the
``floatbits`` logger hierarchy; the library never installs handlers, so
nothing is printed unless the application configures logging (the
command-line driver does).
"""

import logging
from collections.abc import Mapping

from floatbits.config import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)


class FloatLogger:
    """Structured logging for floatbits operations.

    Per-call messages are emitted at DEBUG and are skipped cheaply when
    DEBUG is disabled, so the pure conversion paths stay cheap.
    """

    @staticmethod
    def log_narrow(bits32: int, bits16: int, path: str) -> None:
        """Log the result of a binary32 -> binary16 conversion.

        Args:
            bits32: Input pattern
            bits16: Output pattern
            path: Conversion path taken ("inf", "nan", "zero", "underflow",
                "overflow", "subnormal", "normal")
        """
        if log.isEnabledFor(logging.DEBUG):
            log.debug(f"narrow 0x{bits32:08x} → 0x{bits16:04x} [{path}]")

    @staticmethod
    def log_rounding(candidate: int, round_bit: int, sticky: bool, result: int) -> None:
        """Log a round-to-nearest-even decision.

        Args:
            candidate: Truncated significand before rounding
            round_bit: Highest discarded bit
            sticky: Whether any lower discarded bit was set
            result: Significand after rounding
        """
        if log.isEnabledFor(logging.DEBUG):
            decision = "UP" if result != candidate else "DOWN"
            tie = " tie" if round_bit and not sticky else ""
            log.debug(
                f"round 0x{candidate:03x} r={round_bit} s={int(sticky)}{tie} "
                f"→ 0x{result:03x} [{decision}]"
            )

    @staticmethod
    def log_truncation(text: str, capacity: int, written: int) -> None:
        """Log formatter output that did not fit the caller's buffer.

        Args:
            text: Full untruncated text
            capacity: Buffer size in bytes, terminator included
            written: Number of characters actually stored
        """
        if log.isEnabledFor(logging.DEBUG):
            log.debug(
                f"truncated {text!r} to {written} of {len(text)} chars "
                f"(buffer {capacity} bytes)"
            )

    @staticmethod
    def log_class_census(title: str, counts: Mapping[str, int], total: int) -> None:
        """Log a classification census summary.

        Args:
            title: Heading for the summary
            counts: Mapping class name → number of patterns
            total: Number of patterns sampled
        """
        log.info("=" * 60)
        log.info(title.upper())
        log.info("=" * 60)
        for name, count in counts.items():
            share = 100.0 * count / total if total else 0.0
            log.info(f"  {name:10s}: {count:8d} ({share:5.1f}%)")
        log.info(f"  {'total':10s}: {total:8d}")
        log.info("=" * 60)
