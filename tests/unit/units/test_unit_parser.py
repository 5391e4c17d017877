"""Unit tests for size and duration parsing.

Covers:
- Size suffixes k/m/g in both cases
- Duration suffixes ns/us/ms/s in both cases
- Rejection of unknown suffixes, empty mantissas and 64-bit overflow
"""

import pytest

from sysutil.core.exceptions import NumberFormatError
from sysutil.units.constants import MAX_LONG_VALUE
from sysutil.units.parser import parse_duration, parse_size

# =============================================================================
# Constants
# =============================================================================

LABEL: str = "test.property"


# =============================================================================
# Size Parsing
# =============================================================================


class TestParseSize:
    """Sizes with optional binary suffix."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1", 1),
            ("1k", 1024),
            ("1K", 1024),
            ("1m", 1024 * 1024),
            ("1M", 1024 * 1024),
            ("1g", 1024 * 1024 * 1024),
            ("1G", 1024 * 1024 * 1024),
            ("64k", 64 * 1024),
            ("0", 0),
            ("0g", 0),
        ],
    )
    def test_parses_sizes_with_suffix(self, value: str, expected: int) -> None:
        """Each suffix scales the mantissa by its power of 1024."""
        assert parse_size(LABEL, value) == expected

    def test_largest_long_without_suffix(self) -> None:
        """The signed 64-bit maximum parses unchanged."""
        assert parse_size(LABEL, str(MAX_LONG_VALUE)) == MAX_LONG_VALUE

    def test_overflow_with_gigabyte_suffix(self) -> None:
        """8589934592g is exactly 2**63 and must overflow."""
        with pytest.raises(NumberFormatError):
            parse_size(LABEL, "8589934592g")

    def test_largest_gigabyte_value_fits(self) -> None:
        """One below the overflow point still fits."""
        assert parse_size(LABEL, "8589934591g") == 8589934591 * 1024**3

    def test_overflow_of_mantissa(self) -> None:
        """A mantissa past the long range fails even without a suffix."""
        with pytest.raises(NumberFormatError):
            parse_size(LABEL, str(MAX_LONG_VALUE + 1))

    @pytest.mark.parametrize("value", ["", "k", "G", "1x", "1kb", "-1", "+1", "1_000", " 1", "1.5k"])
    def test_rejects_malformed_sizes(self, value: str) -> None:
        """Empty, signed, spaced, fractional or unknown-suffix sizes are rejected."""
        with pytest.raises(NumberFormatError):
            parse_size(LABEL, value)

    def test_error_names_label_and_value(self) -> None:
        """The error message carries the caller's label and the raw value."""
        with pytest.raises(NumberFormatError) as exc_info:
            parse_size("buffer.length", "12q")

        assert exc_info.value.label == "buffer.length"
        assert exc_info.value.value == "12q"
        assert "buffer.length" in str(exc_info.value)
        assert "12q" in str(exc_info.value)

    def test_error_is_a_value_error(self) -> None:
        """Callers catching ValueError still see parse failures."""
        with pytest.raises(ValueError):
            parse_size(LABEL, "abc")


# =============================================================================
# Duration Parsing
# =============================================================================


class TestParseDuration:
    """Durations with optional time-unit suffix, in nanoseconds."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1", 1),
            ("1ns", 1),
            ("1NS", 1),
            ("1us", 1000),
            ("1US", 1000),
            ("1ms", 1000 * 1000),
            ("1MS", 1000 * 1000),
            ("1s", 1000 * 1000 * 1000),
            ("1S", 1000 * 1000 * 1000),
            ("12S", 12 * 1000 * 1000 * 1000),
            ("1Ms", 1000 * 1000),
        ],
    )
    def test_parses_durations_with_suffix(self, value: str, expected: int) -> None:
        """Each suffix converts to nanoseconds."""
        assert parse_duration(LABEL, value) == expected

    def test_rejects_bad_suffix(self) -> None:
        """'g' is a size suffix, not a time unit."""
        with pytest.raises(NumberFormatError):
            parse_duration(LABEL, "1g")

    def test_rejects_bad_two_letter_suffix(self) -> None:
        """'zs' ends in 's' but is not a known unit."""
        with pytest.raises(NumberFormatError):
            parse_duration(LABEL, "1zs")

    @pytest.mark.parametrize("value", ["", "s", "ms", "NS", "1 s", "-1s", "1m", "1sec"])
    def test_rejects_malformed_durations(self, value: str) -> None:
        """Missing mantissas and unknown units are rejected."""
        with pytest.raises(NumberFormatError):
            parse_duration(LABEL, value)

    def test_overflow_in_seconds(self) -> None:
        """Seconds past the long range of nanoseconds overflow."""
        limit = MAX_LONG_VALUE // 1_000_000_000
        assert parse_duration(LABEL, f"{limit}s") == limit * 1_000_000_000
        with pytest.raises(NumberFormatError):
            parse_duration(LABEL, f"{limit + 1}s")
