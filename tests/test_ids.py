"""
Tests for id allocation and path id parsing.
"""
import pytest

from backend.core.ids import IdAllocator, parse_record_id


class TestIdAllocator:
    """Millisecond ids that never repeat within one process."""

    def test_uses_clock_value(self):
        allocator = IdAllocator(clock=lambda: 1700000000000)
        assert allocator.next_id() == 1700000000000

    def test_same_millisecond_is_bumped(self):
        """Two ids in the same millisecond must still differ."""
        allocator = IdAllocator(clock=lambda: 1000)
        assert [allocator.next_id() for _ in range(3)] == [1000, 1001, 1002]

    def test_clock_going_backwards_keeps_increasing(self):
        ticks = iter([5000, 4000, 6000])
        allocator = IdAllocator(clock=lambda: next(ticks))
        assert [allocator.next_id() for _ in range(3)] == [5000, 5001, 6000]

    def test_default_clock_is_epoch_millis(self):
        # any time after 2020-01-01 in milliseconds
        assert IdAllocator().next_id() > 1577836800000


class TestParseRecordId:
    """Path segments are read like JavaScript parseInt."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("42", 42),
            ("  42", 42),
            ("42abc", 42),
            ("-7", -7),
            ("+9", 9),
            ("0x1A", 26),
            ("0x1g", 1),
            ("-0x10", -16),
            ("007", 7),
            ("1700000000000", 1700000000000),
        ],
    )
    def test_parses_leading_number(self, raw, expected):
        assert parse_record_id(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "x42", "-", "NaN", "0x", "-0x", "0xg"])
    def test_unparseable_is_none(self, raw):
        assert parse_record_id(raw) is None

    def test_only_ascii_digits_count(self):
        """Arabic-Indic digits are not a number to parseInt."""
        assert parse_record_id("٤٢") is None
        assert parse_record_id("4٢") == 4
