"""Tests for sysdash formatting helpers."""

import re

import pytest

from sysdash.formatter import (
    GREEN,
    RED,
    RESET,
    YELLOW,
    bar,
    format_bytes,
    format_uptime,
)

UNIT_ORDER = {"B": 0, "KB": 1, "MB": 2, "GB": 3}


def parse_size(text: str) -> tuple[int, float]:
    value, unit = text.split()
    return UNIT_ORDER[unit], float(value)


def markers(text: str) -> str:
    """Extract the cells between the brackets of a rendered bar."""
    match = re.search(r"\[([#.]*)\]", text)
    assert match is not None
    return match.group(1)


class TestFormatBytes:
    """Tests for format_bytes."""

    @pytest.mark.parametrize("size", [0, 1, 512, 1023])
    def test_below_one_kilobyte(self, size):
        assert format_bytes(size) == f"{size} B"

    def test_kilobytes(self):
        assert format_bytes(1024) == "1.00 KB"
        assert format_bytes(1536) == "1.50 KB"

    @pytest.mark.parametrize("size", [1024, 2048, 500_000, 1024 * 1024 - 1])
    def test_kilobyte_range(self, size):
        result = format_bytes(size)
        assert result.endswith(" KB")
        assert 1.0 <= float(result.split()[0]) <= 1024.0

    def test_megabytes(self):
        assert format_bytes(5 * 1024**2) == "5.00 MB"

    def test_gigabytes(self):
        assert format_bytes(1073741824) == "1.00 GB"
        assert format_bytes(16 * 1024**3) == "16.00 GB"

    def test_gigabytes_is_largest_unit(self):
        assert format_bytes(2048 * 1024**3) == "2048.00 GB"

    def test_monotonic_across_boundaries(self):
        sizes = [0, 1, 1023, 1024, 1025, 1024**2 - 1, 1024**2, 1024**3 - 1, 1024**3, 5 * 1024**3]
        parsed = [parse_size(format_bytes(s)) for s in sizes]
        assert parsed == sorted(parsed)


class TestBar:
    """Tests for bar rendering."""

    @pytest.mark.parametrize(
        "value,maximum,width",
        [(0, 100, 25), (50, 100, 25), (100, 100, 25), (33.3, 100, 20), (7, 9, 35)],
    )
    def test_total_cells_equal_width(self, value, maximum, width):
        cells = markers(bar(value, maximum, width))
        assert len(cells) == width
        assert cells.count("#") == int(value / maximum * width)

    def test_filled_is_floored(self):
        assert markers(bar(19.9, 100.0, 10)) == "#" + "." * 9

    def test_filled_clamped_to_width(self):
        assert markers(bar(150.0, 100.0, 10)) == "#" * 10

    def test_negative_value_renders_empty(self):
        assert markers(bar(-5.0, 100.0, 10)) == "." * 10

    def test_wrapped_in_color_and_reset(self):
        text = bar(50.0, 100.0, 4)
        assert text == f"{GREEN}[##..]{RESET}"

    @pytest.mark.parametrize(
        "value,color",
        [
            (0.0, GREEN),
            (50.0, GREEN),
            (50.1, YELLOW),
            (80.0, YELLOW),
            (80.1, RED),
            (100.0, RED),
        ],
    )
    def test_color_tiers(self, value, color):
        text = bar(value, 100.0, 10)
        assert text.startswith(color)
        for other in {GREEN, YELLOW, RED} - {color}:
            assert other not in text

    def test_zero_maximum_is_a_precondition(self):
        with pytest.raises(ZeroDivisionError):
            bar(1.0, 0.0, 10)


def test_format_uptime():
    """Test uptime splits into hours, minutes and seconds."""
    assert format_uptime(0) == "0h 0m 0s"
    assert format_uptime(3725) == "1h 2m 5s"
    assert format_uptime(90061) == "25h 1m 1s"
