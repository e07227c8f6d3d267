"""Tests for SourceLocation."""

import pytest

from consentdoc.location import SourceLocation


class TestSourceLocation:
    def test_str_is_line_colon_column(self) -> None:
        assert str(SourceLocation(line=3, column=7)) == "3:7"

    def test_zero(self) -> None:
        assert SourceLocation.zero() == SourceLocation(0, 0)

    def test_orders_by_line_then_column(self) -> None:
        assert SourceLocation(0, 9) < SourceLocation(1, 0)
        assert SourceLocation(1, 2) < SourceLocation(1, 3)

    def test_is_frozen(self) -> None:
        location = SourceLocation(1, 1)
        with pytest.raises(AttributeError):
            location.line = 2  # type: ignore[misc]


class TestFromOffset:
    """Line/column computation from a code point offset."""

    @pytest.mark.parametrize(
        "source,offset,expected",
        [
            ("", 0, SourceLocation(0, 0)),
            ("abc", 2, SourceLocation(0, 2)),
            ("ab\ncd", 3, SourceLocation(1, 0)),
            ("ab\ncd", 4, SourceLocation(1, 1)),
            ("ab\ncd", 5, SourceLocation(1, 2)),
            ("a\n\n\nb", 4, SourceLocation(3, 0)),
        ],
    )
    def test_line_feed_sources(self, source: str, offset: int, expected: SourceLocation) -> None:
        assert SourceLocation.from_offset(source, offset) == expected

    def test_crlf_counts_as_one_break(self) -> None:
        assert SourceLocation.from_offset("a\r\nb", 3) == SourceLocation(1, 0)
        assert SourceLocation.from_offset("a\r\nb", 4) == SourceLocation(1, 1)

    def test_lone_carriage_return_is_a_break(self) -> None:
        assert SourceLocation.from_offset("a\rb", 2) == SourceLocation(1, 0)

    def test_columns_count_code_points(self) -> None:
        """Non-ASCII characters advance the column by one each."""
        assert SourceLocation.from_offset("héllo wörld", 8) == SourceLocation(0, 8)
        assert SourceLocation.from_offset("🙂🙂x", 2) == SourceLocation(0, 2)
