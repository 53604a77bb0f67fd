"""Tests for tennisdata.util."""

from datetime import date

import pytest

from tennisdata.util import clean_text, parse_month_day, yesterday_stamp


class TestCleanText:
    def test_collapses_whitespace(self) -> None:
        assert clean_text("  Carlos\n   Alcaraz ") == "Carlos Alcaraz"

    def test_non_breaking_space(self) -> None:
        assert clean_text("Carlos\xa0Alcaraz") == "Carlos Alcaraz"


class TestParseMonthDay:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("October 19 7:00 PM ET", (10, 19)),
            ("Oct. 19 7:00 PM ET", (10, 19)),
            ("Sept 3", (9, 3)),
            ("May 1, 2026", (5, 1)),
            ("June 1", (6, 1)),
            ("July 4", (7, 4)),
        ],
    )
    def test_parsed(self, text: str, expected: tuple[int, int]) -> None:
        assert parse_month_day(text) == expected

    @pytest.mark.parametrize(
        "text", ["", "TBD", "J 19", "October", "October nineteen", "October 32"],
    )
    def test_unparsed(self, text: str) -> None:
        assert parse_month_day(text) is None


class TestYesterdayStamp:
    def test_previous_day(self) -> None:
        assert yesterday_stamp(date(2026, 10, 19)) == "20261018"

    def test_crosses_year(self) -> None:
        assert yesterday_stamp(date(2026, 1, 1)) == "20251231"
