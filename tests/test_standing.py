"""Tests for tennisdata.standing."""

import pytest

from tennisdata.models import Standing, StandingKind
from tennisdata.standing import (
    TournamentPanel,
    detect_standing,
    latest_match_result,
    latest_result_index,
    upcoming_match_details,
)

CURRENT = "CURRENT TOURNAMENT"
SINGLES = "Women's Singles"


def _panel(rows: list[list[str]], heading: str = CURRENT, match_type: str = SINGLES) -> TournamentPanel:
    return TournamentPanel(heading=heading, match_type=match_type, rows=rows)


class TestEligibilityGate:
    """Pass 1: only a current singles entry is considered."""

    def test_no_panel(self) -> None:
        assert detect_standing(None).standing == Standing.not_playing()

    def test_other_heading(self) -> None:
        panel = _panel([["Final", "X", "W", "6-0 6-0"]], heading="LAST TOURNAMENT")
        assert detect_standing(panel).standing == Standing.not_playing()

    def test_heading_must_match_exactly(self) -> None:
        panel = _panel([["Final", "X", "W", "6-0 6-0"]], heading="Current Tournament")
        assert detect_standing(panel).standing == Standing.not_playing()

    def test_doubles_entry_ignored(self) -> None:
        panel = _panel([["Final", "X", "W", "6-0 6-0"]], match_type="Women's Doubles")
        result = detect_standing(panel)
        assert result.standing == Standing.not_playing()
        assert result.latest_index == -1

    def test_no_full_row(self) -> None:
        panel = _panel([["Women's Doubles"]])
        assert detect_standing(panel).standing == Standing.not_playing()


class TestLatestResultIndex:
    """Pass 2: the scan stops at the first short row."""

    def test_stops_at_short_row(self) -> None:
        rows = [["a", "b", "W", "s"], ["a", "b", "-", "s"], ["x"], ["a", "b", "W", "s"]]
        assert latest_result_index(rows) == 1

    def test_runs_to_table_end(self) -> None:
        rows = [["a", "b", "W", "s"], ["a", "b", "W", "s"]]
        assert latest_result_index(rows) == 1

    def test_first_row_short(self) -> None:
        assert latest_result_index([["x"], ["a", "b", "W", "s"]]) == -1

    def test_extra_cells_still_full(self) -> None:
        assert latest_result_index([["a", "b", "W", "s", "extra"]]) == 0


class TestDetectStanding:
    """Every gate-passing result cell maps to exactly one standing."""

    @pytest.mark.parametrize(
        "result_cell, expected",
        [
            ("-", Standing.advanced("Semifinal")),
            ("W", Standing.winner()),
            ("L", Standing.out()),
            ("Ret.", Standing.out()),
            ("", Standing.out()),
        ],
    )
    def test_result_cell(self, result_cell: str, expected: Standing) -> None:
        panel = _panel([
            ["Quarterfinal", "Opp", "W", "6-1 6-1"],
            ["Semifinal", "Opp", result_cell, "6-4 6-4"],
        ])
        result = detect_standing(panel)
        assert result.standing == expected
        assert result.latest_index == 1

    def test_advanced_round_payload(self) -> None:
        panel = _panel([["Round of 16", "Opp", "-", "October 19 1:00 PM ET"]])
        standing = detect_standing(panel).standing
        assert standing.kind is StandingKind.ADVANCED
        assert standing.round_name == "Round of 16"
        assert str(standing) == "advanced to Round of 16"

    def test_winner_with_trailing_short_rows(self) -> None:
        panel = _panel([["Final", "Opp", "W", "7-6 6-4"], ["Mixed"]])
        assert detect_standing(panel).standing == Standing.winner()


class TestLatestMatchResult:
    """Tests for latest_match_result()."""

    def test_completed_row(self) -> None:
        panel = _panel([["Final", "Jessica Pegula", "L", "4-6 2-6"]])
        assert latest_match_result(panel, 0) == "Final- Jessica Pegula 4-6 2-6"

    def test_placeholder_uses_previous_row(self) -> None:
        panel = _panel([
            ["Round of 32", "Jessica Pegula", "W", "6-4 6-2"],
            ["Round of 16", "Elena Rybakina", "-", "October 20 2:00 AM ET"],
        ])
        assert latest_match_result(panel, 1) == "Round of 32- Jessica Pegula 6-4 6-2"

    def test_placeholder_on_first_row_is_empty(self) -> None:
        panel = _panel([["Round of 64", "Elena Rybakina", "-", "October 20 2:00 AM ET"]])
        assert latest_match_result(panel, 0) == ""

    def test_bye_row(self) -> None:
        panel = _panel([
            ["Round of 64", "", "W", ""],
            ["Round of 32", "Elena Rybakina", "-", "October 20 2:00 AM ET"],
        ])
        assert latest_match_result(panel, 1) == "Round of 64- automatically advanced"

    def test_bye_on_latest_row(self) -> None:
        panel = _panel([["Round of 64", "", "L", ""]])
        assert latest_match_result(panel, 0).endswith("automatically advanced")


def test_upcoming_match_details() -> None:
    panel = _panel([["Final", "Opp", "-", "October 19 7:00 PM ET"]])
    assert upcoming_match_details(panel, 0) == "October 19 7:00 PM ET"
