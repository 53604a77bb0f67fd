"""Tournament standing detection.

A profile page never states an athlete's standing outright. It has to be
read off the shape of the current tournament table:

    CURRENT TOURNAMENT                      <- heading
    [Tournament link]
    | Men's Singles                      |  <- match type row
    | Round of 64 | Opponent | W | 6-3 6-4 |
    | Round of 32 | Opponent | - | Oct 19 7:00 PM ET |   <- next round placeholder
    | ...short rows (fewer cells)...     |

The latest-result row is the last row, starting from the first match row,
in an unbroken run of rows with the full cell count. Its result cell
decides the standing: "-" means the match has not been played yet, "W" a
win with nothing scheduled after it, anything else a loss.
"""

from dataclasses import dataclass, field

from tennisdata.models import Standing

CURRENT_TOURNAMENT_HEADING = "CURRENT TOURNAMENT"
SINGLES_MARKER = "Singles"
PENDING_RESULT = "-"
WIN_RESULT = "W"
MATCH_ROW_CELLS = 4

# Match row cell positions
ROUND_CELL = 0
OPPONENT_CELL = 1
RESULT_CELL = 2
DETAIL_CELL = 3  # score once played, date/time before


@dataclass
class TournamentPanel:
    """Cell texts of the current tournament panel, already normalized.

    ``rows`` holds the match rows only; the first match row is index 0.
    """

    heading: str
    match_type: str
    rows: list[list[str]] = field(default_factory=list)


@dataclass(frozen=True)
class StandingResult:
    standing: Standing
    latest_index: int = -1  # -1 when not playing


NOT_PLAYING = StandingResult(Standing.not_playing())


def is_eligible(panel: TournamentPanel | None) -> bool:
    """Only a current singles entry counts; doubles and mixed are ignored."""
    return (
        panel is not None
        and panel.heading == CURRENT_TOURNAMENT_HEADING
        and SINGLES_MARKER in panel.match_type
    )


def latest_result_index(rows: list[list[str]]) -> int:
    """Index of the last full row in the leading run of full rows, or -1."""
    index = -1
    for i, cells in enumerate(rows):
        if len(cells) < MATCH_ROW_CELLS:
            break
        index = i
    return index


def detect_standing(panel: TournamentPanel | None) -> StandingResult:
    if not is_eligible(panel):
        return NOT_PLAYING

    index = latest_result_index(panel.rows)
    if index < 0:
        return NOT_PLAYING

    cells = panel.rows[index]
    result = cells[RESULT_CELL]
    if result == PENDING_RESULT:
        return StandingResult(Standing.advanced(cells[ROUND_CELL]), index)
    if result == WIN_RESULT:
        return StandingResult(Standing.winner(), index)
    return StandingResult(Standing.out(), index)


def latest_match_result(panel: TournamentPanel, latest_index: int) -> str:
    """Text of the latest played match, e.g. ``"Round of 32- Jane Doe 6-3 6-4"``.

    An unplayed placeholder row is skipped in favour of the row above it.
    When the placeholder is the first match row nothing has been played yet.
    """
    cells = panel.rows[latest_index]
    if cells[RESULT_CELL] == PENDING_RESULT:
        if latest_index == 0:
            return ""
        cells = panel.rows[latest_index - 1]

    round_name = cells[ROUND_CELL]
    opponent = cells[OPPONENT_CELL]
    if not opponent:
        return f"{round_name}- automatically advanced"
    return f"{round_name}- {opponent} {cells[DETAIL_CELL]}"


def upcoming_match_details(panel: TournamentPanel, latest_index: int) -> str:
    return panel.rows[latest_index][DETAIL_CELL]
