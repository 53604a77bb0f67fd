"""Player profile page HTML parser."""

import logging
from datetime import date

from bs4 import BeautifulSoup, Tag

from tennisdata.models import PlayerStats, Standing, StandingKind
from tennisdata.standing import (
    CURRENT_TOURNAMENT_HEADING,
    TournamentPanel,
    detect_standing,
    latest_match_result,
    upcoming_match_details,
)
from tennisdata.util import ParseError, clean_text, parse_month_day

logger = logging.getLogger(__name__)

UNKNOWN_TITLES = "Singles titles: unknown"
TIME_ZONE_MARKER = "ET"  # match times are printed in Eastern time


def parse_profile(
    html: str,
    name: str,
    rank: str,
    today: date,
) -> PlayerStats:
    """Parse a player profile page and return PlayerStats.

    ``today`` is the current date in the reference time zone; an upcoming
    match is only reported when it is scheduled for that day.
    """
    soup = BeautifulSoup(html, "html.parser")

    titles = _extract_titles(soup)
    panel = _extract_panel(soup)
    result = detect_standing(panel)
    standing = result.standing

    current_tournament = ""
    latest_result = ""
    if standing.is_playing:
        current_tournament = _extract_tournament_name(soup)
        latest_result = latest_match_result(panel, result.latest_index)

    upcoming = ""
    if standing.kind is StandingKind.ADVANCED:
        heading = soup.find("h1")
        player_name = clean_text(heading.get_text()) if heading else ""
        upcoming = _format_upcoming(
            upcoming_match_details(panel, result.latest_index),
            player_name or name,
            today,
        )

    logger.debug("%s (%s): %s", name, rank, standing)
    return PlayerStats(
        name=name,
        ranking=f"Current ranking: {rank}",
        titles=titles,
        standing=standing,
        current_tournament=current_tournament,
        latest_match_result=latest_result,
        upcoming_match=upcoming,
    )


def degraded_stats(name: str, rank: str) -> PlayerStats:
    """Placeholder record for a profile page that could not be parsed."""
    return PlayerStats(
        name=name,
        ranking=f"Current ranking: {rank}",
        titles=UNKNOWN_TITLES,
        standing=Standing.not_playing(),
        degraded=True,
    )


def _extract_titles(soup: BeautifulSoup) -> str:
    """Season singles titles from the player-stats panel.

    The panel paragraph reads e.g. "2026 STATS"; its first word is the
    season. Some pages omit the paragraph, in which case the count is
    reported as unknown.
    """
    stats_div = soup.find("div", class_="player-stats")
    if stats_div is None:
        raise ParseError("No player-stats panel")

    paragraph = stats_div.find("p")
    if paragraph is None:
        return UNKNOWN_TITLES
    season = clean_text(paragraph.get_text()).split(" ")[0]

    table = stats_div.find("table")
    if table is None:
        raise ParseError("No table in player-stats panel")
    rows = table.find_all("tr")
    if len(rows) < 2:
        raise ParseError("player-stats table has no data row")
    cell = rows[1].find("td")
    if cell is None:
        raise ParseError("player-stats data row has no cells")

    return f"{season} singles titles: {clean_text(cell.get_text())}"


def _find_panel_div(soup: BeautifulSoup) -> Tag | None:
    return soup.find(id="my-players-table")


def _extract_panel(soup: BeautifulSoup) -> TournamentPanel | None:
    """Normalize the current tournament panel into cell texts.

    Returns None when the page has no tournament panel at all. The panel's
    second table holds [header, match type, match rows...].
    """
    div = _find_panel_div(soup)
    if div is None:
        return None

    h4 = div.find("h4")
    heading = clean_text(h4.get_text()) if h4 else ""
    panel = TournamentPanel(heading=heading, match_type="")
    if heading != CURRENT_TOURNAMENT_HEADING:
        return panel

    tables = div.find_all("table")
    if len(tables) < 2:
        raise ParseError("Current tournament panel has no match table")
    rows = tables[1].find_all("tr")
    if len(rows) < 2:
        raise ParseError("Current tournament table has no match type row")

    panel.match_type = clean_text(rows[1].get_text())
    panel.rows = [
        [clean_text(td.get_text()) for td in tr.find_all("td")]
        for tr in rows[2:]
    ]
    return panel


def _extract_tournament_name(soup: BeautifulSoup) -> str:
    div = _find_panel_div(soup)
    link = div.find("a") if div is not None else None
    if link is None:
        raise ParseError("Current tournament panel has no tournament link")
    return clean_text(link.get_text())


def _format_upcoming(details: str, player_name: str, today: date) -> str:
    """``"<name> <time>"`` if ``details`` ("October 19 7:00 PM ET") is today."""
    month_day = parse_month_day(details)
    if month_day != (today.month, today.day):
        return ""
    match_time = " ".join(details.split(" ")[2:])
    if TIME_ZONE_MARKER not in match_time.split(" "):
        return ""
    return f"{player_name} {match_time}"
