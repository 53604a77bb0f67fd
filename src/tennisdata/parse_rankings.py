"""Rankings page HTML parser."""

import logging
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from tennisdata.models import RankedAthlete
from tennisdata.util import ParseError, clean_text

logger = logging.getLogger(__name__)

TOP_N = 100


def read_rankings(
    html: str,
    gender: str,
    base_url: str,
    limit: int = TOP_N,
) -> list[RankedAthlete]:
    """Parse a rankings page and return up to ``limit`` RankedAthletes.

    Row 0 of the first table is the header. The site sometimes serves a
    table a few rows short; the missing entries are omitted. No table at
    all means the season has not started and yields an empty list.
    """
    soup = BeautifulSoup(html, "html.parser")
    table = soup.find("table")
    if table is None:
        logger.info("No %s rankings table found; treating as empty", gender)
        return []

    rows = table.find_all("tr")
    athletes: list[RankedAthlete] = []
    # rows 1..limit, bounded by the table's own length
    for row_index in range(1, min(limit, len(rows) - 1) + 1):
        athletes.append(
            _parse_ranking_row(rows[row_index], row_index, gender, base_url)
        )

    if len(athletes) < limit:
        logger.info(
            "Short %s rankings table: %d of %d rows",
            gender, len(athletes), limit,
        )
    logger.debug("Parsed %d %s ranked athletes", len(athletes), gender)
    return athletes


def _parse_ranking_row(
    row: Tag,
    row_index: int,
    gender: str,
    base_url: str,
) -> RankedAthlete:
    """Parse one data row: [rank, name+link, display name, ...]."""
    cells = row.find_all("td")
    if len(cells) < 2:
        raise ParseError(
            f"{gender} rankings row {row_index} has {len(cells)} cells"
        )

    rank = clean_text(cells[0].get_text())
    name = clean_text(cells[1].get_text())
    link = cells[1].find("a", href=True)
    if link is None:
        raise ParseError(
            f"{gender} rankings row {row_index} has no profile link"
        )

    display_name = name
    if len(cells) > 2:
        display_name = clean_text(cells[2].get_text()) or name

    return RankedAthlete(
        name=name,
        rank=rank,
        profile_url=urljoin(base_url, link["href"]),
        display_name=display_name,
        gender=gender,
    )


def interleave(
    men: list[RankedAthlete],
    women: list[RankedAthlete],
) -> list[RankedAthlete]:
    """Man 1, woman 1, man 2, woman 2, ... each list bounded by its length."""
    ordered: list[RankedAthlete] = []
    for i in range(max(len(men), len(women))):
        if i < len(men):
            ordered.append(men[i])
        if i < len(women):
            ordered.append(women[i])
    return ordered


def player_choices(
    men: list[RankedAthlete],
    women: list[RankedAthlete],
) -> list[str]:
    """Choice list entries ``"display name (rank)"`` interleaved by rank."""
    return [f"{a.display_name} ({a.rank})" for a in interleave(men, women)]
