"""Daily schedule parser and digest text."""

import logging
import re
from collections.abc import Iterable

from bs4 import BeautifulSoup

from tennisdata.models import ScheduleEntry
from tennisdata.util import clean_text

logger = logging.getLogger(__name__)

_PLAYER_HREF = re.compile(r"/player/")


def parse_schedule(html: str) -> list[ScheduleEntry]:
    """Return one ScheduleEntry per match row of a daily results page.

    A match row is any table row with at least two cells and at least one
    link to a player page.
    """
    soup = BeautifulSoup(html, "html.parser")
    entries: list[ScheduleEntry] = []
    for tr in soup.find_all("tr"):
        cells = tr.find_all("td")
        if len(cells) < 2:
            continue
        players = [
            clean_text(a.get_text())
            for a in tr.find_all("a", href=_PLAYER_HREF)
        ]
        players = [p for p in players if p]
        if not players:
            continue
        summary = clean_text(" ".join(td.get_text(" ") for td in cells))
        entries.append(ScheduleEntry(players=players, summary=summary))
    return entries


def _tracked_lines(entries: list[ScheduleEntry], tracked: set[str]) -> list[str]:
    return [
        f"  {e.summary}" for e in entries
        if any(p in tracked for p in e.players)
    ]


def build_digest(
    today_html: str,
    yesterday_html: str,
    tracked: Iterable[str] = (),
) -> str:
    """Short text summary of today's schedule and yesterday's results.

    Matches involving a tracked player are listed under the count lines.
    """
    tracked_set = set(tracked)
    today = parse_schedule(today_html)
    yesterday = parse_schedule(yesterday_html)

    lines = [f"Today: {len(today)} matches scheduled"]
    lines.extend(_tracked_lines(today, tracked_set))
    lines.append(f"Yesterday: {len(yesterday)} matches played")
    lines.extend(_tracked_lines(yesterday, tracked_set))

    logger.info(
        "Digest: today=%d yesterday=%d tracked=%d",
        len(today), len(yesterday), len(tracked_set),
    )
    return "\n".join(lines)
