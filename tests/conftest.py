"""Shared pytest fixtures for loading and building HTML test pages."""

from datetime import date
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

TODAY = date(2026, 10, 19)


def _load(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture()
def today() -> date:
    return TODAY


@pytest.fixture()
def rankings_short_html() -> str:
    return _load("rankings_short.html")


@pytest.fixture()
def rankings_no_table_html() -> str:
    return _load("rankings_no_table.html")


@pytest.fixture()
def profile_advanced_html() -> str:
    return _load("profile_advanced.html")


@pytest.fixture()
def profile_not_playing_html() -> str:
    return _load("profile_not_playing.html")


@pytest.fixture()
def profile_no_titles_paragraph_html() -> str:
    return _load("profile_no_titles_paragraph.html")


@pytest.fixture()
def schedule_today_html() -> str:
    return _load("schedule_today.html")


@pytest.fixture()
def schedule_yesterday_html() -> str:
    return _load("schedule_yesterday.html")


def _rankings_html(data_rows: int, prefix: str = "men") -> str:
    rows = ["<tr><th>RK</th><th>Name</th><th>Player</th></tr>"]
    for i in range(1, data_rows + 1):
        rows.append(
            f"<tr><td>{i}</td>"
            f'<td><a href="/tennis/player/_/id/{i}/{prefix}-{i}">'
            f"{prefix.title()} Player {i}</a></td>"
            f"<td>{prefix.title()} {i}</td></tr>"
        )
    return f"<html><body><table>{''.join(rows)}</table></body></html>"


@pytest.fixture()
def rankings_page():
    """Build a rankings page with ``data_rows`` rows below the header."""
    return _rankings_html


def _profile_html(
    heading: str | None = "CURRENT TOURNAMENT",
    match_type: str = "Men's Singles",
    rows: list[list[str]] | None = None,
    tail_rows: int = 0,
    season_paragraph: bool = True,
    name: str = "Test Player",
) -> str:
    """Profile page with a player-stats panel and optional tournament panel.

    ``heading=None`` omits the tournament panel. ``rows`` are the match rows
    after the match type row; ``tail_rows`` appends short one-cell rows.
    """
    paragraph = "<p>2026 STATS</p>" if season_paragraph else ""
    parts = [
        "<html><body>",
        f"<h1>{name}</h1>",
        '<div class="player-stats">', paragraph,
        "<table><tr><th>Titles</th></tr><tr><td>1</td></tr></table>",
        "</div>",
    ]
    if heading is not None:
        body = "".join(
            "<tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr>"
            for cells in (rows or [])
        )
        body += '<tr><td colspan="4">Other</td></tr>' * tail_rows
        parts.extend([
            '<div id="my-players-table">',
            f"<h4>{heading}</h4>",
            '<table><tr><td><a href="/event/1">Test Open</a></td></tr></table>',
            "<table>",
            "<tr><th>Round</th><th>Opponent</th><th>Result</th><th>Score</th></tr>",
            f'<tr><td colspan="4">{match_type}</td></tr>',
            body,
            "</table>",
            "</div>",
        ])
    parts.append("</body></html>")
    return "".join(parts)


@pytest.fixture()
def profile_page():
    """Build a profile page; see ``_profile_html`` for the options."""
    return _profile_html
