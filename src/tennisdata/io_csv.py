"""CSV and text output, replacing previous contents in full."""

import csv
import logging
from pathlib import Path

from tennisdata.models import StatsMap

logger = logging.getLogger(__name__)

STATS_COLUMNS = [
    "key", "name", "ranking", "titles", "standing", "current_tournament",
    "latest_match_result", "upcoming_match", "degraded",
]

CHOICES_COLUMNS = ["choice"]


def _stats_to_dicts(stats: StatsMap) -> list[dict]:
    """Convert the stats map to a key-sorted list of string-valued rows."""
    rows = []
    for key in sorted(stats):
        s = stats[key]
        rows.append({
            "key": key,
            "name": s.name,
            "ranking": s.ranking,
            "titles": s.titles,
            "standing": str(s.standing),
            "current_tournament": s.current_tournament,
            "latest_match_result": s.latest_match_result,
            "upcoming_match": s.upcoming_match,
            "degraded": "T" if s.degraded else "F",
        })
    return rows


def _write_csv(path: Path, rows: list[dict], fieldnames: list[str]) -> None:
    """Write rows to CSV with LF line endings, via a temp file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    with open(tmp, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(
            f, fieldnames=fieldnames, quoting=csv.QUOTE_MINIMAL,
            lineterminator="\n",
        )
        writer.writeheader()
        writer.writerows(rows)
    tmp.replace(path)


def write_stats_csv(stats: StatsMap, path: Path) -> None:
    """Write player_stats.csv, dropping whatever the previous cycle wrote."""
    rows = _stats_to_dicts(stats)
    _write_csv(path, rows, STATS_COLUMNS)
    logger.info("Wrote %d stats rows to %s", len(rows), path)


def write_choices_csv(choices: list[str], path: Path) -> None:
    """Write player_choices.csv in choice-list order."""
    _write_csv(path, [{"choice": c} for c in choices], CHOICES_COLUMNS)
    logger.info("Wrote %d choices to %s", len(choices), path)


def write_digest(digest: str, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(digest + "\n", encoding="utf-8")
    logger.info("Wrote digest to %s", path)
