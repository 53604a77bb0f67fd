"""One complete fetch cycle: documents -> rankings -> stats -> digest."""

import logging
from collections.abc import Callable, Iterable
from datetime import date

from tennisdata.aggregate import aggregate_stats
from tennisdata.digest import build_digest
from tennisdata.fetch import (
    PageSource,
    men_rankings_url,
    schedule_url,
    women_rankings_url,
)
from tennisdata.models import CycleResult
from tennisdata.parse_rankings import TOP_N, player_choices, read_rankings
from tennisdata.util import today_in_reference_tz, yesterday_stamp

logger = logging.getLogger(__name__)

# Progress milestones reported to an optional observer
PROGRESS_START = 0
PROGRESS_DOCUMENTS = 10
PROGRESS_CHOICES = 40
PROGRESS_STATS = 70
PROGRESS_DIGEST = 99
PROGRESS_DONE = 100


def run_cycle(
    source: PageSource,
    today: date | None = None,
    limit: int = TOP_N,
    tracked: Iterable[str] = (),
    max_workers: int = 1,
    progress: Callable[[int], None] | None = None,
) -> CycleResult:
    """Run one cycle and return its results.

    Nothing is written here; the caller persists the result only once the
    whole cycle has succeeded. Fetch errors propagate.
    """
    def report(pct: int) -> None:
        if progress is not None:
            progress(pct)

    if today is None:
        today = today_in_reference_tz()
    report(PROGRESS_START)

    # 1. Top-level documents
    men_url = men_rankings_url()
    women_url = women_rankings_url()
    men_html = source.get(men_url, "rankings_men.html")
    logger.info("Got men's rankings document")
    women_html = source.get(women_url, "rankings_women.html")
    logger.info("Got women's rankings document")
    today_html = source.get(schedule_url(), "schedule_today.html")
    logger.info("Got today's schedule document")
    stamp = yesterday_stamp(today)
    yesterday_html = source.get(schedule_url(stamp), f"schedule_{stamp}.html")
    logger.info("Got yesterday's schedule document (%s)", stamp)
    report(PROGRESS_DOCUMENTS)

    # 2. Rankings and choice list
    men = read_rankings(men_html, "men", men_url, limit)
    women = read_rankings(women_html, "women", women_url, limit)
    choices = player_choices(men, women)
    logger.info("Got player choices list: %d entries", len(choices))
    report(PROGRESS_CHOICES)

    # 3. Stats map; no men's table means the season has not started
    if men:
        aggregated = aggregate_stats(
            men, women, source.profile, today, max_workers=max_workers,
        )
        stats, skipped = aggregated.stats, aggregated.skipped
    else:
        logger.info("No rankings yet this season; stats map is empty")
        stats, skipped = {}, 0
    report(PROGRESS_STATS)

    # 4. Digest
    digest = build_digest(today_html, yesterday_html, tracked)
    report(PROGRESS_DIGEST)

    report(PROGRESS_DONE)
    return CycleResult(stats=stats, choices=choices, digest=digest, skipped=skipped)
