"""Combine ranked athletes and their profile pages into a stats map."""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from datetime import date

from tennisdata.models import AggregateResult, PlayerStats, RankedAthlete, StatsMap
from tennisdata.parse_profile import degraded_stats, parse_profile
from tennisdata.parse_rankings import interleave
from tennisdata.util import ParseError

logger = logging.getLogger(__name__)

ProfileFetcher = Callable[[str], str]


def _athlete_stats(
    athlete: RankedAthlete,
    fetch_profile: ProfileFetcher,
    today: date,
) -> PlayerStats:
    """Fetch and parse one profile.

    A page with unexpected structure degrades to a placeholder record.
    Fetch errors propagate so the whole cycle can be retried.
    """
    html = fetch_profile(athlete.profile_url)
    try:
        return parse_profile(html, athlete.name, athlete.rank, today)
    except ParseError as e:
        logger.warning(
            "Skipping profile of %s (%s) at %s: %s",
            athlete.name, athlete.rank, athlete.profile_url, e,
        )
        return degraded_stats(athlete.name, athlete.rank)


def aggregate_stats(
    men: list[RankedAthlete],
    women: list[RankedAthlete],
    fetch_profile: ProfileFetcher,
    today: date,
    max_workers: int = 1,
) -> AggregateResult:
    """Build the stats map keyed by ``"name (rank)"``.

    Each list is bounded by its own length. With ``max_workers`` > 1 the
    profile pages are fetched on a bounded thread pool.
    """
    athletes = interleave(men, women)

    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(
                lambda a: _athlete_stats(a, fetch_profile, today), athletes,
            ))
    else:
        results = [_athlete_stats(a, fetch_profile, today) for a in athletes]

    stats: StatsMap = {}
    skipped = 0
    for athlete, player_stats in zip(athletes, results):
        if player_stats.degraded:
            skipped += 1
        stats[athlete.key] = player_stats

    logger.info(
        "Built stats for %d players (men=%d, women=%d), skipped=%d",
        len(stats), len(men), len(women), skipped,
    )
    return AggregateResult(stats=stats, skipped=skipped)
