"""CLI entry point and main processing flow."""

import argparse
import logging
import sys
import time
from pathlib import Path

from tennisdata.cycle import run_cycle
from tennisdata.fetch import PageSource
from tennisdata.io_csv import write_choices_csv, write_digest, write_stats_csv
from tennisdata.parse_rankings import TOP_N
from tennisdata.util import NetworkError, TennisdataError, today_in_reference_tz

logger = logging.getLogger("tennisdata")

EXIT_FAILURE = 1
EXIT_RETRY = 75  # EX_TEMPFAIL: transient network failure, rerun the cycle


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tennisdata",
        description="Fetch tennis rankings and player standings from ESPN.",
    )
    parser.add_argument(
        "--out-dir", type=Path, default=Path("data"),
        help="Output directory (default: data)",
    )
    parser.add_argument(
        "--raw-cache", choices=["on", "off"], default="off",
        help="HTML cache mode (default: off)",
    )
    parser.add_argument(
        "--top-n", type=int, default=TOP_N,
        help=f"Ranked players read per tour (default: {TOP_N})",
    )
    parser.add_argument(
        "--track", action="append", default=[], metavar="NAME",
        help="Player to list in the digest (repeatable)",
    )
    parser.add_argument(
        "--workers", type=int, default=1,
        help="Concurrent profile fetches (default: 1)",
    )
    parser.add_argument(
        "--log-level", choices=["INFO", "DEBUG"], default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )


def _log_progress(pct: int) -> None:
    logger.info("Progress: %d%%", pct)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.log_level)

    out_dir: Path = args.out_dir
    today = today_in_reference_tz()
    cache_dir = out_dir / "raw" / today.strftime("%Y%m%d")
    source = PageSource(cache_dir, use_cache=args.raw_cache == "on")

    logger.info("Starting tennisdata for %s", today.isoformat())
    logger.info(
        "Options: top_n=%d cache=%s workers=%d tracked=%d",
        args.top_n, args.raw_cache, args.workers, len(args.track),
    )

    start_time = time.time()

    try:
        result = run_cycle(
            source,
            today=today,
            limit=args.top_n,
            tracked=args.track,
            max_workers=args.workers,
            progress=_log_progress,
        )

        write_stats_csv(result.stats, out_dir / "player_stats.csv")
        write_choices_csv(result.choices, out_dir / "player_choices.csv")
        write_digest(result.digest, out_dir / "digest.txt")

        elapsed = time.time() - start_time
        logger.info("=== Summary ===")
        logger.info("Players: %d", len(result.stats))
        logger.info("Choices: %d", len(result.choices))
        logger.info("Skipped profiles: %d", result.skipped)
        logger.info("Elapsed: %.1fs", elapsed)

    except NetworkError as e:
        logger.error("Network error, retry the cycle later: %s", e)
        sys.exit(EXIT_RETRY)
    except TennisdataError as e:
        logger.error("Fatal error: %s", e)
        sys.exit(EXIT_FAILURE)
    except Exception as e:
        logger.error("Unexpected error: %s", e, exc_info=True)
        sys.exit(EXIT_FAILURE)
