"""HTTP fetch with retry, backoff, sleep, and caching."""

import logging
import random
import time
from pathlib import Path

import requests

from tennisdata.util import FetchError, NetworkError

logger = logging.getLogger(__name__)

BASE_URL = "https://www.espn.com"
HEADERS = {
    "User-Agent": "tennisdata/0.1 (+https://github.com/owner/tennisdata)"
}
MAX_RETRIES = 3
BACKOFF_BASE = 1  # seconds: 1, 2, 4
SLEEP_MIN = 0.5
SLEEP_MAX = 1.5
TIMEOUT = 30


def men_rankings_url() -> str:
    return f"{BASE_URL}/tennis/rankings"


def women_rankings_url() -> str:
    return f"{BASE_URL}/tennis/rankings/_/type/wta"


def schedule_url(date_stamp: str | None = None) -> str:
    """Daily results page; today's when ``date_stamp`` (YYYYMMDD) is None."""
    if date_stamp is None:
        return f"{BASE_URL}/tennis/dailyResults"
    return f"{BASE_URL}/tennis/dailyResults?date={date_stamp}"


def fetch_page(url: str) -> str:
    """Fetch a page with retry and exponential backoff.

    Raises NetworkError when the last attempt failed at the connection
    level, FetchError when the server kept answering with a non-200 status.
    Other request errors (bad URL, redirect loop) are not retried.
    """
    last_error: FetchError | None = None
    for attempt in range(1, MAX_RETRIES + 1):
        try:
            logger.debug("Fetching %s (attempt %d/%d)", url, attempt, MAX_RETRIES)
            resp = requests.get(url, headers=HEADERS, timeout=TIMEOUT)
            if resp.status_code == 200:
                logger.debug("OK %s", url)
                return resp.text
            logger.warning(
                "HTTP %d for %s (attempt %d/%d)",
                resp.status_code, url, attempt, MAX_RETRIES,
            )
            last_error = FetchError(f"HTTP {resp.status_code} for {url}")
        except (requests.ConnectionError, requests.Timeout) as e:
            logger.warning(
                "Connection error for %s (attempt %d/%d): %s",
                url, attempt, MAX_RETRIES, e,
            )
            last_error = NetworkError(f"Connection error for {url}: {e}")
        except requests.RequestException as e:
            raise FetchError(f"Request failed for {url}: {e}") from e

        if attempt < MAX_RETRIES:
            backoff = BACKOFF_BASE * (2 ** (attempt - 1))
            logger.debug("Backoff %ds before retry", backoff)
            time.sleep(backoff)

    raise last_error  # type: ignore[misc]


def _page_sleep() -> None:
    """Random sleep between page fetches."""
    delay = random.uniform(SLEEP_MIN, SLEEP_MAX)
    time.sleep(delay)


def fetch_with_cache(
    url: str,
    cache_path: Path | None,
    use_cache: bool,
) -> str:
    """Fetch a page, optionally using/saving cache."""
    if use_cache and cache_path and cache_path.exists():
        logger.info("Cache hit: %s", cache_path)
        return cache_path.read_text(encoding="utf-8")

    html = fetch_page(url)
    _page_sleep()

    if use_cache and cache_path:
        cache_path.parent.mkdir(parents=True, exist_ok=True)
        cache_path.write_text(html, encoding="utf-8")
        logger.debug("Cached to %s", cache_path)

    return html


class PageSource:
    """Fetches the cycle's documents, caching raw HTML under ``cache_dir``.

    Profile pages are cached by the last path segments of their URL so a
    rerun of the same day reuses them.
    """

    def __init__(self, cache_dir: Path | None = None, use_cache: bool = False):
        self.cache_dir = cache_dir
        self.use_cache = use_cache and cache_dir is not None

    def _cache_path(self, name: str) -> Path | None:
        if not self.use_cache or self.cache_dir is None:
            return None
        return self.cache_dir / name

    def get(self, url: str, cache_name: str) -> str:
        return fetch_with_cache(url, self._cache_path(cache_name), self.use_cache)

    def profile(self, url: str) -> str:
        slug = "_".join(p for p in url.rstrip("/").split("/")[-2:] if p)
        return self.get(url, f"profiles/{slug or 'profile'}.html")
