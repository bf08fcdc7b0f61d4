"""
Satellite Catalog Feed

Fetches three-line TLE text from public catalog groups (CelesTrak) and splits
it into named element sets. Element sets are not validated: anything that
looks like a name line followed by a "1 " line and a "2 " line is accepted,
and bad sets are dropped later when propagation fails.
"""

import threading
import time
from typing import Callable, List, Optional, Sequence

import requests
import structlog

from orbit_site.models import TLERecord

logger = structlog.get_logger(__name__)


class CatalogFetchError(RuntimeError):
    """Raised when a catalog feed cannot be retrieved"""


def parse_tle_text(text: str) -> List[TLERecord]:
    """
    Parse three-line TLE text into records.

    Args:
        text: Feed body (name line, line 1, line 2, repeated)

    Returns:
        Records in feed order. Lines that do not start a complete group
        are skipped one at a time until the next group lines up.
    """
    lines = [line.strip() for line in text.strip().splitlines()]
    lines = [line for line in lines if line]

    records = []
    i = 0
    while i + 2 < len(lines):
        if lines[i + 1].startswith("1 ") and lines[i + 2].startswith("2 "):
            records.append(TLERecord(name=lines[i], line1=lines[i + 1], line2=lines[i + 2]))
            i += 3
        else:
            i += 1
    return records


class CatalogClient:
    """
    Best-effort reader for a fixed list of TLE feeds.

    Features:
    - Per-source failure isolation (a dead feed does not blank the globe)
    - Short-lived in-process cache so page loads do not hit the feed each time
    - One instance can be shared by the threads of a threaded server
    """

    def __init__(
        self,
        urls: Sequence[str],
        timeout: float = 10.0,
        cache_ttl: int = 0,
        session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.urls = list(urls)
        self.timeout = timeout
        self.cache_ttl = cache_ttl
        self.session = session or requests.Session()
        self.clock = clock
        self._cached: Optional[List[TLERecord]] = None
        self._cached_at = 0.0
        self._lock = threading.Lock()

    def fetch_source(self, url: str) -> str:
        """Download one feed body, raising CatalogFetchError on failure"""
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise CatalogFetchError(f"Failed to fetch {url}: {e}") from e
        return response.text

    def fetch_records(self) -> List[TLERecord]:
        """
        Fetch and parse every configured feed.

        Returns:
            Concatenated records in source order; failing sources contribute
            nothing.

        Safe to call from concurrent request threads: one refresh runs at a
        time and waiting callers reuse its result.
        """
        with self._lock:
            if self._cache_valid():
                logger.debug("Using cached catalog", records=len(self._cached))
                return list(self._cached)

            records = []
            failures = 0
            for url in self.urls:
                try:
                    body = self.fetch_source(url)
                except CatalogFetchError as e:
                    failures += 1
                    logger.warning("Catalog source unavailable", url=url, error=str(e))
                    continue
                parsed = parse_tle_text(body)
                logger.info("Fetched catalog source", url=url, records=len(parsed))
                records.extend(parsed)

            # Only complete results are cached; a missing group must not stick
            if self.cache_ttl > 0 and failures == 0:
                self._cached = records
                self._cached_at = self.clock()

            return list(records)

    def clear_cache(self) -> None:
        with self._lock:
            self._cached = None
            self._cached_at = 0.0

    def _cache_valid(self) -> bool:
        if self._cached is None or self.cache_ttl <= 0:
            return False
        return self.clock() - self._cached_at < self.cache_ttl
