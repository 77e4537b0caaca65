"""
Holder for the "current result set" of one dashboard session.

Each search replaces the whole set. When searches overlap, only the most
recently started one may publish its result; an overtaken fetch is dropped.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, List

from .listings_client import ListingResult, fetch_listings
from .metrics import MetricsSummary, build_metrics

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_LIMIT = 10


class SearchSession:
    """
    Owns one result set. The dashboard view builds a fresh session per request,
    so the lock and the stale-ticket check only matter when a single session is
    shared by concurrent searches.
    """

    def __init__(self, fetcher: Callable[[str, str], ListingResult] = fetch_listings) -> None:
        self._fetcher = fetcher
        self._lock = threading.Lock()
        self._generation = 0
        self._result: ListingResult | None = None

    @property
    def current(self) -> ListingResult | None:
        return self._result

    def begin(self) -> int:
        """Start a search and return its ticket; older tickets become stale."""
        with self._lock:
            self._generation += 1
            return self._generation

    def commit(self, ticket: int, result: ListingResult) -> bool:
        with self._lock:
            if ticket != self._generation:
                logger.info("Dropping result of superseded search #%d", ticket)
                return False
            self._result = result
            return True

    def search(self, suburb: str, property_type: str) -> ListingResult:
        ticket = self.begin()
        result = self._fetcher(suburb, property_type)
        self.commit(ticket, result)
        return result

    def metrics(self, summary: MetricsSummary | None = None) -> Dict:
        return build_metrics(self._result.properties if self._result else [], summary)

    def table_rows(self, limit: int = DEFAULT_PREVIEW_LIMIT) -> List[Dict]:
        """First ``limit`` properties of the current set, without raw payloads."""
        if self._result is None:
            return []
        return [prop.to_dict(include_raw=False) for prop in self._result.properties[:limit]]
