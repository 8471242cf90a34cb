"""
Request tracker: rolling count of searches that returned nothing.

Time is logical - every tracked request advances the clock by one tick.
Outcomes older than MIN_IN_DAY ticks are evicted.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List

from .document import Document
from .search_server import PredicateOrStatus, SearchServer

logger = logging.getLogger(__name__)

MIN_IN_DAY = 1440


@dataclass(frozen=True)
class QueryResult:
    """Outcome of one tracked request"""
    is_empty: bool
    timestamp: int


class RequestQueue:
    """Wraps a SearchServer and tracks empty results over the last day of requests"""

    def __init__(self, search_server: SearchServer, window: int = MIN_IN_DAY):
        self.search_server = search_server
        self.window = window
        self._requests: Deque[QueryResult] = deque()
        self._no_result_requests = 0
        self._current_time = 0

    def add_find_request(self, raw_query: str, predicate_or_status: PredicateOrStatus = None) -> List[Document]:
        """
        Run find_top_documents and record whether it came back empty.

        Args:
            raw_query: Query text
            predicate_or_status: Same as SearchServer.find_top_documents

        Returns:
            Search results, unchanged

        Raises:
            InvalidTermError: query contains an invalid word (nothing is recorded)
        """
        documents = self.search_server.find_top_documents(raw_query, predicate_or_status)
        self._add_query_result(not documents)
        return documents

    def get_no_result_requests(self) -> int:
        return self._no_result_requests

    def _add_query_result(self, is_empty: bool) -> None:
        self._current_time += 1
        self._requests.append(QueryResult(is_empty=is_empty, timestamp=self._current_time))
        if is_empty:
            self._no_result_requests += 1

        # Evict outcomes that fell out of the window
        while self._requests and self._current_time - self._requests[0].timestamp >= self.window:
            evicted = self._requests.popleft()
            if evicted.is_empty:
                self._no_result_requests -= 1

        logger.debug(
            f"Request #{self._current_time}: empty={is_empty}, "
            f"no-result requests in window={self._no_result_requests}"
        )
