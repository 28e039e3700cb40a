from __future__ import annotations

import logging
from dataclasses import dataclass

from hn_search.schemas import PageResult
from hn_search.services.result_cache import ResultCache
from hn_search.transport.base import FetchFailure, SearchTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RequestState:
    is_loading: bool = False
    error: FetchFailure | None = None


class RequestController:
    """Runs search fetches and routes their pages into the result cache.

    Only the most recently issued fetch may change ``state``. Older responses
    are still merged, always into the term they were requested for, but leave
    the loading and error flags alone.
    """

    def __init__(
        self,
        transport: SearchTransport,
        cache: ResultCache,
        hits_per_page: int,
    ) -> None:
        self._transport = transport
        self._cache = cache
        self._hits_per_page = hits_per_page
        self._sequence = 0
        self._in_flight: set[tuple[str, int]] = set()
        self.state = RequestState()

    @property
    def cache(self) -> ResultCache:
        return self._cache

    def needs_fetch(self, term: str) -> bool:
        return term not in self._cache

    def is_in_flight(self, term: str, page: int) -> bool:
        return (term, page) in self._in_flight

    async def fetch(self, term: str, page: int = 0) -> PageResult | None:
        request_key = (term, page)
        if request_key in self._in_flight:
            logger.info("Fetch already in flight term=%r page=%s", term, page)
            return None

        self._sequence += 1
        token = self._sequence
        self._in_flight.add(request_key)
        self.state = RequestState(is_loading=True, error=None)
        logger.info("Fetching search page term=%r page=%s", term, page)

        try:
            result = await self._transport.search(term, page, self._hits_per_page)
        except FetchFailure as exc:
            if token != self._sequence:
                logger.info("Dropping stale failure term=%r page=%s: %s", term, page, exc)
                return None
            logger.warning("Search fetch failed term=%r page=%s: %s", term, page, exc)
            self.state = RequestState(is_loading=False, error=exc)
            return None
        finally:
            self._in_flight.discard(request_key)

        self._cache.merge(term, result)
        if token != self._sequence:
            logger.info("Merged stale page without touching request state term=%r page=%s", term, page)
            return result

        self.state = RequestState(is_loading=False, error=None)
        logger.info("Search page loaded term=%r page=%s hits=%s", term, result.page, len(result.hits))
        return result
