from __future__ import annotations

import logging

from hn_search.schemas import PageResult
from hn_search.services.cache import PageCache
from hn_search.transport.base import SearchTransport

logger = logging.getLogger(__name__)


class CachingTransport(SearchTransport):
    """Serves repeated (term, page) requests from the page cache before hitting the API."""

    def __init__(self, inner: SearchTransport, page_cache: PageCache) -> None:
        self._inner = inner
        self._page_cache = page_cache
        self.name = inner.name

    async def search(self, term: str, page: int, hits_per_page: int) -> PageResult:
        cached = await self._page_cache.get_page(term, page, hits_per_page)
        if cached is not None:
            logger.debug("Search page served from cache term=%r page=%s", term, page)
            return cached

        result = await self._inner.search(term, page, hits_per_page)
        await self._page_cache.set_page(term, page, hits_per_page, result)
        return result

    async def close(self) -> None:
        await self._inner.close()
