from __future__ import annotations

import asyncio
import logging
import time

from hn_search.schemas import PageResult
from hn_search.transport.base import FetchFailure, SearchTransport, format_exception_message

logger = logging.getLogger(__name__)


class ResilientTransport(SearchTransport):
    """Adds a per-attempt timeout and a bounded number of retries to a transport."""

    def __init__(self, inner: SearchTransport, timeout_seconds: float, retries: int) -> None:
        self._inner = inner
        self._timeout_seconds = timeout_seconds
        self._retries = max(retries, 0)
        self.name = inner.name

    async def search(self, term: str, page: int, hits_per_page: int) -> PageResult:
        started = time.perf_counter()
        last_error: str | None = None

        for attempt in range(self._retries + 1):
            try:
                result = await asyncio.wait_for(
                    self._inner.search(term, page, hits_per_page),
                    timeout=self._timeout_seconds,
                )
                latency_ms = int((time.perf_counter() - started) * 1000)
                logger.debug(
                    "Search page fetched source=%s term=%r page=%s latency_ms=%s",
                    self.name,
                    term,
                    page,
                    latency_ms,
                )
                return result
            except TimeoutError:
                last_error = f"Timed out after {self._timeout_seconds}s"
            except FetchFailure as exc:
                last_error = str(exc)
            except Exception as exc:
                last_error = format_exception_message(exc)
            logger.info(
                "Search attempt failed source=%s term=%r page=%s attempt=%s: %s",
                self.name,
                term,
                page,
                attempt + 1,
                last_error,
            )

        raise FetchFailure(last_error or "Search failed")

    async def close(self) -> None:
        await self._inner.close()
