from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from hn_search.schemas import PageResult
from hn_search.transport.base import FetchFailure, SearchTransport, format_exception_message

logger = logging.getLogger(__name__)

_SEARCH_PATH = "/search"


class HackerNewsTransport(SearchTransport):
    name = "hacker_news"

    def __init__(
        self,
        base_url: str,
        timeout_seconds: int = 15,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(
            timeout=timeout_seconds,
            headers={"User-Agent": "hn-search-client/1.0"},
        )

    async def search(self, term: str, page: int, hits_per_page: int) -> PageResult:
        params = {"query": term, "page": page, "hitsPerPage": hits_per_page}
        try:
            response = await self._client.get(f"{self._base_url}{_SEARCH_PATH}", params=params)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Search request failed term=%r page=%s: %s", term, page, exc)
            raise FetchFailure(format_exception_message(exc)) from exc

        try:
            return PageResult.model_validate(payload)
        except ValidationError as exc:
            logger.warning("Malformed search payload term=%r page=%s", term, page)
            raise FetchFailure(f"Malformed search payload: {exc.error_count()} error(s)") from exc

    async def close(self) -> None:
        await self._client.aclose()
