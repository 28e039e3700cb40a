from __future__ import annotations

import hashlib
import json
import logging

from pydantic import ValidationError
from redis.asyncio import Redis

from hn_search.schemas import PageResult

logger = logging.getLogger(__name__)

_CACHE_KEY_VERSION = "v1"


def page_cache_key(term: str, page: int, hits_per_page: int) -> str:
    canonical = json.dumps(
        {"hits_per_page": hits_per_page, "page": page, "term": term},
        separators=(",", ":"),
        sort_keys=True,
    )
    digest = hashlib.sha256(canonical.encode("utf-8")).hexdigest()
    return f"hn-page:{_CACHE_KEY_VERSION}:{digest}"


class PageCache:
    """Redis store of raw search pages keyed by (term, page, page size).

    Without a reachable Redis every lookup misses and every store is dropped.
    """

    def __init__(self, redis_url: str | None, ttl_seconds: int) -> None:
        self._redis_url = redis_url
        self._ttl_seconds = ttl_seconds
        self._redis: Redis | None = None

    @property
    def enabled(self) -> bool:
        return self._redis is not None

    async def connect(self) -> None:
        if not self._redis_url:
            return
        client = Redis.from_url(self._redis_url, decode_responses=True)
        try:
            await client.ping()
        except Exception as exc:
            logger.warning("Redis unavailable; search pages will not be cached: %s", exc)
            await client.aclose()
            return
        self._redis = client
        logger.info("Search page cache connected ttl_seconds=%s", self._ttl_seconds)

    async def get_page(self, term: str, page: int, hits_per_page: int) -> PageResult | None:
        if not self._redis:
            return None
        key = page_cache_key(term, page, hits_per_page)
        raw = await self._redis.get(key)
        if not raw:
            return None
        try:
            return PageResult.model_validate_json(raw)
        except ValidationError:
            logger.warning("Discarding unreadable cached page term=%r page=%s", term, page)
            await self._redis.delete(key)
            return None

    async def set_page(
        self, term: str, page: int, hits_per_page: int, result: PageResult
    ) -> None:
        if not self._redis or not result.hits:
            return
        key = page_cache_key(term, page, hits_per_page)
        await self._redis.set(
            key,
            result.model_dump_json(by_alias=True),
            ex=self._ttl_seconds,
        )

    async def close(self) -> None:
        if self._redis:
            await self._redis.aclose()
            self._redis = None
