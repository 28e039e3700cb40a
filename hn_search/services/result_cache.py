from __future__ import annotations

import logging
from dataclasses import dataclass

from hn_search.schemas import Hit, PageResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CacheEntry:
    hits: tuple[Hit, ...] = ()
    page: int = 0


_EMPTY_ENTRY = CacheEntry()


class ResultCache:
    """Accumulated search results per term.

    Pages are appended in the order they are merged; nothing is reordered or
    de-duplicated, so merging the same page twice stores its hits twice.
    Entries live for the lifetime of the cache.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}

    def __contains__(self, term: object) -> bool:
        return term in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, term: str) -> CacheEntry:
        return self._entries.get(term, _EMPTY_ENTRY)

    def merge(self, term: str, result: PageResult) -> CacheEntry:
        previous = self._entries.get(term, _EMPTY_ENTRY)
        entry = CacheEntry(hits=previous.hits + tuple(result.hits), page=result.page)
        self._entries[term] = entry
        logger.debug(
            "Merged page term=%r page=%s added=%s total=%s",
            term,
            result.page,
            len(result.hits),
            len(entry.hits),
        )
        return entry

    def dismiss(self, term: str, object_id: str) -> None:
        entry = self._entries.get(term)
        if entry is None:
            return
        remaining = tuple(hit for hit in entry.hits if hit.object_id != object_id)
        if len(remaining) == len(entry.hits):
            return
        self._entries[term] = CacheEntry(hits=remaining, page=entry.page)
