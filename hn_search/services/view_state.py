from __future__ import annotations

import logging
from dataclasses import dataclass

from hn_search.schemas import Hit, SortKey, ViewSnapshot
from hn_search.services.request_controller import RequestController
from hn_search.services.sorting import apply_sort

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChangeTerm:
    text: str


@dataclass(frozen=True, slots=True)
class Submit:
    term: str | None = None


@dataclass(frozen=True, slots=True)
class LoadMore:
    pass


@dataclass(frozen=True, slots=True)
class Dismiss:
    object_id: str


@dataclass(frozen=True, slots=True)
class ChangeSort:
    key: SortKey


Intent = ChangeTerm | Submit | LoadMore | Dismiss | ChangeSort


class SearchSession:
    """State behind one search page: the edited term, the committed search key
    whose results are shown, and the active sort.

    Every user action goes through ``dispatch`` and yields a fresh snapshot.
    """

    def __init__(self, controller: RequestController, default_term: str = "") -> None:
        self._controller = controller
        self.search_term = default_term
        self.search_key = ""
        self.sort_key = SortKey.NONE
        self.is_sort_reverse = False

    async def start(self) -> ViewSnapshot:
        self.search_key = self.search_term
        await self._controller.fetch(self.search_key)
        return self.snapshot()

    def change_term(self, text: str) -> None:
        self.search_term = text

    async def submit(self, term: str | None = None) -> None:
        if term is not None:
            self.search_term = term
        self.search_key = self.search_term
        if self._controller.needs_fetch(self.search_key):
            await self._controller.fetch(self.search_key, 0)
        else:
            logger.debug("Serving cached results term=%r", self.search_key)

    async def load_more(self) -> None:
        current_page = self._controller.cache.get(self.search_key).page
        await self._controller.fetch(self.search_key, current_page + 1)

    def dismiss(self, object_id: str) -> None:
        self._controller.cache.dismiss(self.search_key, object_id)

    def change_sort(self, key: SortKey) -> None:
        key = SortKey(key)
        if key == self.sort_key:
            self.is_sort_reverse = not self.is_sort_reverse
        else:
            self.sort_key = key
            self.is_sort_reverse = False

    def displayed_hits(self) -> list[Hit]:
        entry = self._controller.cache.get(self.search_key)
        return apply_sort(self.sort_key, entry.hits, self.is_sort_reverse)

    def snapshot(self) -> ViewSnapshot:
        state = self._controller.state
        entry = self._controller.cache.get(self.search_key)
        failed = state.error is not None
        error = (str(state.error).strip() or type(state.error).__name__) if failed else None
        return ViewSnapshot(
            search_term=self.search_term,
            search_key=self.search_key,
            # An error replaces the whole result view.
            displayed_hits=[] if failed else self.displayed_hits(),
            page=entry.page,
            is_loading=state.is_loading,
            error=error,
            sort_key=self.sort_key,
            is_sort_reverse=self.is_sort_reverse,
        )

    async def dispatch(self, intent: Intent) -> ViewSnapshot:
        if isinstance(intent, ChangeTerm):
            self.change_term(intent.text)
        elif isinstance(intent, Submit):
            await self.submit(intent.term)
        elif isinstance(intent, LoadMore):
            await self.load_more()
        elif isinstance(intent, Dismiss):
            self.dismiss(intent.object_id)
        elif isinstance(intent, ChangeSort):
            self.change_sort(intent.key)
        else:
            raise TypeError(f"Unsupported intent: {intent!r}")
        return self.snapshot()
