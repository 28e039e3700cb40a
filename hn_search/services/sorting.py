from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from hn_search.schemas import Hit, SortKey


def _ascending_by(field: str) -> Callable[[Sequence[Hit]], list[Hit]]:
    # Missing values go after present ones, so a list of None never gets compared.
    def _key(hit: Hit) -> tuple[bool, Any]:
        value = getattr(hit, field)
        return (value is None, value if value is not None else 0)

    def _sort(hits: Sequence[Hit]) -> list[Hit]:
        return sorted(hits, key=_key)

    return _sort


def _descending_by(field: str) -> Callable[[Sequence[Hit]], list[Hit]]:
    ascending = _ascending_by(field)

    # Ascending then reversed: equal values come out in reverse arrival order.
    def _sort(hits: Sequence[Hit]) -> list[Hit]:
        ordered = ascending(hits)
        ordered.reverse()
        return ordered

    return _sort


SORTS: dict[SortKey, Callable[[Sequence[Hit]], list[Hit]]] = {
    SortKey.NONE: list,
    SortKey.TITLE: _ascending_by("title"),
    SortKey.AUTHOR: _ascending_by("author"),
    SortKey.COMMENTS: _descending_by("num_comments"),
    SortKey.POINTS: _descending_by("points"),
}


def sort_hits(key: SortKey, hits: Sequence[Hit]) -> list[Hit]:
    return SORTS[SortKey(key)](hits)


def apply_sort(key: SortKey, hits: Sequence[Hit], reverse: bool = False) -> list[Hit]:
    ordered = sort_hits(key, hits)
    if reverse:
        ordered.reverse()
    return ordered
