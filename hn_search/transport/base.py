from __future__ import annotations

from abc import ABC, abstractmethod

from hn_search.schemas import PageResult


class FetchFailure(RuntimeError):
    """Raised when a search page cannot be fetched or parsed."""


class SearchTransport(ABC):
    name: str

    @abstractmethod
    async def search(self, term: str, page: int, hits_per_page: int) -> PageResult:
        raise NotImplementedError

    async def close(self) -> None:
        return None


def format_exception_message(exc: BaseException) -> str:
    message = str(exc).strip()
    if message:
        return f"{type(exc).__name__}: {message}"
    return f"{type(exc).__name__}: no details provided"
