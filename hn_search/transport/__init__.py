from hn_search.transport.base import FetchFailure, SearchTransport
from hn_search.transport.caching import CachingTransport
from hn_search.transport.hacker_news import HackerNewsTransport
from hn_search.transport.resilient import ResilientTransport

__all__ = [
    "CachingTransport",
    "FetchFailure",
    "HackerNewsTransport",
    "ResilientTransport",
    "SearchTransport",
]
