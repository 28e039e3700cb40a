from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from hn_search.api.routes import router
from hn_search.config import Settings, get_settings
from hn_search.logging import configure_logging
from hn_search.services.cache import PageCache
from hn_search.services.request_controller import RequestController
from hn_search.services.result_cache import ResultCache
from hn_search.services.view_state import SearchSession
from hn_search.transport import (
    CachingTransport,
    HackerNewsTransport,
    ResilientTransport,
    SearchTransport,
)

logger = logging.getLogger(__name__)


def build_transport(settings: Settings, page_cache: PageCache) -> SearchTransport:
    transport: SearchTransport = HackerNewsTransport(
        settings.search_api_base_url,
        timeout_seconds=settings.request_timeout_seconds,
    )
    transport = ResilientTransport(
        transport,
        timeout_seconds=settings.request_timeout_seconds,
        retries=settings.transport_retries,
    )
    if page_cache.enabled:
        transport = CachingTransport(transport, page_cache)
    return transport


def create_app(
    settings: Settings | None = None,
    transport: SearchTransport | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        page_cache = PageCache(settings.redis_url, ttl_seconds=settings.page_cache_ttl_seconds)
        await page_cache.connect()
        active_transport = transport or build_transport(settings, page_cache)
        try:
            controller = RequestController(
                active_transport,
                ResultCache(),
                hits_per_page=settings.hits_per_page,
            )
            session = SearchSession(controller, default_term=settings.default_query)
            app.state.search_session = session
            await session.start()
            logger.info("Search session ready default_query=%r", settings.default_query)

            yield
        finally:
            await active_transport.close()
            await page_cache.close()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.include_router(router, prefix=settings.api_prefix)
    return app


configure_logging()
app = create_app()
