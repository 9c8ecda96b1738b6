"""NewsData API client and its per-endpoint services."""

import logging
from collections.abc import AsyncIterator
from typing import Any

from newsdata.data import Article, Source
from newsdata.query import (
    ArchiveNewsQuery,
    CryptoNewsQuery,
    LatestNewsQuery,
    NewsQuery,
    SourcesQuery,
)
from newsdata.retrieval import CancelSignal, PageRetriever, list_sources
from newsdata.session_log import SessionLogger
from newsdata.transport import DEFAULT_BASE_URL, Endpoint, HttpTransport, Transport
from newsdata.transport.http import DEFAULT_TIMEOUT

_QUERY_TYPES: dict[Endpoint, type[NewsQuery]] = {
    Endpoint.LATEST: LatestNewsQuery,
    Endpoint.ARCHIVE: ArchiveNewsQuery,
    Endpoint.CRYPTO: CryptoNewsQuery,
}


class NewsService:
    """Articles from one paginated endpoint (latest, archive or crypto).

    Args:
        transport: Transport shared with the owning client.
        endpoint: Endpoint served by this service.
        logger: Logger for retrieval diagnostics.
        session_logger: Optional SessionLogger recording each retrieval.
    """

    def __init__(
        self,
        transport: Transport,
        endpoint: Endpoint,
        *,
        logger: logging.Logger | None = None,
        session_logger: SessionLogger | None = None,
    ) -> None:
        self._retriever = PageRetriever(
            transport, endpoint, logger=logger, session_logger=session_logger
        )
        self._query_type = _QUERY_TYPES[endpoint]

    @property
    def endpoint(self) -> Endpoint:
        return self._retriever.endpoint

    @property
    def query_type(self) -> type[NewsQuery]:
        """Query class accepted by this endpoint."""
        return self._query_type

    def stream(
        self,
        query: NewsQuery,
        max_results: int = 0,
        *,
        cancel: CancelSignal | None = None,
    ) -> AsyncIterator[Article]:
        """Stream articles matching ``query``.

        Args:
            query: Query of this endpoint's type.
            max_results: Maximum articles to yield (0 = all reported by the API).
            cancel: Optional cancellation signal, e.g. an ``asyncio.Event``.

        Returns:
            Async iterator of articles; a terminal error is raised by the iterator.
        """
        self._check_type(query)
        return self._retriever.stream(query, max_results=max_results, cancel=cancel)

    async def get(
        self,
        query: NewsQuery,
        max_results: int = 0,
        *,
        cancel: CancelSignal | None = None,
    ) -> list[Article]:
        """Retrieve articles matching ``query`` as a list.

        Args:
            query: Query of this endpoint's type.
            max_results: Maximum articles to return (0 = all reported by the API).
            cancel: Optional cancellation signal, e.g. an ``asyncio.Event``.

        Returns:
            Articles in server order.
        """
        self._check_type(query)
        return await self._retriever.collect(query, max_results=max_results, cancel=cancel)

    async def search(self, text: str, max_results: int = 0, **filters: Any) -> list[Article]:
        """Search articles by keyword, with optional extra query fields.

        Example:
            ``await client.latest.search("climate", 20, languages=["en"])``
        """
        query = self._query_type(query=text, **filters)
        return await self.get(query, max_results)

    def _check_type(self, query: NewsQuery) -> None:
        if not isinstance(query, self._query_type):
            msg = (
                f"{self.endpoint.label} expects {self._query_type.__name__}, "
                f"got {type(query).__name__}"
            )
            raise TypeError(msg)


class SourcesService:
    """News sources known to the API (single request, not paginated)."""

    def __init__(self, transport: Transport, *, logger: logging.Logger | None = None) -> None:
        self._transport = transport
        self._logger = logger

    async def get(self, query: SourcesQuery | None = None) -> list[Source]:
        """List sources, optionally filtered by country, language, category, etc."""
        return await list_sources(self._transport, query, logger=self._logger)


class NewsDataClient:
    """Client for the NewsData.io API.

    Exposes one service per endpoint: ``latest``, ``archive``, ``crypto`` and
    ``sources``.

    Args:
        api_key: NewsData API key (defaults to NEWSDATA_API_KEY env var).
            Ignored when ``transport`` is given.
        base_url: API root URL.
        timeout: Per-request timeout in seconds.
        transport: Custom transport; defaults to an ``HttpTransport``.
        logger: Logger injected into the services and the default transport.
        session_logger: Optional SessionLogger for paginated retrievals.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Transport | None = None,
        logger: logging.Logger | None = None,
        session_logger: SessionLogger | None = None,
    ) -> None:
        if transport is None:
            transport = HttpTransport(
                api_key=api_key, base_url=base_url, timeout=timeout, logger=logger
            )
        self._transport = transport
        self.latest = NewsService(
            transport, Endpoint.LATEST, logger=logger, session_logger=session_logger
        )
        self.archive = NewsService(
            transport, Endpoint.ARCHIVE, logger=logger, session_logger=session_logger
        )
        self.crypto = NewsService(
            transport, Endpoint.CRYPTO, logger=logger, session_logger=session_logger
        )
        self.sources = SourcesService(transport, logger=logger)

    @property
    def transport(self) -> Transport:
        return self._transport

    def service(self, endpoint: Endpoint | str) -> NewsService:
        """Return the news service for an endpoint name."""
        endpoint = Endpoint(endpoint)
        if endpoint is Endpoint.SOURCES:
            raise ValueError("Use client.sources for the sources endpoint")
        services = {
            Endpoint.LATEST: self.latest,
            Endpoint.ARCHIVE: self.archive,
            Endpoint.CRYPTO: self.crypto,
        }
        return services[endpoint]
