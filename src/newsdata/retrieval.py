"""Paginated retrieval of articles and single-shot listing of sources.

A retrieval turns one logical query into a sequence of page requests that
follow the API's ``nextPage`` tokens. It stops when a page carries no token,
when the result cap is reached, when the caller signals cancellation, or on
the first error.
"""

import logging
import time
from collections.abc import AsyncIterator
from typing import Protocol

from newsdata.data import Article, Source, decode_news_page, decode_sources_page
from newsdata.errors import RetrievalCancelled
from newsdata.query import NewsQuery, SourcesQuery
from newsdata.session_log import SessionLogger, SessionRecord
from newsdata.transport import Endpoint, Transport


class CancelSignal(Protocol):
    """Anything with an ``is_set()`` method, e.g. ``asyncio.Event``."""

    def is_set(self) -> bool: ...


class PageRetriever:
    """Drive page fetches for one news endpoint.

    Args:
        transport: Transport used for every page request.
        endpoint: A paginated news endpoint (latest, archive or crypto).
        logger: Logger for session diagnostics (defaults to the module logger).
        session_logger: Optional SessionLogger recording each page fetch.
    """

    def __init__(
        self,
        transport: Transport,
        endpoint: Endpoint,
        *,
        logger: logging.Logger | None = None,
        session_logger: SessionLogger | None = None,
    ) -> None:
        if endpoint is Endpoint.SOURCES:
            raise ValueError("The sources endpoint is not paginated; use list_sources()")
        self._transport = transport
        self._endpoint = endpoint
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._session_logger = session_logger

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    async def stream(
        self,
        query: NewsQuery,
        *,
        max_results: int = 0,
        cancel: CancelSignal | None = None,
    ) -> AsyncIterator[Article]:
        """Yield articles matching ``query`` across as many pages as needed.

        The query is validated before the first request. Between requests the
        query's ``page`` is set to the previous page's ``nextPage`` token; no
        other field is touched.

        Args:
            query: Filters for the endpoint.
            max_results: Maximum number of articles to yield. 0 means the
                ``totalResults`` reported by the first page.
            cancel: Signal checked before each page request and each article.

        Yields:
            Articles in server order.

        Raises:
            QueryValidationError: If the query is invalid (nothing is fetched).
            TransportError: If a page request fails.
            DecodeError: If a page cannot be decoded.
            RetrievalCancelled: If ``cancel`` was set before the retrieval ended.
        """
        if max_results < 0:
            raise ValueError("max_results must be >= 0")
        query.validate()

        limit = max_results
        emitted = 0
        pages = 0
        token = ""
        error: BaseException | None = None
        t0 = time.monotonic()
        session: SessionRecord | None = None
        if self._session_logger:
            session = self._session_logger.start_session(
                self._endpoint, query.encode(), max_results
            )

        try:
            while True:
                if _is_cancelled(cancel):
                    raise RetrievalCancelled(
                        f"{self._endpoint.label} retrieval cancelled after {emitted} articles"
                    )
                if token:
                    query.page = token
                params = query.encode()

                t_page = time.monotonic()
                body = await self._transport.fetch(self._endpoint, params)
                page = decode_news_page(body)
                pages += 1
                if self._session_logger:
                    self._session_logger.log_page(
                        session, pages, params, page, time.monotonic() - t_page
                    )

                # totalResults of the first page stands for the whole session
                if limit == 0:
                    limit = page.total_results

                for article in page.results:
                    if emitted >= limit:
                        return
                    if _is_cancelled(cancel):
                        raise RetrievalCancelled(
                            f"{self._endpoint.label} retrieval cancelled after {emitted} articles"
                        )
                    emitted += 1
                    yield article

                if not page.next_page:
                    return
                # Cap met exactly at a page boundary: skip the request it would cost.
                if limit and emitted >= limit:
                    return
                token = page.next_page
        except BaseException as e:
            error = e
            raise
        finally:
            self._logger.debug(
                "%s retrieval done: pages=%d articles=%d duration=%.3fs",
                self._endpoint.label,
                pages,
                emitted,
                time.monotonic() - t0,
            )
            self._finish_session(session, emitted, error)

    def _finish_session(
        self, session: SessionRecord | None, emitted: int, error: BaseException | None
    ) -> None:
        if self._session_logger is None:
            return
        # A failed log write must not replace the retrieval's own outcome.
        try:
            self._session_logger.finish_session(session, emitted, error)
        except OSError as e:
            self._logger.warning("Could not write session log: %s", e)

    async def collect(
        self,
        query: NewsQuery,
        *,
        max_results: int = 0,
        cancel: CancelSignal | None = None,
    ) -> list[Article]:
        """Retrieve all articles of a session into a list.

        Same ordering and cap semantics as :meth:`stream`. Any error discards
        the articles fetched so far and propagates.
        """
        articles: list[Article] = []
        async for article in self.stream(query, max_results=max_results, cancel=cancel):
            articles.append(article)
        return articles


def retrieve(
    transport: Transport,
    endpoint: Endpoint,
    query: NewsQuery,
    max_results: int = 0,
    cancel: CancelSignal | None = None,
) -> AsyncIterator[Article]:
    """Stream articles from a paginated endpoint. See :meth:`PageRetriever.stream`."""
    return PageRetriever(transport, endpoint).stream(
        query, max_results=max_results, cancel=cancel
    )


async def retrieve_all(
    transport: Transport,
    endpoint: Endpoint,
    query: NewsQuery,
    max_results: int = 0,
    cancel: CancelSignal | None = None,
) -> list[Article]:
    """Collect articles from a paginated endpoint. See :meth:`PageRetriever.collect`."""
    return await PageRetriever(transport, endpoint).collect(
        query, max_results=max_results, cancel=cancel
    )


async def list_sources(
    transport: Transport,
    query: SourcesQuery | None = None,
    *,
    logger: logging.Logger | None = None,
) -> list[Source]:
    """Fetch the news sources matching ``query`` in a single request.

    Raises:
        QueryValidationError: If the query is invalid (nothing is fetched).
        TransportError: If the request fails.
        DecodeError: If the response cannot be decoded.
    """
    log = logger if logger is not None else logging.getLogger(__name__)
    query = query if query is not None else SourcesQuery()
    query.validate()
    params = query.encode()

    t0 = time.monotonic()
    body = await transport.fetch(Endpoint.SOURCES, params)
    page = decode_sources_page(body)
    log.debug(
        "Sources retrieval done: params=%s sources=%d duration=%.3fs",
        params,
        len(page.results),
        time.monotonic() - t0,
    )
    return list(page.results)


def _is_cancelled(cancel: CancelSignal | None) -> bool:
    return cancel is not None and cancel.is_set()
