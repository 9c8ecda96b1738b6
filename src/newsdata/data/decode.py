"""Decode raw NewsData responses into typed pages."""

import json
from datetime import datetime
from typing import Any

from newsdata.data.models import Article, NewsPage, SentimentStats, Source, SourcesPage
from newsdata.errors import APIError, DecodeError
from newsdata.query.values import SENTIMENTS

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def decode_news_page(body: bytes | str) -> NewsPage:
    """Decode one page of the latest/archive/crypto endpoints.

    Raises:
        APIError: If the body is an API error payload.
        DecodeError: If the body is not a well-formed news page.
    """
    data = _load(body)
    items = _results(data)
    articles = tuple(_article(item) for item in items)
    return NewsPage(
        status=str(data.get("status") or "success"),
        total_results=_int(data.get("totalResults")),
        results=articles,
        next_page=str(data.get("nextPage") or ""),
    )


def decode_sources_page(body: bytes | str) -> SourcesPage:
    """Decode a response of the sources endpoint.

    Raises:
        APIError: If the body is an API error payload.
        DecodeError: If the body is not a well-formed sources response.
    """
    data = _load(body)
    items = _results(data)
    return SourcesPage(
        status=str(data.get("status") or "success"),
        total_results=_int(data.get("totalResults")),
        results=tuple(_source(item) for item in items),
    )


def decode_error_message(body: bytes | str) -> tuple[str, str | None] | None:
    """Extract ``(message, code)`` from an API error payload, if it is one."""
    try:
        data = json.loads(body)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    results = data.get("results")
    if not isinstance(results, dict) or not results.get("message"):
        return None
    code = results.get("code")
    return (str(results["message"]), str(code) if code is not None else None)


def _load(body: bytes | str) -> dict[str, Any]:
    try:
        data = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")
    if data.get("status") == "error":
        error = decode_error_message(body)
        message, code = error if error else ("Unknown API error", None)
        raise APIError(message, code=code)
    return data


def _results(data: dict[str, Any]) -> list[dict[str, Any]]:
    if "results" not in data:
        raise DecodeError("Response has no 'results' field")
    items = data["results"]
    if items is None:
        return []
    if not isinstance(items, list):
        raise DecodeError(f"'results' must be a list, got {type(items).__name__}")
    for item in items:
        if not isinstance(item, dict):
            raise DecodeError(f"Result entries must be objects, got {type(item).__name__}")
    return items


def _article(item: dict[str, Any]) -> Article:
    sentiment = item.get("sentiment")
    return Article(
        article_id=str(item.get("article_id") or ""),
        title=item.get("title") or "",
        link=item.get("link") or "",
        keywords=_str_tuple(item.get("keywords")),
        creator=_str_tuple(item.get("creator")),
        video_url=item.get("video_url"),
        description=item.get("description"),
        content=item.get("content"),
        pub_date=_datetime(item.get("pubDate"), "pubDate"),
        pub_date_tz=item.get("pubDateTZ"),
        image_url=item.get("image_url"),
        source_id=item.get("source_id") or "",
        source_priority=_int(item.get("source_priority")),
        source_name=item.get("source_name") or "",
        source_url=item.get("source_url") or "",
        source_icon=item.get("source_icon"),
        language=item.get("language") or "",
        country=_str_tuple(item.get("country")),
        category=_str_tuple(item.get("category")),
        ai_tag=_str_tuple(item.get("ai_tag")),
        sentiment=sentiment if isinstance(sentiment, str) and sentiment in SENTIMENTS else "",
        sentiment_stats=_sentiment_stats(item.get("sentiment_stats")),
        ai_region=_str_tuple(item.get("ai_region")),
        ai_org=_str_tuple(item.get("ai_org")),
        coin=_str_tuple(item.get("coin")),
        duplicate=bool(item.get("duplicate", False)),
    )


def _source(item: dict[str, Any]) -> Source:
    return Source(
        id=str(item.get("id") or ""),
        name=item.get("name") or "",
        url=item.get("url") or "",
        icon=item.get("icon"),
        priority=_int(item.get("priority")),
        description=item.get("description") or "",
        category=_str_tuple(item.get("category")),
        language=_str_tuple(item.get("language")),
        country=_str_tuple(item.get("country")),
        total_article=_int(item.get("total_article")),
        last_fetch=_datetime(item.get("last_fetch"), "last_fetch"),
    )


def _str_tuple(value: Any) -> tuple[str, ...]:
    """Normalize list-or-restricted fields.

    A list is kept; a restriction message (a plain string) or null becomes ().
    """
    if isinstance(value, list):
        return tuple(str(v) for v in value)
    return ()


def _sentiment_stats(value: Any) -> SentimentStats:
    if not isinstance(value, dict):
        return SentimentStats()
    try:
        return SentimentStats(
            positive=float(value["positive"]),
            neutral=float(value["neutral"]),
            negative=float(value["negative"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise DecodeError(f"Invalid sentiment_stats: {value!r}") from e


def _datetime(value: Any, name: str) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.strptime(str(value), DATETIME_FORMAT)
    except ValueError as e:
        raise DecodeError(f"Invalid {name}: {value!r}") from e


def _int(value: Any) -> int:
    if value is None or value == "":
        return 0
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Expected an integer, got {value!r}") from e
