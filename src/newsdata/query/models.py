"""Query parameter sets for the NewsData endpoints."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from datetime import date
from typing import ClassVar

from newsdata.query import rules
from newsdata.query.rules import Param, between, in_past, max_items, max_length, one_of
from newsdata.query.values import (
    ARTICLE_FIELDS,
    CATEGORIES,
    COUNTRIES,
    LANGUAGES,
    MAX_LIST_ITEMS,
    MAX_PAGE_SIZE,
    MAX_QUERY_LENGTH,
    MAX_TIMEFRAME_HOURS,
    MAX_TIMEFRAME_MINUTES,
    MIN_PAGE_SIZE,
    PRIORITY_DOMAINS,
    SENTIMENTS,
    TAGS,
)

_TEXT = (max_length(MAX_QUERY_LENGTH),)
_LIST = (rules.list_of_values, max_items(MAX_LIST_ITEMS))


@dataclass(kw_only=True)
class NewsQuery:
    """Filters shared by the latest, archive and crypto news endpoints.

    All fields are optional; unset fields are not sent. ``page`` holds the
    continuation token and is the only field a retrieval updates.
    """

    ids: Collection[str] = ()
    query: str = ""
    query_in_title: str = ""
    query_in_metadata: str = ""
    categories: Collection[str] = ()
    exclude_categories: Collection[str] = ()
    countries: Collection[str] = ()
    languages: Collection[str] = ()
    domains: Collection[str] = ()
    domain_urls: Collection[str] = ()
    exclude_domains: Collection[str] = ()
    exclude_fields: Collection[str] = ()
    priority_domain: str = ""
    timezone: str = ""
    full_content: bool | None = None
    image: bool | None = None
    video: bool | None = None
    size: int | None = None
    page: str = ""

    PARAMS: ClassVar[tuple[Param, ...]] = (
        Param("ids", "id", (rules.list_of_values,)),
        Param("query", "q", _TEXT),
        Param("query_in_title", "qInTitle", _TEXT),
        Param("query_in_metadata", "qInMeta", _TEXT),
        Param("categories", "category", (*_LIST, one_of(CATEGORIES))),
        Param("exclude_categories", "excludecategory", (*_LIST, one_of(CATEGORIES))),
        Param("countries", "country", (*_LIST, one_of(COUNTRIES))),
        Param("languages", "language", (*_LIST, one_of(LANGUAGES))),
        Param("domains", "domain", _LIST),
        Param("domain_urls", "domainurl", _LIST),
        Param("exclude_domains", "excludedomain", _LIST),
        Param("exclude_fields", "excludefield", (rules.list_of_values, one_of(ARTICLE_FIELDS))),
        Param("priority_domain", "prioritydomain", (one_of(PRIORITY_DOMAINS),)),
        Param("timezone", "timezone"),
        Param("full_content", "full_content"),
        Param("image", "image"),
        Param("video", "video"),
        Param("size", "size", (between(MIN_PAGE_SIZE, MAX_PAGE_SIZE),)),
        Param("page", "page"),
    )
    EXCLUSIVE: ClassVar[tuple[tuple[str, ...], ...]] = (
        ("query", "query_in_title", "query_in_metadata"),
        ("categories", "exclude_categories"),
    )

    def validate(self) -> None:
        """Raise :class:`QueryValidationError` on the first violated rule."""
        rules.validate(self)

    def encode(self) -> dict[str, str]:
        """Return the request parameters for this query."""
        return rules.encode(self)


@dataclass(kw_only=True)
class LatestNewsQuery(NewsQuery):
    """Query for the ``latest`` endpoint (news from the past 48 hours)."""

    timeframe: str = ""
    tags: Collection[str] = ()
    sentiment: str = ""
    regions: Collection[str] = ()
    remove_duplicates: bool | None = None

    PARAMS: ClassVar[tuple[Param, ...]] = (
        *NewsQuery.PARAMS,
        Param("timeframe", "timeframe", (rules.timeframe_range,)),
        Param("tags", "tag", (*_LIST, one_of(TAGS))),
        Param("sentiment", "sentiment", (one_of(SENTIMENTS),)),
        Param("regions", "region", _LIST),
        Param("remove_duplicates", "removeduplicate"),
    )


@dataclass(kw_only=True)
class ArchiveNewsQuery(NewsQuery):
    """Query for the ``archive`` endpoint."""

    from_date: date | None = None
    to_date: date | None = None

    PARAMS: ClassVar[tuple[Param, ...]] = (
        *NewsQuery.PARAMS,
        Param("from_date", "from_date", (in_past,)),
        Param("to_date", "to_date", (in_past,)),
    )


@dataclass(kw_only=True)
class CryptoNewsQuery(NewsQuery):
    """Query for the ``crypto`` endpoint."""

    coins: Collection[str] = ()
    timeframe: str = ""
    tags: Collection[str] = ()
    sentiment: str = ""
    from_date: date | None = None
    to_date: date | None = None
    remove_duplicates: bool | None = None

    PARAMS: ClassVar[tuple[Param, ...]] = (
        *NewsQuery.PARAMS,
        Param("coins", "coin", _LIST),
        Param("timeframe", "timeframe", (rules.timeframe_range,)),
        Param("tags", "tag", (*_LIST, one_of(TAGS))),
        Param("sentiment", "sentiment", (one_of(SENTIMENTS),)),
        Param("from_date", "from_date", (in_past,)),
        Param("to_date", "to_date", (in_past,)),
        Param("remove_duplicates", "removeduplicate"),
    )


@dataclass(kw_only=True)
class SourcesQuery:
    """Filters for the ``sources`` endpoint. Each filter takes a single value."""

    country: str = ""
    language: str = ""
    category: str = ""
    priority_domain: str = ""
    domain_url: str = ""

    PARAMS: ClassVar[tuple[Param, ...]] = (
        Param("country", "country", (one_of(COUNTRIES),)),
        Param("language", "language", (one_of(LANGUAGES),)),
        Param("category", "category", (one_of(CATEGORIES),)),
        Param("priority_domain", "prioritydomain", (one_of(PRIORITY_DOMAINS),)),
        Param("domain_url", "domainurl"),
    )
    EXCLUSIVE: ClassVar[tuple[tuple[str, ...], ...]] = ()

    def validate(self) -> None:
        rules.validate(self)

    def encode(self) -> dict[str, str]:
        return rules.encode(self)


def timeframe(hours: int = 0, minutes: int = 0) -> str:
    """Build a ``timeframe`` value.

    Whole hours are sent as ``"6"``; anything with minutes is converted to a
    total number of minutes, e.g. ``timeframe(1, 30) == "90m"``.

    Raises:
        ValueError: If the span is empty, negative, or longer than 48 hours.
    """
    if hours < 0 or minutes < 0 or hours + minutes == 0:
        raise ValueError("timeframe must be a positive span")
    if minutes == 0:
        if hours > MAX_TIMEFRAME_HOURS:
            raise ValueError(f"timeframe must be at most {MAX_TIMEFRAME_HOURS} hours")
        return str(hours)
    total = hours * 60 + minutes
    if total > MAX_TIMEFRAME_MINUTES:
        raise ValueError(f"timeframe must be at most {MAX_TIMEFRAME_HOURS} hours")
    return f"{total}m"
