"""Typed records returned by the NewsData API."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class SentimentStats:
    """Per-class sentiment scores of an article.

    All scores are zero when the API withholds them (plan restriction or null).
    """

    positive: float = 0.0
    neutral: float = 0.0
    negative: float = 0.0


@dataclass(frozen=True)
class Article:
    """A news article.

    See https://newsdata.io/documentation/#http_response for field meanings.
    Fields restricted to paid plans (``ai_tag``, ``ai_region``, ``ai_org``,
    ``sentiment``, ``sentiment_stats``) hold their empty value when withheld.
    """

    article_id: str
    title: str = ""
    link: str = ""
    keywords: tuple[str, ...] = ()
    creator: tuple[str, ...] = ()
    video_url: str | None = None
    description: str | None = None
    content: str | None = None
    pub_date: datetime | None = None
    pub_date_tz: str | None = None
    image_url: str | None = None
    source_id: str = ""
    source_priority: int = 0
    source_name: str = ""
    source_url: str = ""
    source_icon: str | None = None
    language: str = ""
    country: tuple[str, ...] = ()
    category: tuple[str, ...] = ()
    ai_tag: tuple[str, ...] = ()
    sentiment: str = ""
    sentiment_stats: SentimentStats = field(default_factory=SentimentStats)
    ai_region: tuple[str, ...] = ()
    ai_org: tuple[str, ...] = ()
    coin: tuple[str, ...] = ()
    duplicate: bool = False


@dataclass(frozen=True)
class Source:
    """A news source listed by the ``sources`` endpoint."""

    id: str
    name: str = ""
    url: str = ""
    icon: str | None = None
    priority: int = 0
    description: str = ""
    category: tuple[str, ...] = ()
    language: tuple[str, ...] = ()
    country: tuple[str, ...] = ()
    total_article: int = 0
    last_fetch: datetime | None = None


@dataclass(frozen=True)
class NewsPage:
    """One decoded page of a paginated news response."""

    status: str
    total_results: int
    results: tuple[Article, ...]
    next_page: str = ""


@dataclass(frozen=True)
class SourcesPage:
    """A decoded ``sources`` response (never paginated)."""

    status: str
    total_results: int
    results: tuple[Source, ...]
