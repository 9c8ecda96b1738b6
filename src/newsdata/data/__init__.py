"""Data models and response decoding."""

from newsdata.data.decode import decode_news_page, decode_sources_page
from newsdata.data.models import Article, NewsPage, SentimentStats, Source, SourcesPage

__all__ = [
    "Article",
    "NewsPage",
    "SentimentStats",
    "Source",
    "SourcesPage",
    "decode_news_page",
    "decode_sources_page",
]
