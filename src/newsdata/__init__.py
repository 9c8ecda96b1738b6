"""NewsData: typed async client for the NewsData.io news API."""

from newsdata.client import NewsDataClient, NewsService, SourcesService
from newsdata.config import NewsDataConfig, create_from_config, load_config
from newsdata.data import (
    Article,
    NewsPage,
    SentimentStats,
    Source,
    SourcesPage,
    decode_news_page,
    decode_sources_page,
)
from newsdata.errors import (
    APIError,
    DecodeError,
    NewsDataError,
    QueryValidationError,
    RetrievalCancelled,
    TransportError,
)
from newsdata.query import (
    ArchiveNewsQuery,
    CryptoNewsQuery,
    LatestNewsQuery,
    NewsQuery,
    SourcesQuery,
    timeframe,
)
from newsdata.retrieval import PageRetriever, list_sources, retrieve, retrieve_all
from newsdata.session_log import SessionLogger
from newsdata.transport import Endpoint, HttpTransport, Transport

__all__ = [
    # Models
    "Article",
    "NewsPage",
    "SentimentStats",
    "Source",
    "SourcesPage",
    # Queries
    "ArchiveNewsQuery",
    "CryptoNewsQuery",
    "LatestNewsQuery",
    "NewsQuery",
    "SourcesQuery",
    "timeframe",
    # Errors
    "APIError",
    "DecodeError",
    "NewsDataError",
    "QueryValidationError",
    "RetrievalCancelled",
    "TransportError",
    # Transport
    "Endpoint",
    "HttpTransport",
    "Transport",
    # Retrieval
    "PageRetriever",
    "list_sources",
    "retrieve",
    "retrieve_all",
    # Decoding
    "decode_news_page",
    "decode_sources_page",
    # Client
    "NewsDataClient",
    "NewsService",
    "SourcesService",
    # Logging
    "SessionLogger",
    # Config
    "NewsDataConfig",
    "create_from_config",
    "load_config",
]
