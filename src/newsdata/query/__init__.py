"""Query parameter sets, validation and encoding."""

from newsdata.query.models import (
    ArchiveNewsQuery,
    CryptoNewsQuery,
    LatestNewsQuery,
    NewsQuery,
    SourcesQuery,
    timeframe,
)
from newsdata.query.rules import Param, Rule, encode, validate

__all__ = [
    "ArchiveNewsQuery",
    "CryptoNewsQuery",
    "LatestNewsQuery",
    "NewsQuery",
    "Param",
    "Rule",
    "SourcesQuery",
    "encode",
    "timeframe",
    "validate",
]
