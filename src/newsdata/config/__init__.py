"""Configuration module for the NewsData client."""

from newsdata.config.factory import create_from_config, create_transport
from newsdata.config.loader import get_default_config_path, load_config, resolve_config_path
from newsdata.config.models import ClientConfig, LoggingConfig, NewsDataConfig, RetrievalConfig

__all__ = [
    "ClientConfig",
    "LoggingConfig",
    "NewsDataConfig",
    "RetrievalConfig",
    "create_from_config",
    "create_transport",
    "get_default_config_path",
    "load_config",
    "resolve_config_path",
]
