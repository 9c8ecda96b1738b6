"""Factory functions to create components from configuration."""

from pathlib import Path

from newsdata.client import NewsDataClient
from newsdata.config.models import ClientConfig, NewsDataConfig
from newsdata.session_log import SessionLogger
from newsdata.transport import HttpTransport


def create_transport(config: ClientConfig) -> HttpTransport:
    """Create the HTTP transport from client config."""
    return HttpTransport(
        api_key=config.api_key,
        base_url=config.base_url,
        timeout=config.timeout,
    )


def create_from_config(
    config: NewsDataConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[NewsDataClient, SessionLogger | None]:
    """Create a client from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.session_log setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (client, session_logger).
        session_logger is None if session logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.session_log
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    session_logger: SessionLogger | None = None
    if log_enabled:
        session_logger = SessionLogger(log_dir=log_dir, enabled=True)

    client = NewsDataClient(
        transport=create_transport(config.client),
        session_logger=session_logger,
    )
    return (client, session_logger)
