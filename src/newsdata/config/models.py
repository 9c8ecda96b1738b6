"""Pydantic configuration models for the NewsData client."""

from typing import Literal

from pydantic import BaseModel, Field

from newsdata.transport.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

# ============================================================
# Client Config
# ============================================================


class ClientConfig(BaseModel):
    """Configuration for the HTTP client."""

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Retrieval Config
# ============================================================


class RetrievalConfig(BaseModel):
    """Defaults applied to retrievals started from the CLI."""

    endpoint: Literal["latest", "archive", "crypto", "sources"] = "latest"
    max_results: int = Field(default=10, ge=0)
    size: int | None = Field(default=None, ge=1, le=50)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for console logging and JSON session logs."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    session_log: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NewsDataConfig(BaseModel):
    """Root configuration for the NewsData client."""

    client: ClientConfig = Field(default_factory=ClientConfig)
    retrieval: RetrievalConfig = Field(default_factory=RetrievalConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
