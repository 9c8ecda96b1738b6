"""Tests for configuration loading and factory functions."""

from __future__ import annotations

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest
from pydantic import ValidationError

from newsdata.client import NewsDataClient
from newsdata.config import (
    ClientConfig,
    LoggingConfig,
    NewsDataConfig,
    RetrievalConfig,
    create_from_config,
    create_transport,
    get_default_config_path,
    load_config,
    resolve_config_path,
)
from newsdata.session_log import SessionLogger
from newsdata.transport import DEFAULT_BASE_URL, HttpTransport


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_client_config_defaults(self) -> None:
        config = ClientConfig()
        assert config.api_key is None
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == 5.0

    def test_retrieval_config_defaults(self) -> None:
        config = RetrievalConfig()
        assert config.endpoint == "latest"
        assert config.max_results == 10
        assert config.size is None

    def test_logging_config_defaults(self) -> None:
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.session_log is False
        assert config.log_dir == "logs"

    def test_root_config_defaults(self) -> None:
        config = NewsDataConfig()
        assert isinstance(config.client, ClientConfig)
        assert isinstance(config.retrieval, RetrievalConfig)
        assert isinstance(config.logging, LoggingConfig)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"endpoint": "headlines"},
            {"max_results": -1},
            {"size": 0},
            {"size": 51},
        ],
    )
    def test_retrieval_config_rejects_invalid(self, kwargs: dict) -> None:
        with pytest.raises(ValidationError):
            RetrievalConfig(**kwargs)

    def test_client_config_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValidationError):
            ClientConfig(timeout=0)

    def test_configs_are_frozen(self) -> None:
        config = ClientConfig()
        with pytest.raises(ValidationError):
            config.timeout = 10.0  # type: ignore[misc]


class TestConfigLoader:
    """Tests for YAML loading."""

    def test_load_config(self) -> None:
        yaml_content = """
client:
  api_key: yaml-key
  timeout: 10
retrieval:
  endpoint: crypto
  max_results: 0
  size: 25
logging:
  level: DEBUG
  session_log: true
  log_dir: /tmp/newsdata-logs
"""
        with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()
            config = load_config(f.name)

        assert config.client.api_key == "yaml-key"
        assert config.client.timeout == 10.0
        assert config.retrieval.endpoint == "crypto"
        assert config.retrieval.max_results == 0
        assert config.retrieval.size == 25
        assert config.logging.level == "DEBUG"
        assert config.logging.session_log is True

        Path(f.name).unlink()

    def test_load_empty_config(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(path) == NewsDataConfig()

    def test_load_invalid_config(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("retrieval:\n  endpoint: weather\n")

        with pytest.raises(ValidationError):
            load_config(path)

    def test_load_missing_config(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_load_non_mapping_config(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- latest\n- archive\n")

        with pytest.raises(ValueError, match="expected a mapping"):
            load_config(path)

    def test_load_partial_config(self, tmp_path: Path) -> None:
        path = tmp_path / "partial.yaml"
        path.write_text("retrieval:\n  max_results: 3\n")

        config = load_config(path)

        assert config.retrieval.max_results == 3
        assert config.retrieval.endpoint == "latest"
        assert config.client == ClientConfig()

    def test_resolve_explicit_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEWSDATA_CONFIG", "/etc/newsdata.yaml")
        assert resolve_config_path("custom.yaml") == Path("custom.yaml")

    def test_resolve_env_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEWSDATA_CONFIG", "/etc/newsdata.yaml")
        assert resolve_config_path() == Path("/etc/newsdata.yaml")

    def test_resolve_default_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NEWSDATA_CONFIG", raising=False)
        assert resolve_config_path(None) == get_default_config_path()

    def test_get_default_config_path(self) -> None:
        path = get_default_config_path()
        assert path.name == "default.yaml"
        assert path.parent.name == "configs"

    def test_load_default_config(self) -> None:
        path = get_default_config_path()
        if not path.exists():
            pytest.skip("Default config not found")

        config = load_config(path)
        assert config.retrieval.endpoint == "latest"
        assert config.client.base_url == DEFAULT_BASE_URL


class TestFactory:
    """Tests for factory functions."""

    def test_create_transport(self) -> None:
        transport = create_transport(ClientConfig(api_key="k", timeout=2.5))
        assert isinstance(transport, HttpTransport)
        assert transport._timeout == 2.5

    def test_create_transport_uses_env_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEWSDATA_API_KEY", "env-key")
        transport = create_transport(ClientConfig())
        assert transport._api_key == "env-key"

    def test_create_from_config(self) -> None:
        config = NewsDataConfig(client=ClientConfig(api_key="k"))

        client, session_logger = create_from_config(config)

        assert isinstance(client, NewsDataClient)
        assert session_logger is None

    def test_create_from_config_with_session_log(self, tmp_path: Path) -> None:
        config = NewsDataConfig(
            client=ClientConfig(api_key="k"),
            logging=LoggingConfig(session_log=True, log_dir=str(tmp_path)),
        )

        _, session_logger = create_from_config(config)

        assert isinstance(session_logger, SessionLogger)
        assert session_logger.enabled

    def test_overrides(self, tmp_path: Path) -> None:
        config = NewsDataConfig(client=ClientConfig(api_key="k"))

        _, session_logger = create_from_config(
            config, log_override=True, log_dir_override=str(tmp_path)
        )

        assert session_logger is not None
        assert session_logger._log_dir == tmp_path

        _, disabled = create_from_config(
            NewsDataConfig(
                client=ClientConfig(api_key="k"),
                logging=LoggingConfig(session_log=True),
            ),
            log_override=False,
        )
        assert disabled is None
