"""Tests for HttpTransport."""

from __future__ import annotations

import httpx
import pytest

from newsdata.errors import APIError, TransportError
from newsdata.transport import API_KEY_HEADER, Endpoint, HttpTransport


class TestHttpTransport:
    """Tests for HttpTransport."""

    @pytest.fixture
    def transport(self) -> HttpTransport:
        """Create a transport with a test API key."""
        return HttpTransport(api_key="test-key")

    def test_init_requires_api_key(self, monkeypatch: pytest.MonkeyPatch):
        """Should raise if no API key provided."""
        monkeypatch.delenv("NEWSDATA_API_KEY", raising=False)
        with pytest.raises(ValueError, match="API key required"):
            HttpTransport()

    def test_init_uses_env_var(self, monkeypatch: pytest.MonkeyPatch):
        """Should use NEWSDATA_API_KEY env var if no key passed."""
        monkeypatch.setenv("NEWSDATA_API_KEY", "env-key")
        transport = HttpTransport()
        assert transport._api_key == "env-key"

    async def test_fetch_sends_request(
        self, transport: HttpTransport, monkeypatch: pytest.MonkeyPatch
    ):
        """Should GET the endpoint URL with params and the key header."""
        captured: dict = {}

        async def mock_get(self, url, *, params=None, headers=None):
            captured.update(url=url, params=params, headers=headers)
            return httpx.Response(200, content=b'{"status": "success", "results": []}')

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        raw = await transport.fetch(Endpoint.LATEST, {"q": "climate", "page": "tok"})

        assert raw == b'{"status": "success", "results": []}'
        assert captured["url"] == "https://newsdata.io/api/1/latest"
        assert captured["params"] == {"q": "climate", "page": "tok"}
        assert captured["headers"] == {API_KEY_HEADER: "test-key"}
        assert "test-key" not in captured["url"]

    async def test_custom_base_url(self, monkeypatch: pytest.MonkeyPatch):
        """Should strip the trailing slash of the base URL."""
        urls: list[str] = []

        async def mock_get(self, url, **kwargs):
            urls.append(url)
            return httpx.Response(200, json={"results": []})

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        transport = HttpTransport(api_key="k", base_url="http://localhost:8080/api/")
        await transport.fetch(Endpoint.SOURCES, {})

        assert urls == ["http://localhost:8080/api/sources"]

    async def test_error_payload_raises_api_error(
        self, transport: HttpTransport, monkeypatch: pytest.MonkeyPatch
    ):
        """Should surface the API's error message on non-2xx responses."""

        async def mock_get(self, url, **kwargs):
            return httpx.Response(
                429,
                json={"status": "error", "results": {"message": "rate limited", "code": "429"}},
            )

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(APIError) as exc_info:
            await transport.fetch(Endpoint.LATEST, {})

        assert str(exc_info.value) == "rate limited"
        assert exc_info.value.code == "429"
        assert exc_info.value.status_code == 429

    async def test_non_json_error_uses_http_reason(
        self, transport: HttpTransport, monkeypatch: pytest.MonkeyPatch
    ):
        """Should fall back to the HTTP status line when the body is not an error payload."""

        async def mock_get(self, url, **kwargs):
            return httpx.Response(502, content=b"<html>Bad Gateway</html>")

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(APIError, match="HTTP 502 Bad Gateway") as exc_info:
            await transport.fetch(Endpoint.LATEST, {})

        assert exc_info.value.status_code == 502
        assert exc_info.value.code is None

    async def test_network_error_raises_transport_error(
        self, transport: HttpTransport, monkeypatch: pytest.MonkeyPatch
    ):
        """Should wrap httpx failures in TransportError."""

        async def mock_get(self, url, **kwargs):
            raise httpx.ConnectTimeout("timed out")

        monkeypatch.setattr(httpx.AsyncClient, "get", mock_get)

        with pytest.raises(TransportError) as exc_info:
            await transport.fetch(Endpoint.ARCHIVE, {})

        assert not isinstance(exc_info.value, APIError)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectTimeout)

    async def test_shared_client_is_used(self):
        """Should route requests through an injected AsyncClient."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers[API_KEY_HEADER] == "test-key"
            assert request.url.params["country"] == "us,gb"
            return httpx.Response(200, json={"results": [], "totalResults": 0})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            transport = HttpTransport(api_key="test-key", client=client)
            raw = await transport.fetch(Endpoint.CRYPTO, {"country": "us,gb"})

        assert b'"results"' in raw
