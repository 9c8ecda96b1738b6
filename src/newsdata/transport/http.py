"""HTTP transport for the NewsData API, built on httpx."""

import logging
import os
import time

import httpx

from newsdata.data.decode import decode_error_message
from newsdata.errors import APIError, TransportError
from newsdata.transport.base import Endpoint

DEFAULT_BASE_URL = "https://newsdata.io/api/1"
DEFAULT_TIMEOUT = 5.0
API_KEY_HEADER = "X-ACCESS-KEY"


class HttpTransport:
    """Perform authenticated GET requests against the NewsData API.

    The API key travels in the ``X-ACCESS-KEY`` header and never appears in
    request URLs or logs.

    Args:
        api_key: NewsData API key (defaults to NEWSDATA_API_KEY env var).
        base_url: API root URL.
        timeout: Per-request timeout in seconds.
        client: Optional shared ``httpx.AsyncClient``. When omitted, each
            request opens and closes its own client.
        logger: Logger for request diagnostics (defaults to the module logger).
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._api_key = api_key or os.environ.get("NEWSDATA_API_KEY")
        if not self._api_key:
            raise ValueError(
                "NewsData API key required. Pass api_key or set NEWSDATA_API_KEY env var."
            )
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    async def fetch(self, endpoint: Endpoint, params: dict[str, str]) -> bytes:
        """Request an endpoint and return the raw body of a 2xx response.

        Raises:
            TransportError: On network failures and timeouts.
            APIError: On non-2xx responses, carrying the API's error message.
        """
        url = f"{self._base_url}/{endpoint.value}"
        headers = {API_KEY_HEADER: self._api_key or ""}

        t0 = time.monotonic()
        try:
            if self._client is not None:
                response = await self._client.get(url, params=params, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url, params=params, headers=headers)
        except httpx.HTTPError as e:
            self._logger.debug("GET %s failed after %.3fs: %s", url, time.monotonic() - t0, e)
            raise TransportError(f"Request to {endpoint.label} failed: {e}") from e

        self._logger.debug(
            "GET %s params=%s status=%d duration=%.3fs",
            url,
            params,
            response.status_code,
            time.monotonic() - t0,
        )

        if not response.is_success:
            error = decode_error_message(response.content)
            if error is not None:
                message, code = error
                raise APIError(message, code=code, status_code=response.status_code)
            raise APIError(
                f"HTTP {response.status_code} {response.reason_phrase}".strip(),
                status_code=response.status_code,
            )
        return response.content
