from enum import StrEnum
from typing import Protocol


class Endpoint(StrEnum):
    """NewsData API endpoints, valued by their path segment."""

    LATEST = "latest"
    ARCHIVE = "archive"
    CRYPTO = "crypto"
    SOURCES = "sources"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Endpoint.LATEST: "Latest News",
    Endpoint.ARCHIVE: "News Archive",
    Endpoint.CRYPTO: "Crypto News",
    Endpoint.SOURCES: "Sources",
}


class Transport(Protocol):
    """Interface for performing one authenticated GET against the API."""

    async def fetch(self, endpoint: Endpoint, params: dict[str, str]) -> bytes:
        """Request an endpoint and return the raw response body.

        Args:
            endpoint: Endpoint to call.
            params: Query string parameters.

        Returns:
            The body of a successful (2xx) response.

        Raises:
            TransportError: If the request could not be completed.
            APIError: If the API answered with a non-2xx status.
        """
        ...
