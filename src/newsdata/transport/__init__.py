from newsdata.transport.base import Endpoint, Transport
from newsdata.transport.http import API_KEY_HEADER, DEFAULT_BASE_URL, HttpTransport

__all__ = ["API_KEY_HEADER", "DEFAULT_BASE_URL", "Endpoint", "HttpTransport", "Transport"]
