"""Exception hierarchy for the NewsData client."""


class NewsDataError(Exception):
    """Base class for every error raised by this package."""


class QueryValidationError(NewsDataError, ValueError):
    """A query failed a validation rule before any request was sent.

    Args:
        message: Human-readable description of the violation.
        field: Attribute name of the offending query field.
        rule: Name of the violated rule (e.g. ``"max_items"``, ``"exclusive"``).
    """

    def __init__(self, message: str, *, field: str, rule: str) -> None:
        super().__init__(message)
        self.field = field
        self.rule = rule


class TransportError(NewsDataError):
    """The HTTP request could not be completed."""


class APIError(TransportError):
    """The API answered with an error payload.

    ``str(error)`` is the message reported by the API.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class DecodeError(NewsDataError):
    """A response body could not be decoded into typed records."""


class RetrievalCancelled(NewsDataError):
    """The caller signalled cancellation while a retrieval was running."""
