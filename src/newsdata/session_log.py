"""Session logger for recording paginated retrievals to JSON files."""

import asyncio
import uuid
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel

from newsdata.data import NewsPage
from newsdata.errors import RetrievalCancelled


class PageRecord(BaseModel):
    """Record of a single page fetch."""

    page_number: int
    params: dict[str, str]
    item_count: int
    total_results: int
    next_page: str = ""
    timestamp: str = ""
    duration_seconds: float = 0.0


class SessionRecord(BaseModel):
    """Record of a complete retrieval session."""

    session_id: str
    endpoint: str
    params: dict[str, str]
    max_results: int
    started_at: str
    completed_at: str | None = None
    pages: list[PageRecord] = []
    emitted: int = 0
    outcome: str = "running"
    error: str | None = None


def _outcome(error: BaseException | None) -> str:
    if error is None:
        return "completed"
    if isinstance(error, RetrievalCancelled):
        return "cancelled"
    if isinstance(error, GeneratorExit | asyncio.CancelledError):
        return "closed"
    return "error"


class SessionLogger:
    """Writes a JSON log file per retrieval.

    The logger keeps no in-progress state: :meth:`start_session` returns the
    session's record, which the caller hands back to :meth:`log_page` and
    :meth:`finish_session`. One logger can therefore serve several retrievals
    running at the same time. When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the most recently written log file, or None."""
        return self._last_log_path

    def start_session(
        self, endpoint: str, params: dict[str, str], max_results: int
    ) -> SessionRecord | None:
        """Open a new session record.

        Args:
            endpoint: Endpoint path segment (e.g. "latest").
            params: Encoded parameters of the first request.
            max_results: Cap requested by the caller (0 = server total).

        Returns:
            The session's record, or None if logging is disabled.
        """
        if not self._enabled:
            return None

        return SessionRecord(
            session_id=str(uuid.uuid4()),
            endpoint=str(endpoint),
            params=dict(params),
            max_results=max_results,
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_page(
        self,
        record: SessionRecord | None,
        page_number: int,
        params: dict[str, str],
        page: NewsPage,
        duration_seconds: float,
    ) -> None:
        """Append a page record to a session."""
        if not self._enabled or record is None:
            return

        record.pages.append(
            PageRecord(
                page_number=page_number,
                params=dict(params),
                item_count=len(page.results),
                total_results=page.total_results,
                next_page=page.next_page,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_session(
        self,
        record: SessionRecord | None,
        emitted: int,
        error: BaseException | None = None,
    ) -> Path | None:
        """Write a session record to a JSON file.

        The file is written synchronously; records are small and written once
        per retrieval.

        Args:
            record: Record returned by :meth:`start_session`.
            emitted: Number of articles handed to the caller.
            error: Exception that ended the session, if any.

        Returns:
            Path to the written JSON file, or None if logging is disabled.

        Raises:
            OSError: If the log directory or file cannot be written.
        """
        if not self._enabled or record is None:
            return None

        record.completed_at = datetime.now(tz=UTC).isoformat()
        record.emitted = emitted
        record.outcome = _outcome(error)
        if record.outcome in ("cancelled", "error"):
            record.error = f"{type(error).__name__}: {error}"

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # session_2026-02-12T14-30-00_1a2b3c4d.json
        ts = record.started_at.replace(":", "-").split(".")[0].split("+")[0]
        filepath = self._log_dir / f"session_{ts}_{record.session_id[:8]}.json"

        filepath.write_text(record.model_dump_json(indent=2))
        self._last_log_path = filepath
        return filepath
