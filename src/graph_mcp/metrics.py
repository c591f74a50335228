"""In-process statistics for Graph traffic, collection walks and page renders.

Three things are tracked:
- Graph requests: totals plus the most recent failures
- Collections: per resource kind, how many walks, records and pages each took
- Page renders: how many pages rendered, fell back to the no-content text,
  failed to fetch, or were replaced by the content error sentinel in a
  site listing

Requests are recorded from executor threads, so every update takes a lock.
"""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

# Page render outcomes
RENDERED = "rendered"
EMPTY = "empty"
FAILED = "failed"
CONTENT_ERROR = "content_error"
RENDER_OUTCOMES = (RENDERED, EMPTY, FAILED, CONTENT_ERROR)


@dataclass(frozen=True)
class FailedRequest:
    """A Graph request that did not succeed."""

    path: str
    timestamp: datetime
    status_code: int | None
    error: str | None


@dataclass
class CollectionStats:
    """Pagination figures for one resource kind."""

    walks: int = 0
    records: int = 0
    pages: int = 0
    deepest: int = 0

    def add(self, records: int, pages: int) -> None:
        self.walks += 1
        self.records += records
        self.pages += pages
        self.deepest = max(self.deepest, pages)

    def to_dict(self) -> dict[str, Any]:
        return {
            "walks": self.walks,
            "records": self.records,
            "pages": self.pages,
            "deepest": self.deepest,
            "pages_per_walk": round(self.pages / self.walks, 2) if self.walks else 0.0,
        }


@dataclass
class GraphMetrics:
    """Process-wide Graph statistics."""

    start_time: datetime = field(default_factory=datetime.now)
    requests: int = 0
    failed_requests: int = 0
    request_ms: float = 0.0
    recent_failures: deque[FailedRequest] = field(default_factory=lambda: deque(maxlen=20))
    collections: dict[str, CollectionStats] = field(default_factory=dict)
    renders: dict[str, int] = field(default_factory=lambda: dict.fromkeys(RENDER_OUTCOMES, 0))
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def record_request(
        self,
        path: str,
        success: bool,
        status_code: int | None = None,
        elapsed_ms: float | None = None,
        error: str | None = None,
    ) -> None:
        """Record one Graph HTTP request.

        Args:
            path: The URL or continuation link that was requested
            success: Whether a 2xx response was received
            status_code: HTTP status code if a response arrived
            elapsed_ms: Time taken in milliseconds
            error: Error message if failed
        """
        with self._lock:
            self.requests += 1
            self.request_ms += elapsed_ms or 0.0
            if not success:
                self.failed_requests += 1
                self.recent_failures.append(
                    FailedRequest(path, datetime.now(), status_code, error)
                )

    def record_collection(self, kind: str, records: int, pages: int) -> None:
        """Record one completed collection walk."""
        with self._lock:
            self.collections.setdefault(kind, CollectionStats()).add(records, pages)

    def record_render(self, outcome: str) -> None:
        """Count a page render outcome (one of RENDER_OUTCOMES)."""
        if outcome not in RENDER_OUTCOMES:
            raise ValueError(f"Unknown render outcome: {outcome}")
        with self._lock:
            self.renders[outcome] += 1

    def to_dict(self) -> dict[str, Any]:
        """Snapshot the statistics for JSON serialization."""
        with self._lock:
            succeeded = self.requests - self.failed_requests
            success_rate = succeeded / self.requests * 100 if self.requests else 0.0
            average_ms = self.request_ms / self.requests if self.requests else 0.0
            return {
                "status": "healthy",
                "started_at": self.start_time.isoformat(),
                "uptime_seconds": round((datetime.now() - self.start_time).total_seconds(), 1),
                "graph_requests": {
                    "total": self.requests,
                    "failed": self.failed_requests,
                    "success_rate": round(success_rate, 2),
                    "average_ms": round(average_ms, 1),
                    "recent_failures": [
                        {
                            "path": f.path,
                            "timestamp": f.timestamp.isoformat(),
                            "status_code": f.status_code,
                            "error": f.error,
                        }
                        for f in reversed(self.recent_failures)
                    ],
                },
                "collections": {kind: stats.to_dict() for kind, stats in self.collections.items()},
                "page_renders": dict(self.renders),
            }


_metrics = GraphMetrics()


def get_metrics() -> GraphMetrics:
    """Get the process-wide metrics."""
    return _metrics


def reset_metrics() -> GraphMetrics:
    """Replace the process-wide metrics with an empty instance."""
    global _metrics
    _metrics = GraphMetrics()
    return _metrics


def record_request(
    path: str,
    success: bool,
    status_code: int | None = None,
    elapsed_ms: float | None = None,
    error: str | None = None,
) -> None:
    _metrics.record_request(path, success, status_code, elapsed_ms, error)


def record_collection(kind: str, records: int, pages: int) -> None:
    _metrics.record_collection(kind, records, pages)


def record_render(outcome: str) -> None:
    _metrics.record_render(outcome)
