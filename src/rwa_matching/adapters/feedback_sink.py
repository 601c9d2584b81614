"""
In-Memory Feedback Sink.

Append-only list of feedback records.
"""

from __future__ import annotations

from threading import Lock
from typing import List, Optional

from rwa_matching.domain.value_objects import FeedbackRecord


class InMemoryFeedbackSink:
    """Append-only in-memory feedback storage."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._records: List[FeedbackRecord] = []

    def append(self, record: FeedbackRecord) -> None:
        with self._lock:
            self._records.append(record)

    def list_feedback(
        self,
        profile_id: Optional[str] = None,
        asset_id: Optional[str] = None,
    ) -> List[FeedbackRecord]:
        with self._lock:
            records = list(self._records)
        return [
            r
            for r in records
            if (profile_id is None or r.profile_id == profile_id)
            and (asset_id is None or r.asset_id == asset_id)
        ]

    def count(self) -> int:
        with self._lock:
            return len(self._records)
