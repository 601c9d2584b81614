"""
Feedback Sink Protocol.

Append-only storage of investor ratings for later offline analysis.
Stored feedback does not change scoring behaviour.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from rwa_matching.domain.value_objects import FeedbackRecord


@runtime_checkable
class FeedbackSink(Protocol):
    """Abstract interface for feedback storage."""

    def append(self, record: FeedbackRecord) -> None:
        """Append a feedback record. Existing records are never overwritten."""
        ...

    def list_feedback(
        self,
        profile_id: Optional[str] = None,
        asset_id: Optional[str] = None,
    ) -> List[FeedbackRecord]:
        """List records, optionally filtered, in insertion order."""
        ...

    def count(self) -> int:
        """Total number of records."""
        ...
