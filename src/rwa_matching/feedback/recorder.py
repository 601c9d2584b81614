"""
Feedback Recorder - Investor Ratings of Recommendations.

Validates and stores ratings for offline analysis. Feedback never
changes scores directly; it is an input to future tuning of the weights.
"""

from __future__ import annotations

import logging
from statistics import fmean
from typing import List, Optional

from rwa_matching.domain.errors import InvalidRatingError
from rwa_matching.domain.value_objects import FeedbackRecord
from rwa_matching.interfaces.feedback_sink import FeedbackSink
from rwa_matching.interfaces.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)

RATING_MIN = 1
RATING_MAX = 5


class FeedbackRecorder:
    """Validates ratings and appends them to a feedback sink."""

    def __init__(
        self,
        sink: FeedbackSink,
        profile_repository: Optional[ProfileRepository] = None,
    ) -> None:
        """
        Initialize recorder.

        Args:
            sink: Append-only feedback storage
            profile_repository: When given, feedback for unknown profiles
                                is rejected
        """
        self.sink = sink
        self.profile_repository = profile_repository

    def record_feedback(
        self,
        profile_id: str,
        asset_id: str,
        rating: int,
        comment: Optional[str] = None,
    ) -> FeedbackRecord:
        """
        Record a rating.

        Args:
            profile_id: Rating investor
            asset_id: Rated asset
            rating: Integer rating 1-5
            comment: Optional free text

        Returns:
            The stored FeedbackRecord

        Raises:
            InvalidRatingError: If rating is not an integer in [1, 5]
            ProfileNotFoundError: If the profile is unknown
        """
        # bool is an int subclass
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise InvalidRatingError(rating, RATING_MIN, RATING_MAX)
        if not (RATING_MIN <= rating <= RATING_MAX):
            raise InvalidRatingError(rating, RATING_MIN, RATING_MAX)

        if self.profile_repository is not None:
            self.profile_repository.require(profile_id)

        record = FeedbackRecord(
            profile_id=profile_id,
            asset_id=asset_id,
            rating=rating,
            comment=comment,
        )
        self.sink.append(record)

        logger.info(f"Recorded feedback {rating}/5 from {profile_id} on {asset_id}")
        return record

    def list_feedback(
        self,
        profile_id: Optional[str] = None,
        asset_id: Optional[str] = None,
    ) -> List[FeedbackRecord]:
        return self.sink.list_feedback(profile_id=profile_id, asset_id=asset_id)

    def average_rating(self, asset_id: Optional[str] = None) -> Optional[float]:
        """Mean rating overall or for one asset; None without feedback."""
        records = self.sink.list_feedback(asset_id=asset_id)
        if not records:
            return None
        return fmean(r.rating for r in records)

    def count(self) -> int:
        return self.sink.count()
