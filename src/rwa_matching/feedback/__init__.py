"""
Feedback Package - Recommendation Ratings.

Components:
    - FeedbackRecorder: Rating validation and storage
"""

from rwa_matching.feedback.recorder import RATING_MAX, RATING_MIN, FeedbackRecorder

__all__ = ["FeedbackRecorder", "RATING_MAX", "RATING_MIN"]
