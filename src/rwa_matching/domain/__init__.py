"""
Domain Layer - Core Business Entities and Value Objects.

This package contains the core domain model for RWA matching.
All entities here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - InvestorProfile: Declarative investor profile
    - Asset: Tokenized real-world asset
    - AssetType, RiskTolerance: Closed enums

Value Objects:
    - ScoreResult: Sub-scores and weighted match score
    - MatchingRecommendation: Scored asset with coded findings
    - ClusterAnalysis: Segment summary
    - FeedbackRecord: Investor rating of a recommendation

Errors:
    - InvalidProfileError, InvalidAssetError
    - ProfileNotFoundError, AssetNotFoundError, InvalidRatingError
"""

from rwa_matching.domain.entities import (
    Asset,
    AssetType,
    InvestorProfile,
    RiskTolerance,
)
from rwa_matching.domain.errors import (
    AssetNotFoundError,
    InvalidAssetError,
    InvalidProfileError,
    InvalidRatingError,
    MatchingError,
    ProfileNotFoundError,
)
from rwa_matching.domain.value_objects import (
    ClusterAnalysis,
    FeedbackRecord,
    FindingCode,
    MatchingRecommendation,
    ScoreResult,
)

__all__ = [
    "Asset",
    "AssetType",
    "InvestorProfile",
    "RiskTolerance",
    "MatchingError",
    "AssetNotFoundError",
    "InvalidAssetError",
    "InvalidProfileError",
    "InvalidRatingError",
    "ProfileNotFoundError",
    "ClusterAnalysis",
    "FeedbackRecord",
    "FindingCode",
    "MatchingRecommendation",
    "ScoreResult",
]
