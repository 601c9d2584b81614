"""
Value Objects for Domain Layer.

Value objects are immutable, derived results: scores, recommendations,
cluster summaries and feedback records. None of them is authoritative
state; they are recomputed from profiles and assets on demand.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from rwa_matching.domain.entities import Asset, AssetType


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Violated field path -> message
ViolationsDict = Dict[str, str]


class FindingKind(str, Enum):
    """Which list of a recommendation a finding belongs to."""

    REASONING = "reasoning"
    WARNING = "warning"
    OPPORTUNITY = "opportunity"


class FindingCode(str, Enum):
    """Coded explanation attached to a recommendation."""

    # Reasoning
    RISK_FIT = "RISK_FIT"
    PREFERENCE_FIT = "PREFERENCE_FIT"
    BUDGET_FIT = "BUDGET_FIT"
    GEOGRAPHIC_FIT = "GEOGRAPHIC_FIT"
    ESG_ALIGNED = "ESG_ALIGNED"

    # Warnings
    RISK_ABOVE_TOLERANCE = "RISK_ABOVE_TOLERANCE"
    LOW_LIQUIDITY = "LOW_LIQUIDITY"
    EXCLUDED_SECTOR = "EXCLUDED_SECTOR"
    OUTSIDE_BUDGET = "OUTSIDE_BUDGET"

    # Opportunities
    HIGH_EXPECTED_RETURN = "HIGH_EXPECTED_RETURN"
    LOW_COMPETITION = "LOW_COMPETITION"
    STRONG_ESG = "STRONG_ESG"


class ScoreResult(BaseModel):
    """Four sub-scores and the weighted match score for one profile/asset pair."""

    risk_alignment: float = Field(ge=0, le=100)
    preference_alignment: float = Field(ge=0, le=100)
    financial_fit: float = Field(ge=0, le=100)
    geographic_fit: float = Field(ge=0, le=100)
    match_score: int = Field(ge=0, le=100)
    confidence: float = Field(ge=0, le=1)
    weights_version: str

    model_config = {"frozen": True}


class MatchingRecommendation(BaseModel):
    """A scored asset together with its coded explanation."""

    asset_id: str
    asset: Asset
    match_score: int = Field(ge=0, le=100)
    confidence: float = Field(ge=0, le=1)
    risk_alignment: float
    preference_alignment: float
    financial_fit: float
    geographic_fit: float
    reasoning: List[FindingCode] = Field(default_factory=list)
    warnings: List[FindingCode] = Field(default_factory=list)
    opportunities: List[FindingCode] = Field(default_factory=list)
    weights_version: str

    model_config = {"frozen": True}

    @property
    def sort_key(self) -> tuple:
        """Ranking order: score desc, confidence desc, asset id asc."""
        return (-self.match_score, -self.confidence, self.asset_id)


class ClusterCharacteristics(BaseModel):
    """Aggregate characteristics of a segment."""

    avg_risk_score: float
    common_asset_types: List[AssetType] = Field(default_factory=list)
    avg_investment_amount: float
    common_locations: List[str] = Field(default_factory=list)
    avg_age: Optional[float] = None

    model_config = {"frozen": True}


class ClusterAnalysis(BaseModel):
    """Summary of one investor segment."""

    cluster_id: str
    cluster_name: str
    description: str = ""
    member_count: int = Field(ge=0)
    characteristics: ClusterCharacteristics
    member_ids: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class FeedbackRecord(BaseModel):
    """An investor's rating of a recommendation."""

    profile_id: str
    asset_id: str
    rating: int = Field(ge=1, le=5)
    recorded_at: datetime = Field(default_factory=datetime.now)
    comment: Optional[str] = None

    model_config = {"frozen": True}


class MatchingMetrics(BaseModel):
    """Aggregate numbers for the matching dashboard."""

    total_profiles: int
    total_assets: int
    cluster_count: int
    feedback_count: int
    average_rating: Optional[float] = None
    recommendations_served: int = 0
    average_match_score: Optional[float] = None

    model_config = {"frozen": True}
