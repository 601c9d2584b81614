"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic. Every
tunable of the scoring model is a named field here so operators can
version and audit it.
"""

from __future__ import annotations

import math
from typing import Dict, Literal, Tuple

from pydantic import BaseModel, Field, model_validator


class ScoringWeights(BaseModel):
    """
    Weight vector of the match score.

    Any change to the weights must come with a new ``version`` so that
    historical scores remain interpretable.
    """

    version: str = Field(default="1.0.0", min_length=1)
    risk: float = Field(default=0.30, ge=0, le=1)
    preference: float = Field(default=0.25, ge=0, le=1)
    financial: float = Field(default=0.25, ge=0, le=1)
    geographic: float = Field(default=0.20, ge=0, le=1)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_sum(self) -> "ScoringWeights":
        total = self.risk + self.preference + self.financial + self.geographic
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"weights must sum to 1.0, got {total:.4f}")
        return self


class PreferenceScoringConfig(BaseModel):
    """Preference alignment tunables."""

    preferred_type_score: float = Field(default=80.0, ge=0, le=100)
    other_type_score: float = Field(default=20.0, ge=0, le=100)
    sustainability_bonus: float = Field(default=20.0, ge=0, le=100)
    sustainability_esg_threshold: float = Field(default=70.0, ge=0, le=100)
    score_cap: float = Field(default=100.0, ge=0, le=100)


class FinancialScoringConfig(BaseModel):
    """Financial fit tunables."""

    ramp_factor: float = Field(default=80.0, ge=0)


class ConfidenceConfig(BaseModel):
    """Confidence is capped below certainty because the model is heuristic."""

    cap: float = Field(default=0.95, ge=0, le=1)


class FindingThresholdsConfig(BaseModel):
    """Thresholds of the finding rule table."""

    risk_fit_min: float = Field(default=80.0, ge=0, le=100)
    preference_fit_min: float = Field(default=80.0, ge=0, le=100)
    budget_fit_min: float = Field(default=80.0, ge=0, le=100)
    geographic_fit_min: float = Field(default=80.0, ge=0, le=100)
    esg_aligned_min: float = Field(default=70.0, ge=0, le=100)
    risk_excess_max: float = Field(default=20.0, ge=0, le=100)
    low_liquidity_max: float = Field(default=30.0, ge=0, le=100)
    high_return_min: float = Field(default=12.0)
    low_popularity_max: float = Field(default=30.0, ge=0, le=100)
    strong_esg_min: float = Field(default=80.0, ge=0, le=100)


class RankingConfig(BaseModel):
    """Recommendation ranker settings."""

    acceptance_floor: int = Field(default=30, ge=0, le=100)
    default_limit: int = Field(default=10, ge=0)
    max_workers: int = Field(default=1, ge=1)
    min_success_rate: float = Field(default=0.0, ge=0, le=1)


class SegmentationConfig(BaseModel):
    """Investor segmentation settings."""

    method: Literal["risk_tolerance", "kmeans"] = "risk_tolerance"
    top_asset_types: int = Field(default=2, ge=1)
    top_locations: int = Field(default=2, ge=1)
    kmeans_clusters: int = Field(default=3, ge=1)
    kmeans_max_iterations: int = Field(default=50, ge=1)


class RiskBandsConfig(BaseModel):
    """Accepted risk score range per declared risk tolerance (inclusive)."""

    conservative: Tuple[float, float] = (0.0, 50.0)
    moderate: Tuple[float, float] = (40.0, 70.0)
    aggressive: Tuple[float, float] = (70.0, 100.0)

    @model_validator(mode="after")
    def _check_bounds(self) -> "RiskBandsConfig":
        for name, (low, high) in self.as_dict().items():
            if not (0 <= low <= high <= 100):
                raise ValueError(f"risk band '{name}' must satisfy 0 <= low <= high <= 100")
        return self

    def as_dict(self) -> Dict[str, Tuple[float, float]]:
        return {
            "conservative": self.conservative,
            "moderate": self.moderate,
            "aggressive": self.aggressive,
        }


class CacheConfig(BaseModel):
    """Recommendation cache settings."""

    enabled: bool = False
    max_entries: int = Field(default=1024, ge=1)
    ttl_seconds: float = Field(default=300.0, ge=0)


class MatchingConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    preference: PreferenceScoringConfig = Field(default_factory=PreferenceScoringConfig)
    financial: FinancialScoringConfig = Field(default_factory=FinancialScoringConfig)
    confidence: ConfidenceConfig = Field(default_factory=ConfidenceConfig)
    findings: FindingThresholdsConfig = Field(default_factory=FindingThresholdsConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)
    risk_bands: RiskBandsConfig = Field(default_factory=RiskBandsConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)

    model_config = {"populate_by_name": True}
