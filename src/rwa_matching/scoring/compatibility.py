"""
Compatibility Scorer.

Computes the four-dimension compatibility between one investor profile
and one asset:

    match_score = round(w_risk * risk + w_pref * preference
                        + w_fin * financial + w_geo * geographic)

The scorer is a pure function of its inputs and its configuration; it
holds no mutable state and can be shared between threads.
"""

from __future__ import annotations

from typing import Optional

from rwa_matching.config.models import MatchingConfig
from rwa_matching.domain.entities import Asset, InvestorProfile
from rwa_matching.domain.value_objects import (
    FindingKind,
    MatchingRecommendation,
    ScoreResult,
)
from rwa_matching.scoring import dimensions
from rwa_matching.scoring.findings import evaluate_findings


class CompatibilityScorer:
    """Scores profile/asset pairs and explains the result with coded findings."""

    def __init__(self, config: Optional[MatchingConfig] = None) -> None:
        """
        Initialize with configuration.

        Args:
            config: Matching configuration (weights, sub-score tunables,
                    finding thresholds)
        """
        self.config = config or MatchingConfig()

    @property
    def weights_version(self) -> str:
        return self.config.weights.version

    def score(self, profile: InvestorProfile, asset: Asset) -> ScoreResult:
        """
        Compute sub-scores, match score and confidence.

        Args:
            profile: Validated investor profile
            asset: Validated asset

        Returns:
            ScoreResult with all four sub-scores
        """
        risk = dimensions.risk_alignment(
            profile.risk_profile.risk_score,
            asset.financial_metrics.risk_score,
        )
        preference = dimensions.preference_alignment(
            profile.preferences, asset, self.config.preference
        )
        financial = dimensions.financial_fit(
            profile.preferences.investment_amount,
            asset.financial_metrics.minimum_investment,
            self.config.financial,
        )
        geographic = dimensions.geographic_fit(
            profile.preferences.geographic_preferences, asset.location
        )

        match_score = dimensions.weighted_match_score(
            risk, preference, financial, geographic, self.config.weights
        )

        return ScoreResult(
            risk_alignment=risk,
            preference_alignment=preference,
            financial_fit=financial,
            geographic_fit=geographic,
            match_score=match_score,
            confidence=dimensions.confidence(match_score, self.config.confidence.cap),
            weights_version=self.weights_version,
        )

    def evaluate(self, profile: InvestorProfile, asset: Asset) -> MatchingRecommendation:
        """Score a pair and attach reasoning, warnings and opportunities."""
        scores = self.score(profile, asset)
        findings = evaluate_findings(profile, asset, scores, self.config.findings)

        return MatchingRecommendation(
            asset_id=asset.id,
            asset=asset,
            match_score=scores.match_score,
            confidence=scores.confidence,
            risk_alignment=scores.risk_alignment,
            preference_alignment=scores.preference_alignment,
            financial_fit=scores.financial_fit,
            geographic_fit=scores.geographic_fit,
            reasoning=findings[FindingKind.REASONING],
            warnings=findings[FindingKind.WARNING],
            opportunities=findings[FindingKind.OPPORTUNITY],
            weights_version=scores.weights_version,
        )
