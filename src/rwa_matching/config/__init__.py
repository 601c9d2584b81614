"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - MatchingConfig: Root configuration object
    - ScoringWeights: Versioned weight vector of the match score
    - PreferenceScoringConfig / FinancialScoringConfig: Sub-score tunables
    - FindingThresholdsConfig: Thresholds of the finding rule table
    - RankingConfig: Acceptance floor, default limit, worker count
    - SegmentationConfig: Segmentation method and parameters
    - RiskBandsConfig: Risk score band per declared risk tolerance
"""

from rwa_matching.config.loader import ConfigLoader, load_config
from rwa_matching.config.models import (
    CacheConfig,
    ConfidenceConfig,
    FinancialScoringConfig,
    FindingThresholdsConfig,
    MatchingConfig,
    PreferenceScoringConfig,
    RankingConfig,
    RiskBandsConfig,
    ScoringWeights,
    SegmentationConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "CacheConfig",
    "ConfidenceConfig",
    "FinancialScoringConfig",
    "FindingThresholdsConfig",
    "MatchingConfig",
    "PreferenceScoringConfig",
    "RankingConfig",
    "RiskBandsConfig",
    "ScoringWeights",
    "SegmentationConfig",
]
