"""
Scoring Package - Profile/Asset Compatibility.

Components:
    - dimensions: Pure sub-score functions and the weighted sum
    - findings: Rule table producing coded reasoning/warnings/opportunities
    - CompatibilityScorer: Combines both into ScoreResult and
      MatchingRecommendation
"""

from rwa_matching.scoring.compatibility import CompatibilityScorer
from rwa_matching.scoring.findings import (
    FINDING_RULES,
    describe_finding,
    evaluate_findings,
)

__all__ = [
    "CompatibilityScorer",
    "FINDING_RULES",
    "describe_finding",
    "evaluate_findings",
]
