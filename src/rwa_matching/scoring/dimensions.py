"""
Scoring Dimensions - Pure Sub-Score Functions.

Each function computes one 0-100 sub-score from explicit inputs, with
no access to global state, so every dimension can be tested and
audited in isolation.

Dimensions:
    - risk_alignment: symmetric distance between risk scores
    - preference_alignment: asset type, sustainability bonus, exclusions
    - financial_fit: minimum ticket versus investment range
    - geographic_fit: share of geographic preferences matched
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from rwa_matching.config.models import (
    FinancialScoringConfig,
    PreferenceScoringConfig,
    ScoringWeights,
)
from rwa_matching.domain.entities import (
    Asset,
    InvestmentAmountRange,
    InvestorPreferences,
    Location,
)

SCORE_MIN = 0.0
SCORE_MAX = 100.0

# Absorbs float noise such as 45.49999999 for an exact half
_ROUNDING_EPSILON = 1e-9


def _normalize(text: str) -> str:
    return text.strip().casefold()


def _clamp(value: float, low: float = SCORE_MIN, high: float = SCORE_MAX) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5 + _ROUNDING_EPSILON))


def risk_alignment(profile_risk_score: float, asset_risk_score: float) -> float:
    """100 minus the absolute risk score distance, floored at 0."""
    return max(SCORE_MIN, SCORE_MAX - abs(profile_risk_score - asset_risk_score))


def is_excluded_sector(sector: str, excluded_sectors: Iterable[str]) -> bool:
    target = _normalize(sector)
    return any(_normalize(s) == target for s in excluded_sectors)


def preference_alignment(
    preferences: InvestorPreferences,
    asset: Asset,
    config: PreferenceScoringConfig,
) -> float:
    """
    Preference alignment of an asset.

    An excluded sector zeroes the score outright. Otherwise a preferred
    asset type scores high, any other type keeps a small base score so
    unexpected assets can still surface, and sustainability-focused
    investors get a bonus for assets with a high ESG score.
    """
    if is_excluded_sector(asset.sector, preferences.excluded_sectors):
        return SCORE_MIN

    if asset.type in preferences.asset_types:
        score = config.preferred_type_score
    else:
        score = config.other_type_score

    if (
        preferences.sustainability_focus
        and asset.esg_score > config.sustainability_esg_threshold
    ):
        score += config.sustainability_bonus

    return min(config.score_cap, score)


def financial_fit(
    investment_amount: InvestmentAmountRange,
    minimum_investment: float,
    config: FinancialScoringConfig,
) -> float:
    """
    Fit of the asset's minimum ticket with the investor's range.

    Infeasible (minimum ticket above the investor's maximum) scores 0,
    a minimum ticket at or below the investor's minimum scores 100, and
    anything in between ramps with preferred / minimum ticket.
    """
    if minimum_investment > investment_amount.maximum:
        return SCORE_MIN
    if minimum_investment <= investment_amount.minimum:
        return SCORE_MAX

    ratio = investment_amount.preferred / minimum_investment
    return _clamp(ratio * config.ramp_factor)


def geographic_fit(geographic_preferences: Sequence[str], location: Location) -> float:
    """
    Percentage of geographic preferences matching the asset's country or region.

    An empty preference list means "no data" and scores 0.
    """
    if not geographic_preferences:
        return SCORE_MIN

    asset_places = {_normalize(location.country), _normalize(location.region)}
    matches = sum(1 for pref in geographic_preferences if _normalize(pref) in asset_places)
    return matches / len(geographic_preferences) * SCORE_MAX


def weighted_match_score(
    risk: float,
    preference: float,
    financial: float,
    geographic: float,
    weights: ScoringWeights,
) -> int:
    """Weighted sum of the four sub-scores, rounded and clamped to 0-100."""
    total = (
        weights.risk * risk
        + weights.preference * preference
        + weights.financial * financial
        + weights.geographic * geographic
    )
    return int(_clamp(round_half_up(total)))


def confidence(match_score: int, cap: float) -> float:
    """Match score as a 0-1 confidence, capped below certainty."""
    return min(match_score / SCORE_MAX, cap)
