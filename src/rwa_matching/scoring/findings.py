"""
Finding Rules - Coded Explanations for Recommendations.

Reasoning, warning and opportunity codes are produced by a fixed rule
table evaluated against the sub-scores and the profile/asset records.
Each rule is a named predicate; the UI maps codes to display text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from rwa_matching.config.models import FindingThresholdsConfig
from rwa_matching.domain.entities import Asset, InvestorProfile, LiquidityPreference
from rwa_matching.domain.value_objects import FindingCode, FindingKind, ScoreResult
from rwa_matching.scoring.dimensions import is_excluded_sector


@dataclass(frozen=True)
class FindingContext:
    """Inputs available to finding predicates."""

    profile: InvestorProfile
    asset: Asset
    scores: ScoreResult
    thresholds: FindingThresholdsConfig


@dataclass(frozen=True)
class FindingRule:
    code: FindingCode
    kind: FindingKind
    predicate: Callable[[FindingContext], bool]


def _risk_fit(ctx: FindingContext) -> bool:
    return ctx.scores.risk_alignment > ctx.thresholds.risk_fit_min


def _preference_fit(ctx: FindingContext) -> bool:
    return ctx.scores.preference_alignment > ctx.thresholds.preference_fit_min


def _budget_fit(ctx: FindingContext) -> bool:
    return ctx.scores.financial_fit > ctx.thresholds.budget_fit_min


def _geographic_fit(ctx: FindingContext) -> bool:
    return ctx.scores.geographic_fit > ctx.thresholds.geographic_fit_min


def _esg_aligned(ctx: FindingContext) -> bool:
    return (
        ctx.profile.preferences.sustainability_focus
        and ctx.asset.esg_score > ctx.thresholds.esg_aligned_min
    )


def _risk_above_tolerance(ctx: FindingContext) -> bool:
    return (
        ctx.asset.financial_metrics.risk_score
        > ctx.profile.risk_profile.risk_score + ctx.thresholds.risk_excess_max
    )


def _low_liquidity(ctx: FindingContext) -> bool:
    return (
        ctx.asset.financial_metrics.liquidity_score < ctx.thresholds.low_liquidity_max
        and ctx.profile.preferences.liquidity_preference == LiquidityPreference.HIGH
    )


def _excluded_sector(ctx: FindingContext) -> bool:
    return is_excluded_sector(ctx.asset.sector, ctx.profile.preferences.excluded_sectors)


def _outside_budget(ctx: FindingContext) -> bool:
    return ctx.scores.financial_fit == 0


def _high_expected_return(ctx: FindingContext) -> bool:
    return ctx.asset.financial_metrics.expected_return > ctx.thresholds.high_return_min


def _low_competition(ctx: FindingContext) -> bool:
    metadata = ctx.asset.metadata
    return metadata is not None and metadata.popularity < ctx.thresholds.low_popularity_max


def _strong_esg(ctx: FindingContext) -> bool:
    return ctx.asset.esg_score > ctx.thresholds.strong_esg_min


FINDING_RULES: Tuple[FindingRule, ...] = (
    FindingRule(FindingCode.RISK_FIT, FindingKind.REASONING, _risk_fit),
    FindingRule(FindingCode.PREFERENCE_FIT, FindingKind.REASONING, _preference_fit),
    FindingRule(FindingCode.BUDGET_FIT, FindingKind.REASONING, _budget_fit),
    FindingRule(FindingCode.GEOGRAPHIC_FIT, FindingKind.REASONING, _geographic_fit),
    FindingRule(FindingCode.ESG_ALIGNED, FindingKind.REASONING, _esg_aligned),
    FindingRule(FindingCode.RISK_ABOVE_TOLERANCE, FindingKind.WARNING, _risk_above_tolerance),
    FindingRule(FindingCode.LOW_LIQUIDITY, FindingKind.WARNING, _low_liquidity),
    FindingRule(FindingCode.EXCLUDED_SECTOR, FindingKind.WARNING, _excluded_sector),
    FindingRule(FindingCode.OUTSIDE_BUDGET, FindingKind.WARNING, _outside_budget),
    FindingRule(FindingCode.HIGH_EXPECTED_RETURN, FindingKind.OPPORTUNITY, _high_expected_return),
    FindingRule(FindingCode.LOW_COMPETITION, FindingKind.OPPORTUNITY, _low_competition),
    FindingRule(FindingCode.STRONG_ESG, FindingKind.OPPORTUNITY, _strong_esg),
)

FINDING_DESCRIPTIONS: Dict[FindingCode, str] = {
    FindingCode.RISK_FIT: "Risk level aligned with the investor's risk profile",
    FindingCode.PREFERENCE_FIT: "Matches preferred asset types and criteria",
    FindingCode.BUDGET_FIT: "Minimum ticket fits the investment budget",
    FindingCode.GEOGRAPHIC_FIT: "Located in a preferred geography",
    FindingCode.ESG_ALIGNED: "High ESG score matches the sustainability focus",
    FindingCode.RISK_ABOVE_TOLERANCE: "Asset risk above the investor's comfort zone",
    FindingCode.LOW_LIQUIDITY: "Low liquidity for an investor needing high liquidity",
    FindingCode.EXCLUDED_SECTOR: "Asset sector is excluded by the investor",
    FindingCode.OUTSIDE_BUDGET: "Minimum ticket exceeds the investment budget",
    FindingCode.HIGH_EXPECTED_RETURN: "High expected return",
    FindingCode.LOW_COMPETITION: "Low investor competition",
    FindingCode.STRONG_ESG: "Excellent ESG credentials",
}


def describe_finding(code: FindingCode) -> str:
    """Short fixed label for a finding code."""
    return FINDING_DESCRIPTIONS[code]


def evaluate_findings(
    profile: InvestorProfile,
    asset: Asset,
    scores: ScoreResult,
    thresholds: FindingThresholdsConfig,
    rules: Tuple[FindingRule, ...] = FINDING_RULES,
) -> Dict[FindingKind, List[FindingCode]]:
    """
    Evaluate the rule table.

    Returns:
        Codes per kind, in rule-table order
    """
    ctx = FindingContext(profile=profile, asset=asset, scores=scores, thresholds=thresholds)
    findings: Dict[FindingKind, List[FindingCode]] = {kind: [] for kind in FindingKind}
    for rule in rules:
        if rule.predicate(ctx):
            findings[rule.kind].append(rule.code)
    return findings
