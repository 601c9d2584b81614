"""
Cluster Characteristics - Aggregates over a Group of Profiles.

Shared by every segmentation strategy so that a cluster is summarized
the same way no matter how its members were chosen.
"""

from __future__ import annotations

from collections import Counter
from statistics import fmean
from typing import List, Optional, Sequence

from rwa_matching.config.models import SegmentationConfig
from rwa_matching.domain.entities import AssetType, InvestorProfile
from rwa_matching.domain.value_objects import ClusterAnalysis, ClusterCharacteristics


def top_asset_types(profiles: Sequence[InvestorProfile], limit: int) -> List[AssetType]:
    """Most frequently preferred asset types, ties broken by enum value."""
    counts: Counter = Counter()
    for profile in profiles:
        counts.update(profile.preferences.asset_types)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0].value))
    return [asset_type for asset_type, _ in ranked[:limit]]


def top_regions(profiles: Sequence[InvestorProfile], limit: int) -> List[str]:
    """Most frequent member regions, ties broken alphabetically."""
    counts = Counter(p.demographics.location.region for p in profiles)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [region for region, _ in ranked[:limit]]


def average_age(profiles: Sequence[InvestorProfile]) -> Optional[float]:
    ages = [p.demographics.age for p in profiles if p.demographics.age is not None]
    return fmean(ages) if ages else None


def summarize_cluster(
    cluster_id: str,
    cluster_name: str,
    description: str,
    members: Sequence[InvestorProfile],
    config: SegmentationConfig,
) -> ClusterAnalysis:
    """
    Build the ClusterAnalysis of a non-empty group of profiles.

    Args:
        cluster_id: Stable identifier of the cluster
        cluster_name: Display name
        description: One-line description
        members: Profiles in the cluster (must not be empty)
        config: Segmentation configuration (top-N sizes)

    Returns:
        ClusterAnalysis with aggregated characteristics

    Raises:
        ValueError: If members is empty
    """
    if not members:
        raise ValueError(f"Cannot summarize empty cluster '{cluster_id}'")

    characteristics = ClusterCharacteristics(
        avg_risk_score=fmean(p.risk_profile.risk_score for p in members),
        common_asset_types=top_asset_types(members, config.top_asset_types),
        avg_investment_amount=fmean(
            p.preferences.investment_amount.preferred for p in members
        ),
        common_locations=top_regions(members, config.top_locations),
        avg_age=average_age(members),
    )

    return ClusterAnalysis(
        cluster_id=cluster_id,
        cluster_name=cluster_name,
        description=description,
        member_count=len(members),
        characteristics=characteristics,
        member_ids=sorted(p.id for p in members),
    )
