"""
Segmentation Strategies - Grouping Investor Profiles.

Provides Strategy Pattern implementations for segmenting profiles:
    - RiskToleranceSegmentation: One cluster per declared risk tolerance
    - KMeansSegmentation: Deterministic k-means over normalized features

Design Notes:
    - Both strategies are pure functions of the profile list
    - Every input profile lands in exactly one output cluster
    - Empty clusters are omitted from the output
    - Output order is fixed so repeated runs compare equal
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Protocol, Sequence

import numpy as np
from sklearn.cluster import KMeans
from sklearn.preprocessing import MinMaxScaler

from rwa_matching.config.models import SegmentationConfig
from rwa_matching.domain.entities import InvestorProfile, RiskTolerance
from rwa_matching.domain.value_objects import ClusterAnalysis
from rwa_matching.segmentation.characteristics import summarize_cluster

logger = logging.getLogger(__name__)


class SegmentationStrategy(Protocol):
    """Strategy protocol for profile segmentation."""

    @property
    def name(self) -> str:
        """Unique name of this strategy."""
        ...

    def segment(self, profiles: Sequence[InvestorProfile]) -> List[ClusterAnalysis]:
        """
        Partition profiles into clusters.

        Args:
            profiles: Profiles to segment

        Returns:
            Non-empty clusters in a deterministic order
        """
        ...


@dataclass(frozen=True)
class SegmentDefinition:
    cluster_id: str
    cluster_name: str
    description: str


RISK_TOLERANCE_SEGMENTS: Dict[RiskTolerance, SegmentDefinition] = {
    RiskTolerance.CONSERVATIVE: SegmentDefinition(
        cluster_id="conservative_investors",
        cluster_name="Conservative Investors",
        description="Risk-averse investors focused on capital preservation",
    ),
    RiskTolerance.MODERATE: SegmentDefinition(
        cluster_id="growth_seekers",
        cluster_name="Growth Seekers",
        description="Moderate risk investors seeking growth opportunities",
    ),
    RiskTolerance.AGGRESSIVE: SegmentDefinition(
        cluster_id="aggressive_traders",
        cluster_name="Aggressive Traders",
        description="High-risk investors pursuing maximum returns",
    ),
}


class RiskToleranceSegmentation:
    """Group profiles by their declared risk tolerance."""

    def __init__(self, config: SegmentationConfig) -> None:
        self.config = config

    @property
    def name(self) -> str:
        return "risk_tolerance"

    def segment(self, profiles: Sequence[InvestorProfile]) -> List[ClusterAnalysis]:
        groups: Dict[RiskTolerance, List[InvestorProfile]] = {
            tolerance: [] for tolerance in RISK_TOLERANCE_SEGMENTS
        }
        for profile in profiles:
            groups[profile.risk_profile.risk_tolerance].append(profile)

        clusters = []
        for tolerance, definition in RISK_TOLERANCE_SEGMENTS.items():
            members = groups[tolerance]
            if not members:
                continue
            clusters.append(
                summarize_cluster(
                    definition.cluster_id,
                    definition.cluster_name,
                    definition.description,
                    members,
                    self.config,
                )
            )
        return clusters


class KMeansSegmentation:
    """
    Deterministic k-means segmentation.

    Features per profile:
        - risk score / 100
        - preferred investment amount, min-max scaled over the input
        - activity level / 100

    Initial centroids are evenly spaced distinct feature rows after sorting
    profiles by (risk score, id), and scikit-learn runs a single Lloyd pass
    from that seed. Clusters are relabelled by ascending centroid risk, so
    ``kmeans_1`` is always the most risk-averse segment.
    """

    def __init__(self, config: SegmentationConfig) -> None:
        self.config = config

    @property
    def name(self) -> str:
        return "kmeans"

    def segment(self, profiles: Sequence[InvestorProfile]) -> List[ClusterAnalysis]:
        if not profiles:
            return []

        ordered = sorted(profiles, key=lambda p: (p.risk_profile.risk_score, p.id))
        features = self._features(ordered)
        seeds = self._distinct_rows(features)
        k = min(self.config.kmeans_clusters, len(seeds))

        model = KMeans(
            n_clusters=k,
            init=self._initial_centroids(seeds, k),
            n_init=1,
            max_iter=self.config.kmeans_max_iterations,
            random_state=0,
        )
        assignments = model.fit_predict(features)
        centroids = model.cluster_centers_

        logger.debug(f"k-means converged after {model.n_iter_} iterations (k={k})")

        # Ascending centroid risk, then the remaining features, then original index
        order = sorted(range(k), key=lambda i: (tuple(centroids[i]), i))

        clusters = []
        for index in order:
            members = [p for p, a in zip(ordered, assignments) if a == index]
            if not members:
                continue
            label = len(clusters) + 1
            clusters.append(
                summarize_cluster(
                    f"kmeans_{label}",
                    f"Segment {label}",
                    f"k-means segment {label} of {k}, ordered by ascending risk",
                    members,
                    self.config,
                )
            )
        return clusters

    @staticmethod
    def _features(profiles: Sequence[InvestorProfile]) -> np.ndarray:
        amounts = np.array(
            [[p.preferences.investment_amount.preferred] for p in profiles], dtype=float
        )
        scaled_amounts = MinMaxScaler().fit_transform(amounts)[:, 0]
        risk = np.array([p.risk_profile.risk_score for p in profiles], dtype=float) / 100.0
        activity = (
            np.array([p.behavior_metrics.activity_level for p in profiles], dtype=float)
            / 100.0
        )
        return np.column_stack([risk, scaled_amounts, activity])

    @staticmethod
    def _distinct_rows(features: np.ndarray) -> np.ndarray:
        """Unique feature rows in first-seen order."""
        _, first_seen = np.unique(features, axis=0, return_index=True)
        return features[np.sort(first_seen)]

    @staticmethod
    def _initial_centroids(seeds: np.ndarray, k: int) -> np.ndarray:
        if k == 1:
            return seeds[:1].copy()
        last = len(seeds) - 1
        return seeds[[i * last // (k - 1) for i in range(k)]].copy()
