"""
Segmenter - Investor Segmentation Entry Point.

Selects the configured strategy and checks that the produced clusters
account for every input profile exactly once.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Type

from rwa_matching.config.models import SegmentationConfig
from rwa_matching.domain.entities import InvestorProfile
from rwa_matching.domain.value_objects import ClusterAnalysis
from rwa_matching.segmentation.strategies import (
    KMeansSegmentation,
    RiskToleranceSegmentation,
    SegmentationStrategy,
)

logger = logging.getLogger(__name__)

STRATEGIES: Dict[str, Type] = {
    "risk_tolerance": RiskToleranceSegmentation,
    "kmeans": KMeansSegmentation,
}


class Segmenter:
    """Partitions investor profiles into cluster summaries."""

    def __init__(
        self,
        config: Optional[SegmentationConfig] = None,
        strategy: Optional[SegmentationStrategy] = None,
    ) -> None:
        """
        Initialize with configuration.

        Args:
            config: Segmentation configuration
            strategy: Explicit strategy, overrides ``config.method``
        """
        self.config = config or SegmentationConfig()
        self.strategy = strategy or STRATEGIES[self.config.method](self.config)

    def segment(self, profiles: Sequence[InvestorProfile]) -> List[ClusterAnalysis]:
        """
        Segment profiles with the configured strategy.

        Args:
            profiles: Profiles to segment (latest versions)

        Returns:
            Non-empty clusters whose member counts sum to len(profiles)
        """
        clusters = self.strategy.segment(profiles)

        assigned = sum(c.member_count for c in clusters)
        if assigned != len(profiles):
            raise RuntimeError(
                f"Segmentation '{self.strategy.name}' assigned {assigned} "
                f"of {len(profiles)} profiles"
            )

        logger.info(
            f"Segmented {len(profiles)} profiles into {len(clusters)} clusters "
            f"({self.strategy.name})"
        )
        return clusters
