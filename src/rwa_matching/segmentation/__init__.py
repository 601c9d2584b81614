"""
Segmentation Package - Investor Clusters.

Components:
    - Segmenter: Strategy selection and count conservation check
    - RiskToleranceSegmentation: Default grouping by declared risk tolerance
    - KMeansSegmentation: Optional deterministic k-means
    - summarize_cluster: Shared cluster characteristics
"""

from rwa_matching.segmentation.characteristics import summarize_cluster
from rwa_matching.segmentation.segmenter import Segmenter
from rwa_matching.segmentation.strategies import (
    RISK_TOLERANCE_SEGMENTS,
    KMeansSegmentation,
    RiskToleranceSegmentation,
    SegmentationStrategy,
)

__all__ = [
    "Segmenter",
    "RISK_TOLERANCE_SEGMENTS",
    "KMeansSegmentation",
    "RiskToleranceSegmentation",
    "SegmentationStrategy",
    "summarize_cluster",
]
