"""
Ranking Package - Recommendation Ranking.

Components:
    - RecommendationRanker: Validate, score, filter, sort and truncate
"""

from rwa_matching.ranking.ranker import RecommendationRanker

__all__ = ["RecommendationRanker"]
