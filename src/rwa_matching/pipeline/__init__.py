"""
Pipeline Package - Engine Facade.

Components:
    - MatchingEngine: Facade over profiles, catalog, ranking,
      segmentation and feedback
    - create_engine: Builds an engine on the in-memory adapters
"""

from rwa_matching.pipeline.factory import create_engine
from rwa_matching.pipeline.matching_engine import MatchingEngine

__all__ = ["MatchingEngine", "create_engine"]
