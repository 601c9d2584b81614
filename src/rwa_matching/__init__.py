"""
RWA Matching - Investor/Asset Matching & Segmentation Engine.

Recommends real-world-asset (RWA) investment opportunities by combining
declarative investor profiles with a catalog of asset records, producing
ranked, explainable recommendations.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - Strategy Pattern for segmentation methods
    - Configuration-driven scoring via YAML

Main Components:
    - domain: Core entities (InvestorProfile, Asset, MatchingRecommendation)
    - interfaces: Protocols for repositories, catalog, feedback, logging
    - scoring: Compatibility scorer and finding rules
    - segmentation: Investor segmentation strategies
    - ranking: Recommendation ranker
    - pipeline: MatchingEngine facade
    - adapters: In-memory repositories, loggers, fixture loading
    - config: Configuration models and loaders

Example:
    >>> from rwa_matching import create_engine
    >>> engine = create_engine()
    >>> engine.load_assets(asset_records)
    >>> engine.upsert_profile(profile)
    >>> recommendations = engine.recommend(profile.id, limit=10)

"""

import logging

__version__ = "1.0.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for RWA Matching.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import rwa_matching
        >>> rwa_matching.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("rwa_matching").setLevel(level)


def create_engine(*args, **kwargs):
    """Build a MatchingEngine on in-memory adapters (see pipeline.factory)."""
    from rwa_matching.pipeline.factory import create_engine as _create_engine

    return _create_engine(*args, **kwargs)


__all__ = ["__version__", "configure_logging", "create_engine"]
