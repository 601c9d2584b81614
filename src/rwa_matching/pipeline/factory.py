"""
Engine Factory.

Builds a MatchingEngine on the in-memory adapters, with configuration
from a MatchingConfig object or a YAML file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from rwa_matching.adapters.asset_catalog import InMemoryAssetCatalog
from rwa_matching.adapters.feedback_sink import InMemoryFeedbackSink
from rwa_matching.adapters.profile_repository import InMemoryProfileRepository
from rwa_matching.caching.recommendation_cache import RecommendationCache
from rwa_matching.config.loader import load_config
from rwa_matching.config.models import MatchingConfig
from rwa_matching.interfaces.audit_logger import AuditLogger
from rwa_matching.interfaces.metrics_collector import MetricsCollector
from rwa_matching.observability.observability_manager import ObservabilityManager
from rwa_matching.pipeline.matching_engine import MatchingEngine
from rwa_matching.validation.asset_validator import AssetValidator

logger = logging.getLogger(__name__)


def create_engine(
    config: Optional[MatchingConfig] = None,
    config_path: Optional[Union[str, Path]] = None,
    overlay: Optional[str] = None,
    base_path: Optional[Path] = None,
    audit_logger: Optional[AuditLogger] = None,
    metrics_collector: Optional[MetricsCollector] = None,
) -> MatchingEngine:
    """
    Build a MatchingEngine with in-memory storage.

    Args:
        config: Configuration object (wins over config_path)
        config_path: YAML configuration file
        overlay: Overlay profile applied on top of config_path
        base_path: Directory holding config_path and config/profiles/
        audit_logger: Audit trail (default: ObservabilityManager)
        metrics_collector: Metrics (default: the same ObservabilityManager)

    Returns:
        Ready-to-use MatchingEngine
    """
    if config is None:
        config = load_config(config_path, overlay, base_path) if config_path else MatchingConfig()

    if audit_logger is None or metrics_collector is None:
        observability = ObservabilityManager()
        audit_logger = audit_logger or observability
        metrics_collector = metrics_collector or observability

    cache = RecommendationCache(config.cache) if config.cache.enabled else None

    engine = MatchingEngine(
        config=config,
        profile_repository=InMemoryProfileRepository(),
        asset_catalog=InMemoryAssetCatalog(validator=AssetValidator()),
        feedback_sink=InMemoryFeedbackSink(),
        audit_logger=audit_logger,
        metrics_collector=metrics_collector,
        cache=cache,
    )

    logger.info(
        f"Created matching engine (weights v{config.weights.version}, "
        f"segmentation={config.segmentation.method}, cache={'on' if cache else 'off'})"
    )
    return engine
