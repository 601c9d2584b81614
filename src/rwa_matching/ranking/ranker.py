"""
Recommendation Ranker - Ranked, Explainable Recommendations.

Workflow per request:
    1. Resolve the profile (ProfileNotFoundError if unknown)
    2. Validate each asset; malformed records are skipped and audited
    3. Optionally restrict to the requested asset types
    4. Score every remaining asset (sequentially or on a thread pool)
    5. Drop everything at or below the acceptance floor
    6. Sort by match score desc, confidence desc, asset id asc
    7. Truncate to the limit

Design Notes:
    - Scoring is pure over immutable snapshots, so parallel scoring
      returns exactly the sequential result
    - A caller-supplied minimum score can only raise the floor
    - Results for the live catalog are cacheable by profile version,
      catalog version and config hash
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Optional, Sequence

from rwa_matching.caching.recommendation_cache import (
    RecommendationCache,
    RecommendationCacheProtocol,
)
from rwa_matching.config.models import MatchingConfig
from rwa_matching.domain.entities import Asset, AssetType, InvestorProfile
from rwa_matching.domain.errors import InvalidAssetError
from rwa_matching.domain.value_objects import MatchingRecommendation
from rwa_matching.interfaces.asset_catalog import AssetCatalog
from rwa_matching.interfaces.audit_logger import AuditLogger
from rwa_matching.interfaces.metrics_collector import MetricsCollector
from rwa_matching.interfaces.profile_repository import ProfileRepository
from rwa_matching.observability.version_manager import VersionManager
from rwa_matching.resilience.error_handler import ErrorHandler
from rwa_matching.scoring.compatibility import CompatibilityScorer
from rwa_matching.validation.asset_validator import (
    AssetRecord,
    AssetValidator,
    asset_record_id,
)

logger = logging.getLogger(__name__)


class RecommendationRanker:
    """Produces ranked recommendation lists for one profile."""

    def __init__(
        self,
        profile_repository: ProfileRepository,
        asset_catalog: AssetCatalog,
        scorer: Optional[CompatibilityScorer] = None,
        config: Optional[MatchingConfig] = None,
        validator: Optional[AssetValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
        metrics_collector: Optional[MetricsCollector] = None,
        cache: Optional[RecommendationCacheProtocol] = None,
    ) -> None:
        """
        Initialize ranker with all dependencies.

        Args:
            profile_repository: Source of investor profiles
            asset_catalog: Default asset set to rank
            scorer: Compatibility scorer (built from config if omitted)
            config: Matching configuration
            validator: Asset validator applied to every candidate
            audit_logger: For the rejection/served trail (optional)
            metrics_collector: For timing and volume metrics (optional)
            cache: Recommendation cache (optional)
        """
        self.config = config or MatchingConfig()
        self.profile_repository = profile_repository
        self.asset_catalog = asset_catalog
        self.scorer = scorer or CompatibilityScorer(self.config)
        self.validator = validator or AssetValidator()
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector
        self.cache = cache
        self.config_hash = VersionManager.compute_config_hash(self.config)
        self._error_handler = ErrorHandler(isolated_exceptions=(InvalidAssetError,))

    def recommend(
        self,
        profile_id: str,
        assets: Optional[Iterable[AssetRecord]] = None,
        limit: Optional[int] = None,
        min_match_score: Optional[int] = None,
        asset_types: Optional[Iterable[AssetType]] = None,
    ) -> List[MatchingRecommendation]:
        """
        Rank assets for a profile.

        Args:
            profile_id: Investor profile id
            assets: Candidate records (default: current catalog snapshot)
            limit: Maximum results (default: ranking.default_limit)
            min_match_score: Inclusive minimum score on top of the floor
            asset_types: Restrict results to these asset types

        Returns:
            Recommendations in ranking order, at most ``limit``

        Raises:
            ProfileNotFoundError: If the profile does not exist
            ValueError: If limit is negative
        """
        if limit is None:
            limit = self.config.ranking.default_limit
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")

        profile = self.profile_repository.require(profile_id)
        type_filter = frozenset(asset_types) if asset_types is not None else None

        if assets is not None:
            return self._rank(profile, list(assets), limit, min_match_score, type_filter)

        catalog_version, candidates = self.asset_catalog.versioned_snapshot()

        if self.cache is None or not self.cache.enabled:
            return self._rank(profile, candidates, limit, min_match_score, type_filter)

        query = (
            limit,
            min_match_score,
            tuple(sorted(t.value for t in type_filter)) if type_filter is not None else None,
        )
        key = RecommendationCache.make_key(
            profile.id, profile.version, catalog_version, self.config_hash, query
        )
        ranked = self.cache.get_or_compute(
            key,
            lambda: tuple(
                self._rank(profile, candidates, limit, min_match_score, type_filter)
            ),
        )
        return list(ranked)

    def _rank(
        self,
        profile: InvestorProfile,
        records: Sequence[AssetRecord],
        limit: int,
        min_match_score: Optional[int],
        type_filter: Optional[frozenset],
    ) -> List[MatchingRecommendation]:
        start_time = time.perf_counter()

        validated = self._error_handler.handle_partial_failure(
            records,
            self.validator.parse,
            min_success_rate=self.config.ranking.min_success_rate,
            operation_name="asset validation",
            on_failure=self._on_rejected,
        )
        candidates = validated.successful
        if type_filter is not None:
            candidates = [a for a in candidates if a.type in type_filter]

        scored = self._score_all(profile, candidates)

        floor = self.config.ranking.acceptance_floor
        accepted = [
            r
            for r in scored
            if r.match_score > floor
            and (min_match_score is None or r.match_score >= min_match_score)
        ]
        accepted.sort(key=lambda r: r.sort_key)
        ranked = accepted[:limit]

        duration = time.perf_counter() - start_time
        if self.audit_logger:
            self.audit_logger.log_recommendations(
                profile.id, len(scored), len(ranked), duration
            )
        if self.metrics_collector:
            self.metrics_collector.record_timing("ranking_seconds", duration)
            self.metrics_collector.record_count("assets_scored_total", len(scored))
            self.metrics_collector.record_count(
                "assets_skipped_total", len(validated.failed)
            )

        logger.debug(
            f"Ranked {len(scored)} assets for {profile.id}: "
            f"{len(accepted)} above floor, returning {len(ranked)}"
        )
        return ranked

    def _score_all(
        self,
        profile: InvestorProfile,
        assets: List[Asset],
    ) -> List[MatchingRecommendation]:
        workers = self.config.ranking.max_workers
        if workers <= 1 or len(assets) < 2:
            return [self.scorer.evaluate(profile, asset) for asset in assets]

        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(lambda a: self.scorer.evaluate(profile, a), assets))

    def _on_rejected(self, record: Any, error: Exception) -> None:
        if self.audit_logger:
            self.audit_logger.log_asset_rejected(asset_record_id(record), str(error))

