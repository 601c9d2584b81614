"""
Matching Engine - Main Facade.

The MatchingEngine wires profile storage, the asset catalog, scoring,
ranking, segmentation and feedback behind the operations integrating
layers (dashboard, catalog feed) call.

Design Notes:
    - Request/response only; audit and metrics go through injected
      collaborators
    - Every public request gets a fresh correlation ID
    - Segment refresh reads one repository snapshot and publishes the
      resulting cluster list in a single assignment
"""

from __future__ import annotations

import logging
import threading
import time
import uuid
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from rwa_matching.caching.recommendation_cache import RecommendationCacheProtocol
from rwa_matching.config.models import MatchingConfig
from rwa_matching.domain.entities import Asset, AssetType, InvestorProfile
from rwa_matching.domain.errors import AssetNotFoundError
from rwa_matching.domain.value_objects import (
    ClusterAnalysis,
    FeedbackRecord,
    MatchingMetrics,
    MatchingRecommendation,
)
from rwa_matching.feedback.recorder import FeedbackRecorder
from rwa_matching.interfaces.asset_catalog import AssetCatalog
from rwa_matching.interfaces.audit_logger import AuditLogger
from rwa_matching.interfaces.feedback_sink import FeedbackSink
from rwa_matching.interfaces.metrics_collector import MetricsCollector
from rwa_matching.interfaces.profile_repository import ProfileRepository
from rwa_matching.observability.version_manager import VersionManager, VersionMetadata
from rwa_matching.ranking.ranker import RecommendationRanker
from rwa_matching.resilience.error_handler import PartialResult
from rwa_matching.scoring.compatibility import CompatibilityScorer
from rwa_matching.segmentation.segmenter import Segmenter
from rwa_matching.validation.asset_validator import (
    AssetRecord,
    AssetValidator,
    asset_record_id,
)
from rwa_matching.validation.profile_validator import ProfileValidator

logger = logging.getLogger(__name__)

ProfilePayload = Union[InvestorProfile, Mapping[str, Any]]


class MatchingEngine:
    """Facade over the matching and segmentation components."""

    def __init__(
        self,
        config: MatchingConfig,
        profile_repository: ProfileRepository,
        asset_catalog: AssetCatalog,
        feedback_sink: FeedbackSink,
        audit_logger: AuditLogger,
        metrics_collector: MetricsCollector,
        cache: Optional[RecommendationCacheProtocol] = None,
        version_manager: Optional[VersionManager] = None,
    ) -> None:
        """
        Initialize engine with all dependencies.

        Args:
            config: Matching configuration
            profile_repository: Versioned profile storage
            asset_catalog: Published asset set
            feedback_sink: Append-only feedback storage
            audit_logger: For audit trail
            metrics_collector: For performance metrics
            cache: Recommendation cache (optional)
            version_manager: For version metadata (optional)
        """
        self.config = config
        self.profile_repository = profile_repository
        self.asset_catalog = asset_catalog
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector
        self.cache = cache
        self.version_manager = version_manager or VersionManager()

        self.profile_validator = ProfileValidator(config.risk_bands)
        self.asset_validator = AssetValidator()
        self.scorer = CompatibilityScorer(config)
        self.ranker = RecommendationRanker(
            profile_repository,
            asset_catalog,
            scorer=self.scorer,
            config=config,
            validator=self.asset_validator,
            audit_logger=audit_logger,
            metrics_collector=metrics_collector,
            cache=cache,
        )
        self.segmenter = Segmenter(config.segmentation)
        self.feedback = FeedbackRecorder(feedback_sink, profile_repository)

        self._lock = threading.Lock()
        self._clusters: Optional[List[ClusterAnalysis]] = None
        self._served_count = 0
        self._served_score_total = 0

    # =========================================================================
    # Profiles
    # =========================================================================

    def upsert_profile(self, profile: ProfilePayload) -> InvestorProfile:
        """
        Validate and store a new version of a profile.

        Args:
            profile: InvestorProfile or raw mapping

        Returns:
            The stored profile with its assigned version

        Raises:
            InvalidProfileError: If the profile violates an invariant
        """
        self._new_correlation_id()
        validated = self.profile_validator.parse(profile)
        stored = self.profile_repository.upsert(validated)

        self.audit_logger.log_profile_upserted(stored.id, stored.version)
        self.metrics_collector.record_count("profiles_upserted_total", 1)
        if self.cache is not None:
            self.cache.invalidate_profile(stored.id)

        logger.info(f"Upserted profile {stored.id} v{stored.version}")
        return stored

    def get_profile(self, profile_id: str) -> InvestorProfile:
        """Latest version of a profile (ProfileNotFoundError if unknown)."""
        return self.profile_repository.require(profile_id)

    def profile_history(self, profile_id: str) -> List[InvestorProfile]:
        """All stored versions of a profile, oldest first."""
        return self.profile_repository.history(profile_id)

    # =========================================================================
    # Catalog
    # =========================================================================

    def load_assets(
        self,
        records: Iterable[AssetRecord],
        replace: bool = True,
    ) -> PartialResult[Asset]:
        """
        Publish catalog records; malformed ones are excluded and audited.

        Args:
            records: Asset models or raw feed mappings
            replace: Replace the whole catalog (True) or merge by id (False)

        Returns:
            PartialResult with accepted assets and rejected records
        """
        self._new_correlation_id()
        start_time = time.perf_counter()

        result = self.asset_catalog.load(records, replace=replace)

        for record, error in result.failed:
            self.audit_logger.log_asset_rejected(asset_record_id(record), str(error))

        if result.has_failures:
            self.audit_logger.log_anomaly(
                f"Catalog load rejected {len(result.failed)} records",
                severity="WARNING",
                context={"accepted": len(result.successful)},
            )

        self.metrics_collector.record_timing(
            "catalog_load_seconds", time.perf_counter() - start_time
        )
        self.metrics_collector.record_count("assets_accepted_total", len(result.successful))
        self.metrics_collector.record_count("assets_rejected_total", len(result.failed))
        return result

    # =========================================================================
    # Scoring & Ranking
    # =========================================================================

    def score(self, profile_id: str, asset_id: str) -> MatchingRecommendation:
        """
        Score one published asset for one profile.

        Raises:
            ProfileNotFoundError: If the profile is unknown
            AssetNotFoundError: If the asset is not in the catalog
        """
        profile = self.profile_repository.require(profile_id)
        asset = self.asset_catalog.get(asset_id)
        if asset is None:
            raise AssetNotFoundError(asset_id)
        return self.scorer.evaluate(profile, asset)

    def recommend(
        self,
        profile_id: str,
        assets: Optional[Iterable[AssetRecord]] = None,
        limit: Optional[int] = None,
        min_match_score: Optional[int] = None,
        asset_types: Optional[Iterable[AssetType]] = None,
    ) -> List[MatchingRecommendation]:
        """
        Ranked recommendations for a profile.

        Args:
            profile_id: Investor profile id
            assets: Candidate records (default: published catalog)
            limit: Maximum results (default from config)
            min_match_score: Inclusive minimum score on top of the floor
            asset_types: Restrict results to these asset types

        Returns:
            Recommendations in ranking order

        Raises:
            ProfileNotFoundError: If the profile is unknown
            ValueError: If limit is negative
        """
        self._new_correlation_id()
        recommendations = self.ranker.recommend(
            profile_id,
            assets=assets,
            limit=limit,
            min_match_score=min_match_score,
            asset_types=asset_types,
        )

        with self._lock:
            self._served_count += len(recommendations)
            self._served_score_total += sum(r.match_score for r in recommendations)
        return recommendations

    # =========================================================================
    # Segmentation
    # =========================================================================

    def segment(
        self,
        profiles: Optional[Sequence[InvestorProfile]] = None,
    ) -> List[ClusterAnalysis]:
        """
        Segment profiles without publishing the result.

        Args:
            profiles: Profiles to segment (default: latest stored versions)
        """
        if profiles is None:
            profiles = self.profile_repository.snapshot()
        return self.segmenter.segment(profiles)

    def refresh_segments(self) -> List[ClusterAnalysis]:
        """Recompute segments from the current profiles and publish them."""
        self._new_correlation_id()
        start_time = time.perf_counter()

        clusters = self.segmenter.segment(self.profile_repository.snapshot())
        with self._lock:
            self._clusters = clusters

        self.metrics_collector.record_timing(
            "segmentation_seconds", time.perf_counter() - start_time
        )
        self.metrics_collector.record_gauge("cluster_count", len(clusters))
        return list(clusters)

    def get_cluster_analysis(self) -> List[ClusterAnalysis]:
        """Published segments; computed on first access."""
        with self._lock:
            clusters = self._clusters
        if clusters is None:
            return self.refresh_segments()
        return list(clusters)

    # =========================================================================
    # Feedback & Metrics
    # =========================================================================

    def record_feedback(
        self,
        profile_id: str,
        asset_id: str,
        rating: int,
        comment: Optional[str] = None,
    ) -> FeedbackRecord:
        """
        Record an investor's rating of a recommendation.

        Raises:
            InvalidRatingError: If rating is not an integer in [1, 5]
            ProfileNotFoundError: If the profile is unknown
        """
        record = self.feedback.record_feedback(profile_id, asset_id, rating, comment)
        self.metrics_collector.record_count("feedback_total", 1)
        return record

    def get_matching_metrics(self) -> MatchingMetrics:
        """Aggregate numbers for the dashboard."""
        with self._lock:
            served = self._served_count
            score_total = self._served_score_total

        return MatchingMetrics(
            total_profiles=self.profile_repository.count(),
            total_assets=self.asset_catalog.count(),
            cluster_count=len(self.get_cluster_analysis()),
            feedback_count=self.feedback.count(),
            average_rating=self.feedback.average_rating(),
            recommendations_served=served,
            average_match_score=score_total / served if served else None,
        )

    def version_metadata(self) -> VersionMetadata:
        """Code, weights and config versions behind current results."""
        return self.version_manager.get_version_metadata(self.config)

    def _new_correlation_id(self) -> str:
        correlation_id = str(uuid.uuid4())
        self.audit_logger.set_correlation_id(correlation_id)
        return correlation_id
