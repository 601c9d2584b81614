"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Sequence

import pytest

from rwa_matching.adapters.asset_catalog import InMemoryAssetCatalog
from rwa_matching.adapters.console_logger import ConsoleAuditLogger
from rwa_matching.adapters.feedback_sink import InMemoryFeedbackSink
from rwa_matching.adapters.fixture_loader import FixtureLoader, FixtureSet
from rwa_matching.adapters.profile_repository import InMemoryProfileRepository
from rwa_matching.config.models import MatchingConfig
from rwa_matching.domain.entities import (
    Asset,
    AssetCharacteristics,
    AssetMetadata,
    AssetType,
    Demographics,
    FinancialMetrics,
    InvestmentAmountRange,
    InvestorPreferences,
    InvestorProfile,
    LiquidityPreference,
    Location,
    RiskProfile,
    RiskTolerance,
    BehaviorMetrics,
    Sustainability,
)
from rwa_matching.observability.observability_manager import ObservabilityManager
from rwa_matching.pipeline.matching_engine import MatchingEngine
from rwa_matching.scoring.compatibility import CompatibilityScorer

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def build_profile(
    profile_id: str = "inv-001",
    risk_tolerance: RiskTolerance = RiskTolerance.MODERATE,
    risk_score: float = 50.0,
    asset_types: Sequence[AssetType] = (AssetType.REAL_ESTATE,),
    geographic_preferences: Sequence[str] = ("North America",),
    minimum: float = 10_000,
    preferred: float = 50_000,
    maximum: float = 200_000,
    sustainability_focus: bool = False,
    excluded_sectors: Sequence[str] = (),
    liquidity_preference: LiquidityPreference = LiquidityPreference.MEDIUM,
    country: str = "US",
    region: str = "North America",
    age: Optional[int] = None,
    activity_level: float = 50.0,
) -> InvestorProfile:
    """Build a valid investor profile with readable overrides."""
    return InvestorProfile(
        id=profile_id,
        preferences=InvestorPreferences(
            asset_types=list(asset_types),
            geographic_preferences=list(geographic_preferences),
            investment_amount=InvestmentAmountRange(
                minimum=minimum, preferred=preferred, maximum=maximum
            ),
            liquidity_preference=liquidity_preference,
            sustainability_focus=sustainability_focus,
            excluded_sectors=list(excluded_sectors),
        ),
        risk_profile=RiskProfile(risk_tolerance=risk_tolerance, risk_score=risk_score),
        demographics=Demographics(
            location=Location(country=country, region=region),
            age_range="35-44",
            age=age,
        ),
        behavior_metrics=BehaviorMetrics(activity_level=activity_level),
    )


def build_asset(
    asset_id: str = "asset-001",
    asset_type: AssetType = AssetType.REAL_ESTATE,
    risk_score: float = 50.0,
    minimum_investment: float = 5_000,
    country: str = "US",
    region: str = "North America",
    sector: str = "Commercial Property",
    esg_score: float = 60.0,
    liquidity_score: float = 60.0,
    expected_return: float = 8.0,
    popularity: Optional[float] = 50.0,
) -> Asset:
    """Build a valid asset with readable overrides."""
    return Asset(
        id=asset_id,
        name=f"Asset {asset_id}",
        type=asset_type,
        location=Location(country=country, region=region),
        financial_metrics=FinancialMetrics(
            current_value=1_000_000,
            minimum_investment=minimum_investment,
            expected_return=expected_return,
            volatility=12.0,
            liquidity_score=liquidity_score,
            risk_score=risk_score,
        ),
        characteristics=AssetCharacteristics(
            sector=sector,
            sustainability=Sustainability(esg_score=esg_score),
        ),
        metadata=AssetMetadata(popularity=popularity) if popularity is not None else None,
    )


@pytest.fixture
def make_profile() -> Callable[..., InvestorProfile]:
    """Factory for valid investor profiles."""
    return build_profile


@pytest.fixture
def make_asset() -> Callable[..., Asset]:
    """Factory for valid assets."""
    return build_asset


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return FIXTURES_DIR / "sample_config.yaml"


@pytest.fixture
def matching_fixtures() -> FixtureSet:
    """Deterministic profiles and assets."""
    return FixtureLoader(FIXTURES_DIR).load("matching_fixtures.yaml")


@pytest.fixture
def default_config() -> MatchingConfig:
    """Create default matching configuration."""
    return MatchingConfig()


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> ObservabilityManager:
    """Structured metrics collector for testing."""
    return ObservabilityManager()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def asset_catalog() -> InMemoryAssetCatalog:
    return InMemoryAssetCatalog()


@pytest.fixture
def scorer(default_config: MatchingConfig) -> CompatibilityScorer:
    return CompatibilityScorer(default_config)


@pytest.fixture
def engine(
    default_config: MatchingConfig,
    console_logger: ConsoleAuditLogger,
    metrics_collector: ObservabilityManager,
) -> MatchingEngine:
    """Engine on in-memory adapters with the default configuration."""
    return MatchingEngine(
        config=default_config,
        profile_repository=InMemoryProfileRepository(),
        asset_catalog=InMemoryAssetCatalog(),
        feedback_sink=InMemoryFeedbackSink(),
        audit_logger=console_logger,
        metrics_collector=metrics_collector,
    )
