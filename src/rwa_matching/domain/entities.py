"""
Core Domain Entities.

This module defines the fundamental entities of the matching domain:
investor profiles and the real-world assets they can be matched with.

Entities are frozen pydantic models that reject NaN and infinite numbers.
Shape and types are enforced by pydantic; business invariants (amount
ordering, score ranges, risk bands) are checked by the validators in
``rwa_matching.validation`` so that every violation can be reported
with its field path.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class AssetType(str, Enum):
    """Closed set of tokenized asset classes."""

    REAL_ESTATE = "real_estate"
    CARBON_CREDITS = "carbon_credits"
    PRECIOUS_METALS = "precious_metals"
    COMMODITIES = "commodities"
    RENEWABLE_ENERGY = "renewable_energy"
    INFRASTRUCTURE = "infrastructure"
    ART_COLLECTIBLES = "art_collectibles"
    BONDS = "bonds"


class RiskTolerance(str, Enum):
    """Declared risk appetite of an investor."""

    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class TimeHorizon(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class LiquidityPreference(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class DecisionSpeed(str, Enum):
    FAST = "fast"
    MODERATE = "moderate"
    SLOW = "slow"


class ResearchDepth(str, Enum):
    MINIMAL = "minimal"
    MODERATE = "moderate"
    EXTENSIVE = "extensive"


class Location(BaseModel):
    """Geographic location of an investor or an asset."""

    country: str
    region: str
    city: Optional[str] = None

    model_config = {"frozen": True, "allow_inf_nan": False}


# =============================================================================
# Investor Profile
# =============================================================================


class InvestmentAmountRange(BaseModel):
    """Ticket size an investor is willing to commit."""

    minimum: float = Field(..., description="Smallest acceptable ticket")
    preferred: float = Field(..., description="Preferred ticket")
    maximum: float = Field(..., description="Largest acceptable ticket")

    model_config = {"frozen": True, "allow_inf_nan": False}


class InvestorPreferences(BaseModel):
    """Declarative investment preferences."""

    asset_types: List[AssetType] = Field(default_factory=list)
    geographic_preferences: List[str] = Field(default_factory=list)
    investment_amount: InvestmentAmountRange
    time_horizon: TimeHorizon = TimeHorizon.MEDIUM
    liquidity_preference: LiquidityPreference = LiquidityPreference.MEDIUM
    sustainability_focus: bool = False
    technology_adoption: Optional[RiskTolerance] = None
    diversification_goals: List[str] = Field(default_factory=list)
    excluded_sectors: List[str] = Field(default_factory=list)

    model_config = {"frozen": True, "allow_inf_nan": False}


class RiskFactors(BaseModel):
    """Per-factor risk sensitivity scores (0-100)."""

    market_risk: float = 50.0
    credit_risk: float = 50.0
    liquidity_risk: float = 50.0
    operational_risk: float = 50.0
    regulatory_risk: float = 50.0

    model_config = {"frozen": True, "allow_inf_nan": False}


class RiskProfile(BaseModel):
    """Risk appetite of an investor."""

    risk_tolerance: RiskTolerance
    risk_score: float = Field(..., description="Overall risk score (0-100)")
    volatility_tolerance: Optional[float] = None
    max_drawdown: Optional[float] = None
    risk_factors: RiskFactors = Field(default_factory=RiskFactors)

    model_config = {"frozen": True, "allow_inf_nan": False}


class Demographics(BaseModel):
    """Demographic context used for segmentation."""

    location: Location
    age_range: str
    age: Optional[int] = None
    occupation: Optional[str] = None
    income_range: Optional[str] = None
    net_worth: Optional[str] = None
    investment_experience: ExperienceLevel = ExperienceLevel.INTERMEDIATE

    model_config = {"frozen": True, "allow_inf_nan": False}


class BehaviorMetrics(BaseModel):
    """Observed investing behaviour."""

    activity_level: float = 50.0
    decision_speed: DecisionSpeed = DecisionSpeed.MODERATE
    research_depth: ResearchDepth = ResearchDepth.MODERATE
    social_influence: Optional[float] = None
    contrarian: bool = False
    portfolio_turnover: Optional[float] = None
    average_holding_period: Optional[int] = None

    model_config = {"frozen": True, "allow_inf_nan": False}


class InvestmentHistoryEntry(BaseModel):
    """A past investment made by the investor."""

    asset_id: str
    asset_type: AssetType
    investment_amount: float
    investment_date: date
    current_value: Optional[float] = None
    roi: Optional[float] = None
    satisfaction: Optional[int] = None

    model_config = {"frozen": True, "allow_inf_nan": False}


class InvestorProfile(BaseModel):
    """
    Declarative investor profile.

    Profiles are replaced wholesale on update. The repository assigns
    ``version`` and the timestamps; a new version keeps the same ``id``.
    """

    id: str = Field(..., description="Unique, immutable profile identifier")
    version: int = Field(default=0, description="Repository-assigned version")
    wallet_address: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    preferences: InvestorPreferences
    risk_profile: RiskProfile
    demographics: Demographics
    behavior_metrics: BehaviorMetrics = Field(default_factory=BehaviorMetrics)
    investment_history: List[InvestmentHistoryEntry] = Field(default_factory=list)

    model_config = {"frozen": True, "allow_inf_nan": False}

    def __hash__(self) -> int:
        return hash((self.id, self.version))


# =============================================================================
# Asset
# =============================================================================


class FinancialMetrics(BaseModel):
    """Financial figures of an asset as published by the catalog feed."""

    current_value: float
    minimum_investment: float
    expected_return: float = Field(..., description="Expected annual return in %")
    volatility: float
    liquidity_score: float = Field(..., description="Liquidity (0-100)")
    risk_score: float = Field(..., description="Risk (0-100)")

    model_config = {"frozen": True, "allow_inf_nan": False}


class Sustainability(BaseModel):
    esg_score: float = Field(..., description="ESG rating (0-100)")
    carbon_footprint: Optional[float] = None
    social_impact: Optional[float] = None

    model_config = {"frozen": True, "allow_inf_nan": False}


class AssetCharacteristics(BaseModel):
    sector: str
    sustainability: Sustainability

    model_config = {"frozen": True, "allow_inf_nan": False}


class Performance(BaseModel):
    historical_returns: List[float] = Field(default_factory=list)
    sharpe_ratio: float = 0.0
    max_drawdown: float = 0.0

    model_config = {"frozen": True, "allow_inf_nan": False}


class AssetMetadata(BaseModel):
    popularity: float = Field(default=50.0, description="Popularity (0-100)")
    investor_count: int = 0
    total_invested: float = 0.0
    created_at: Optional[datetime] = None

    model_config = {"frozen": True, "allow_inf_nan": False}


class Asset(BaseModel):
    """A tokenized real-world asset offered to investors."""

    id: str = Field(..., description="Unique asset identifier")
    name: str = Field(..., description="Display name")
    type: AssetType = Field(..., description="Asset class")
    description: str = ""
    location: Location
    financial_metrics: FinancialMetrics
    characteristics: AssetCharacteristics
    performance: Performance = Field(default_factory=Performance)
    metadata: Optional[AssetMetadata] = None

    model_config = {"frozen": True, "allow_inf_nan": False}

    @property
    def sector(self) -> str:
        return self.characteristics.sector

    @property
    def esg_score(self) -> float:
        return self.characteristics.sustainability.esg_score

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return self.id == other.id
