"""
Profile Validator - Validate Investor Profiles Before Storage.

Validates profiles at write time:
    - Payload shape and types (via Pydantic)
    - Investment amount ordering (minimum <= preferred <= maximum)
    - Score ranges (0-100)
    - Risk score consistent with the declared risk tolerance band

Design Notes:
    - Collects every violation before failing
    - Violations keyed by dotted field path for field-level UI feedback
    - A rejected profile is never partially stored
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from rwa_matching.config.models import RiskBandsConfig
from rwa_matching.domain.entities import InvestorProfile
from rwa_matching.domain.errors import InvalidProfileError

logger = logging.getLogger(__name__)

SCORE_MIN = 0.0
SCORE_MAX = 100.0


def violations_from_pydantic(exc: ValidationError) -> Dict[str, str]:
    """Flatten a pydantic ValidationError into field path -> message."""
    violations: Dict[str, str] = {}
    for error in exc.errors():
        path = ".".join(str(part) for part in error.get("loc", ())) or "__root__"
        violations.setdefault(path, error.get("msg", "invalid value"))
    return violations


class ProfileValidator:
    """
    Validates investor profiles against the profile invariants.

    Validates:
        - Investment amounts are non-negative and ordered
        - Risk score and risk factors within 0-100
        - Risk score inside the band of the declared tolerance
        - No duplicate asset types, non-empty id
        - Satisfaction ratings in investment history within 1-5
    """

    def __init__(self, risk_bands: Optional[RiskBandsConfig] = None) -> None:
        """
        Initialize profile validator.

        Args:
            risk_bands: Risk score band per tolerance (defaults apply if None)
        """
        self.risk_bands = risk_bands or RiskBandsConfig()

    def parse(
        self,
        payload: Union[InvestorProfile, Mapping[str, Any]],
    ) -> InvestorProfile:
        """
        Build and validate a profile from a model or raw mapping.

        Args:
            payload: InvestorProfile or mapping (e.g. decoded JSON)

        Returns:
            The validated InvestorProfile

        Raises:
            InvalidProfileError: If the payload is malformed or inconsistent
        """
        if isinstance(payload, InvestorProfile):
            profile = payload
        elif not isinstance(payload, Mapping):
            logger.warning(f"Rejected profile payload of type {type(payload).__name__}")
            raise InvalidProfileError({"__root__": "profile must be a mapping"}, record_id=None)
        else:
            try:
                profile = InvestorProfile.model_validate(dict(payload))
            except ValidationError as e:
                record_id = payload.get("id")
                violations = violations_from_pydantic(e)
                logger.warning(f"Rejected malformed profile {record_id}: {violations}")
                raise InvalidProfileError(violations, record_id=record_id) from e

        self.validate(profile)
        return profile

    def validate(self, profile: InvestorProfile) -> None:
        """
        Validate an investor profile.

        Raises:
            InvalidProfileError: Listing every violated field
        """
        violations = self.check(profile)
        if violations:
            logger.warning(f"Profile {profile.id} failed validation: {violations}")
            raise InvalidProfileError(violations, record_id=profile.id)

        logger.debug(f"Profile validated: {profile.id}")

    def check(self, profile: InvestorProfile) -> Dict[str, str]:
        """Return all violations of a profile (empty dict when valid)."""
        violations: Dict[str, str] = {}

        if not profile.id or not profile.id.strip():
            violations["id"] = "must not be empty"

        self._check_amounts(profile, violations)
        self._check_risk(profile, violations)
        self._check_preferences(profile, violations)
        self._check_behavior(profile, violations)
        self._check_history(profile, violations)

        return violations

    def _check_amounts(self, profile: InvestorProfile, violations: Dict[str, str]) -> None:
        amount = profile.preferences.investment_amount
        prefix = "preferences.investment_amount"

        for name in ("minimum", "preferred", "maximum"):
            if getattr(amount, name) < 0:
                violations[f"{prefix}.{name}"] = "must be >= 0"

        if amount.minimum > amount.preferred:
            violations[f"{prefix}.preferred"] = (
                f"preferred ({amount.preferred}) must be >= minimum ({amount.minimum})"
            )
        if amount.preferred > amount.maximum:
            violations[f"{prefix}.maximum"] = (
                f"maximum ({amount.maximum}) must be >= preferred ({amount.preferred})"
            )

    def _check_risk(self, profile: InvestorProfile, violations: Dict[str, str]) -> None:
        risk = profile.risk_profile

        if not self._in_score_range(risk.risk_score):
            violations["risk_profile.risk_score"] = "must be between 0 and 100"
        else:
            low, high = self.risk_bands.as_dict()[risk.risk_tolerance.value]
            if not (low <= risk.risk_score <= high):
                violations["risk_profile.risk_score"] = (
                    f"{risk.risk_score} outside the {risk.risk_tolerance.value} "
                    f"band [{low}, {high}]"
                )

        for name, value in risk.risk_factors.model_dump().items():
            if not self._in_score_range(value):
                violations[f"risk_profile.risk_factors.{name}"] = "must be between 0 and 100"

        if risk.volatility_tolerance is not None and not self._in_score_range(
            risk.volatility_tolerance
        ):
            violations["risk_profile.volatility_tolerance"] = "must be between 0 and 100"

        if risk.max_drawdown is not None and risk.max_drawdown < 0:
            violations["risk_profile.max_drawdown"] = "must be >= 0"

    def _check_preferences(
        self, profile: InvestorProfile, violations: Dict[str, str]
    ) -> None:
        asset_types = profile.preferences.asset_types
        if len(set(asset_types)) != len(asset_types):
            violations["preferences.asset_types"] = "must not contain duplicates"

    def _check_behavior(self, profile: InvestorProfile, violations: Dict[str, str]) -> None:
        if not self._in_score_range(profile.behavior_metrics.activity_level):
            violations["behavior_metrics.activity_level"] = "must be between 0 and 100"
        if profile.demographics.age is not None and profile.demographics.age < 0:
            violations["demographics.age"] = "must be >= 0"

    def _check_history(self, profile: InvestorProfile, violations: Dict[str, str]) -> None:
        for idx, entry in enumerate(profile.investment_history):
            if entry.investment_amount < 0:
                violations[f"investment_history.{idx}.investment_amount"] = "must be >= 0"
            if entry.satisfaction is not None and not (1 <= entry.satisfaction <= 5):
                violations[f"investment_history.{idx}.satisfaction"] = (
                    "must be between 1 and 5"
                )

    @staticmethod
    def _in_score_range(value: float) -> bool:
        return SCORE_MIN <= value <= SCORE_MAX
