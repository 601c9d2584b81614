"""
Unit Tests for ProfileValidator.

Test Aspects Covered:
    ✅ Business Logic: Amount ordering, risk ranges and bands
    ✅ Error Handling: Violations carry field paths, parse errors mapped
    ✅ Edge Cases: Boundary values, duplicate asset types, NaN amounts, non-mapping payloads
"""

from __future__ import annotations

import pytest

from rwa_matching.config.models import RiskBandsConfig
from rwa_matching.domain.entities import AssetType, RiskTolerance
from rwa_matching.domain.errors import InvalidProfileError
from rwa_matching.validation.profile_validator import ProfileValidator


@pytest.fixture
def validator() -> ProfileValidator:
    return ProfileValidator()


class TestAmounts:
    """Test investment amount invariants."""

    def test_valid_profile_passes(self, validator, make_profile) -> None:
        """
        SCENARIO: Default builder profile
        EXPECTED: No violations
        """
        assert validator.check(make_profile()) == {}

    def test_minimum_above_preferred(self, validator, make_profile) -> None:
        """
        SCENARIO: minimum 60000 > preferred 50000
        EXPECTED: Violation on preferences.investment_amount.preferred
        """
        # Arrange
        profile = make_profile(minimum=60_000, preferred=50_000)

        # Act & Assert
        with pytest.raises(InvalidProfileError) as exc_info:
            validator.validate(profile)

        assert "preferences.investment_amount.preferred" in exc_info.value.violations
        assert exc_info.value.record_id == "inv-001"

    def test_preferred_above_maximum(self, validator, make_profile) -> None:
        """
        SCENARIO: preferred 250000 > maximum 200000
        EXPECTED: Violation on preferences.investment_amount.maximum
        """
        violations = validator.check(make_profile(preferred=250_000, maximum=200_000))

        assert "preferences.investment_amount.maximum" in violations

    def test_equal_amounts_allowed(self, validator, make_profile) -> None:
        """
        SCENARIO: minimum == preferred == maximum
        EXPECTED: Valid
        """
        profile = make_profile(minimum=50_000, preferred=50_000, maximum=50_000)

        assert validator.check(profile) == {}

    def test_negative_minimum(self, validator, make_profile) -> None:
        """
        SCENARIO: Negative minimum
        EXPECTED: Violation on the minimum
        """
        violations = validator.check(make_profile(minimum=-1))

        assert violations["preferences.investment_amount.minimum"] == "must be >= 0"


class TestRisk:
    """Test risk invariants."""

    def test_risk_score_out_of_range(self, validator, make_profile) -> None:
        """
        SCENARIO: Risk score 120
        EXPECTED: Range violation
        """
        violations = validator.check(
            make_profile(risk_tolerance=RiskTolerance.AGGRESSIVE, risk_score=120)
        )

        assert violations["risk_profile.risk_score"] == "must be between 0 and 100"

    def test_risk_score_outside_tolerance_band(self, validator, make_profile) -> None:
        """
        SCENARIO: Conservative investor with risk score 90
        EXPECTED: Band violation naming the band
        """
        violations = validator.check(
            make_profile(risk_tolerance=RiskTolerance.CONSERVATIVE, risk_score=90)
        )

        assert "conservative band" in violations["risk_profile.risk_score"]

    @pytest.mark.parametrize(
        "tolerance,score",
        [
            (RiskTolerance.CONSERVATIVE, 0),
            (RiskTolerance.CONSERVATIVE, 50),
            (RiskTolerance.MODERATE, 40),
            (RiskTolerance.MODERATE, 70),
            (RiskTolerance.AGGRESSIVE, 70),
            (RiskTolerance.AGGRESSIVE, 100),
        ],
    )
    def test_band_edges_inclusive(self, validator, make_profile, tolerance, score) -> None:
        """
        SCENARIO: Risk score on a band edge
        EXPECTED: Valid
        """
        profile = make_profile(risk_tolerance=tolerance, risk_score=score)

        assert validator.check(profile) == {}

    def test_custom_bands(self, make_profile) -> None:
        """
        SCENARIO: Narrow moderate band [45, 55]
        EXPECTED: Risk 60 rejected for a moderate investor
        """
        validator = ProfileValidator(RiskBandsConfig(moderate=(45, 55)))

        violations = validator.check(make_profile(risk_score=60))

        assert "risk_profile.risk_score" in violations


class TestOtherInvariants:
    """Test remaining invariants."""

    def test_duplicate_asset_types(self, validator, make_profile) -> None:
        """
        SCENARIO: real_estate listed twice
        EXPECTED: Violation on preferences.asset_types
        """
        profile = make_profile(asset_types=[AssetType.REAL_ESTATE, AssetType.REAL_ESTATE])

        assert "preferences.asset_types" in validator.check(profile)

    def test_activity_level_range(self, validator, make_profile) -> None:
        """
        SCENARIO: Activity level 150
        EXPECTED: Violation on behavior_metrics.activity_level
        """
        assert "behavior_metrics.activity_level" in validator.check(
            make_profile(activity_level=150)
        )

    def test_blank_id(self, validator, make_profile) -> None:
        """
        SCENARIO: Whitespace-only id
        EXPECTED: Violation on id
        """
        assert "id" in validator.check(make_profile(profile_id="  "))

    def test_all_violations_reported_together(self, validator, make_profile) -> None:
        """
        SCENARIO: Several independent violations
        EXPECTED: One error listing every field
        """
        profile = make_profile(minimum=-5, activity_level=-1, risk_score=95)

        with pytest.raises(InvalidProfileError) as exc_info:
            validator.validate(profile)

        assert set(exc_info.value.fields) >= {
            "preferences.investment_amount.minimum",
            "behavior_metrics.activity_level",
            "risk_profile.risk_score",
        }


class TestParse:
    """Test parsing of raw payloads."""

    def test_parse_mapping(self, validator, make_profile) -> None:
        """
        SCENARIO: Profile supplied as a JSON-like mapping
        EXPECTED: Equivalent InvestorProfile returned
        """
        payload = make_profile().model_dump(mode="json")

        profile = validator.parse(payload)

        assert profile == make_profile()

    def test_parse_missing_field(self, validator, make_profile) -> None:
        """
        SCENARIO: Mapping without risk_profile
        EXPECTED: InvalidProfileError with the missing path
        """
        payload = make_profile().model_dump(mode="json")
        del payload["risk_profile"]

        with pytest.raises(InvalidProfileError) as exc_info:
            validator.parse(payload)

        assert "risk_profile" in exc_info.value.violations
        assert exc_info.value.record_id == "inv-001"

    def test_parse_unknown_asset_type(self, validator, make_profile) -> None:
        """
        SCENARIO: Asset type outside the closed enum
        EXPECTED: InvalidProfileError on preferences.asset_types.0
        """
        payload = make_profile().model_dump(mode="json")
        payload["preferences"]["asset_types"] = ["tulips"]

        with pytest.raises(InvalidProfileError) as exc_info:
            validator.parse(payload)

        assert "preferences.asset_types.0" in exc_info.value.violations

    @pytest.mark.parametrize("payload", [None, 7, "inv-001"])
    def test_parse_non_mapping_payload(self, validator, payload) -> None:
        """
        SCENARIO: Payload that is not a mapping
        EXPECTED: InvalidProfileError on __root__
        """
        with pytest.raises(InvalidProfileError) as exc_info:
            validator.parse(payload)

        assert exc_info.value.violations == {"__root__": "profile must be a mapping"}
        assert exc_info.value.record_id is None

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_parse_non_finite_maximum(self, validator, make_profile, value) -> None:
        """
        SCENARIO: investment_amount.maximum is NaN or infinite
        EXPECTED: InvalidProfileError naming the field
        """
        payload = make_profile().model_dump(mode="json")
        payload["preferences"]["investment_amount"]["maximum"] = value

        with pytest.raises(InvalidProfileError) as exc_info:
            validator.parse(payload)

        assert "preferences.investment_amount.maximum" in exc_info.value.violations
