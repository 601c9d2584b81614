"""
Domain Errors.

Every error raised by the matching core derives from ``MatchingError``.
Validation errors carry the violated fields so callers can show
field-level feedback.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional


class MatchingError(Exception):
    """Base class for matching engine errors."""


class _ViolationError(MatchingError):
    """Error carrying a mapping of field path -> violated invariant."""

    subject = "record"

    def __init__(
        self,
        violations: Mapping[str, str],
        record_id: Optional[str] = None,
    ) -> None:
        self.violations: Dict[str, str] = dict(violations)
        self.record_id = record_id
        details = "; ".join(f"{path}: {msg}" for path, msg in self.violations.items())
        prefix = f"Invalid {self.subject}"
        if record_id:
            prefix += f" '{record_id}'"
        super().__init__(f"{prefix}: {details}")

    @property
    def fields(self) -> list:
        return list(self.violations)


class InvalidProfileError(_ViolationError):
    """Profile is malformed or inconsistent; it was not stored."""

    subject = "profile"


class InvalidAssetError(_ViolationError):
    """Catalog record is malformed; it is excluded from scoring."""

    subject = "asset"


class ProfileNotFoundError(MatchingError):
    """No profile exists for the requested id."""

    def __init__(self, profile_id: str) -> None:
        self.profile_id = profile_id
        super().__init__(f"Investor profile not found: {profile_id}")


class InvalidRatingError(MatchingError):
    """Feedback rating outside the accepted range."""

    def __init__(self, rating: object, minimum: int = 1, maximum: int = 5) -> None:
        self.rating = rating
        super().__init__(
            f"Rating must be an integer between {minimum} and {maximum}, got {rating!r}"
        )


class AssetNotFoundError(MatchingError):
    """No published asset exists for the requested id."""

    def __init__(self, asset_id: str) -> None:
        self.asset_id = asset_id
        super().__init__(f"Asset not found in catalog: {asset_id}")
