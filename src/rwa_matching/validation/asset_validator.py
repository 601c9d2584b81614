"""
Asset Validator - Validate Catalog Records.

Validates records supplied by the asset catalog feed:
    - Required fields present with the right types (via Pydantic)
    - No negative monetary values or counts
    - Scores (liquidity, risk, ESG, popularity) within 0-100

Design Notes:
    - A bad record raises InvalidAssetError; callers skip it and go on
    - Expected and historical returns may legitimately be negative
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from rwa_matching.domain.entities import Asset
from rwa_matching.domain.errors import InvalidAssetError
from rwa_matching.validation.profile_validator import violations_from_pydantic

logger = logging.getLogger(__name__)

AssetRecord = Union[Asset, Mapping[str, Any]]


def asset_record_id(record: Any) -> Optional[str]:
    """Best-effort id of a catalog record, for audit messages."""
    if isinstance(record, Asset):
        return record.id
    if isinstance(record, Mapping):
        return record.get("id")
    return None


class AssetValidator:
    """Validates asset records before they are scored."""

    NON_NEGATIVE_METRICS = ("current_value", "minimum_investment", "volatility")
    SCORE_METRICS = ("liquidity_score", "risk_score")

    def parse(self, record: AssetRecord) -> Asset:
        """
        Build and validate an asset from a model or raw feed record.

        Raises:
            InvalidAssetError: If the record is malformed
        """
        if isinstance(record, Asset):
            asset = record
        elif not isinstance(record, Mapping):
            raise InvalidAssetError({"__root__": "record must be a mapping"}, record_id=None)
        else:
            try:
                asset = Asset.model_validate(dict(record))
            except ValidationError as e:
                record_id = record.get("id")
                raise InvalidAssetError(
                    violations_from_pydantic(e), record_id=record_id
                ) from e

        self.validate(asset)
        return asset

    def validate(self, asset: Asset) -> None:
        """
        Validate an asset.

        Raises:
            InvalidAssetError: Listing every violated field
        """
        violations = self.check(asset)
        if violations:
            raise InvalidAssetError(violations, record_id=asset.id)

    def check(self, asset: Asset) -> Dict[str, str]:
        """Return all violations of an asset (empty dict when valid)."""
        violations: Dict[str, str] = {}

        if not asset.id or not asset.id.strip():
            violations["id"] = "must not be empty"

        metrics = asset.financial_metrics
        for name in self.NON_NEGATIVE_METRICS:
            if getattr(metrics, name) < 0:
                violations[f"financial_metrics.{name}"] = "must be >= 0"
        for name in self.SCORE_METRICS:
            if not (0 <= getattr(metrics, name) <= 100):
                violations[f"financial_metrics.{name}"] = "must be between 0 and 100"

        if not (0 <= asset.esg_score <= 100):
            violations["characteristics.sustainability.esg_score"] = (
                "must be between 0 and 100"
            )

        if asset.performance.max_drawdown < 0:
            violations["performance.max_drawdown"] = "must be >= 0"

        if asset.metadata is not None:
            if not (0 <= asset.metadata.popularity <= 100):
                violations["metadata.popularity"] = "must be between 0 and 100"
            if asset.metadata.investor_count < 0:
                violations["metadata.investor_count"] = "must be >= 0"
            if asset.metadata.total_invested < 0:
                violations["metadata.total_invested"] = "must be >= 0"

        return violations
