"""
Validation Package - Profile and Asset Validation.

This package provides validation for:
    - ProfileValidator: Validate investor profiles at write time
    - AssetValidator: Validate catalog records before scoring

Design Principles:
    - Fail fast on invalid input
    - Every violated field reported, not just the first
    - Configurable risk bands
"""

from rwa_matching.validation.asset_validator import AssetValidator, asset_record_id
from rwa_matching.validation.profile_validator import (
    ProfileValidator,
    violations_from_pydantic,
)

__all__ = [
    "AssetValidator",
    "ProfileValidator",
    "asset_record_id",
    "violations_from_pydantic",
]
