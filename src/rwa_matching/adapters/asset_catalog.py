"""
In-Memory Asset Catalog.

Holds the asset set published by the catalog feed. Loading validates
every record, drops malformed ones and publishes the accepted set in a
single step, so readers see either the old or the new catalog.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, Iterable, Optional, Tuple

from rwa_matching.domain.entities import Asset
from rwa_matching.domain.errors import InvalidAssetError
from rwa_matching.resilience.error_handler import ErrorHandler, PartialResult
from rwa_matching.validation.asset_validator import AssetRecord, AssetValidator

logger = logging.getLogger(__name__)


class InMemoryAssetCatalog:
    """Read-mostly asset catalog with atomic snapshot publication."""

    def __init__(
        self,
        assets: Optional[Iterable[AssetRecord]] = None,
        validator: Optional[AssetValidator] = None,
    ) -> None:
        """
        Initialize catalog.

        Args:
            assets: Optional initial records (validated like any load)
            validator: Asset validator (default AssetValidator)
        """
        self._lock = Lock()
        self._assets: Dict[str, Asset] = {}
        self._version = 0
        self._validator = validator or AssetValidator()
        self._error_handler = ErrorHandler(isolated_exceptions=(InvalidAssetError,))

        if assets is not None:
            self.load(assets)

    @property
    def version(self) -> int:
        with self._lock:
            return self._version

    def load(
        self,
        records: Iterable[AssetRecord],
        replace: bool = True,
    ) -> PartialResult[Asset]:
        """
        Validate and publish catalog records.

        Args:
            records: Asset models or raw feed mappings
            replace: Replace the whole catalog (True) or merge by id (False)

        Returns:
            PartialResult with accepted assets and rejected records
        """
        result = self._error_handler.handle_partial_failure(
            records,
            self._validator.parse,
            operation_name="asset catalog load",
        )

        accepted = {asset.id: asset for asset in result.successful}
        with self._lock:
            if replace:
                self._assets = accepted
            else:
                merged = dict(self._assets)
                merged.update(accepted)
                self._assets = merged
            self._version += 1
            version = self._version

        logger.info(
            f"Published asset catalog v{version}: {len(accepted)} accepted, "
            f"{len(result.failed)} rejected"
        )
        return result

    def get(self, asset_id: str) -> Optional[Asset]:
        with self._lock:
            return self._assets.get(asset_id)

    def snapshot(self) -> Tuple[Asset, ...]:
        return self.versioned_snapshot()[1]

    def versioned_snapshot(self) -> Tuple[int, Tuple[Asset, ...]]:
        with self._lock:
            assets = self._assets
            version = self._version
        return version, tuple(assets[asset_id] for asset_id in sorted(assets))

    def count(self) -> int:
        with self._lock:
            return len(self._assets)
