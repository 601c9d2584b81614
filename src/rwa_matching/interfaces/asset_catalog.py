"""
Asset Catalog Protocol.

Defines the abstract interface for read-mostly asset reference data.
The engine never mutates assets; an external feed replaces them.

Design Notes:
    - ``version`` changes whenever the published asset set changes,
      so derived results can be cached per catalog version
    - ``snapshot`` returns an immutable view safe to score concurrently
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Protocol, Tuple, Union, runtime_checkable

from rwa_matching.domain.entities import Asset
from rwa_matching.resilience.error_handler import PartialResult


@runtime_checkable
class AssetCatalog(Protocol):
    """Abstract interface for asset reference data."""

    @property
    def version(self) -> int:
        """Monotonic version of the published asset set."""
        ...

    def load(
        self,
        records: Iterable[Union[Asset, Mapping[str, Any]]],
        replace: bool = True,
    ) -> PartialResult[Asset]:
        """Validate records and publish the accepted ones as a new version."""
        ...

    def get(self, asset_id: str) -> Optional[Asset]:
        """Get an asset by id, or None."""
        ...

    def snapshot(self) -> Tuple[Asset, ...]:
        """Immutable snapshot of all published assets."""
        ...

    def versioned_snapshot(self) -> Tuple[int, Tuple[Asset, ...]]:
        """Catalog version and snapshot read together."""
        ...

    def count(self) -> int:
        """Number of published assets."""
        ...
