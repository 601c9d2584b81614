"""
Profile Repository Protocol.

Defines the abstract interface for investor profile storage. In-memory
and database-backed implementations must satisfy the same contract.

The repository is responsible for:
    - Assigning profile versions and timestamps on upsert
    - Returning whole profile versions (never partially updated ones)
    - Keeping superseded versions (profiles are never hard-deleted)
    - Providing consistent snapshots of all current profiles

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Last write wins per profile id
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Tuple, runtime_checkable

from rwa_matching.domain.entities import InvestorProfile


@runtime_checkable
class ProfileRepository(Protocol):
    """Abstract interface for investor profile storage."""

    def upsert(self, profile: InvestorProfile) -> InvestorProfile:
        """
        Store a new version of a profile.

        Args:
            profile: Validated profile (version/timestamps are ignored)

        Returns:
            The stored profile with its assigned version
        """
        ...

    def get(self, profile_id: str) -> Optional[InvestorProfile]:
        """Get the current version of a profile, or None."""
        ...

    def require(self, profile_id: str) -> InvestorProfile:
        """
        Get the current version of a profile.

        Raises:
            ProfileNotFoundError: If the profile does not exist
        """
        ...

    def history(self, profile_id: str) -> List[InvestorProfile]:
        """All stored versions of a profile, oldest first."""
        ...

    def snapshot(self) -> Tuple[InvestorProfile, ...]:
        """Consistent snapshot of the current version of every profile."""
        ...

    def count(self) -> int:
        """Number of distinct profiles."""
        ...
