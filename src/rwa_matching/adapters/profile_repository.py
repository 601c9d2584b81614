"""
In-Memory Profile Repository.

Thread-safe, versioned profile storage for tests, demos and single
process deployments.
"""

from __future__ import annotations

import logging
from datetime import datetime
from threading import Lock
from typing import Dict, List, Optional, Tuple

from rwa_matching.domain.entities import InvestorProfile
from rwa_matching.domain.errors import ProfileNotFoundError

logger = logging.getLogger(__name__)


class InMemoryProfileRepository:
    """
    Versioned in-memory profile store.

    Profiles are frozen models, so a reader holding a reference always
    sees one complete version. Every upsert appends a new version under
    the same id; nothing is ever deleted.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._versions: Dict[str, List[InvestorProfile]] = {}

    def upsert(self, profile: InvestorProfile) -> InvestorProfile:
        """Store a new version of ``profile`` and return it."""
        now = datetime.now()
        with self._lock:
            history = self._versions.setdefault(profile.id, [])
            created_at = history[0].created_at if history else (profile.created_at or now)
            stored = profile.model_copy(
                update={
                    "version": len(history) + 1,
                    "created_at": created_at,
                    "updated_at": now,
                }
            )
            history.append(stored)

        logger.debug(f"Stored profile {stored.id} v{stored.version}")
        return stored

    def get(self, profile_id: str) -> Optional[InvestorProfile]:
        with self._lock:
            history = self._versions.get(profile_id)
            return history[-1] if history else None

    def require(self, profile_id: str) -> InvestorProfile:
        profile = self.get(profile_id)
        if profile is None:
            raise ProfileNotFoundError(profile_id)
        return profile

    def history(self, profile_id: str) -> List[InvestorProfile]:
        with self._lock:
            return list(self._versions.get(profile_id, []))

    def snapshot(self) -> Tuple[InvestorProfile, ...]:
        with self._lock:
            return tuple(
                self._versions[profile_id][-1] for profile_id in sorted(self._versions)
            )

    def count(self) -> int:
        with self._lock:
            return len(self._versions)
