"""
Version Manager - Code, Weights and Configuration Versioning.

Ties every recommendation to the exact tunables that produced it:
    - Code version (package version, plus Git SHA when available)
    - Weights version (declared in ScoringWeights)
    - Config hash (SHA256 of the full MatchingConfig)

Design Notes:
    - The config hash is part of the recommendation cache key, so a
      config change never serves stale results
    - Hashing is deterministic across processes (sorted JSON)
"""

from __future__ import annotations

import hashlib
import json
import subprocess
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from rwa_matching import __version__
from rwa_matching.config.models import MatchingConfig


@dataclass(frozen=True)
class VersionMetadata:
    """Version metadata for reproducibility."""

    code_version: str
    weights_version: str
    config_hash: str
    timestamp: str
    git_sha: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class VersionManager:
    """Computes version metadata for a matching configuration."""

    def __init__(self, include_git_info: bool = False) -> None:
        """
        Initialize version manager.

        Args:
            include_git_info: Try to read the Git SHA of the working tree
        """
        self.include_git_info = include_git_info
        self._cached_git_sha: Optional[str] = None
        self._git_checked = False

    def get_version_metadata(self, config: MatchingConfig) -> VersionMetadata:
        """
        Get complete version metadata.

        Args:
            config: Matching configuration to describe

        Returns:
            VersionMetadata with all version info
        """
        return VersionMetadata(
            code_version=__version__,
            weights_version=config.weights.version,
            config_hash=self.compute_config_hash(config),
            timestamp=datetime.now().isoformat(),
            git_sha=self._get_git_sha() if self.include_git_info else None,
        )

    @staticmethod
    def compute_config_hash(config: Any) -> str:
        """
        Compute SHA256 hash of configuration.

        Args:
            config: Configuration object (Pydantic model or dict)

        Returns:
            SHA256 hash string (first 16 chars)
        """
        if hasattr(config, "model_dump"):
            config_dict = config.model_dump(mode="json")
        elif isinstance(config, dict):
            config_dict = config
        else:
            raise TypeError(f"Cannot hash configuration of type {type(config).__name__}")

        config_json = json.dumps(config_dict, sort_keys=True, default=str)
        return hashlib.sha256(config_json.encode()).hexdigest()[:16]

    def compare_configs(self, config1: Any, config2: Any) -> bool:
        """True if both configurations hash identically."""
        return self.compute_config_hash(config1) == self.compute_config_hash(config2)

    def _get_git_sha(self) -> Optional[str]:
        if self._git_checked:
            return self._cached_git_sha

        try:
            sha = subprocess.check_output(
                ["git", "rev-parse", "HEAD"],
                stderr=subprocess.DEVNULL,
                text=True,
            ).strip()
            self._cached_git_sha = sha[:8]
        except (subprocess.CalledProcessError, FileNotFoundError, OSError):
            # Not in a Git checkout
            self._cached_git_sha = None

        self._git_checked = True
        return self._cached_git_sha
