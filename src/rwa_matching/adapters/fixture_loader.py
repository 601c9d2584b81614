"""
Fixture Loader.

Loads deterministic profile and asset records from YAML files for
development, demos and tests. Records are returned raw; validation
happens when they are fed to the engine.

File layout::

    profiles:
      - id: investor_1
        ...
    assets:
      - id: asset_1
        ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass
class FixtureSet:
    """Raw records read from a fixture file."""

    profiles: List[Dict[str, Any]] = field(default_factory=list)
    assets: List[Dict[str, Any]] = field(default_factory=list)


class FixtureLoader:
    """Reads profile and asset records from YAML fixture files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        self._base_path = base_path or Path(".")

    def load(self, path: Union[str, Path]) -> FixtureSet:
        """
        Load a fixture file.

        Args:
            path: YAML file, absolute or relative to base path

        Returns:
            FixtureSet with raw profile and asset records

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If a top-level section is not a list
        """
        p = Path(path)
        if not p.is_absolute():
            p = self._base_path / p

        with open(p, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        fixtures = FixtureSet(
            profiles=self._section(data, "profiles", p),
            assets=self._section(data, "assets", p),
        )
        logger.debug(
            f"Loaded fixtures from {p}: {len(fixtures.profiles)} profiles, "
            f"{len(fixtures.assets)} assets"
        )
        return fixtures

    @staticmethod
    def _section(data: Dict[str, Any], key: str, path: Path) -> List[Dict[str, Any]]:
        section = data.get(key) or []
        if not isinstance(section, list):
            raise ValueError(f"{path}: '{key}' must be a list")
        return section
