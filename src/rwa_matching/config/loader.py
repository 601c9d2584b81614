"""
Configuration Loader - YAML Loading with Validation.

Loads matching configuration from YAML files and validates it with the
Pydantic models. A named overlay (for example ``cached``) can be
deep-merged over the base file to try alternative tunables.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from rwa_matching.config.models import MatchingConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        overlay: Optional[str] = None,
    ) -> MatchingConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file
            overlay: Optional overlay name under ``config/profiles/``

        Returns:
            Validated MatchingConfig object

        Raises:
            FileNotFoundError: If a config file doesn't exist
            pydantic.ValidationError: If config is invalid
        """
        path = self._resolve_path(config_path)
        config_dict = self._load_yaml(path)

        if overlay:
            overlay_dict = self._load_overlay(overlay)
            config_dict = self._merge_configs(config_dict, overlay_dict)

        config = MatchingConfig.model_validate(config_dict)
        logger.info(
            f"Loaded matching config from {path} "
            f"(weights v{config.weights.version}, overlay={overlay or '-'})"
        )
        return config

    def load_from_dict(self, config_dict: Dict[str, Any]) -> MatchingConfig:
        """
        Load configuration from dictionary.

        Args:
            config_dict: Configuration as dictionary

        Returns:
            Validated MatchingConfig object
        """
        return MatchingConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve config path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file."""
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _load_overlay(self, overlay: str) -> Dict[str, Any]:
        """Load overlay configuration."""
        overlay_path = self._base_path / "config" / "profiles" / f"{overlay}.yaml"
        if not overlay_path.exists():
            raise FileNotFoundError(f"Config overlay not found: {overlay}")
        return self._load_yaml(overlay_path)

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base config."""
        result = dict(base)
        for key, value in overlay.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Union[str, Path],
    overlay: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> MatchingConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        overlay: Optional overlay name
        base_path: Base path for resolving relative paths

    Returns:
        Validated MatchingConfig object
    """
    loader = ConfigLoader(base_path=base_path)
    return loader.load(config_path, overlay)
