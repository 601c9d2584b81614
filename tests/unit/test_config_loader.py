"""
Unit Tests for ConfigLoader.

Test Aspects Covered:
    ✅ Business Logic: Config loading and overlay merging
    ✅ Error Handling: Invalid weights, missing files
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from rwa_matching.config.loader import ConfigLoader, load_config
from rwa_matching.config.models import MatchingConfig, ScoringWeights

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """
        SCENARIO: Valid YAML configuration file
        EXPECTED: MatchingConfig object created with the file's values
        """
        # Arrange
        config_content = """
version: "1.0"
ranking:
  acceptance_floor: 35
  default_limit: 20
preference:
  sustainability_bonus: 15
"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(config_content)

        loader = ConfigLoader(base_path=tmp_path)

        # Act
        config = loader.load("config.yaml")

        # Assert
        assert isinstance(config, MatchingConfig)
        assert config.ranking.acceptance_floor == 35
        assert config.ranking.default_limit == 20
        assert config.preference.sustainability_bonus == 15

    def test_applies_defaults(self, tmp_path: Path) -> None:
        """
        SCENARIO: Empty config file
        EXPECTED: Default weights and floor
        """
        # Arrange
        (tmp_path / "empty.yaml").write_text("")

        # Act
        config = ConfigLoader(base_path=tmp_path).load("empty.yaml")

        # Assert
        assert config.weights == ScoringWeights()
        assert config.ranking.acceptance_floor == 30
        assert config.confidence.cap == 0.95
        assert config.segmentation.method == "risk_tolerance"

    def test_loads_sample_config(self, sample_config_path: Path) -> None:
        """
        SCENARIO: Sample config fixture with custom weights and k-means
        EXPECTED: All sections parsed, risk bands as tuples
        """
        # Act
        config = load_config(sample_config_path)

        # Assert
        assert config.weights.version == "2.0.0-test"
        assert config.weights.risk == 0.40
        assert config.segmentation.method == "kmeans"
        assert config.segmentation.kmeans_clusters == 2
        assert config.risk_bands.moderate == (35.0, 75.0)

    def test_overlay_is_deep_merged(self) -> None:
        """
        SCENARIO: Base config plus strict_floor overlay
        EXPECTED: Overlay wins for its keys, base values kept elsewhere
        """
        # Arrange
        loader = ConfigLoader(base_path=FIXTURES_DIR)

        # Act
        config = loader.load("sample_config.yaml", overlay="strict_floor")

        # Assert
        assert config.ranking.acceptance_floor == 60
        assert config.ranking.default_limit == 5
        assert config.cache.enabled is True
        assert config.weights.version == "2.0.0-test"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """
        SCENARIO: Config path does not exist
        EXPECTED: FileNotFoundError
        """
        loader = ConfigLoader(base_path=tmp_path)

        with pytest.raises(FileNotFoundError):
            loader.load("missing.yaml")

    def test_missing_overlay_raises(self) -> None:
        """
        SCENARIO: Unknown overlay name
        EXPECTED: FileNotFoundError naming the overlay
        """
        loader = ConfigLoader(base_path=FIXTURES_DIR)

        with pytest.raises(FileNotFoundError, match="no_such_overlay"):
            loader.load("sample_config.yaml", overlay="no_such_overlay")

    def test_weights_must_sum_to_one(self, tmp_path: Path) -> None:
        """
        SCENARIO: Weights summing to 1.1
        EXPECTED: ValidationError at load time
        """
        # Arrange
        (tmp_path / "bad.yaml").write_text(
            "weights:\n  risk: 0.4\n  preference: 0.25\n  financial: 0.25\n  geographic: 0.2\n"
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="sum to 1.0"):
            ConfigLoader(base_path=tmp_path).load("bad.yaml")

    def test_invalid_risk_band_rejected(self) -> None:
        """
        SCENARIO: Risk band with low above high
        EXPECTED: ValidationError
        """
        loader = ConfigLoader()

        with pytest.raises(ValidationError):
            loader.load_from_dict({"risk_bands": {"moderate": [80, 40]}})

    def test_unknown_segmentation_method_rejected(self) -> None:
        """
        SCENARIO: segmentation.method not supported
        EXPECTED: ValidationError
        """
        with pytest.raises(ValidationError):
            ConfigLoader().load_from_dict({"segmentation": {"method": "dbscan"}})
