"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration for testing
    - config/profiles/strict_floor.yaml: Overlay for ConfigLoader tests
    - matching_fixtures.yaml: Deterministic investor profiles and assets

Usage:
    Load via the ``matching_fixtures`` and ``sample_config_path`` pytest
    fixtures, or with FixtureLoader / ConfigLoader directly.
"""
