"""
Integration Tests - End-to-End Engine Tests.

These tests verify that all components work together correctly.
They run the MatchingEngine on in-memory adapters over the
deterministic records in fixtures/matching_fixtures.yaml.

Test Files:
    - test_matching_engine.py: Catalog load, ranking, segments, feedback
"""
