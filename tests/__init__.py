"""
Test Suite for RWA Matching.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end engine tests over YAML fixtures
    - performance/: Ranking and segmentation benchmarks
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest -m "not slow"                    # Skip long benchmarks
    pytest --cov=src/rwa_matching           # With coverage
"""
