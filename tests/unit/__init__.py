"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with mocked dependencies.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_dimensions.py: Sub-score formulas and rounding
    - test_compatibility_scorer.py: Match score and recommendations
    - test_findings.py: Reasoning, warning and opportunity rules
    - test_ranker.py: Floor, ordering, limits and caching
    - test_segmenter.py: Risk tolerance and k-means segmentation
    - test_config_loader.py: Configuration loading/validation
"""
