"""
Performance Tests.

Benchmarks for RWA Matching performance requirements:
    - 2000 assets ranked < 5 seconds
    - 1000 profiles segmented < 5 seconds
    - Parallel scoring returns the sequential result
"""
