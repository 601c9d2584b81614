"""
Observability Package - Structured Logging, Metrics, Versioning.

This package provides:
    - ObservabilityManager: Structured logging with correlation IDs
    - VersionManager: Code, weights and config versioning

Design Principles:
    - Structured JSON logging via structlog
    - Correlation ID propagation for end-to-end tracing
"""

from rwa_matching.observability.observability_manager import (
    ObservabilityManager,
    get_correlation_id,
    set_correlation_id,
)
from rwa_matching.observability.version_manager import (
    VersionManager,
    VersionMetadata,
)

__all__ = [
    "ObservabilityManager",
    "VersionManager",
    "VersionMetadata",
    "get_correlation_id",
    "set_correlation_id",
]
