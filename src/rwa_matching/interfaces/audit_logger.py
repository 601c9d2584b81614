"""
Audit Logger Protocol.

Tracks matching decisions for compliance and debugging: which assets
were rejected, how many recommendations were served, and anomalies.

Design Notes:
    - Correlation ID propagation for tracing
    - No side effects on scoring logic
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class AuditLogger(Protocol):
    """Abstract interface for audit logging."""

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        ...

    def log_profile_upserted(self, profile_id: str, version: int) -> None:
        """Log that a profile version was stored."""
        ...

    def log_asset_rejected(self, asset_id: Optional[str], reason: str) -> None:
        """Log that a catalog record was excluded from scoring."""
        ...

    def log_recommendations(
        self,
        profile_id: str,
        scored_count: int,
        returned_count: int,
        duration_seconds: float,
    ) -> None:
        """Log the outcome of a ranking request."""
        ...

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an anomaly or warning.

        Args:
            message: Description of the anomaly
            severity: INFO, WARNING, or CRITICAL
            context: Optional additional context
        """
        ...
