"""
Console Audit Logger.

A simple audit logger that prints the matching trail to the console.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional


class ConsoleAuditLogger:
    """Simple console-based audit logger."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log all events. If False, only summaries.
        """
        self._verbose = verbose
        self._correlation_id: Optional[str] = None

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        self._correlation_id = correlation_id

    def log_profile_upserted(self, profile_id: str, version: int) -> None:
        if self._verbose:
            self._log("INFO", f"Stored profile {profile_id} v{version}")

    def log_asset_rejected(self, asset_id: Optional[str], reason: str) -> None:
        if self._verbose:
            self._log("WARN", f"Asset {asset_id or '<unknown>'} rejected: {reason}")

    def log_recommendations(
        self,
        profile_id: str,
        scored_count: int,
        returned_count: int,
        duration_seconds: float,
    ) -> None:
        self._log(
            "INFO",
            f"Recommended {returned_count}/{scored_count} assets for {profile_id} "
            f"({duration_seconds:.3f}s)",
        )

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._log(severity, f"ANOMALY: {message}")

    def _log(self, level: str, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        print(f"[{timestamp}] [{corr_id}] [{level:5}] {message}")
