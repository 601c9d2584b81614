"""
Interfaces Layer - Abstract Protocols for Dependencies.

Following the Dependency Inversion Principle, the engine depends on
these abstractions, not on concrete implementations.

Protocols:
    - ProfileRepository: Investor profile storage
    - AssetCatalog: Asset reference data
    - FeedbackSink: Append-only feedback storage
    - AuditLogger: Audit trail of matching decisions
    - MetricsCollector: Performance metrics
"""

from rwa_matching.interfaces.asset_catalog import AssetCatalog
from rwa_matching.interfaces.audit_logger import AuditLogger
from rwa_matching.interfaces.feedback_sink import FeedbackSink
from rwa_matching.interfaces.metrics_collector import MetricsCollector
from rwa_matching.interfaces.profile_repository import ProfileRepository

__all__ = [
    "AssetCatalog",
    "AuditLogger",
    "FeedbackSink",
    "MetricsCollector",
    "ProfileRepository",
]
