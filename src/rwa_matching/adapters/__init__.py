"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the protocols defined in the interfaces
package, following the Hexagonal Architecture (Ports & Adapters) pattern.

Storage:
    - InMemoryProfileRepository: Versioned profile storage
    - InMemoryAssetCatalog: Validated, atomically published asset set
    - InMemoryFeedbackSink: Append-only feedback storage

Loggers:
    - ConsoleAuditLogger: Simple console output

Fixtures:
    - FixtureLoader: Deterministic YAML profile/asset fixtures

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from rwa_matching.adapters.asset_catalog import InMemoryAssetCatalog
from rwa_matching.adapters.console_logger import ConsoleAuditLogger
from rwa_matching.adapters.feedback_sink import InMemoryFeedbackSink
from rwa_matching.adapters.fixture_loader import FixtureLoader, FixtureSet
from rwa_matching.adapters.profile_repository import InMemoryProfileRepository

__all__ = [
    "InMemoryAssetCatalog",
    "ConsoleAuditLogger",
    "InMemoryFeedbackSink",
    "FixtureLoader",
    "FixtureSet",
    "InMemoryProfileRepository",
]
