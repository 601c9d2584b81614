"""
Resilience Package - Partial Failure Handling.

Provides:
    - ErrorHandler: Per-item failure isolation for batch operations
    - PartialResult: Successful items plus (item, error) failures
"""

from rwa_matching.resilience.error_handler import (
    ErrorHandler,
    PartialResult,
    SuccessRateTooLow,
)

__all__ = [
    "ErrorHandler",
    "PartialResult",
    "SuccessRateTooLow",
]
