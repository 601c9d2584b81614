"""
Error Handler - Partial Failure Isolation for Batch Operations.

One bad record must not prevent the rest of a batch from being
processed. The handler runs a processor over every item, collects the
items that raised one of the isolated exception types, and lets every
other exception propagate.

Design Notes:
    - Only the configured exception types are isolated
    - Optional minimum success rate for callers that need one
    - Operations are local and synchronous, so there are no retries
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    List,
    Optional,
    Tuple,
    Type,
    TypeVar,
)

from rwa_matching.domain.errors import MatchingError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SuccessRateTooLow(MatchingError):
    """Raised when a batch falls below its minimum success rate."""


@dataclass
class PartialResult(Generic[T]):
    """Result of a partial success operation."""

    successful: List[T] = field(default_factory=list)
    failed: List[Tuple[Any, Exception]] = field(default_factory=list)

    @property
    def success_rate(self) -> float:
        """Calculate success rate (0.0 to 1.0)."""
        total = len(self.successful) + len(self.failed)
        if total == 0:
            return 1.0
        return len(self.successful) / total

    @property
    def has_failures(self) -> bool:
        return len(self.failed) > 0

    @property
    def all_failed(self) -> bool:
        return len(self.successful) == 0 and len(self.failed) > 0


class ErrorHandler:
    """Isolates per-item failures of batch operations."""

    def __init__(
        self,
        isolated_exceptions: Tuple[Type[Exception], ...] = (MatchingError,),
    ) -> None:
        """
        Initialize error handler.

        Args:
            isolated_exceptions: Exception types recorded as item failures;
                                 anything else propagates to the caller
        """
        self.isolated_exceptions = isolated_exceptions

    def handle_partial_failure(
        self,
        items: Iterable[Any],
        processor: Callable[[Any], T],
        min_success_rate: float = 0.0,
        operation_name: str = "batch operation",
        on_failure: Optional[Callable[[Any, Exception], None]] = None,
    ) -> PartialResult[T]:
        """
        Process items, allowing partial failures.

        Args:
            items: Items to process
            processor: Function to process each item
            min_success_rate: Minimum success rate to accept (0.0-1.0)
            operation_name: Name for logging
            on_failure: Called with (item, error) for each isolated failure

        Returns:
            PartialResult with successful and failed items

        Raises:
            SuccessRateTooLow: If success rate falls below minimum
        """
        result: PartialResult[T] = PartialResult()

        for item in items:
            try:
                result.successful.append(processor(item))
            except self.isolated_exceptions as e:
                result.failed.append((item, e))
                logger.warning(f"{operation_name} skipped an item: {e}")
                if on_failure is not None:
                    on_failure(item, e)

        if result.success_rate < min_success_rate:
            raise SuccessRateTooLow(
                f"{operation_name} success rate {result.success_rate:.1%} "
                f"below minimum {min_success_rate:.1%}"
            )

        if result.has_failures:
            logger.warning(
                f"{operation_name} completed with {len(result.failed)} failures "
                f"({result.success_rate:.1%} success rate)"
            )

        return result
