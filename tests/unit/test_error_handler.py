"""
Unit Tests for ErrorHandler.

Test Aspects Covered:
    ✅ Business Logic: Partial failure isolation, minimum success rate
    ✅ Error Handling: Non-isolated exceptions propagate
    ✅ Edge Cases: Empty batch, all failures
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from rwa_matching.domain.errors import InvalidAssetError, MatchingError
from rwa_matching.resilience.error_handler import (
    ErrorHandler,
    PartialResult,
    SuccessRateTooLow,
)


def reject_zero(x: int) -> int:
    if x == 0:
        raise InvalidAssetError({"value": "must not be zero"}, record_id=str(x))
    return 10 // x


class TestPartialFailure:
    """Test cases for partial failure handling."""

    def test_all_succeed(self) -> None:
        """
        SCENARIO: All items process successfully
        EXPECTED: Full success, no failures
        """
        # Arrange
        handler = ErrorHandler()
        items = [1, 2, 3, 4, 5]
        processor = lambda x: x * 2

        # Act
        result = handler.handle_partial_failure(items, processor)

        # Assert
        assert result.successful == [2, 4, 6, 8, 10]
        assert result.failed == []
        assert result.success_rate == 1.0

    def test_partial_success(self) -> None:
        """
        SCENARIO: One item raises an isolated error
        EXPECTED: Continues with the other items, failure recorded with its item
        """
        # Arrange
        handler = ErrorHandler()
        items = [1, 2, 0, 4, 5]

        # Act
        result = handler.handle_partial_failure(items, reject_zero, min_success_rate=0.5)

        # Assert
        assert result.successful == [10, 5, 2, 2]
        assert len(result.failed) == 1
        assert result.failed[0][0] == 0
        assert isinstance(result.failed[0][1], InvalidAssetError)
        assert result.success_rate == 0.8

    def test_on_failure_callback(self) -> None:
        """
        SCENARIO: on_failure callback supplied
        EXPECTED: Called once per isolated failure with item and error
        """
        # Arrange
        handler = ErrorHandler()
        callback = Mock()

        # Act
        handler.handle_partial_failure([0, 1, 0], reject_zero, on_failure=callback)

        # Assert
        assert callback.call_count == 2
        item, error = callback.call_args[0]
        assert item == 0
        assert isinstance(error, InvalidAssetError)

    def test_below_min_success_rate(self) -> None:
        """
        SCENARIO: Success rate below minimum
        EXPECTED: SuccessRateTooLow raised
        """
        # Arrange
        handler = ErrorHandler()
        processor = Mock(side_effect=MatchingError("Error"))

        # Act & Assert
        with pytest.raises(SuccessRateTooLow) as exc_info:
            handler.handle_partial_failure([1, 2, 3], processor, min_success_rate=0.5)

        assert "success rate 0.0%" in str(exc_info.value)

    def test_unexpected_exception_propagates(self) -> None:
        """
        SCENARIO: Processor raises an exception type that is not isolated
        EXPECTED: Exception propagates, batch aborted
        """
        # Arrange
        handler = ErrorHandler(isolated_exceptions=(InvalidAssetError,))
        processor = Mock(side_effect=KeyError("boom"))

        # Act & Assert
        with pytest.raises(KeyError):
            handler.handle_partial_failure([1, 2], processor)

        assert processor.call_count == 1


class TestPartialResult:
    """Test cases for PartialResult."""

    def test_success_rate_calculation(self) -> None:
        """
        SCENARIO: Mixed results
        EXPECTED: Correct success rate and failure flags
        """
        result = PartialResult(
            successful=[1, 2, 3],
            failed=[("x", ValueError("bad"))],
        )

        assert result.success_rate == 0.75
        assert result.has_failures is True
        assert result.all_failed is False

    def test_empty_result(self) -> None:
        """
        SCENARIO: Nothing processed
        EXPECTED: Success rate 1.0, no failures
        """
        result = PartialResult()

        assert result.success_rate == 1.0
        assert result.has_failures is False
        assert result.all_failed is False

    def test_all_failed(self) -> None:
        """
        SCENARIO: Only failures
        EXPECTED: all_failed is True
        """
        result = PartialResult(failed=[("a", ValueError()), ("b", ValueError())])

        assert result.all_failed is True
        assert result.success_rate == 0.0
