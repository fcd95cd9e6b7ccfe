"""Tests for batch evaluation of indicators."""

import logging

import numpy as np
import pytest

from front_quality.harness import IndicatorRecord, evaluate_many
from front_quality.indicators import InvertedGenerationalDistanceIndicator, SpreadIndicator


class ExplodingIndicator:
    """Indicator that fails with an unexpected error."""

    name = "BOOM"
    description = "Always raises RuntimeError"

    def evaluate(self, solutions) -> float:
        raise RuntimeError("boom")


class TestIndicatorRecord:
    """Tests for IndicatorRecord."""

    def test_ok_when_no_error(self) -> None:
        """A record with a value is ok."""
        assert IndicatorRecord(indicator="SPREAD", label="run", value=0.5).ok

    def test_not_ok_with_error(self) -> None:
        """A record carrying an error is not ok."""
        assert not IndicatorRecord(indicator="SPREAD", label="run", value=None, error="bad").ok

    def test_frozen(self) -> None:
        """Records are immutable."""
        record = IndicatorRecord(indicator="SPREAD", label="run", value=0.5)
        with pytest.raises(AttributeError):
            record.value = 1.0


class TestEvaluateMany:
    """Tests for evaluate_many."""

    def test_one_record_per_front_and_indicator(self, line_front: np.ndarray) -> None:
        """Records cover every (front, indicator) pair in order."""
        indicators = [SpreadIndicator(line_front), InvertedGenerationalDistanceIndicator(line_front)]
        fronts = {"a": line_front, "b": line_front[:2]}

        records = evaluate_many(indicators, fronts)

        assert [(r.label, r.indicator) for r in records] == [
            ("a", "SPREAD"),
            ("a", "IGD"),
            ("b", "SPREAD"),
            ("b", "IGD"),
        ]
        assert all(r.ok for r in records)

    def test_values_match_direct_evaluation(self, line_front: np.ndarray) -> None:
        """Recorded values equal the indicator's own result."""
        indicator = SpreadIndicator(line_front)
        candidate = np.array([[0.0, 1.0], [0.3, 0.6], [1.0, 0.0]])

        records = evaluate_many([indicator], {"run": candidate})

        assert records[0].value == indicator.evaluate(candidate)

    def test_failed_evaluation_recorded_and_batch_continues(self, line_front: np.ndarray) -> None:
        """An indicator error is recorded and later fronts are still evaluated."""
        indicator = SpreadIndicator(line_front)
        fronts = {"empty": [], "wrong-dim": [[0.0, 0.0, 0.0]], "good": line_front}

        records = evaluate_many([indicator], fronts)

        assert [r.ok for r in records] == [False, False, True]
        assert records[0].value is None
        assert "no points" in records[0].error
        assert "objectives" in records[1].error
        assert records[2].value == pytest.approx(0.0, abs=1e-12)

    def test_failure_logged_as_warning(self, line_front: np.ndarray, caplog: pytest.LogCaptureFixture) -> None:
        """Failures are logged with the indicator name and front label."""
        with caplog.at_level(logging.WARNING, logger="front_quality.harness"):
            evaluate_many([SpreadIndicator(line_front)], {"empty-run": []})

        assert "SPREAD failed on empty-run" in caplog.text

    def test_unexpected_errors_propagate(self, line_front: np.ndarray) -> None:
        """Errors that are not indicator errors abort the batch."""
        with pytest.raises(RuntimeError, match="boom"):
            evaluate_many([ExplodingIndicator()], {"run": line_front})

    def test_empty_inputs(self) -> None:
        """No fronts or no indicators produce no records."""
        assert evaluate_many([], {"run": [[0.0, 1.0]]}) == []
        assert evaluate_many([ExplodingIndicator()], {}) == []
