"""Batch evaluation of quality indicators.

A benchmarking pipeline typically evaluates several indicators on the final
fronts of many algorithm runs. One malformed front should not abort the
whole batch, so failures raised by an indicator are logged and recorded
alongside the successful values.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from front_quality.exceptions import QualityIndicatorError
from front_quality.protocols import QualityIndicator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndicatorRecord:
    """Outcome of evaluating one indicator on one labelled front.

    Attributes:
        indicator: Name of the indicator, e.g. "SPREAD".
        label: Label of the evaluated front, e.g. "nsga2/ZDT1/seed=3".
        value: Indicator value, or None if the evaluation failed.
        error: Error message if the evaluation failed, otherwise None.
    """

    indicator: str
    label: str
    value: float | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the evaluation produced a value."""
        return self.error is None


def evaluate_many(
    indicators: Sequence[QualityIndicator],
    fronts: Mapping[str, object],
) -> list[IndicatorRecord]:
    """Evaluate every indicator on every labelled front.

    Records are returned front by front, in the iteration order of ``fronts``,
    and within a front in the order of ``indicators``.

    Args:
        indicators: Configured indicators to evaluate.
        fronts: Mapping from label to candidate front (anything accepted by
            ``as_front``).

    Returns:
        One IndicatorRecord per (front, indicator) pair.

    Raises:
        Exception: Anything that is not a QualityIndicatorError propagates
            unchanged.

    Example:
        >>> from front_quality import SpreadIndicator
        >>> records = evaluate_many([SpreadIndicator([[0, 1], [1, 0]])], {"run": [[0.5, 0.5]]})
        >>> records[0].value
        1.0
    """
    records: list[IndicatorRecord] = []

    for label, solutions in fronts.items():
        for indicator in indicators:
            try:
                value = indicator.evaluate(solutions)
            except QualityIndicatorError as e:
                logger.warning(f"{indicator.name} failed on {label}: {e}")
                records.append(IndicatorRecord(indicator=indicator.name, label=label, value=None, error=str(e)))
                continue

            logger.debug(f"{indicator.name} on {label}: {value:.6f}")
            records.append(IndicatorRecord(indicator=indicator.name, label=label, value=value))

    n_failed = sum(not r.ok for r in records)
    if n_failed:
        logger.info(f"Evaluated {len(records)} indicator values, {n_failed} failed")

    return records
