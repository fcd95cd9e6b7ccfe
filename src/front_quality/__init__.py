"""front-quality: quality indicators for multi-objective optimization fronts.

A pure numpy implementation of the Spread (Delta) diversity indicator, together
with the front primitives it is built on and a small family of companion
indicators that share the same evaluation contract.

Example (Spread against a reference front):
    >>> from front_quality import SpreadIndicator
    >>> reference = [[0.0, 1.0], [0.5, 0.5], [1.0, 0.0]]
    >>> indicator = SpreadIndicator(reference)
    >>> indicator.evaluate([[1.0, 0.0], [0.0, 1.0], [0.5, 0.5]])
    0.0

Example (several indicators over several fronts):
    >>> from front_quality import IndicatorRegistry, evaluate_many
    >>> indicators = [
    ...     IndicatorRegistry.get("spread", reference_front=reference),
    ...     IndicatorRegistry.get("igd", reference_front=reference),
    ... ]
    >>> records = evaluate_many(indicators, {"run-1": reference})
    >>> [r.value for r in records]
    [0.0, 0.0]
"""

from front_quality.exceptions import (
    DegenerateFrontError,
    DimensionMismatchError,
    InvalidInputError,
    QualityIndicatorError,
)
from front_quality.front import Front, as_front, load_front
from front_quality.harness import IndicatorRecord, evaluate_many
from front_quality.indicators import (
    GenerationalDistanceIndicator,
    HypervolumeIndicator,
    InvertedGenerationalDistanceIndicator,
    SpreadIndicator,
    spread,
)
from front_quality.normalization import normalize_front, reference_bounds
from front_quality.primitives import (
    consecutive_distances,
    euclidean_distance,
    lexicographic_order,
    nearest_distances,
)
from front_quality.protocols import QualityIndicator
from front_quality.registry import IndicatorRegistry, list_indicators

__all__ = [
    # Indicators
    "SpreadIndicator",
    "spread",
    "HypervolumeIndicator",
    "GenerationalDistanceIndicator",
    "InvertedGenerationalDistanceIndicator",
    # Protocol and registry
    "QualityIndicator",
    "IndicatorRegistry",
    "list_indicators",
    # Batch evaluation
    "evaluate_many",
    "IndicatorRecord",
    # Fronts
    "Front",
    "as_front",
    "load_front",
    "normalize_front",
    "reference_bounds",
    # Primitives
    "lexicographic_order",
    "euclidean_distance",
    "consecutive_distances",
    "nearest_distances",
    # Errors
    "QualityIndicatorError",
    "InvalidInputError",
    "DimensionMismatchError",
    "DegenerateFrontError",
]
