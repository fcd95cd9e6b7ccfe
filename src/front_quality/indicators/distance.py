"""Distance-based convergence and coverage indicators.

- GenerationalDistanceIndicator: how far the candidate points lie from the
  reference front (convergence).
- InvertedGenerationalDistanceIndicator: how far the reference points lie from
  the candidate front (coverage and convergence).

Both use the same aggregation over nearest-point Euclidean distances d_i:

    (sum_i d_i^p)^(1/p) / n

where n is the number of points measured from, as in jMetal's
GenerationalDistance (pymoo's GD and IGD take the plain mean instead).
Lower is better; 0 means every measured point lies on the other front.
"""

import logging

import numpy as np

from front_quality.exceptions import InvalidInputError
from front_quality.front import as_front, check_candidate
from front_quality.primitives import nearest_distances

logger = logging.getLogger(__name__)


def _aggregate(distances: np.ndarray, p: float) -> float:
    return float(np.sum(distances**p) ** (1.0 / p) / distances.shape[0])


class _ReferenceFrontIndicator:
    """Shared construction for indicators measured against a reference front."""

    def __init__(self, reference_front, p: float = 2.0) -> None:
        """Bind the indicator to a reference front.

        Args:
            reference_front: Anything accepted by ``as_front``.
            p: Exponent of the power mean. Must be positive.

        Raises:
            InvalidInputError: If reference_front is None or p is not positive.
            DegenerateFrontError: If the reference front has no points.
        """
        if p <= 0:
            raise InvalidInputError(f"p must be positive, got {p}")

        reference = as_front(reference_front)
        check_candidate(reference, reference.n_obj, role="reference front")

        self.reference_front = reference
        self.p = p
        logger.debug(f"{type(self).__name__} bound to reference front with {len(reference)} points")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_reference={len(self.reference_front)}, p={self.p})"


class GenerationalDistanceIndicator(_ReferenceFrontIndicator):
    """Generational Distance (GD) of a candidate front.

    Example:
        >>> gd = GenerationalDistanceIndicator([[0.0, 1.0], [1.0, 0.0]])
        >>> gd.evaluate([[0.0, 1.0], [1.0, 0.0]])
        0.0
    """

    name = "GD"
    description = "Generational distance quality indicator"

    def evaluate(self, solutions) -> float:
        """Compute GD from each candidate point to the reference front.

        Raises:
            InvalidInputError: If solutions is None or not convertible to a front.
            DegenerateFrontError: If the candidate front is empty.
            DimensionMismatchError: If the candidate's number of objectives differs.
        """
        front = as_front(solutions)
        check_candidate(front, self.reference_front.n_obj)
        return _aggregate(nearest_distances(front.points, self.reference_front.points), self.p)


class InvertedGenerationalDistanceIndicator(_ReferenceFrontIndicator):
    """Inverted Generational Distance (IGD) of a candidate front."""

    name = "IGD"
    description = "Inverted generational distance quality indicator"

    def evaluate(self, solutions) -> float:
        """Compute IGD from each reference point to the candidate front.

        Raises:
            InvalidInputError: If solutions is None or not convertible to a front.
            DegenerateFrontError: If the candidate front is empty.
            DimensionMismatchError: If the candidate's number of objectives differs.
        """
        front = as_front(solutions)
        check_candidate(front, self.reference_front.n_obj)
        return _aggregate(nearest_distances(self.reference_front.points, front.points), self.p)
