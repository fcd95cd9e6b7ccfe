"""Hypervolume indicator.

The hypervolume (or S-metric) measures the volume of objective space
dominated by the front and bounded by a reference point. Unlike the other
indicators in this package, higher values are better.
"""

import logging

import numpy as np
from pymoo.indicators.hv import HV

from front_quality.exceptions import InvalidInputError
from front_quality.front import as_front, check_candidate

logger = logging.getLogger(__name__)

# Slightly worse than the nadir point (1, 1) of the ZDT problems
DEFAULT_REF_POINT = (1.1, 1.1)


class HypervolumeIndicator:
    """Hypervolume of a front with respect to a fixed reference point.

    Points that do not dominate the reference point contribute nothing.

    Attributes:
        name: "HV".
        description: "Hypervolume quality indicator".
        reference_point: Reference point, shape (n_obj,).

    Example:
        >>> HypervolumeIndicator(reference_point=[1.0, 1.0]).evaluate([[0.5, 0.5]])
        0.25
    """

    name = "HV"
    description = "Hypervolume quality indicator"

    def __init__(self, reference_point=DEFAULT_REF_POINT) -> None:
        """Configure the indicator.

        Args:
            reference_point: Reference point, shape (n_obj,). Defaults to
                (1.1, 1.1), suitable for normalized bi-objective problems.

        Raises:
            InvalidInputError: If reference_point is None, not 1D, or not finite.
        """
        if reference_point is None:
            raise InvalidInputError("reference point is None")

        ref = np.asarray(reference_point, dtype=np.float64)
        if ref.ndim != 1 or ref.size == 0:
            raise InvalidInputError(f"reference point must be a non-empty 1D array, got shape {ref.shape}")
        if not np.all(np.isfinite(ref)):
            raise InvalidInputError("reference point must contain only finite values")

        self.reference_point = ref
        self._hv = HV(ref_point=ref)
        logger.debug(f"HypervolumeIndicator with reference point {ref.tolist()}")

    def evaluate(self, solutions) -> float:
        """Compute the hypervolume of a candidate front.

        Args:
            solutions: Candidate front; anything accepted by ``as_front``.

        Returns:
            Hypervolume value (higher is better).

        Raises:
            InvalidInputError: If solutions is None or not convertible to a front.
            DegenerateFrontError: If the candidate front is empty.
            DimensionMismatchError: If the candidate's number of objectives
                differs from the reference point's length.
        """
        front = as_front(solutions)
        check_candidate(front, self.reference_point.shape[0])
        return float(self._hv(np.array(front.points)))

    def __repr__(self) -> str:
        return f"HypervolumeIndicator(reference_point={self.reference_point.tolist()})"
