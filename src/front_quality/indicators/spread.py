"""Spread (Delta) diversity indicator.

The Spread indicator of Deb et al. measures how evenly the points of a
bi-objective front are spaced and how far they extend towards the extremes
of the reference Pareto front:

    Delta = (df + dl + sum_i |d_i - mean(d)|) / (df + dl + (n - 1) * mean(d))

where d_i are the distances between lexicographically consecutive candidate
points, and df / dl are the distances between the first / last candidate point
and the first / last reference point. Lower is better; 0 means perfectly even
spacing that reaches both extremes.

The indicator is only meaningful for two objectives. Fronts with more
objectives are accepted but the result is not corrected for dimensionality.

References:
    Deb, K., Pratap, A., Agarwal, S., & Meyarivan, T. (2002). A fast and elitist
    multiobjective genetic algorithm: NSGA-II. IEEE Transactions on Evolutionary
    Computation, 6(2), 182-197.
"""

import logging
from os import PathLike

import numpy as np

from front_quality.exceptions import DegenerateFrontError
from front_quality.front import Front, as_front, check_candidate, load_front
from front_quality.normalization import normalize_front, reference_bounds
from front_quality.primitives import consecutive_distances, euclidean_distance

logger = logging.getLogger(__name__)

# Value reported for a front with a single point, which has no spacing at all
SINGLE_POINT_SPREAD = 1.0


def spread(front: Front, reference_front: Front) -> float:
    """Compute the Spread of a front against a reference front.

    Neither front is modified; both are sorted into new fronts before the
    distances are taken. No normalization is applied.

    Args:
        front: Candidate front.
        reference_front: Reference Pareto front.

    Returns:
        The Spread value, or exactly 1.0 if the candidate has a single point.

    Raises:
        DegenerateFrontError: If either front is empty, or if every candidate
            point coincides with both reference extremes.
        DimensionMismatchError: If the fronts differ in number of objectives.

    Examples:
        >>> ref = Front(np.array([[0.0, 1.0], [0.5, 0.5], [1.0, 0.0]]))
        >>> spread(ref, ref)
        0.0
    """
    check_candidate(reference_front, reference_front.n_obj, role="reference front")
    check_candidate(front, reference_front.n_obj)
    return _sorted_spread(front.sorted().points, reference_front.sorted().points)


def _sorted_spread(points: np.ndarray, reference: np.ndarray) -> float:
    """Spread of lexicographically sorted, validated point arrays."""
    n_points = points.shape[0]
    if n_points == 1:
        return SINGLE_POINT_SPREAD

    # Gaps to the extremes of the reference front
    df = euclidean_distance(points[0], reference[0])
    dl = euclidean_distance(points[-1], reference[-1])

    distances = consecutive_distances(points)
    mean = float(distances.mean())

    denominator = df + dl + (n_points - 1) * mean
    if denominator == 0.0:
        raise DegenerateFrontError(
            "spread is undefined: all candidate points coincide with both reference extremes"
        )

    diversity_sum = df + dl + float(np.abs(distances - mean).sum())
    return diversity_sum / denominator


class SpreadIndicator:
    """Spread quality indicator bound to a fixed reference front.

    The reference front is validated, optionally normalized, and sorted once
    at construction. ``evaluate`` never modifies the indicator or its input,
    so one instance can be reused across many evaluations and threads.

    Attributes:
        name: "SPREAD".
        description: "SPREAD quality indicator".
        normalize: Whether candidate and reference are rescaled into the
            reference front's per-objective bounds before measuring.
        reference_front: The (normalized) reference front, in lexicographic order.

    Example:
        >>> indicator = SpreadIndicator([[0.0, 1.0], [0.5, 0.5], [1.0, 0.0]])
        >>> indicator.evaluate([[0.5, 0.5]])
        1.0
    """

    name = "SPREAD"
    description = "SPREAD quality indicator"

    def __init__(self, reference_front, normalize: bool = True) -> None:
        """Bind the indicator to a reference front.

        Args:
            reference_front: Anything accepted by ``as_front``.
            normalize: Rescale fronts by the reference bounds before measuring.

        Raises:
            InvalidInputError: If reference_front is None or not convertible.
            DegenerateFrontError: If the reference front has no points.
        """
        reference = as_front(reference_front)
        check_candidate(reference, reference.n_obj, role="reference front")

        self.normalize = normalize
        self._bounds: tuple[np.ndarray, np.ndarray] | None = None
        if normalize:
            minimum, maximum = reference_bounds(reference)
            # Objectives with zero extent are shifted to the minimum but not scaled
            maximum = np.where(maximum == minimum, minimum + 1.0, maximum)
            self._bounds = (minimum, maximum)
            reference = normalize_front(reference, *self._bounds)

        self.reference_front = reference.sorted()
        logger.debug(
            f"SpreadIndicator bound to reference front with {len(reference)} points "
            f"and {reference.n_obj} objectives (normalize={normalize})"
        )

    @classmethod
    def from_file(cls, path: str | PathLike | None, normalize: bool = True) -> "SpreadIndicator":
        """Create an indicator from a reference front file.

        Args:
            path: Location of a whitespace-separated point file.
            normalize: See ``SpreadIndicator.__init__``.

        Raises:
            InvalidInputError: If path is None or the file cannot be read or parsed.
            DegenerateFrontError: If the file holds no points.
        """
        return cls(load_front(path), normalize=normalize)

    def evaluate(self, solutions) -> float:
        """Compute the Spread of a candidate front.

        Args:
            solutions: Candidate front; anything accepted by ``as_front``.

        Returns:
            The Spread value (lower is better), or 1.0 for a single point.

        Raises:
            InvalidInputError: If solutions is None or not convertible to a front.
            DegenerateFrontError: If the candidate front is empty.
            DimensionMismatchError: If the candidate's number of objectives
                differs from the reference front's.
        """
        front = as_front(solutions)
        check_candidate(front, self.reference_front.n_obj)

        if self._bounds is not None:
            front = normalize_front(front, *self._bounds)

        return _sorted_spread(front.sorted().points, self.reference_front.points)

    def __repr__(self) -> str:
        return f"SpreadIndicator(n_reference={len(self.reference_front)}, normalize={self.normalize})"
