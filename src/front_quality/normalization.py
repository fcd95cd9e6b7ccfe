"""Per-objective normalization of fronts.

Distance-based indicators are sensitive to the scale of each objective. The
functions here rescale fronts into the box spanned by a reference front so
that every objective contributes on the same [0, 1] scale:

    x_norm = (x - minimum) / (maximum - minimum)

Normalization is an explicit step. Indicators that normalize internally do so
with bounds captured from their reference front at construction time.
"""

import numpy as np

from front_quality.exceptions import DegenerateFrontError, DimensionMismatchError, InvalidInputError
from front_quality.front import Front


def reference_bounds(front: Front) -> tuple[np.ndarray, np.ndarray]:
    """Return the per-objective minimum and maximum of a front.

    Args:
        front: Front with at least one point.

    Returns:
        Tuple (minimum, maximum), each of shape (n_obj,).

    Raises:
        DegenerateFrontError: If the front has no points.

    Example:
        >>> lo, hi = reference_bounds(Front(np.array([[0.0, 4.0], [2.0, 1.0]])))
        >>> lo, hi
        (array([0., 1.]), array([2., 4.]))
    """
    if len(front) == 0:
        raise DegenerateFrontError("cannot compute bounds of a front with no points")
    return front.points.min(axis=0), front.points.max(axis=0)


def normalize_front(front: Front, minimum: np.ndarray, maximum: np.ndarray) -> Front:
    """Rescale every objective of a front into the given bounds.

    Points outside the bounds map outside [0, 1]; nothing is clipped.

    Args:
        front: Front to rescale.
        minimum: Per-objective lower bound, shape (n_obj,).
        maximum: Per-objective upper bound, shape (n_obj,).

    Returns:
        A new, normalized Front.

    Raises:
        DimensionMismatchError: If the bounds and the front disagree on n_obj.
        InvalidInputError: If any objective has zero extent (maximum == minimum).
    """
    minimum = np.asarray(minimum, dtype=np.float64)
    maximum = np.asarray(maximum, dtype=np.float64)

    if minimum.shape != maximum.shape:
        raise DimensionMismatchError(expected=minimum.shape[0], actual=maximum.shape[0], what="maximum")
    if len(front) > 0 and front.n_obj != minimum.shape[0]:
        raise DimensionMismatchError(expected=minimum.shape[0], actual=front.n_obj, what="front")

    extent = maximum - minimum
    flat = np.where(extent == 0)[0]
    if flat.size > 0:
        raise InvalidInputError(
            f"cannot normalize: objectives {flat.tolist()} have zero extent in the reference bounds"
        )

    if len(front) == 0:
        return front
    return Front((front.points - minimum) / extent)
