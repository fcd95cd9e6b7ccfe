"""Geometric primitives for front quality indicators.

This module provides the core pure functions shared by the indicators:
- lexicographic_order: canonical ordering of the points of a front
- euclidean_distance: straight-line distance between two points
- consecutive_distances: distances between neighbouring rows of a front
- nearest_distances: distance from each point to its closest point in another set
"""

import numpy as np

from front_quality.exceptions import DimensionMismatchError


def lexicographic_order(points: np.ndarray) -> np.ndarray:
    """Compute the permutation that sorts points lexicographically.

    Points are compared coordinate by coordinate from the first objective to
    the last; the first non-equal coordinate decides. Fully equal points keep
    their input order.

    Args:
        points: Point coordinates. Shape (n, n_obj).

    Returns:
        Integer array of shape (n,) such that points[order] is sorted.

    Examples:
        >>> pts = np.array([[1.0, 0.0], [0.0, 2.0], [0.0, 1.0]])
        >>> lexicographic_order(pts)
        array([2, 1, 0])
    """
    if points.shape[0] == 0:
        return np.array([], dtype=np.intp)

    # np.lexsort treats the LAST key as primary, so feed columns reversed
    return np.lexsort(points.T[::-1])


def euclidean_distance(a: np.ndarray, b: np.ndarray) -> float:
    """Compute the Euclidean distance between two points.

    Args:
        a: Coordinates of the first point. Shape (n_obj,).
        b: Coordinates of the second point. Shape (n_obj,).

    Returns:
        Square root of the sum of squared coordinate differences.

    Raises:
        DimensionMismatchError: If a and b have different lengths.

    Examples:
        >>> euclidean_distance(np.array([0.0, 0.0]), np.array([3.0, 4.0]))
        5.0
    """
    if a.shape[0] != b.shape[0]:
        raise DimensionMismatchError(expected=a.shape[0], actual=b.shape[0])
    return float(np.sqrt(np.sum((a - b) ** 2)))


def consecutive_distances(points: np.ndarray) -> np.ndarray:
    """Compute distances between each pair of consecutive points.

    Args:
        points: Point coordinates in traversal order. Shape (n, n_obj).

    Returns:
        Array of shape (max(n - 1, 0),) where entry i is the distance
        between points[i] and points[i + 1].

    Examples:
        >>> pts = np.array([[0.0, 0.0], [3.0, 4.0], [3.0, 5.0]])
        >>> consecutive_distances(pts)
        array([5., 1.])
    """
    if points.shape[0] < 2:
        return np.array([], dtype=np.float64)
    steps = np.diff(points, axis=0)
    return np.sqrt(np.sum(steps**2, axis=1))


def nearest_distances(points: np.ndarray, targets: np.ndarray) -> np.ndarray:
    """Distance from every point to its nearest target (vectorized).

    Args:
        points: Points to measure from. Shape (n, n_obj).
        targets: Points to measure to. Shape (m, n_obj), m >= 1.

    Returns:
        Array of shape (n,) with the minimum Euclidean distance of each point
        to any target.

    Raises:
        DimensionMismatchError: If the two sets have different n_obj.
    """
    if points.shape[1] != targets.shape[1]:
        raise DimensionMismatchError(expected=targets.shape[1], actual=points.shape[1], what="front")

    # (n, 1, n_obj) - (1, m, n_obj) -> (n, m)
    diff = points[:, np.newaxis, :] - targets[np.newaxis, :, :]
    pairwise = np.sqrt(np.sum(diff**2, axis=2))
    return pairwise.min(axis=1)
