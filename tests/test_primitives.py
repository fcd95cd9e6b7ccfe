"""Tests for geometric primitives.

Comprehensive test suite covering:
- TestLexicographicOrder: canonical ordering of points
- TestEuclideanDistance: point-to-point distance
- TestConsecutiveDistances: distances along a sorted front
- TestNearestDistances: point-to-set distance
"""

import numpy as np
import pytest

from front_quality.exceptions import DimensionMismatchError
from front_quality.primitives import (
    consecutive_distances,
    euclidean_distance,
    lexicographic_order,
    nearest_distances,
)

# =============================================================================
# TestLexicographicOrder
# =============================================================================


class TestLexicographicOrder:
    """Tests for lexicographic_order."""

    def test_orders_by_first_objective(self) -> None:
        """Points are ordered by their first coordinate."""
        points = np.array([[3.0, 0.0], [1.0, 0.0], [2.0, 0.0]])
        np.testing.assert_array_equal(lexicographic_order(points), [1, 2, 0])

    def test_ties_broken_by_next_objective(self) -> None:
        """Equal first coordinates are ordered by the second."""
        points = np.array([[1.0, 5.0], [0.0, 9.0], [1.0, 2.0]])
        np.testing.assert_array_equal(lexicographic_order(points), [1, 2, 0])

    def test_three_objectives(self) -> None:
        """Ties on the first two objectives fall through to the third."""
        points = np.array([[1.0, 1.0, 3.0], [1.0, 1.0, 1.0], [1.0, 0.0, 9.0]])
        np.testing.assert_array_equal(lexicographic_order(points), [2, 1, 0])

    def test_identical_points_keep_input_order(self) -> None:
        """Sorting is stable for fully equal points."""
        points = np.array([[1.0, 1.0], [0.0, 0.0], [1.0, 1.0]])
        np.testing.assert_array_equal(lexicographic_order(points), [1, 0, 2])

    def test_empty_points(self) -> None:
        """An empty array yields an empty permutation."""
        order = lexicographic_order(np.empty((0, 2)))
        assert order.shape == (0,)

    def test_result_is_permutation(self, rng: np.random.Generator) -> None:
        """The result is a permutation that produces a sorted array."""
        points = rng.integers(0, 3, size=(50, 2)).astype(np.float64)
        order = lexicographic_order(points)

        assert sorted(order.tolist()) == list(range(50))
        as_tuples = [tuple(p) for p in points[order]]
        assert as_tuples == sorted(as_tuples)


# =============================================================================
# TestEuclideanDistance
# =============================================================================


class TestEuclideanDistance:
    """Tests for euclidean_distance."""

    def test_pythagorean_triple(self) -> None:
        """Distance between (0, 0) and (3, 4) is 5."""
        assert euclidean_distance(np.array([0.0, 0.0]), np.array([3.0, 4.0])) == 5.0

    def test_distance_to_self_is_zero(self) -> None:
        """A point is at distance zero from itself."""
        p = np.array([0.3, 0.7])
        assert euclidean_distance(p, p) == 0.0

    def test_symmetric(self) -> None:
        """Distance does not depend on argument order."""
        a = np.array([0.1, 0.9, 0.4])
        b = np.array([0.6, 0.2, 0.8])
        assert euclidean_distance(a, b) == pytest.approx(euclidean_distance(b, a))

    def test_returns_python_float(self) -> None:
        """The result is a plain float."""
        assert isinstance(euclidean_distance(np.array([0.0]), np.array([1.0])), float)

    def test_rejects_mismatched_dimensions(self) -> None:
        """Points of different lengths raise DimensionMismatchError."""
        with pytest.raises(DimensionMismatchError, match="point has 3 objectives, expected 2") as exc_info:
            euclidean_distance(np.array([0.0, 0.0]), np.array([0.0, 0.0, 0.0]))

        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 3


# =============================================================================
# TestConsecutiveDistances
# =============================================================================


class TestConsecutiveDistances:
    """Tests for consecutive_distances."""

    def test_distances_between_neighbours(self) -> None:
        """Each entry is the distance from row i to row i + 1."""
        points = np.array([[0.0, 0.0], [3.0, 4.0], [3.0, 5.0]])
        np.testing.assert_allclose(consecutive_distances(points), [5.0, 1.0])

    def test_single_point_has_no_distances(self) -> None:
        """One point produces an empty result."""
        assert consecutive_distances(np.array([[1.0, 2.0]])).shape == (0,)

    def test_matches_pairwise_euclidean(self, rng: np.random.Generator) -> None:
        """Vectorized result agrees with euclidean_distance row by row."""
        points = rng.uniform(0, 1, size=(10, 2))
        expected = [euclidean_distance(points[i], points[i + 1]) for i in range(9)]
        np.testing.assert_allclose(consecutive_distances(points), expected)


# =============================================================================
# TestNearestDistances
# =============================================================================


class TestNearestDistances:
    """Tests for nearest_distances."""

    def test_nearest_target_selected(self) -> None:
        """Each point is measured to its closest target."""
        points = np.array([[0.0, 0.0], [10.0, 0.0]])
        targets = np.array([[1.0, 0.0], [9.0, 0.0], [50.0, 50.0]])
        np.testing.assert_allclose(nearest_distances(points, targets), [1.0, 1.0])

    def test_points_on_targets_are_zero(self, extremes_front: np.ndarray) -> None:
        """Points that coincide with targets are at distance zero."""
        np.testing.assert_array_equal(nearest_distances(extremes_front, extremes_front), [0.0, 0.0])

    def test_rejects_mismatched_dimensions(self) -> None:
        """Sets with different numbers of objectives are rejected."""
        with pytest.raises(DimensionMismatchError, match="front has 3 objectives, expected 2"):
            nearest_distances(np.zeros((2, 3)), np.zeros((2, 2)))
