"""Front data structure and conversions.

This module provides the container that every indicator works on:

- Front: an immutable, ordered collection of objective-space points
- as_front: conversion of solution lists and arrays into a Front
- load_front: reading a Front from a whitespace-separated point file

Fronts never change after construction. Sorting returns a new Front.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

import numpy as np

from front_quality.exceptions import DegenerateFrontError, DimensionMismatchError, InvalidInputError
from front_quality.primitives import lexicographic_order

logger = logging.getLogger(__name__)

# Lines starting with this prefix are ignored when reading front files
COMMENT_PREFIX = "#"


@dataclass(frozen=True, eq=False)
class Front:
    """Immutable set of points in objective space.

    Each row of ``points`` is one point, i.e. the objective vector of one
    solution. The array is copied on construction and made read-only, so a
    Front can be shared freely between indicators and threads.

    Attributes:
        points: Point coordinates, shape (n_points, n_obj).

    Example:
        >>> front = Front(np.array([[1.0, 0.0], [0.0, 1.0]]))
        >>> len(front)
        2
        >>> front.sorted()[0]
        array([0., 1.])
    """

    points: np.ndarray

    def __post_init__(self) -> None:
        """Validate shape and values, then freeze a private copy.

        Raises:
            TypeError: If points is not a numpy array.
            InvalidInputError: If points is not 2D or holds non-finite values.
        """
        if not isinstance(self.points, np.ndarray):
            raise TypeError(f"points must be a numpy array, got {type(self.points).__name__}")
        if self.points.ndim != 2:
            raise InvalidInputError(f"points must be 2D, got shape {self.points.shape}")
        if not np.all(np.isfinite(self.points)):
            raise InvalidInputError("points must contain only finite values")

        points = self.points.astype(np.float64, copy=True)
        points.flags.writeable = False
        object.__setattr__(self, "points", points)

    def __len__(self) -> int:
        return self.points.shape[0]

    def __getitem__(self, idx: int) -> np.ndarray:
        """Return the coordinates of one point (negative indices allowed).

        Raises:
            TypeError: If idx is not an integer.
            IndexError: If idx is out of bounds.
        """
        if not isinstance(idx, (int, np.integer)):
            raise TypeError(f"indices must be integers, got {type(idx).__name__}")

        n = len(self)
        if idx < -n or idx >= n:
            raise IndexError(f"index {idx} is out of bounds for front with {n} points")
        return self.points[idx]

    @property
    def n_points(self) -> int:
        """Number of points in the front."""
        return self.points.shape[0]

    @property
    def n_obj(self) -> int:
        """Number of objectives (coordinates per point)."""
        return self.points.shape[1]

    def sorted(self) -> "Front":
        """Return a new Front with points in lexicographic order.

        The receiver is left untouched.
        """
        return Front(self.points[lexicographic_order(self.points)])


def as_front(solutions) -> Front:
    """Convert a solution list or array into a Front.

    Accepted inputs:
        - a Front, returned unchanged
        - a 2D array-like of objective rows, shape (n, n_obj)
        - an iterable of solution objects exposing an ``objectives`` attribute
          (for example the individuals of an optimizer's final population)

    An empty input yields a Front with zero points; indicators decide whether
    that is acceptable.

    Args:
        solutions: The solutions to convert.

    Returns:
        A Front with one point per solution.

    Raises:
        InvalidInputError: If solutions is None, ragged, non-numeric or not 2D.

    Example:
        >>> as_front([[0.0, 1.0], [1.0, 0.0]]).n_obj
        2
    """
    if solutions is None:
        raise InvalidInputError("front is None")
    if isinstance(solutions, Front):
        return solutions

    if not isinstance(solutions, np.ndarray):
        solutions = list(solutions) if isinstance(solutions, Iterable) else solutions
        if isinstance(solutions, list) and solutions and hasattr(solutions[0], "objectives"):
            solutions = [s.objectives for s in solutions]

    try:
        points = np.asarray(solutions, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"cannot convert solutions to a front: {e}") from e

    if points.size == 0 and points.ndim < 2:
        points = np.empty((0, 0), dtype=np.float64)

    return Front(points)


def load_front(path: str | PathLike | None) -> Front:
    """Read a front from a text file.

    The file holds one point per line with coordinates separated by spaces or
    tabs. Blank lines and lines starting with ``#`` are skipped.

    Args:
        path: Location of the front file.

    Returns:
        The Front stored in the file, in file order.

    Raises:
        InvalidInputError: If path is None, the file cannot be read, a token is
            not a number, or lines have different numbers of coordinates.
        DegenerateFrontError: If the file holds no points.

    Example:
        >>> front = load_front("ZDT1.pf")  # doctest: +SKIP
        >>> front.n_obj
        2
    """
    if path is None:
        raise InvalidInputError("front file path is None")

    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise InvalidInputError(f"cannot read front file {path}: {e}") from e

    rows: list[list[float]] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue

        try:
            row = [float(token) for token in stripped.split()]
        except ValueError as e:
            raise InvalidInputError(f"{path}:{line_no}: {e}") from e

        if rows and len(row) != len(rows[0]):
            raise InvalidInputError(
                f"{path}:{line_no}: point has {len(row)} coordinates, expected {len(rows[0])}"
            )
        rows.append(row)

    if not rows:
        raise DegenerateFrontError(f"front file {path} contains no points")

    logger.debug(f"Loaded front with {len(rows)} points from {path}")
    return Front(np.array(rows, dtype=np.float64))


def check_candidate(front: Front, n_obj: int, role: str = "candidate front") -> None:
    """Ensure a front is non-empty and has the expected number of objectives.

    Raises:
        DegenerateFrontError: If the front has no points.
        DimensionMismatchError: If the front's n_obj differs from n_obj.
    """
    if len(front) == 0:
        raise DegenerateFrontError(f"{role} has no points")
    if front.n_obj != n_obj:
        raise DimensionMismatchError(expected=n_obj, actual=front.n_obj, what=role)
