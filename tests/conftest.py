"""Shared test fixtures for front-quality tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- Reference fronts of various shapes
- A simple solution type exposing an ``objectives`` attribute
"""

from dataclasses import dataclass

import numpy as np
import pytest


@dataclass(frozen=True)
class Solution:
    """Minimal solution object carrying an objective vector."""

    objectives: np.ndarray


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def line_front() -> np.ndarray:
    """Three evenly spaced points on the line f1 + f2 = 1.

    Returns:
        Array of shape (3, 2), already in lexicographic order.
    """
    return np.array([[0.0, 1.0], [0.5, 0.5], [1.0, 0.0]])


@pytest.fixture
def extremes_front() -> np.ndarray:
    """Only the two extreme points of the unit line front.

    Returns:
        Array of shape (2, 2).
    """
    return np.array([[0.0, 1.0], [1.0, 0.0]])


@pytest.fixture
def zdt1_front() -> np.ndarray:
    """101 points sampled on the ZDT1 Pareto front f2 = 1 - sqrt(f1).

    Returns:
        Array of shape (101, 2).
    """
    f1 = np.linspace(0.0, 1.0, 101)
    return np.column_stack([f1, 1 - np.sqrt(f1)])


@pytest.fixture
def make_solutions():
    """Factory turning objective rows into Solution objects."""

    def make(rows) -> list[Solution]:
        return [Solution(objectives=np.asarray(row, dtype=np.float64)) for row in rows]

    return make
