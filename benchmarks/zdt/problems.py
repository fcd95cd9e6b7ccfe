"""ZDT test problems and their analytical Pareto fronts.

The ZDT (Zitzler-Deb-Thiele) suite is a standard benchmark for bi-objective
optimizers, which makes it a natural test bed for the Spread indicator: the
true Pareto front of every problem is known in closed form, so reference
fronts can be sampled at any resolution.

All problems have n decision variables in [0, 1] and 2 objectives to minimize.
Objective functions here are vectorized over a population, shape (n, n_vars).

References:
    Zitzler, E., Deb, K., & Thiele, L. (2000). Comparison of multiobjective
    evolutionary algorithms: Empirical results. Evolutionary computation, 8(2), 173-195.
"""

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

# Problem configuration
N_VARS: int = 30
BOUNDS: tuple[float, float] = (0.0, 1.0)
N_FRONT_POINTS: int = 500


def _g(x: np.ndarray) -> np.ndarray:
    return 1 + 9 * np.sum(x[:, 1:], axis=1) / (x.shape[1] - 1)


def zdt1(x: np.ndarray) -> np.ndarray:
    """ZDT1: convex front f2 = 1 - sqrt(f1)."""
    f1 = x[:, 0]
    g = _g(x)
    return np.column_stack([f1, g * (1 - np.sqrt(f1 / g))])


def zdt2(x: np.ndarray) -> np.ndarray:
    """ZDT2: concave front f2 = 1 - f1^2."""
    f1 = x[:, 0]
    g = _g(x)
    return np.column_stack([f1, g * (1 - (f1 / g) ** 2)])


def zdt3(x: np.ndarray) -> np.ndarray:
    """ZDT3: front made of several disconnected convex pieces."""
    f1 = x[:, 0]
    g = _g(x)
    h = 1 - np.sqrt(f1 / g) - (f1 / g) * np.sin(10 * np.pi * f1)
    return np.column_stack([f1, g * h])


def _non_dominated_2d(points: np.ndarray) -> np.ndarray:
    """Keep the bi-objective points not dominated by any other point."""
    order = np.lexsort((points[:, 1], points[:, 0]))
    points = points[order]
    best_f2 = np.minimum.accumulate(points[:, 1])
    # A point survives if it strictly improves on every point with smaller f1
    keep = np.concatenate([[True], points[1:, 1] < best_f2[:-1]])
    return points[keep]


def pareto_front(name: str, n_points: int = N_FRONT_POINTS) -> np.ndarray:
    """Sample the analytical Pareto front of a ZDT problem.

    On the optimal front g = 1, so f2 is a function of f1 alone.

    Args:
        name: Problem name ("zdt1", "zdt2" or "zdt3").
        n_points: Number of f1 samples in [0, 1]. ZDT3 keeps only the
            non-dominated subset of them.

    Returns:
        Array of shape (m, 2) with m <= n_points.

    Raises:
        KeyError: If the problem name is unknown.
    """
    f1 = np.linspace(0.0, 1.0, n_points)
    if name == "zdt1":
        f2 = 1 - np.sqrt(f1)
    elif name == "zdt2":
        f2 = 1 - f1**2
    elif name == "zdt3":
        f2 = 1 - np.sqrt(f1) - f1 * np.sin(10 * np.pi * f1)
        return _non_dominated_2d(np.column_stack([f1, f2]))
    else:
        raise KeyError(f"Unknown ZDT problem '{name}'. Available problems: {', '.join(PROBLEMS)}")
    return np.column_stack([f1, f2])


@dataclass(frozen=True)
class ZDTProblem:
    """A ZDT objective function bundled with its reference front."""

    name: str
    objectives: Callable[[np.ndarray], np.ndarray]

    @property
    def reference_front(self) -> np.ndarray:
        return pareto_front(self.name)


# Registry of all ZDT problems
PROBLEMS: dict[str, ZDTProblem] = {
    "zdt1": ZDTProblem("zdt1", zdt1),
    "zdt2": ZDTProblem("zdt2", zdt2),
    "zdt3": ZDTProblem("zdt3", zdt3),
}
