"""Benchmark runner scoring pymoo's NSGA-II on ZDT problems.

This script runs NSGA-II on ZDT1-3 over several seeds and scores every final
front with the front-quality indicators (Spread, GD, IGD, Hypervolume)
against the analytical Pareto fronts.

Usage:
    uv run python benchmarks/zdt/run_benchmark.py
"""

import json
import logging
import sys
import time
from collections import defaultdict
from datetime import UTC, datetime
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np
from pymoo.algorithms.moo.nsga2 import NSGA2
from pymoo.core.problem import Problem as PymooProblem
from pymoo.operators.crossover.sbx import SBX
from pymoo.operators.mutation.pm import PM
from pymoo.operators.sampling.rnd import FloatRandomSampling
from pymoo.optimize import minimize
from pymoo.termination import get_termination

from benchmarks.zdt.problems import BOUNDS, N_VARS, PROBLEMS, ZDTProblem
from front_quality import IndicatorRegistry, QualityIndicator, evaluate_many

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# Experiment parameters
POP_SIZE = 100
N_GENERATIONS = 250
SBX_ETA = 15.0
PM_ETA = 20.0
MUTATION_PROB = 1.0 / N_VARS
N_RUNS = 10
SEEDS = list(range(N_RUNS))
HV_REF_POINT = [1.1, 1.1]


class PymooZDTProblem(PymooProblem):
    """Wrapper to use vectorized ZDT functions with Pymoo."""

    def __init__(self, problem: ZDTProblem) -> None:
        super().__init__(n_var=N_VARS, n_obj=2, xl=BOUNDS[0], xu=BOUNDS[1])
        self._objectives = problem.objectives

    def _evaluate(self, x: np.ndarray, out: dict, *args, **kwargs) -> None:
        out["F"] = self._objectives(x)


def run_nsga2(problem: ZDTProblem, seed: int) -> tuple[np.ndarray, float]:
    """Run NSGA-II using Pymoo and return its final front.

    Args:
        problem: The ZDT problem to solve.
        seed: Random seed for reproducibility.

    Returns:
        Tuple of (objectives of the final population, elapsed_time_seconds).
    """
    algorithm = NSGA2(
        pop_size=POP_SIZE,
        sampling=FloatRandomSampling(),
        crossover=SBX(eta=SBX_ETA, prob=1.0),
        mutation=PM(eta=PM_ETA, prob=MUTATION_PROB),
        eliminate_duplicates=False,
    )

    start_time = time.perf_counter()
    result = minimize(
        PymooZDTProblem(problem),
        algorithm,
        get_termination("n_gen", N_GENERATIONS),
        seed=seed,
        verbose=False,
    )
    elapsed = time.perf_counter() - start_time

    return result.F, elapsed


def build_indicators(problem: ZDTProblem) -> list[QualityIndicator]:
    """Configure every registered indicator for one problem."""
    reference = problem.reference_front
    return [
        IndicatorRegistry.get("spread", reference_front=reference),
        IndicatorRegistry.get("gd", reference_front=reference),
        IndicatorRegistry.get("igd", reference_front=reference),
        IndicatorRegistry.get("hypervolume", reference_point=HV_REF_POINT),
    ]


def run_benchmark() -> dict:
    """Run the full benchmark suite.

    Returns:
        Dictionary containing metadata and results.
    """
    metadata = {
        "timestamp": datetime.now(UTC).isoformat(),
        "parameters": {
            "pop_size": POP_SIZE,
            "n_generations": N_GENERATIONS,
            "n_vars": N_VARS,
            "bounds": list(BOUNDS),
            "sbx_eta": SBX_ETA,
            "pm_eta": PM_ETA,
            "mutation_prob": MUTATION_PROB,
            "n_runs": N_RUNS,
            "seeds": SEEDS,
            "hv_ref_point": HV_REF_POINT,
        },
    }

    results = []
    total_runs = len(PROBLEMS) * N_RUNS
    current_run = 0

    for problem_name, problem in PROBLEMS.items():
        indicators = build_indicators(problem)
        fronts = {}

        for seed in SEEDS:
            current_run += 1
            logger.info(f"Running [{current_run}/{total_runs}]: NSGA-II on {problem_name.upper()} (seed={seed})")
            front, elapsed = run_nsga2(problem, seed)
            fronts[f"{problem_name.upper()}/seed={seed}"] = front
            logger.info(f"  {len(front)} points, Time: {elapsed:.2f}s")

        for record in evaluate_many(indicators, fronts):
            results.append(
                {
                    "problem": problem_name.upper(),
                    "front": record.label,
                    "indicator": record.indicator,
                    "value": record.value,
                    "error": record.error,
                }
            )

    return {"metadata": metadata, "results": results}


def print_summary(results: dict) -> None:
    """Print a summary table of the benchmark results.

    Args:
        results: The benchmark results dictionary.
    """
    data = defaultdict(lambda: defaultdict(list))
    n_failed = 0

    for r in results["results"]:
        if r["value"] is None:
            n_failed += 1
            continue
        data[r["problem"]][r["indicator"]].append(r["value"])

    problems = sorted(data.keys())
    indicators = ["SPREAD", "GD", "IGD", "HV"]

    print("\n" + "=" * 80)
    print("BENCHMARK SUMMARY")
    print("=" * 80)
    print(f"\nParameters: pop_size={POP_SIZE}, generations={N_GENERATIONS}, runs={N_RUNS}")
    print()

    header = f"{'Problem':<10}"
    for name in indicators:
        header += f"{name:>17}"
    print(header)
    print("-" * 78)

    for problem in problems:
        row = f"{problem:<10}"
        for name in indicators:
            values = data[problem][name]
            if values:
                cell = f"{np.mean(values):.4f} +/- {np.std(values):.3f}"
                row += f"{cell:>17}"
            else:
                row += f"{'N/A':>17}"
        print(row)

    print("-" * 78)
    if n_failed:
        print(f"\n{n_failed} indicator evaluations failed; see the results file for details.")
    print()


def main() -> None:
    """Main entry point for the benchmark."""
    logger.info("Starting ZDT indicator benchmark")
    logger.info(f"Parameters: pop_size={POP_SIZE}, generations={N_GENERATIONS}, runs={N_RUNS}")

    results = run_benchmark()

    output_path = Path(__file__).parent / "results" / "indicator_results.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)

    logger.info(f"Results saved to {output_path}")

    print_summary(results)


if __name__ == "__main__":
    main()
