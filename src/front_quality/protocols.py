"""Protocol definition for quality indicators.

Quality indicators reduce a front of solutions to a single number that can be
compared across algorithms and runs. Different indicators measure different
things:

1. **Convergence**: how close the front is to the reference Pareto front
   (Generational Distance).

2. **Coverage**: how well the front represents the whole reference front
   (Inverted Generational Distance, Hypervolume).

3. **Diversity**: how evenly the points are spread along the front and how
   far they reach towards its extremes (Spread).

Every indicator exposes the same small contract so that a benchmarking
harness can treat them interchangeably.

Example usage:
    ```python
    def report(indicators: list[QualityIndicator], solutions) -> dict[str, float]:
        return {ind.name: ind.evaluate(solutions) for ind in indicators}
    ```
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class QualityIndicator(Protocol):
    """Protocol for front quality indicators.

    An indicator is configured once (usually with a reference front or a
    reference point) and then evaluated on many candidate fronts. Evaluation
    must not modify the indicator or its inputs.

    Attributes:
        name: Short label used in reports, e.g. "SPREAD".
        description: Human-readable description of the indicator.

    Example:
        ```python
        class CountIndicator:
            name = "COUNT"
            description = "Number of points in the front"

            def evaluate(self, solutions) -> float:
                return float(len(as_front(solutions)))
        ```
    """

    name: str
    description: str

    def evaluate(self, solutions) -> float:
        """Compute the indicator value for a candidate front.

        Args:
            solutions: Anything accepted by ``front_quality.front.as_front``.

        Returns:
            The indicator value.

        Raises:
            QualityIndicatorError: If the candidate front is not valid input
                for this indicator.
        """
        ...
