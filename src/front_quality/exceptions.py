"""Exception hierarchy for quality indicator evaluation.

All errors derive from QualityIndicatorError so that evaluation harnesses can
catch per-evaluation failures with a single except clause. Each concrete
error also subclasses ValueError, since every one of them describes bad input
rather than a failure of the computation itself.
"""


class QualityIndicatorError(Exception):
    """Base exception for all quality indicator errors."""


class InvalidInputError(QualityIndicatorError, ValueError):
    """Raised when a front, file or parameter cannot be used as input."""


class DimensionMismatchError(QualityIndicatorError, ValueError):
    """Raised when two points or fronts have different numbers of objectives."""

    def __init__(self, expected: int, actual: int, what: str = "point") -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} has {actual} objectives, expected {expected}")


class DegenerateFrontError(QualityIndicatorError, ValueError):
    """Raised when a front has too few points for an indicator to be defined."""
