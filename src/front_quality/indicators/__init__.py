"""Quality indicators for multi-objective optimization."""

from front_quality.indicators.distance import GenerationalDistanceIndicator, InvertedGenerationalDistanceIndicator
from front_quality.indicators.hypervolume import HypervolumeIndicator
from front_quality.indicators.spread import SpreadIndicator, spread
from front_quality.registry import IndicatorRegistry

# Register built-in indicators
IndicatorRegistry.register("gd", GenerationalDistanceIndicator)
IndicatorRegistry.register("hypervolume", HypervolumeIndicator)
IndicatorRegistry.register("igd", InvertedGenerationalDistanceIndicator)
IndicatorRegistry.register("spread", SpreadIndicator)

__all__ = [
    "GenerationalDistanceIndicator",
    "HypervolumeIndicator",
    "InvertedGenerationalDistanceIndicator",
    "SpreadIndicator",
    "spread",
]
