"""Registry system for quality indicators.

This module provides a registry pattern for managing quality indicators.
Instead of hardcoding which indicators a benchmark computes, users can
register factories that create configured indicators and retrieve them by
name.

The registry pattern enables:
- **Pluggable indicators**: Add an indicator without touching the harness
- **Configuration-driven experiments**: Select indicators by string name from config files
- **Discoverability**: List all available indicators programmatically

Basic usage:
    ```python
    from front_quality.registry import IndicatorRegistry, list_indicators

    # Get a configured indicator
    indicator = IndicatorRegistry.get("spread", reference_front=reference)

    # List available indicators
    available = list_indicators()  # ["gd", "hypervolume", "igd", "spread"]
    ```

Registering a custom indicator:
    ```python
    class CountIndicator:
        name = "COUNT"
        description = "Number of points in the front"

        def evaluate(self, solutions) -> float:
            return float(len(as_front(solutions)))

    IndicatorRegistry.register("count", CountIndicator)
    ```
"""

from collections.abc import Callable

from front_quality.protocols import QualityIndicator


class IndicatorRegistry:
    """Registry for quality indicator factories.

    Factories are callables (usually the indicator classes themselves) that
    accept keyword arguments and return an object implementing the
    QualityIndicator protocol.

    Class Attributes:
        _registry: Dictionary mapping indicator names to factory functions.
    """

    _registry: dict[str, Callable[..., QualityIndicator]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., QualityIndicator]) -> None:
        """Register a quality indicator factory.

        Args:
            name: Unique name for the indicator. Will overwrite if already exists.
            factory: Callable that returns a QualityIndicator. Should accept
                keyword arguments for configuration.
        """
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> QualityIndicator:
        """Get a configured quality indicator by name.

        Args:
            name: Name of the registered indicator.
            **kwargs: Configuration passed to the factory (e.g. reference_front).

        Returns:
            A configured QualityIndicator.

        Raises:
            KeyError: If the indicator name is not registered. Error message
                includes list of available indicators.

        Example:
            ```python
            indicator = IndicatorRegistry.get("hypervolume", reference_point=[1.0, 1.0])
            value = indicator.evaluate(objectives)
            ```
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Quality indicator '{name}' not found. Available indicators: {available}")
        factory = cls._registry[name]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return sorted list of registered indicator names."""
        return sorted(cls._registry.keys())


def list_indicators() -> list[str]:
    """List all registered quality indicators.

    Convenience function that returns IndicatorRegistry.list().
    """
    return IndicatorRegistry.list()
