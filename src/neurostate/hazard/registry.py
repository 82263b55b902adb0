"""Registry for hazard model implementations, keyed by condition tag.

Uses a decorator pattern for registration, mirroring the stream registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from neurostate.hazard.base import HazardModel


class HazardModelRegistry:
    """Registry mapping condition tags to HazardModel classes.

    Built-in models register via the ``@HazardModelRegistry.register()``
    decorator. The ``build()`` class method instantiates the model for a
    condition from config.
    """

    _registry: ClassVar[dict[str, type[HazardModel]]] = {}

    @classmethod
    def register(cls, condition: str) -> Callable[[type[HazardModel]], type[HazardModel]]:
        """Decorator that registers a HazardModel class under *condition*.

        Raises:
            ValueError: If *condition* is already registered.
        """

        def decorator(klass: type[HazardModel]) -> type[HazardModel]:
            if condition in cls._registry:
                raise ValueError(f"Hazard model for '{condition}' is already registered")
            cls._registry[condition] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, condition: str) -> type[HazardModel]:
        """Return the model class registered for *condition*.

        Raises:
            KeyError: If *condition* is not registered.
        """
        if condition not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown condition '{condition}'. Available: {available}")
        return cls._registry[condition]

    @classmethod
    def build(cls, condition: str, config: Any) -> HazardModel:
        """Instantiate the model for *condition* from *config*.

        Args:
            condition: Condition tag (``'HI'`` or ``'HD'``).
            config: A NeuroStateConfig (or compatible object).

        Returns:
            A configured HazardModel.
        """
        klass = cls.get(condition)
        return klass.from_config(config)  # type: ignore[attr-defined]

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered condition tags."""
        return sorted(cls._registry)


def hazard_rate(condition: str, tau: float, config: Any = None) -> float:
    """Return ``hazard(condition, tau)`` under *config* (defaults when None).

    Raises:
        KeyError: If *condition* is not registered.
    """
    klass = HazardModelRegistry.get(condition)
    model = klass() if config is None else klass.from_config(config)  # type: ignore[attr-defined]
    return model.hazard(tau)
