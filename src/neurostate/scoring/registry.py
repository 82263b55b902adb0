"""Registry for scoring rule implementations.

Uses a decorator pattern for registration, mirroring the hazard registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from neurostate.scoring.base import ScoringRule


class ScoringRuleRegistry:
    """Registry mapping string names to ScoringRule classes.

    The ``build()`` class method instantiates the rule named by the
    config's ``scoring_rule`` field.
    """

    _registry: ClassVar[dict[str, type[ScoringRule]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[ScoringRule]], type[ScoringRule]]:
        """Decorator that registers a ScoringRule class under *name*.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[ScoringRule]) -> type[ScoringRule]:
            if name in cls._registry:
                raise ValueError(f"Scoring rule '{name}' is already registered")
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[ScoringRule]:
        """Return the rule class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown scoring rule '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, config: Any) -> ScoringRule:
        """Instantiate the rule specified by *config.scoring_rule*."""
        klass = cls.get(config.scoring_rule)
        return klass.from_config(config)  # type: ignore[attr-defined]

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered rule names."""
        return sorted(cls._registry)
