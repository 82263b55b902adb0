"""Registry of random stream implementations.

Streams register under a short name via ``@register_stream``. The registry
also owns stream construction: :meth:`StreamRegistry.build` seeds the
stream from config and checks that the seed took effect, because every
stimulus sequence depends on the stream restarting from exactly that seed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from neurostate.exceptions import ConfigValidationError
from neurostate.rng.base import RandomStream

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("neurostate")

# Draws compared when checking that a stream replays from its seed.
_REPLAY_CHECK_DRAWS = 4


class StreamRegistry:
    """Registry mapping stream names to RandomStream classes.

    Built-in streams register at import time. ``build()`` instantiates the
    stream named by ``config.stream_type`` with ``config.seed``.
    """

    _registry: ClassVar[dict[str, type[RandomStream]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[RandomStream]], type[RandomStream]]:
        """Decorator that registers a RandomStream class under *name*.

        Raises:
            ValueError: If *name* is already registered.
            TypeError: If the decorated class is not a RandomStream.
        """

        def decorator(stream_cls: type[RandomStream]) -> type[RandomStream]:
            if not (isinstance(stream_cls, type) and issubclass(stream_cls, RandomStream)):
                raise TypeError(f"{stream_cls!r} is not a RandomStream subclass")
            if name in cls._registry:
                raise ValueError(f"Random stream '{name}' is already registered")
            cls._registry[name] = stream_cls
            return stream_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[RandomStream]:
        """Return the stream class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown random stream: {name!r}. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, config: Any) -> RandomStream:
        """Instantiate and seed the stream named by *config.stream_type*.

        The stream is drawn from, reseeded and drawn from again; both runs
        must agree before the stream is handed to a generator.

        Args:
            config: A NeuroStateConfig (or compatible object).

        Returns:
            A stream positioned at the start of *config.seed*.

        Raises:
            KeyError: If the stream name is not registered.
            ConfigValidationError: If the stream does not replay from its seed.
        """
        stream = cls.get(config.stream_type)(config.seed)  # type: ignore[call-arg]
        first = stream.next_array(_REPLAY_CHECK_DRAWS).tolist()
        stream.set_seed(config.seed)
        replay = stream.next_array(_REPLAY_CHECK_DRAWS).tolist()
        if first != replay:
            raise ConfigValidationError(
                f"Random stream {config.stream_type!r} does not replay from seed {config.seed}"
            )
        stream.set_seed(config.seed)
        logger.debug("Built random stream: %s", stream.describe())
        return stream

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered stream names."""
        return sorted(cls._registry)


# Convenience alias used as a decorator in stream modules.
register_stream = StreamRegistry.register
