"""History-independent (HI) hazard: a constant change probability."""

from __future__ import annotations

from typing import TYPE_CHECKING

from neurostate.exceptions import ConfigValidationError
from neurostate.hazard.base import HazardModel
from neurostate.hazard.registry import HazardModelRegistry

if TYPE_CHECKING:
    from neurostate.config import NeuroStateConfig


@HazardModelRegistry.register("HI")
class ConstantHazard(HazardModel):
    """Returns the same rate for every ``tau``.

    Args:
        rate: Change probability in ``[0, 1]``.

    Raises:
        ConfigValidationError: If *rate* is outside ``[0, 1]``.
    """

    def __init__(self, rate: float = 0.1) -> None:
        if not 0.0 <= rate <= 1.0:
            raise ConfigValidationError(f"Hazard rate must be in [0, 1], got {rate}")
        self._rate = rate

    @classmethod
    def from_config(cls, config: NeuroStateConfig) -> ConstantHazard:
        return cls(config.hi_hazard_rate)

    @property
    def condition(self) -> str:
        return "HI"

    @property
    def rate(self) -> float:
        return self._rate

    def hazard(self, tau: float) -> float:
        return self._rate
