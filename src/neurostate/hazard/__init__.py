"""Hazard model subsystem for neurostate.

Maps trials-since-change to a change probability per condition: a constant
rate for HI and a logistic ramp for HD.
"""

from neurostate.hazard.base import HazardModel
from neurostate.hazard.constant import ConstantHazard
from neurostate.hazard.logistic import LogisticHazard
from neurostate.hazard.registry import HazardModelRegistry, hazard_rate

__all__ = [
    "ConstantHazard",
    "HazardModel",
    "HazardModelRegistry",
    "LogisticHazard",
    "hazard_rate",
]
